"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
reproduce the stock service: listen on port 8000 on all interfaces
and validate request bodies before touching the store.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Movies API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # When enabled, request bodies are handled the way the first
    # release of the service did: a malformed POST body produces an
    # empty movie instead of an error, and PUT removes the existing
    # record before decoding the replacement (so a malformed body loses
    # the record).  Only useful for clients relying on that behaviour.
    legacy_body_handling: bool = _env_flag("LEGACY_BODY_HANDLING")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
