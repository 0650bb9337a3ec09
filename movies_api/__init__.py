"""
Top‑level package for the Movies API.

The service itself lives in the ``app`` subpackage and can be imported
as ``movies_api.app.main``.  A small HTTP client for talking to a
running instance is provided in ``movies_api.client``.
"""

__all__ = []
