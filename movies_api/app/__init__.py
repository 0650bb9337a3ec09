"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging and the in‑memory store),
``schemas`` (wire models), ``services`` (operations over the store)
and ``api`` (routers).
"""

from .main import app  # noqa: F401
