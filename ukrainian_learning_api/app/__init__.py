"""
Application package initializer.

The project is split into ``core`` (configuration, logging, errors and
the in-memory store), ``schemas`` (pydantic models), ``services`` (the
translation gateway) and ``api`` (versioned routers, one module per
domain in ``api/v1/endpoints``).
"""

from .main import app  # noqa: F401
