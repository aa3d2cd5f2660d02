"""
Top-level package for the Ukrainian Learning API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``ukrainian_learning_api.app.main:app``.
"""

__all__ = []
