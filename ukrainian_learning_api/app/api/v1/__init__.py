"""
Version 1 of the API.

The v1 router is mounted both under ``/api`` and ``/api/v1``.  Breaking
changes should go into a new version subpackage (e.g. ``v2``).
"""
