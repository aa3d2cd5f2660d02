"""
Core infrastructure: settings, logging, error types, password hashing,
the in-memory store and its seed data.
"""
