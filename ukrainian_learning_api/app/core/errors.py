"""
Error taxonomy shared by the store, the translation gateway and the
HTTP handlers.

Each error carries the HTTP status code it maps to.  Handlers catch
these locally and answer with a generic message; the exception text is
only written to the log.
"""

from fastapi import status


class AppError(Exception):
    """Base class for domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class ValidationError(AppError):
    """Malformed or missing required input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """An entity that must exist is absent."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """A unique key is already taken."""

    status_code = status.HTTP_409_CONFLICT


class ProviderError(AppError):
    """The external translation provider failed or answered non-success."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
