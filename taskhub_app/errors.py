"""
Error taxonomy for the TaskHub backend.

Request-level failures derive from :class:`ApiError` and carry the HTTP
status they map to.  The application factory registers a single Flask
error handler that turns any of them into the standard
``{"error": "..."}`` envelope.  Storage failures derive from
:class:`StoreError` and are reported as a 500 instead of crashing the
process.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for errors that are reported to the client as JSON."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """Missing required fields, duplicate email or malformed body."""

    status_code = 400


class AuthError(ApiError):
    """Absent, invalid or expired token, or wrong credentials."""

    status_code = 401


class NotFoundError(ApiError):
    """Unknown route or missing resource."""

    status_code = 404


class StoreError(Exception):
    """Base class for flat-file store failures."""


class CorruptStoreError(StoreError):
    """A collection file holds non-empty content that is not a JSON array."""


class StoreWriteError(StoreError):
    """A collection file could not be written."""
