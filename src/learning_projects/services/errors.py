"""Errors raised by the fetch services.

``str(err)`` is the message shown on screen.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base class for fetch failures shown to the user."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidURLError(ServiceError):
    """Input could not be turned into a request URL. Raised before any I/O."""

    default_message = "Invalid URL"


class InvalidResponseError(ServiceError):
    """Transport failure, unexpected status code, or undecodable body."""

    default_message = "Invalid response from server"


class UserNotFoundError(ServiceError):
    """The user lookup returned 404."""

    default_message = "User not found"


class PersistenceError(Exception):
    """Saving or loading local state failed (strict mode only)."""
