"""
Domain exceptions for the expense tracker.

Each exception carries the HTTP status the API layer maps it to, so the
stores and services stay free of FastAPI imports.
"""

from __future__ import annotations


class ExpenseTrackerError(Exception):
    """Base exception for the expense tracker."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ExpenseTrackerError):
    """Missing or malformed request fields."""

    status_code = 400
    default_message = "Invalid request"


class DuplicateEmail(ExpenseTrackerError):
    status_code = 400
    default_message = "Email already registered"


class InvalidCredentials(ExpenseTrackerError):
    """Unknown email or password mismatch; both share one message."""

    status_code = 401
    default_message = "Invalid credentials"


class Unauthorized(ExpenseTrackerError):
    status_code = 401
    default_message = "Invalid token"


class InvalidToken(ExpenseTrackerError):
    """Raised by the token service; the access guard turns it into ``Unauthorized``."""

    status_code = 401
    default_message = "Invalid token"
