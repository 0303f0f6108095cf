"""Error types raised by ledger operations."""

from __future__ import annotations

from typing import Any


class LedgerError(Exception):
    """Base exception for dairy ledger errors."""

    default_message = "An error occurred in the dairy ledger"

    def __init__(self, message: str | None = None, code: str | None = None, details: Any = None):
        self.message = message or self.default_message
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def to_dict(self) -> dict:
        """Convert the exception to a dictionary."""
        error_dict: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.code:
            error_dict["code"] = self.code
        if self.details:
            error_dict["details"] = self.details
        return error_dict


class ValidationError(LedgerError):
    """Malformed or missing required input."""

    default_message = "Validation error"


class NotFoundError(LedgerError):
    """A referenced id or location name does not exist."""

    default_message = "Not found"


class ConflictError(LedgerError):
    """The operation would create a duplicate."""

    default_message = "Conflict"


class StorageError(LedgerError):
    """The persistence sink failed to load or save the snapshot."""

    default_message = "Storage error"
