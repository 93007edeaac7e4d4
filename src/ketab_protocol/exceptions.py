"""
Exception hierarchy for ketab-protocol.

Input validators raise ValidationError before any event is built. Parsers
raise EventFormatError when a received event does not have the expected
shape. Errors from the signing library are never wrapped.
"""

from __future__ import annotations

from typing import Any


class KetabError(Exception):
    """Base exception for all ketab-protocol errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(KetabError):
    """Builder input failed validation.

    Raised on the first invalid field encountered; validators do not
    accumulate errors.

    Attributes:
        field: Dotted name of the offending field (e.g. "content.title")
        reason: Why the value was rejected
    """

    def __init__(self, field: str, reason: str, details: dict[str, Any] | None = None):
        super().__init__(f"{field}: {reason}", details)
        self.field = field
        self.reason = reason


class EventFormatError(KetabError):
    """A signed event could not be parsed into a Ketab record."""
    pass


__all__ = [
    "KetabError",
    "ValidationError",
    "EventFormatError",
]
