"""Exceptions raised by the interest calculator.

Field validation never raises; it reports ``FieldError`` values instead. The
exceptions below cover the preference boundary, where a failure has to reach
the caller so it can be shown as a notice.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class InterestCalcError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class PreferenceStoreError(InterestCalcError):
    """Raised when the stored interest rate cannot be read or written."""

    def __init__(self, operation: str, key: str, reason: str = ""):
        message = f"Could not {operation} interest rate"
        details: Dict[str, Any] = {"key": key}
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.operation = operation
        self.key = key


class InvalidRateError(InterestCalcError):
    """Raised when a rate is refused before it reaches the preference store."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message, {"value": value} if value is not None else None)
        self.value = value
