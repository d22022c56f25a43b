"""Calendar grid exceptions for error handling."""

from typing import Optional


class CalendarError(Exception):
    """Base exception for calendar grid errors."""

    def __init__(self, message: str, value: Optional[object] = None):
        super().__init__(message)
        self.message = message
        self.value = value


class RangeError(CalendarError, ValueError):
    """Exception raised when a month, year or first day of week is out of bounds."""
