"""
Exceptions raised by the zoned-bit-recording disk model.

All errors derive from DiskModelError so a hosting simulator can reject a
request with a single except clause. Each exception keeps the offending
value around for diagnostics and formats it into the message.
"""

from typing import Any, Optional


# =============================================================================
# Custom Exceptions
# =============================================================================

class DiskModelError(Exception):
    """Base exception for all disk model errors."""

    def __init__(self, message: str, value: Optional[Any] = None):
        self.message = message
        self.value = value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.value is not None:
            return f"{self.message} [Value: {self.value}]"
        return self.message


class InvalidGeometry(DiskModelError):
    """Raised when drive parameters are physically inconsistent."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Optional[Any] = None):
        self.parameter = parameter
        super().__init__(message, value)

    def _format_message(self) -> str:
        if self.parameter is not None:
            return f"{self.message} [{self.parameter}={self.value}]"
        return super()._format_message()


class OutOfRange(DiskModelError):
    """Raised when an address, size, track or position lies outside the drive."""

    def __init__(self, message: str, value: Optional[Any] = None,
                 limit: Optional[Any] = None):
        self.limit = limit
        super().__init__(message, value)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.limit is not None:
            return f"{base} [Limit: {self.limit}]"
        return base


class DivisionHazard(DiskModelError):
    """Raised when a timing formula would divide by zero."""
    pass
