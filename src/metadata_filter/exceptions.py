"""
Exceptions - Error Types Raised by Metadata Filters.

Both error kinds are hard failures: they propagate to the caller and
nothing is retried or suppressed internally.
"""

from __future__ import annotations

from typing import Any, Optional


class MetadataFilterError(Exception):
    """Base class for all metadata filter errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(MetadataFilterError, TypeError):
    """Raised when a filter set is missing or holds a non-callable filter."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value_type: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value_type = value_type

    @classmethod
    def for_value(cls, value: Any, field: Optional[str] = None) -> InvalidArgumentError:
        """Build the error for a value that is not a filter function."""
        value_type = type(value).__name__
        return cls(
            f"Invalid filter function: expected 'function', got '{value_type}'",
            field=field,
            value_type=value_type,
        )


class InvalidFieldError(MetadataFilterError, LookupError):
    """Raised when filtering a field that has no filter functions."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid filter field: {field}")
        self.field = field
