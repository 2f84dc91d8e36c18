"""Exceptions for lazytable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class LazyTableError(Exception):
    """
    Base exception for all lazytable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigError(LazyTableError):
    """
    Base exception for configuration-related errors.

    This includes table widths, render styles and style files.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class InvalidConfig(ConfigError):  # noqa: N818
    """
    Raised when a width or style setting cannot be used.

    Attributes:
        field: Name of the offending setting (e.g., "width", "fill")
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")
