"""Exceptions for ascii-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class AsciiTableError(Exception):
    """
    Root of the ascii-table error tree.

    Bad column or border arguments surface as :class:`ValidationError` when
    the value is built; columns that cannot be drawn at their resolved
    width surface as :class:`ConfigurationError` from ``Table.render``.
    """

    pass


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class ValidationError(AsciiTableError, ValueError):
    """
    Raised when a value object is constructed with invalid arguments.

    These are construction-time contract violations such as negative
    padding or a width range whose minimum exceeds its maximum.

    Attributes:
        field: Name of the offending argument
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(AsciiTableError):
    """
    Raised when a column cannot be rendered as configured.

    Configuration errors indicate a programming mistake by the caller and
    abort the whole render. They are never degraded into a best-effort
    layout.

    Attributes:
        column: Header text of the offending column (may be empty)
    """

    def __init__(self, column: str, message: str) -> None:
        self.column = column
        super().__init__(f"Column '{column}': {message}")


class FormatterWidthError(ConfigurationError):
    """Raised when a column formatter changes the printable width of a cell."""

    def __init__(self, column: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            column,
            f"formatter cannot change the width of the content "
            f"(expected {expected}, got {actual})",
        )


class TruncationError(ConfigurationError):
    """Raised when the truncation marker does not fit into the cell."""

    def __init__(self, column: str, marker: str, available: int) -> None:
        self.marker = marker
        self.available = available
        super().__init__(
            column,
            f"truncation marker {marker!r} is wider than the available width ({available})",
        )
