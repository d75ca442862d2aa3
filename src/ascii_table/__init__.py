"""
ascii-table: Render tabular data as box-drawn plain text.

This library provides a small layout engine with:
- Per-column width policies (at least, up to, between, fixed, max content)
- Alignment, padding and truncation with a custom marker
- Width-preserving cell formatters (e.g. ANSI colors)
- Built-in single, double, heavy/light and borderless styles
- A dedicated placeholder rendering for tables without rows

Example:
    from ascii_table import DOUBLE, Column, Table, UpTo

    table = Table([
        Column("Name", lambda user: user.name),
        Column("Email", lambda user: user.email).with_width(UpTo(24)),
    ]).with_border(DOUBLE)

    print(table.render(users))
"""

from .ansi import printable_width, strip_ansi
from .border import DOUBLE, HEAVY_LIGHT, NONE, SINGLE, BorderStyle, TableBorder, get_border
from .column import Column
from .exceptions import (
    AsciiTableError,
    ConfigurationError,
    FormatterWidthError,
    TruncationError,
    ValidationError,
)
from .models import HorizontalAlign, HorizontalPadding
from .table import Table
from .width import AtLeast, Fixed, MaxContent, MinMax, UpTo, WidthPolicy, between

try:
    from ._version import __version__  # type: ignore[import-not-found]
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "Column",
    # Width policies
    "WidthPolicy",
    "AtLeast",
    "UpTo",
    "MinMax",
    "Fixed",
    "MaxContent",
    "between",
    # Models
    "HorizontalAlign",
    "HorizontalPadding",
    # Borders
    "TableBorder",
    "BorderStyle",
    "SINGLE",
    "DOUBLE",
    "HEAVY_LIGHT",
    "NONE",
    "get_border",
    # Measurement
    "printable_width",
    "strip_ansi",
    # Exceptions
    "AsciiTableError",
    "ValidationError",
    "ConfigurationError",
    "FormatterWidthError",
    "TruncationError",
]
