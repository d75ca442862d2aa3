"""Cell shaping.

This is the one place where width, truncation, alignment and user
formatting meet. The formatter always runs on text that has already been
cut or padded to the final width, so it can add styling but never resize
the cell.
"""

from __future__ import annotations

from collections.abc import Callable

from .ansi import cut, printable_width
from .exceptions import ConfigurationError, FormatterWidthError, TruncationError
from .models import HorizontalAlign, HorizontalPadding


def identity(s: str) -> str:
    return s


def clamp(content: str, width: int, marker: str, label: str = "") -> str:
    """
    Truncate ``content`` to ``width`` printable characters, ending with ``marker``.

    Content that already fits is returned unchanged.

    Raises:
        TruncationError: If ``marker`` alone is wider than ``width``
    """
    if printable_width(content) <= width:
        return content
    keep = width - printable_width(marker)
    if keep < 0:
        raise TruncationError(label, marker, width)
    return cut(content, keep) + marker


def pad(content: str, width: int, align: HorizontalAlign) -> str:
    """Pad ``content`` with spaces to ``width`` printable characters."""
    deficit = width - printable_width(content)
    if deficit <= 0:
        return content
    if align is HorizontalAlign.RIGHT:
        return " " * deficit + content
    if align is HorizontalAlign.CENTER:
        left = deficit // 2
        return " " * left + content + " " * (deficit - left)
    return content + " " * deficit


def shape(
    content: str,
    width: int,
    *,
    align: HorizontalAlign = HorizontalAlign.LEFT,
    truncate: str = "…",
    padding: HorizontalPadding = HorizontalPadding(),
    formatter: Callable[[str], str] = identity,
    label: str = "",
) -> str:
    """
    Shape raw cell content into exactly ``width`` printable characters.

    Args:
        content: Raw cell text
        width: Full cell width, padding included
        align: Placement of short content
        truncate: Marker appended to content that had to be cut
        padding: Spaces added around the shaped content
        formatter: Width-preserving transform applied to the shaped content
        label: Column name used in error messages

    Returns:
        The padded, truncated and formatted cell

    Raises:
        ConfigurationError: If the padding leaves negative room for content
        TruncationError: If the truncation marker does not fit
        FormatterWidthError: If the formatter changes the printable width
    """
    inner = width - padding.total
    if inner < 0:
        raise ConfigurationError(
            label, f"padding ({padding.total}) exceeds the column width ({width})"
        )

    if printable_width(content) > inner:
        display = clamp(content, inner, truncate, label)
    else:
        display = pad(content, inner, align)

    formatted = formatter(display)
    actual = printable_width(formatted)
    if actual != inner:
        raise FormatterWidthError(label, inner, actual)

    return " " * padding.left + formatted + " " * padding.right
