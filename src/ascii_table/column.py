"""Column definitions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from . import cell
from .exceptions import ValidationError
from .models import HorizontalAlign, HorizontalPadding
from .width import MaxContent, WidthPolicy, as_policy

Row = TypeVar("Row")


@dataclass(frozen=True)
class Column(Generic[Row]):
    """
    A single table column.

    Columns are immutable. Every ``with_*`` modifier returns a modified
    copy, so one base column can be shared between tables.

    Attributes:
        header: Header text; an empty header means "no header" for this column
        content: Extracts the displayed value from a row (rendered with ``str``)
        width: Policy resolving the content width
        align: Placement of content narrower than the column
        padding: Spaces around the content
        truncate: Marker appended to content that had to be cut
        formatter: Width-preserving transform applied to each shaped cell

    Example:
        Column("Name", lambda user: user.name).with_width(UpTo(20))
    """

    header: str = ""
    content: Callable[[Row], Any] = field(default=lambda row: "", repr=False)
    width: WidthPolicy = field(default_factory=MaxContent)
    align: HorizontalAlign = HorizontalAlign.LEFT
    padding: HorizontalPadding = field(default_factory=HorizontalPadding)
    truncate: str = "…"
    formatter: Callable[[str], str] = field(default=cell.identity, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.header, str):
            raise ValidationError("header", self.header, "must be a string")
        if not callable(self.content):
            raise ValidationError("content", self.content, "must be callable")
        if not callable(self.formatter):
            raise ValidationError("formatter", self.formatter, "must be callable")
        if not isinstance(self.truncate, str):
            raise ValidationError("truncate", self.truncate, "must be a string")

        # Constructor arguments get the same coercion as the with_* modifiers.
        object.__setattr__(self, "width", as_policy(self.width))
        object.__setattr__(self, "align", HorizontalAlign.coerce(self.align))
        padding = self.padding
        if isinstance(padding, int) and not isinstance(padding, bool):
            padding = HorizontalPadding.uniform(padding)
        if not isinstance(padding, HorizontalPadding):
            raise ValidationError(
                "padding", padding, "expected a HorizontalPadding or an integer"
            )
        object.__setattr__(self, "padding", padding)

    # -- modifiers ---------------------------------------------------------

    def with_width(self, width: WidthPolicy | int) -> Column[Row]:
        return replace(self, width=as_policy(width))

    def with_align(self, align: HorizontalAlign | str) -> Column[Row]:
        return replace(self, align=HorizontalAlign.coerce(align))

    def with_padding(self, padding: HorizontalPadding | int) -> Column[Row]:
        if isinstance(padding, int):
            padding = HorizontalPadding.uniform(padding)
        return replace(self, padding=padding)

    def with_truncate_marker(self, marker: str) -> Column[Row]:
        return replace(self, truncate=marker)

    def with_formatter(self, formatter: Callable[[str], str]) -> Column[Row]:
        return replace(self, formatter=formatter)

    # -- rendering ---------------------------------------------------------

    def content_for(self, row: Row) -> str:
        """Displayed text for ``row``."""
        return str(self.content(row))

    def width_for(self, cells: Sequence[str]) -> int:
        """Full column width (padding included) for the given body cells."""
        return self.width.resolve([self.header, *cells]) + self.padding.total

    def render(self, content: str, width: int) -> str:
        """Shape ``content`` into a cell ``width`` characters wide."""
        return cell.shape(
            content,
            width,
            align=self.align,
            truncate=self.truncate,
            padding=self.padding,
            formatter=self.formatter,
            label=self.header,
        )
