"""
Table assembly.

Rendering happens in two passes: every cell is evaluated first (column by
column), so each column's width can be resolved from its full contents,
and only then are the header, body or empty blocks drawn.

Example output (single border):
    ┌────┬────┐
    │ A  │ B  │
    ├────┼────┤
    │ 1A │ 1B │
    ├────┼────┤
    │ 2A │ 2B │
    └────┴────┘
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Generic, NamedTuple, TypeVar

from .border import SINGLE, TableBorder
from .column import Column
from .exceptions import ValidationError
from .models import HorizontalPadding
from .width import Fixed

logger = logging.getLogger(__name__)

Row = TypeVar("Row")

DEFAULT_EMPTY_TEXT = "No data"


class RenderedColumn(NamedTuple):
    """A column together with its evaluated cells and resolved width."""

    column: Column
    cells: list[str]
    width: int


def _join(left: str, right: str, junction: str, contents: Iterable[str]) -> str:
    return left + junction.join(contents) + right


@dataclass(frozen=True)
class Table(Generic[Row]):
    """
    An ordered set of columns that can render any number of row sequences.

    Tables are immutable; ``with_border`` and ``with_empty_text`` return
    modified copies.

    Example:
        table = Table([
            Column("Name", lambda u: u.name),
            Column("Email", lambda u: u.email).with_width(UpTo(30)),
        ]).with_border(DOUBLE)
        print(table.render(users))
    """

    columns: tuple[Column[Row], ...]
    border: TableBorder = SINGLE
    empty_text: str = DEFAULT_EMPTY_TEXT

    def __init__(
        self,
        columns: Iterable[Column[Row]],
        border: TableBorder = SINGLE,
        empty_text: str = DEFAULT_EMPTY_TEXT,
    ) -> None:
        columns = tuple(columns)
        for index, column in enumerate(columns):
            if not isinstance(column, Column):
                raise ValidationError(f"columns[{index}]", column, "expected a Column")
        if not isinstance(border, TableBorder):
            raise ValidationError("border", border, "expected a TableBorder")
        if not isinstance(empty_text, str):
            raise ValidationError("empty_text", empty_text, "must be a string")
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "border", border)
        object.__setattr__(self, "empty_text", empty_text)

    def with_border(self, border: TableBorder) -> Table[Row]:
        return replace(self, border=border)

    def with_empty_text(self, text: str) -> Table[Row]:
        return replace(self, empty_text=text)

    @property
    def include_header(self) -> bool:
        """True if at least one column has header text."""
        return any(column.header for column in self.columns)

    def render(self, rows: Iterable[Row]) -> str:
        """
        Render ``rows`` as a bordered text block.

        Args:
            rows: Row values handed to each column's content function

        Returns:
            The table, one line per output row, joined with newlines

        Raises:
            ConfigurationError: If a column's formatter or truncation marker
                cannot be honoured at the resolved width
        """
        rows = list(rows)
        if not self.columns:
            return ""

        rendered = self._evaluate(rows)
        logger.debug(
            "Rendering %d rows (%s); widths=%s header=%s",
            len(rows),
            "body" if rows else "empty",
            [rc.width for rc in rendered],
            self.include_header,
        )

        lines = self._render_header(rendered)
        if rows:
            lines += self._render_body(rendered)
        else:
            lines += self._render_empty([rc.width for rc in rendered])

        # Borderless styles produce empty border lines; drop them.
        return "\n".join(line for line in lines if line)

    def _evaluate(self, rows: Sequence[Row]) -> list[RenderedColumn]:
        rendered = []
        for column in self.columns:
            cells = [column.content_for(row) for row in rows]
            rendered.append(RenderedColumn(column, cells, column.width_for(cells)))
        return rendered

    def _render_header(self, rendered: list[RenderedColumn]) -> list[str]:
        if not self.include_header:
            return []

        b = self.border
        top = _join(
            b.header_top_left,
            b.header_top_right,
            b.header_top_junction,
            (b.header_horizontal_edge * rc.width for rc in rendered),
        )
        header = _join(
            b.header_vertical_edge,
            b.header_vertical_edge,
            b.header_vertical_divider,
            (rc.column.render(rc.column.header, rc.width) for rc in rendered),
        )
        return [top, header]

    def _render_body(self, rendered: list[RenderedColumn]) -> list[str]:
        b = self.border
        widths = [rc.width for rc in rendered]

        if self.include_header:
            top = _join(
                b.header_bottom_left,
                b.header_bottom_right,
                b.header_inner_junction,
                (b.header_horizontal_edge * w for w in widths),
            )
        else:
            top = _join(
                b.body_top_left,
                b.body_top_right,
                b.body_top_junction,
                (b.body_horizontal_edge * w for w in widths),
            )

        shaped = [[rc.column.render(c, rc.width) for c in rc.cells] for rc in rendered]
        body_rows = [
            _join(b.body_vertical_edge, b.body_vertical_edge, b.body_vertical_divider, cells)
            for cells in zip(*shaped)
        ]

        divider = _join(
            b.body_left_junction,
            b.body_right_junction,
            b.body_inner_junction,
            (b.body_horizontal_divider * w for w in widths),
        )

        bottom = _join(
            b.body_bottom_left,
            b.body_bottom_right,
            b.body_bottom_junction,
            (b.body_horizontal_edge * w for w in widths),
        )

        lines = [top]
        for index, row in enumerate(body_rows):
            if index and divider:
                lines.append(divider)
            lines.append(row)
        lines.append(bottom)
        return lines

    def _render_empty(self, widths: list[int]) -> list[str]:
        b = self.border
        total = sum(widths) + len(widths) - 1
        placeholder: Column[Row] = Column().with_width(Fixed(total))
        if total < placeholder.padding.total:
            # Too narrow for the default padding; let the text use the whole span.
            placeholder = placeholder.with_padding(HorizontalPadding.none())

        if self.include_header:
            top = _join(
                b.header_bottom_left,
                b.header_bottom_right,
                b.header_bottom_junction,
                (b.header_horizontal_edge * w for w in widths),
            )
        else:
            # Joined by the edge glyph so the line reads as one unbroken span.
            top = _join(
                b.body_top_left,
                b.body_top_right,
                b.body_horizontal_edge,
                (b.body_horizontal_edge * w for w in widths),
            )

        row = _join(
            b.body_vertical_edge,
            b.body_vertical_edge,
            b.body_vertical_divider,
            [placeholder.render(self.empty_text, total)],
        )

        bottom = _join(
            b.body_bottom_left,
            b.body_bottom_right,
            b.body_bottom_junction,
            [b.body_horizontal_edge * total],
        )
        return [top, row, bottom]
