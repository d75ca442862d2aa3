"""
Border glyph tables.

A :class:`TableBorder` holds every glyph the assembler draws. Only the body
glyphs are required; header glyphs fall back to their body counterparts
unless overridden, which is how styles such as ``DOUBLE`` draw a distinct
header/body separator while sharing everything else.

Example:
    from ascii_table import DOUBLE, Table

    print(table.with_border(DOUBLE).render(rows))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# header field -> body field it copies when left unset
_HEADER_FALLBACKS = {
    "header_top_left": "body_top_left",
    "header_top_right": "body_top_right",
    "header_bottom_left": "body_left_junction",
    "header_bottom_right": "body_right_junction",
    "header_horizontal_edge": "body_horizontal_edge",
    "header_vertical_edge": "body_vertical_edge",
    "header_vertical_divider": "body_vertical_divider",
    "header_top_junction": "body_top_junction",
    "header_bottom_junction": "body_bottom_junction",
    "header_inner_junction": "body_inner_junction",
}


@dataclass(frozen=True)
class TableBorder:
    """
    Glyphs used to frame a table.

    ``None`` means "use the fallback": body edges fall back to the body
    dividers, and header glyphs fall back to the body glyph listed in
    ``_HEADER_FALLBACKS``. Fallbacks are resolved once at construction.
    """

    body_top_left: str
    body_top_right: str
    body_bottom_left: str
    body_bottom_right: str

    body_horizontal_divider: str
    body_vertical_divider: str

    body_top_junction: str
    body_left_junction: str
    body_right_junction: str
    body_bottom_junction: str
    body_inner_junction: str

    body_horizontal_edge: str | None = None
    body_vertical_edge: str | None = None

    header_top_left: str | None = None
    header_top_right: str | None = None
    header_bottom_left: str | None = None
    header_bottom_right: str | None = None

    header_horizontal_edge: str | None = None
    header_vertical_edge: str | None = None
    header_vertical_divider: str | None = None

    header_top_junction: str | None = None
    header_bottom_junction: str | None = None
    header_inner_junction: str | None = None

    def __post_init__(self) -> None:
        # Body edges first: header edges fall back to them.
        if self.body_horizontal_edge is None:
            object.__setattr__(self, "body_horizontal_edge", self.body_horizontal_divider)
        if self.body_vertical_edge is None:
            object.__setattr__(self, "body_vertical_edge", self.body_vertical_divider)
        for name, source in _HEADER_FALLBACKS.items():
            if getattr(self, name) is None:
                object.__setattr__(self, name, getattr(self, source))


SINGLE = TableBorder(
    body_top_left="┌",
    body_top_right="┐",
    body_bottom_left="└",
    body_bottom_right="┘",
    body_horizontal_divider="─",
    body_vertical_divider="│",
    body_top_junction="┬",
    body_left_junction="├",
    body_right_junction="┤",
    body_bottom_junction="┴",
    body_inner_junction="┼",
)

DOUBLE = TableBorder(
    body_top_left="╔",
    body_top_right="╗",
    body_bottom_left="╚",
    body_bottom_right="╝",
    body_horizontal_edge="═",
    body_vertical_edge="║",
    body_horizontal_divider="─",
    body_vertical_divider="│",
    body_top_junction="╤",
    body_left_junction="╟",
    body_right_junction="╢",
    body_bottom_junction="╧",
    body_inner_junction="┼",
    header_bottom_left="╠",
    header_bottom_right="╣",
    header_inner_junction="╪",
)

HEAVY_LIGHT = TableBorder(
    body_top_left="┏",
    body_top_right="┓",
    body_bottom_left="┗",
    body_bottom_right="┛",
    body_horizontal_edge="━",
    body_vertical_edge="┃",
    body_horizontal_divider="─",
    body_vertical_divider="│",
    body_top_junction="┯",
    body_left_junction="┠",
    body_right_junction="┨",
    body_bottom_junction="┷",
    body_inner_junction="┼",
    header_bottom_left="┣",
    header_bottom_right="┫",
    header_vertical_divider="┃",
    header_top_junction="┳",
    header_inner_junction="╇",
    header_bottom_junction="┻",
)

NONE = TableBorder(
    body_top_left="",
    body_top_right="",
    body_bottom_left="",
    body_bottom_right="",
    body_horizontal_divider="",
    body_vertical_divider="",
    body_top_junction="",
    body_left_junction="",
    body_right_junction="",
    body_bottom_junction="",
    body_inner_junction="",
)


class BorderStyle(Enum):
    """Names of the built-in border styles."""

    SINGLE = "single"
    DOUBLE = "double"
    HEAVY_LIGHT = "heavy-light"
    NONE = "none"


_BUILTIN = {
    BorderStyle.SINGLE: SINGLE,
    BorderStyle.DOUBLE: DOUBLE,
    BorderStyle.HEAVY_LIGHT: HEAVY_LIGHT,
    BorderStyle.NONE: NONE,
}


def get_border(style: BorderStyle | str) -> TableBorder:
    """
    Get the built-in border for a style name.

    Args:
        style: A :class:`BorderStyle` or its string value (e.g. ``"heavy-light"``)

    Returns:
        The matching :class:`TableBorder`

    Raises:
        ValueError: If the name is not a built-in style
    """
    if not isinstance(style, BorderStyle):
        try:
            style = BorderStyle(style)
        except ValueError:
            raise ValueError(f"Unknown border style: {style}") from None
    return _BUILTIN[style]
