"""Default settings for the command-line interface.

Each setting resolves in the order: explicit option → environment
variable → built-in default. The library itself never reads the
environment; only the CLI goes through this module.
"""

import os

from .border import BorderStyle
from .exceptions import ValidationError
from .table import DEFAULT_EMPTY_TEXT

BORDER_ENV_VAR = "ASCII_TABLE_BORDER"
"""Environment variable for overriding the default border style."""

EMPTY_TEXT_ENV_VAR = "ASCII_TABLE_EMPTY_TEXT"
"""Environment variable for overriding the placeholder shown for empty tables."""

DEFAULT_BORDER = BorderStyle.SINGLE


def resolve_border(border: str | None) -> BorderStyle:
    """Resolve the border style from explicit arg, env var, or default.

    Resolution order: ``border`` arg → ``ASCII_TABLE_BORDER`` env var → ``"single"``.

    Args:
        border: Explicit style name, or ``None`` to use env/default.

    Returns:
        The resolved border style.

    Raises:
        ValidationError: If the name is not a built-in style
    """
    name = border or os.environ.get(BORDER_ENV_VAR) or DEFAULT_BORDER.value
    try:
        return BorderStyle(name.strip().lower())
    except ValueError:
        choices = ", ".join(s.value for s in BorderStyle)
        raise ValidationError("border", name, f"expected one of: {choices}") from None


def resolve_empty_text(text: str | None) -> str:
    """Resolve the empty-table placeholder from explicit arg, env var, or default.

    An explicit empty string is honoured (it renders a blank placeholder row).
    """
    if text is not None:
        return text
    return os.environ.get(EMPTY_TEXT_ENV_VAR, DEFAULT_EMPTY_TEXT)
