"""ANSI-aware string measurement.

Terminal styling escapes (``ESC [ ... m``) occupy no columns on screen, so
every width decision in the layout engine goes through
:func:`printable_width` instead of ``len``.
"""

from __future__ import annotations

import re

ESCAPE = "\x1b"

# ESC, any parameters, terminated by the SGR final byte "m"
ANSI_RE = re.compile(r"\x1b[^m]*m")


def strip_ansi(s: str) -> str:
    """Return ``s`` with all styling escape sequences removed."""
    if ESCAPE not in s:
        return s
    return ANSI_RE.sub("", s)


def printable_width(s: str) -> int:
    """
    Number of character positions ``s`` occupies on screen.

    Args:
        s: Text, possibly containing ANSI styling escapes

    Returns:
        Character count excluding escape sequences
    """
    if ESCAPE not in s:
        return len(s)
    return len(ANSI_RE.sub("", s))


def cut(s: str, width: int) -> str:
    """
    Keep the first ``width`` printable characters of ``s``.

    Escape sequences are copied through unchanged and do not count towards
    ``width``. Those after the cut point are kept too, so a trailing reset
    still closes any styling opened in the prefix.
    """
    if width <= 0:
        return ""
    if ESCAPE not in s:
        return s[:width]

    out: list[str] = []
    visible = i = 0
    while i < len(s) and visible < width:
        if s[i] == ESCAPE:
            m = ANSI_RE.match(s, i)
            if m:
                out.append(m.group(0))
                i = m.end()
                continue
        out.append(s[i])
        visible += 1
        i += 1
    out.extend(ANSI_RE.findall(s, i))
    return "".join(out)
