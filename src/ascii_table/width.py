"""Column width policies.

A policy turns the printable widths of a column's cells (header first)
into a single content width. Padding is added on top by the column.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .ansi import printable_width
from .exceptions import ValidationError


def _check_non_negative(field: str, value: int) -> None:
    if value < 0:
        raise ValidationError(field, value, "must be non-negative")


def _widest(cells: Iterable[str], default: int) -> int:
    return max((printable_width(c) for c in cells), default=default)


@dataclass(frozen=True)
class AtLeast:
    """Fit the content, but never narrower than ``min``."""

    min: int

    def __post_init__(self) -> None:
        _check_non_negative("min", self.min)

    def resolve(self, cells: Iterable[str]) -> int:
        return max(self.min, _widest(cells, 0))


@dataclass(frozen=True)
class UpTo:
    """Fit the content, but never wider than ``max``."""

    max: int

    def __post_init__(self) -> None:
        _check_non_negative("max", self.max)

    def resolve(self, cells: Iterable[str]) -> int:
        return min(self.max, _widest(cells, self.max))


@dataclass(frozen=True)
class MinMax:
    """Fit the content, clamped into ``[min, max]``."""

    min: int
    max: int

    def __post_init__(self) -> None:
        _check_non_negative("min", self.min)
        _check_non_negative("max", self.max)
        if self.min > self.max:
            raise ValidationError("min", self.min, f"must be <= max ({self.max})")

    def resolve(self, cells: Iterable[str]) -> int:
        return min(max(_widest(cells, self.max), self.min), self.max)


@dataclass(frozen=True)
class Fixed:
    """Always ``width`` characters, regardless of content."""

    width: int

    def __post_init__(self) -> None:
        _check_non_negative("width", self.width)

    def resolve(self, cells: Iterable[str]) -> int:
        return self.width


@dataclass(frozen=True)
class MaxContent:
    """Exactly as wide as the widest cell."""

    def resolve(self, cells: Iterable[str]) -> int:
        return _widest(cells, 0)


WidthPolicy = AtLeast | UpTo | MinMax | Fixed | MaxContent


def between(min: int, max: int) -> MinMax:
    """Shorthand for :class:`MinMax`."""
    return MinMax(min, max)


def as_policy(value: WidthPolicy | int) -> WidthPolicy:
    """Coerce a bare integer into a :class:`Fixed` policy."""
    if isinstance(value, bool):
        raise ValidationError("width", value, "expected a width policy or an integer")
    if isinstance(value, int):
        return Fixed(value)
    if isinstance(value, (AtLeast, UpTo, MinMax, Fixed, MaxContent)):
        return value
    raise ValidationError("width", value, "expected a width policy or an integer")
