"""Core value types for ascii-table."""

from dataclasses import dataclass
from enum import Enum

from .exceptions import ValidationError


class HorizontalAlign(Enum):
    """Placement of content inside a cell that is wider than the content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def coerce(cls, value: "HorizontalAlign | str") -> "HorizontalAlign":
        """Accept either a member or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        choices = ", ".join(m.value for m in cls)
        raise ValidationError("align", value, f"expected one of: {choices}")


@dataclass(frozen=True)
class HorizontalPadding:
    """
    Blank space between a cell's content and its borders.

    Attributes:
        left: Spaces before the content
        right: Spaces after the content
    """

    left: int = 1
    right: int = 1

    def __post_init__(self) -> None:
        if self.left < 0:
            raise ValidationError("padding.left", self.left, "must be non-negative")
        if self.right < 0:
            raise ValidationError("padding.right", self.right, "must be non-negative")

    @classmethod
    def none(cls) -> "HorizontalPadding":
        """No padding on either side."""
        return cls(left=0, right=0)

    @classmethod
    def uniform(cls, value: int) -> "HorizontalPadding":
        """The same padding on both sides."""
        return cls(left=value, right=value)

    @property
    def total(self) -> int:
        """Combined padding width."""
        return self.left + self.right
