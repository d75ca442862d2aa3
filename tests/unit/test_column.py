"""Tests for Column and the padding/alignment models."""

from types import SimpleNamespace

import pytest

from ascii_table import (
    Column,
    Fixed,
    HorizontalAlign,
    HorizontalPadding,
    MaxContent,
    UpTo,
    ValidationError,
)


class TestColumnDefaults:
    """Tests for default column settings."""

    def test_defaults(self) -> None:
        column = Column("Name", lambda row: row)
        assert column.header == "Name"
        assert column.width == MaxContent()
        assert column.align is HorizontalAlign.LEFT
        assert column.padding == HorizontalPadding(1, 1)
        assert column.truncate == "…"
        assert column.formatter("abc") == "abc"

    def test_header_defaults_to_empty(self) -> None:
        assert Column(content=lambda row: row).header == ""

    def test_content_for_uses_str(self) -> None:
        user = SimpleNamespace(name="Ada", age=36)
        assert Column("Age", lambda u: u.age).content_for(user) == "36"
        assert Column("Name", lambda u: u.name).content_for(user) == "Ada"


class TestColumnModifiers:
    """Tests for the copy-returning modifiers."""

    @pytest.fixture
    def base(self) -> Column:
        return Column("A", lambda row: row)

    def test_with_width_returns_copy(self, base: Column) -> None:
        narrowed = base.with_width(UpTo(3))
        assert narrowed.width == UpTo(3)
        assert base.width == MaxContent()
        assert narrowed is not base

    def test_with_width_int_is_fixed(self, base: Column) -> None:
        assert base.with_width(4).width == Fixed(4)

    def test_with_align_accepts_strings(self, base: Column) -> None:
        assert base.with_align("Right").align is HorizontalAlign.RIGHT
        assert base.align is HorizontalAlign.LEFT

    def test_with_align_rejects_unknown(self, base: Column) -> None:
        with pytest.raises(ValidationError, match="expected one of: left, center, right"):
            base.with_align("justify")

    def test_with_padding_int_is_uniform(self, base: Column) -> None:
        assert base.with_padding(3).padding == HorizontalPadding(3, 3)
        assert base.padding == HorizontalPadding(1, 1)

    def test_with_truncate_marker(self, base: Column) -> None:
        assert base.with_truncate_marker("..").truncate == ".."
        assert base.truncate == "…"

    def test_with_formatter(self, base: Column) -> None:
        upper = base.with_formatter(str.upper)
        assert upper.formatter("abc") == "ABC"
        assert base.formatter("abc") == "abc"

    def test_modifiers_chain(self, base: Column) -> None:
        column = base.with_width(5).with_align("center").with_padding(0)
        assert column.render("ab", 5) == " ab  "

    def test_columns_are_immutable(self, base: Column) -> None:
        with pytest.raises(AttributeError):
            base.header = "B"  # type: ignore[misc]


class TestColumnValidation:
    """Tests for construction-time validation."""

    def test_content_must_be_callable(self) -> None:
        with pytest.raises(ValidationError, match="content"):
            Column("A", "not callable")  # type: ignore[arg-type]

    def test_formatter_must_be_callable(self) -> None:
        with pytest.raises(ValidationError, match="formatter"):
            Column("A", lambda row: row).with_formatter(None)  # type: ignore[arg-type]

    def test_header_must_be_string(self) -> None:
        with pytest.raises(ValidationError, match="header"):
            Column(42, lambda row: row)  # type: ignore[arg-type]

    def test_constructor_align_string_coerced(self) -> None:
        column = Column("H", lambda row: row, align="right")  # type: ignore[arg-type]
        assert column.align is HorizontalAlign.RIGHT
        assert column.render("H", 7) == "     H "

    def test_constructor_width_int_is_fixed(self) -> None:
        column = Column("H", lambda row: row, width=3)  # type: ignore[arg-type]
        assert column.width == Fixed(3)
        assert column.width_for(["abcdef"]) == 5

    def test_constructor_padding_int_is_uniform(self) -> None:
        column = Column("H", lambda row: row, padding=2)  # type: ignore[arg-type]
        assert column.padding == HorizontalPadding(2, 2)
        assert column.width_for(["ab"]) == 6

    def test_constructor_rejects_unknown_align(self) -> None:
        with pytest.raises(ValidationError, match="expected one of"):
            Column("H", lambda row: row, align="justify")  # type: ignore[arg-type]

    def test_constructor_rejects_bad_width(self) -> None:
        with pytest.raises(ValidationError, match="width"):
            Column("H", lambda row: row, width="wide")  # type: ignore[arg-type]

    def test_constructor_rejects_bad_padding(self) -> None:
        with pytest.raises(ValidationError, match="padding"):
            Column("H", lambda row: row, padding=(1, 1))  # type: ignore[arg-type]

    def test_negative_padding_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be non-negative"):
            Column("A", lambda row: row).with_padding(-1)


class TestHorizontalPadding:
    """Tests for HorizontalPadding."""

    def test_default(self) -> None:
        assert HorizontalPadding() == HorizontalPadding(left=1, right=1)

    def test_none(self) -> None:
        assert HorizontalPadding.none().total == 0

    def test_uniform(self) -> None:
        assert HorizontalPadding.uniform(2) == HorizontalPadding(2, 2)

    @pytest.mark.parametrize(("left", "right"), [(-1, 0), (0, -1)])
    def test_negative_rejected(self, left: int, right: int) -> None:
        with pytest.raises(ValidationError):
            HorizontalPadding(left, right)
