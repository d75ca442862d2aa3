"""Tests for CLI default resolution."""

import pytest

from ascii_table import BorderStyle, ValidationError
from ascii_table.config import (
    BORDER_ENV_VAR,
    EMPTY_TEXT_ENV_VAR,
    resolve_border,
    resolve_empty_text,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without configuration in the environment."""
    monkeypatch.delenv(BORDER_ENV_VAR, raising=False)
    monkeypatch.delenv(EMPTY_TEXT_ENV_VAR, raising=False)


class TestResolveBorder:
    """Tests for resolve_border."""

    def test_default(self) -> None:
        assert resolve_border(None) is BorderStyle.SINGLE

    def test_explicit_wins(self, monkeypatch) -> None:
        monkeypatch.setenv(BORDER_ENV_VAR, "double")
        assert resolve_border("heavy-light") is BorderStyle.HEAVY_LIGHT

    def test_env_var(self, monkeypatch) -> None:
        monkeypatch.setenv(BORDER_ENV_VAR, " Double ")
        assert resolve_border(None) is BorderStyle.DOUBLE

    def test_unknown_style(self, monkeypatch) -> None:
        monkeypatch.setenv(BORDER_ENV_VAR, "dotted")
        with pytest.raises(ValidationError, match="expected one of: single, double"):
            resolve_border(None)


class TestResolveEmptyText:
    """Tests for resolve_empty_text."""

    def test_default(self) -> None:
        assert resolve_empty_text(None) == "No data"

    def test_env_var(self, monkeypatch) -> None:
        monkeypatch.setenv(EMPTY_TEXT_ENV_VAR, "Nothing to show")
        assert resolve_empty_text(None) == "Nothing to show"

    def test_explicit_empty_string_honoured(self, monkeypatch) -> None:
        monkeypatch.setenv(EMPTY_TEXT_ENV_VAR, "Nothing to show")
        assert resolve_empty_text("") == ""
