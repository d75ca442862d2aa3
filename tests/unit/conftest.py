"""Shared fixtures for unit tests."""

import pytest

from ascii_table import Column, Table


@pytest.fixture
def pair_rows() -> list[tuple[str, str]]:
    """Two rows of two cells each."""
    return [("1A", "1B"), ("2A", "2B")]


@pytest.fixture
def triple_rows() -> list[tuple[str, str, str]]:
    """Two rows of three cells each."""
    return [("1A", "1B", "1C"), ("2A", "2B", "2C")]


@pytest.fixture
def abc_table() -> Table:
    """Three columns with headers A, B and C."""
    return Table(
        [
            Column("A", lambda row: row[0]),
            Column("B", lambda row: row[1]),
            Column("C", lambda row: row[2]),
        ]
    )


@pytest.fixture
def headless_table() -> Table:
    """Three columns without header text."""
    return Table(
        [
            Column(content=lambda row: row[0]),
            Column(content=lambda row: row[1]),
            Column(content=lambda row: row[2]),
        ]
    )


@pytest.fixture
def bare_column() -> Column:
    """Identity column without padding, sized to its content."""
    return Column(content=lambda row: row).with_padding(0)
