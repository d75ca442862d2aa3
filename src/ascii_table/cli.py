"""Command-line interface for rendering CSV and JSON data as text tables."""

import csv
import json
import logging
import sys
from typing import Any, TextIO

import click

from .border import BorderStyle, get_border
from .column import Column
from .config import resolve_border, resolve_empty_text
from .exceptions import AsciiTableError
from .models import HorizontalAlign
from .table import Table
from .width import UpTo

logger = logging.getLogger(__name__)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def load_csv(stream: TextIO, has_header: bool = True) -> tuple[list[str], list[list[str]]]:
    """
    Read CSV rows.

    Args:
        stream: Open text stream
        has_header: Treat the first record as the header row

    Returns:
        Tuple of (headers, rows). Without a header row, headers are empty strings.
    """
    records = [record for record in csv.reader(stream) if record]
    if not records:
        return [], []
    if has_header:
        headers, rows = records[0], records[1:]
    else:
        rows = records
        headers = [""] * max(len(r) for r in rows)
    return headers, rows


def load_json(stream: TextIO, has_header: bool = True) -> tuple[list[str], list[list[str]]]:
    """
    Read JSON rows.

    Accepts either a list of objects (the keys become the headers, in order of
    first appearance) or a list of lists (the first list is the header row
    unless ``has_header`` is False).

    Raises:
        ValueError: If the document is not a list of objects or a list of lists
    """
    data = json.load(stream)
    if not isinstance(data, list):
        raise ValueError("JSON input must be a list of objects or a list of lists")
    if not data:
        return [], []

    if all(isinstance(item, dict) for item in data):
        keys: list[str] = []
        for item in data:
            for key in item:
                if key not in keys:
                    keys.append(key)
        rows = [[_cell_text(item.get(key)) for key in keys] for item in data]
        headers = keys if has_header else [""] * len(keys)
        return headers, rows

    if all(isinstance(item, list) for item in data):
        records = [[_cell_text(v) for v in item] for item in data]
        if has_header:
            return records[0], records[1:]
        return [""] * max(len(r) for r in records), records

    raise ValueError("JSON input must be a list of objects or a list of lists")


def _parse_alignments(options: tuple[str, ...], headers: list[str]) -> dict[int, HorizontalAlign]:
    """Map ``COLUMN=ALIGN`` options to column indexes.

    COLUMN is either a header name or a 1-based column number.
    """
    result: dict[int, HorizontalAlign] = {}
    for option in options:
        name, sep, value = option.partition("=")
        if not sep:
            raise click.BadParameter(
                f"expected COLUMN=ALIGN, got {option!r}", param_hint="--align"
            )
        if name in headers:
            index = headers.index(name)
        elif name.isdigit() and 1 <= int(name) <= len(headers):
            index = int(name) - 1
        else:
            raise click.BadParameter(f"unknown column {name!r}", param_hint="--align")
        result[index] = HorizontalAlign.coerce(value)
    return result


def build_table(
    headers: list[str],
    alignments: dict[int, HorizontalAlign] | None = None,
    max_width: int | None = None,
    truncate_marker: str = "…",
) -> Table[list[str]]:
    """Build a table whose rows are lists of strings indexed by column position."""
    alignments = alignments or {}
    columns: list[Column[list[str]]] = []
    for index, header in enumerate(headers):
        column: Column[list[str]] = Column(
            header, lambda row, i=index: row[i] if i < len(row) else ""
        )
        if index in alignments:
            column = column.with_align(alignments[index])
        if max_width is not None:
            column = column.with_width(UpTo(max_width))
        if truncate_marker != column.truncate:
            column = column.with_truncate_marker(truncate_marker)
        columns.append(column)
    return Table(columns)


@click.group()
@click.version_option(package_name="ascii-table")
def cli() -> None:
    """Render tabular data as box-drawn text tables."""
    pass


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["csv", "json"]),
    default="csv",
    help="Input format (default: csv)",
)
@click.option(
    "--border",
    type=click.Choice([s.value for s in BorderStyle]),
    default=None,
    help="Border style (default: $ASCII_TABLE_BORDER or single)",
)
@click.option(
    "--empty-text",
    default=None,
    help="Placeholder shown when there are no rows (default: $ASCII_TABLE_EMPTY_TEXT or 'No data')",
)
@click.option(
    "--no-header",
    is_flag=True,
    help="Input has no header row; render without a header block",
)
@click.option(
    "--max-width",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum content width of every column; longer cells are truncated",
)
@click.option(
    "--align",
    "alignments",
    multiple=True,
    metavar="COLUMN=ALIGN",
    help="Column alignment (left, center or right). COLUMN is a header or 1-based index.",
)
@click.option(
    "--truncate-marker",
    default="…",
    show_default=True,
    help="Marker appended to truncated cells",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def render(
    source: TextIO,
    input_format: str,
    border: str | None,
    empty_text: str | None,
    no_header: bool,
    max_width: int | None,
    alignments: tuple[str, ...],
    truncate_marker: str,
    verbose: bool,
) -> None:
    """Render CSV or JSON rows from SOURCE (default: stdin) as a table."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    loader = load_json if input_format == "json" else load_csv
    try:
        headers, rows = loader(source, has_header=not no_header)
    except (ValueError, csv.Error) as e:
        click.echo(f"✗ Failed to read {input_format.upper()} input: {e}", err=True)
        sys.exit(1)

    logger.debug("Loaded %d columns and %d rows", len(headers), len(rows))

    try:
        style = resolve_border(border)
        table = (
            build_table(
                headers,
                alignments=_parse_alignments(alignments, headers),
                max_width=max_width,
                truncate_marker=truncate_marker,
            )
            .with_border(get_border(style))
            .with_empty_text(resolve_empty_text(empty_text))
        )
        output = table.render(rows)
    except AsciiTableError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if output:
        click.echo(output)


@cli.command()
def borders() -> None:
    """Show a sample table in every built-in border style."""
    sample = build_table(["Name", "Count"], alignments={1: HorizontalAlign.RIGHT})
    rows = [["item-1", "10"], ["item-2", "5"]]
    for style in BorderStyle:
        click.echo(style.value)
        click.echo(sample.with_border(get_border(style)).render(rows))
        click.echo()


if __name__ == "__main__":
    cli()
