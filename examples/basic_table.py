#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates the core ascii-table API: width policies, alignment,
truncation, width-preserving formatters and the empty-table placeholder.

Run:
    uv run python examples/basic_table.py
"""

from dataclasses import dataclass

from ascii_table import (
    DOUBLE,
    HEAVY_LIGHT,
    Column,
    HorizontalAlign,
    Table,
    UpTo,
    between,
)

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


@dataclass
class Service:
    name: str
    region: str
    latency_ms: int
    healthy: bool


SERVICES = [
    Service("api-gateway", "us-east-1", 12, True),
    Service("billing-reconciliation-worker", "eu-west-1", 240, False),
    Service("search", "ap-south-1", 48, True),
]


def colorize_status(text: str) -> str:
    """Wrap the padded cell in ANSI colors; escapes have no printable width."""
    # The header passes through the formatter too
    if text.strip() == "up":
        return f"{GREEN}{text}{RESET}"
    if text.strip() == "down":
        return f"{RED}{text}{RESET}"
    return text


def main() -> None:
    table = Table(
        [
            Column("Service", lambda s: s.name).with_width(UpTo(20)),
            Column("Region", lambda s: s.region).with_width(between(8, 12)),
            Column("Latency", lambda s: f"{s.latency_ms} ms").with_align(HorizontalAlign.RIGHT),
            Column("Status", lambda s: "up" if s.healthy else "down")
            .with_align("center")
            .with_formatter(colorize_status),
        ]
    )

    print("=== Single border ===\n")
    print(table.render(SERVICES))

    print("\n=== Double border ===\n")
    print(table.with_border(DOUBLE).render(SERVICES))

    print("\n=== Heavy/light border, no rows ===\n")
    print(table.with_border(HEAVY_LIGHT).with_empty_text("No services registered").render([]))


if __name__ == "__main__":
    main()
