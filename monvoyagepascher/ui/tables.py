"""Table and field renderers for API records."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from rich.table import Table
from rich.text import Text

from monvoyagepascher.ui.console import console

MAX_COLUMN_WIDTH = 50
MISSING = "N/A"


@dataclass
class Column:
    """How to project one field of a record into a table cell."""

    key: str
    label: str
    format: Optional[Callable[[Any, dict[str, Any]], Any]] = None
    default: str = MISSING

    def cell(self, record: dict[str, Any]) -> str:
        value = record.get(self.key)
        if self.format is not None:
            value = self.format(value, record)
        if value is None or value == "":
            return self.default
        return str(value)


def format_number(value: Any, record: dict[str, Any] | None = None) -> Any:
    """1234567 -> '1,234,567'; non-numeric values pass through."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return value
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.2f}"


def count_items(value: Any, record: dict[str, Any] | None = None) -> Any:
    """Length of a nested list, e.g. the countries of a continent."""
    return len(value) if isinstance(value, (list, tuple)) else None


def build_table(records: list[dict[str, Any]], columns: Iterable[Column]) -> Table:
    """Build a Rich table with columns capped at MAX_COLUMN_WIDTH characters."""
    table = Table(
        show_header=True,
        header_style="table.header",
        box=None,
        padding=(0, 2, 0, 0),
        pad_edge=False,
    )
    columns = list(columns)
    for column in columns:
        table.add_column(column.label, max_width=MAX_COLUMN_WIDTH, overflow="ellipsis", no_wrap=True)

    for record in records:
        table.add_row(*(Text(column.cell(record)) for column in columns))

    return table


def print_table(records: list[dict[str, Any]], columns: Iterable[Column]) -> None:
    """Print records as a table, with a result count footer."""
    if not records:
        console.print("[warning]No results found.[/warning]")
        return

    console.print(build_table(records, columns))
    console.print()
    console.print(f"[table.footer]{len(records)} result(s)[/table.footer]")


def print_fields(fields: Iterable[tuple[str, Any]], label_width: int = 20) -> None:
    """Print ``label value`` lines for single-record endpoints."""
    for label, value in fields:
        line = Text()
        line.append(f"{label}".ljust(label_width), style="muted")
        line.append(MISSING if value is None or value == "" else str(value), style="accent")
        console.print(line)
