"""Mini README: Console rendering for command results.

Structure:
    * Column - table column description with optional value formatter.
    * OutputRenderer - prints tables, detail blocks, JSON and status lines.

Human mode uses rich tables and coloured status prefixes. JSON mode prints
``json.dumps`` output on stdout only, keeps status chatter quiet, and writes
errors to stderr as ``{"error": "..."}`` so scripts can parse both streams.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..money import CurrencyFormatter

Formatter = Callable[[Any, Mapping[str, Any]], Any]


@dataclass(slots=True)
class Column:
    """A table column bound to a row key."""

    header: str
    key: str
    align: str = "left"
    formatter: Optional[Formatter] = None


class OutputRenderer:
    """Render command output either for people or for scripts."""

    def __init__(
        self,
        *,
        json_mode: bool = False,
        formatter_provider: Optional[Callable[[], CurrencyFormatter]] = None,
    ) -> None:
        self.json_mode = json_mode
        self._formatter_provider = formatter_provider or CurrencyFormatter
        self.console = Console(highlight=False)
        self.error_console = Console(stderr=True, highlight=False)

    # Money ----------------------------------------------------------------

    def money(self, milliunits: int) -> str:
        """Plain formatted amount using the active budget currency."""

        return self._formatter_provider().format(milliunits)

    def amount(self, milliunits: int) -> Text:
        """Formatted amount coloured by sign."""

        style = "green" if milliunits > 0 else "red" if milliunits < 0 else "dim"
        return Text(self.money(milliunits), style=style)

    # Structured output ----------------------------------------------------

    def print_json(self, data: Any) -> None:
        typer.echo(json.dumps(data, indent=2, default=str))

    def print_table(self, columns: Sequence[Column], rows: Iterable[Mapping[str, Any]]) -> None:
        rows = list(rows)
        if self.json_mode:
            self.print_json([dict(row) for row in rows])
            return
        if not rows:
            self.console.print("  No results found.", style="dim")
            return

        table = Table(header_style="bold cyan")
        for column in columns:
            table.add_column(column.header, justify=column.align)
        for row in rows:
            table.add_row(*(self._cell(column, row) for column in columns))
        self.console.print(table)

    def print_detail(self, fields: Sequence[Tuple[str, Any]]) -> None:
        if self.json_mode:
            self.print_json({label: _plain(value) for label, value in fields})
            return
        width = max((len(label) for label, _ in fields), default=0)
        for label, value in fields:
            line = Text("  ")
            line.append(label.ljust(width), style="bold")
            line.append("  ")
            line.append(value if isinstance(value, Text) else str(value))
            self.console.print(line)

    def print_line(self, message: str = "") -> None:
        if not self.json_mode:
            self.console.print(message)

    # Status lines ---------------------------------------------------------

    def success(self, message: str) -> None:
        if not self.json_mode:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def info(self, message: str) -> None:
        if not self.json_mode:
            self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def warning(self, message: str) -> None:
        if not self.json_mode:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        if self.json_mode:
            typer.echo(json.dumps({"error": message}), err=True)
        else:
            self.error_console.print(f"[red]✗[/red] {escape(message)}")

    @staticmethod
    def _cell(column: Column, row: Mapping[str, Any]) -> Any:
        value = row.get(column.key)
        if column.formatter is not None:
            value = column.formatter(value, row)
        if isinstance(value, Text):
            return value
        return Text("" if value is None else str(value))


def _plain(value: Any) -> Any:
    return value.plain if isinstance(value, Text) else value


def count_by(rows: Iterable[Mapping[str, Any]], key: str) -> Dict[Any, int]:
    """Count rows per value of ``key`` (used to flag duplicate names)."""

    counts: Dict[Any, int] = {}
    for row in rows:
        counts[row.get(key)] = counts.get(row.get(key), 0) + 1
    return counts


def visible(items: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Drop soft-deleted records from a list response."""

    return [item for item in items if not item.get("deleted")]
