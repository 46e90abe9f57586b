"""Shared reporting helpers with rich or plain formatting."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol, Sequence, TypeAlias, cast

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from commands.catalog import Command
from commands.schemas import specs_for_command
from protocol.envelope import ParseOutcome

Reporter = Callable[[str], None]
Renderable: TypeAlias = Any


class PanelPrinter(Protocol):
    def __call__(self, message: Renderable, title: str | None = None, style: str | None = None) -> None: ...


class TableBuilder(Protocol):
    def __call__(
        self,
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
        title: str | None = None,
        style: str | None = None,
    ) -> object: ...


def show_panel(paneler: PanelPrinter | None, message: Renderable, title: str | None = None, style: str | None = None) -> None:
    if paneler is None:
        return
    paneler(message, title, style)


def show_table(
    reporter: Reporter,
    paneler: PanelPrinter | None,
    table_builder: TableBuilder | None,
    *,
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
    style: str | None = None,
    wrap_panel: bool = True,
) -> None:
    if table_builder is None:
        reporter(format_plain_table(title, columns, rows))
        return

    table = table_builder(columns, rows, title=title, style=style)
    if paneler is None or not wrap_panel:
        reporter(cast(str, table))
        return
    show_panel(paneler, table, title=title, style=style)


def format_plain_table(title: str | None, columns: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    lines = []
    if title:
        lines.append(f"{title}")
    header = " | ".join(columns)
    lines.append(header)
    lines.append("-" * len(header))
    for row in rows:
        lines.append(" | ".join(row))
    return "\n".join(lines)


CATALOG_COLUMNS = ("Id", "Name", "Description", "Args")
OUTCOME_COLUMNS = ("Definition", "Result", "Id", "Detail")


def catalog_rows(commands: Iterable[Command]) -> list[list[str]]:
    rows = []
    for command in commands:
        args = ", ".join(spec.name for spec in specs_for_command(command.id)) or "-"
        rows.append([str(command.id), command.name, command.description, args])
    return rows


def outcome_rows(outcomes: Iterable[ParseOutcome]) -> list[list[str]]:
    rows = []
    for outcome in outcomes:
        result = "ok" if outcome.ok else outcome.code
        rows.append([outcome.definition, result, str(outcome.cmd_id), outcome.text or "-"])
    return rows


def _plain_reporter(message: str) -> None:
    print(message)


def _has_markup(message: Renderable) -> bool:
    if not isinstance(message, str):
        return False
    return "[/" in message


def make_reporter(use_rich: bool = True) -> tuple[Reporter, PanelPrinter | None, TableBuilder | None]:
    if not use_rich:
        return _plain_reporter, None, None

    console = Console()

    def reporter(message: str) -> None:
        if not isinstance(message, str):
            console.print(cast(Renderable, message))
            return
        text = message if _has_markup(message) else escape(message)
        console.print(text)

    def panel(message: Renderable, title: str | None = None, style: str | None = None) -> None:
        if isinstance(message, str):
            content = message if _has_markup(message) else escape(message)
        else:
            content = cast(Renderable, message)
        if style is None:
            console.print(Panel(content, title=title, box=box.ROUNDED))
        else:
            console.print(Panel(content, title=title, box=box.ROUNDED, style=style))

    def table_builder(
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
        title: str | None = None,
        style: str | None = None,
    ) -> object:
        table = Table(title=title, box=box.ROUNDED)
        if style:
            table.style = style
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(escape(cell) for cell in row))
        return table

    return reporter, panel, table_builder
