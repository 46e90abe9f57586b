"""Command definition parser entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from commands.catalog import COMMANDS, command_id_by_description, command_id_by_name
from commands.help import render_command_help, render_instance
from commands.registry import CommandRegistry
from common.reporting import (
    CATALOG_COLUMNS,
    OUTCOME_COLUMNS,
    catalog_rows,
    make_reporter,
    outcome_rows,
    show_panel,
    show_table,
)
from config.defaults import DEFAULT_LOG_LEVEL, LOG_FORMAT, NOT_FOUND


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse command definitions such as 'ScrollUp 5' into command ids")
    parser.add_argument("definitions", nargs="*", help="command definitions to parse, one per argument")
    parser.add_argument("--list", action="store_true", help="print the command catalog")
    parser.add_argument("--describe", metavar="NAME", default=None, help="show help for a command name or description")
    parser.add_argument("--plain", action="store_true", help="disable rich output")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
    )
    reporter, paneler, table_builder = make_reporter(use_rich=not args.plain)

    if args.list:
        show_table(
            reporter,
            paneler,
            table_builder,
            title="Commands",
            columns=CATALOG_COLUMNS,
            rows=catalog_rows(COMMANDS),
            wrap_panel=False,
        )

    status = 0
    if args.describe:
        cmd_id = command_id_by_name(args.describe)
        if cmd_id == NOT_FOUND:
            cmd_id = command_id_by_description(args.describe)
        if cmd_id == NOT_FOUND:
            reporter(f"Unknown command: {args.describe}")
            status = 1
        else:
            text = render_command_help(cmd_id)
            if paneler is None:
                reporter(text)
            else:
                show_panel(paneler, text, title="Command")

    if not args.definitions:
        return status

    registry = CommandRegistry(logger=logging.getLogger("cli"))
    outcomes = [registry.try_parse(definition) for definition in args.definitions]
    show_table(
        reporter,
        paneler,
        table_builder,
        title="Definitions",
        columns=OUTCOME_COLUMNS,
        rows=outcome_rows(outcomes),
        wrap_panel=False,
    )
    for instance in registry:
        text = render_instance(instance)
        if paneler is None:
            reporter(text)
        else:
            show_panel(paneler, text, title="Instance")

    if any(not outcome.ok for outcome in outcomes):
        status = 1
    return status


def run() -> int:
    return main()


if __name__ == "__main__":
    raise SystemExit(run())
