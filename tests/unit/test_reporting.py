from __future__ import annotations

import io
import logging
import unittest
from contextlib import redirect_stdout

from rich.table import Table

from app.cli_main import main
from commands.catalog import COMMANDS, find_command
from commands.help import render_command_help, render_instance
from commands.registry import CommandRegistry
from common.reporting import (
    CATALOG_COLUMNS,
    catalog_rows,
    format_plain_table,
    make_reporter,
    outcome_rows,
)
from protocol.command_ids import CMD_CLOSE, CMD_CREATE_ANNOT_LINK, CMD_EXEC
from protocol.envelope import CODE_UNKNOWN_COMMAND, outcome_error, outcome_ok


class HelpTextTests(unittest.TestCase):
    def test_command_with_arguments(self) -> None:
        text = render_command_help(CMD_EXEC)
        self.assertIn("Command: Exec", text)
        self.assertIn("- spec (str, default)", text)
        self.assertIn("- filter (str, named)", text)
        self.assertIn("Usage:", text)

    def test_family_member_names_its_group(self) -> None:
        text = render_command_help(CMD_CREATE_ANNOT_LINK)
        self.assertIn("Shares arguments with: CreateAnnotText", text)
        self.assertIn("- openedit (bool, named)", text)

    def test_command_without_arguments(self) -> None:
        self.assertIn("Args: none", render_command_help(CMD_CLOSE))

    def test_unknown_command(self) -> None:
        self.assertEqual(render_command_help(99999), "Unknown command: 99999")

    def test_render_instance(self) -> None:
        registry = CommandRegistry(logger=logging.getLogger("test.reporting"))
        instance = registry.find(registry.parse_definition("CreateAnnotText #ff0000 openedit"))
        assert instance is not None
        text = render_instance(instance)
        self.assertIn("Command: CreateAnnotText", text)
        self.assertIn("- color=#ff0000 (color)", text)
        self.assertIn("- openedit=true (bool)", text)


class ReportingTests(unittest.TestCase):
    def test_catalog_rows(self) -> None:
        rows = catalog_rows(COMMANDS)
        self.assertEqual(len(rows), len(COMMANDS))
        by_name = {row[1]: row for row in rows}
        self.assertEqual(by_name["CreateAnnotText"][3], "color, openedit")
        self.assertEqual(by_name["Close"][3], "-")

    def test_outcome_rows(self) -> None:
        rows = outcome_rows([outcome_ok("ScrollUp", 240), outcome_error("Nope", CODE_UNKNOWN_COMMAND, "unknown")])
        self.assertEqual(rows[0], ["ScrollUp", "ok", "240", "-"])
        self.assertEqual(rows[1], ["Nope", CODE_UNKNOWN_COMMAND, "-1", "unknown"])

    def test_plain_table(self) -> None:
        text = format_plain_table("Commands", CATALOG_COLUMNS, [["1", "A", "B", "-"]])
        self.assertEqual(text.splitlines()[0], "Commands")
        self.assertIn("1 | A | B | -", text)

    def test_plain_reporter_has_no_panels(self) -> None:
        _reporter, paneler, table_builder = make_reporter(use_rich=False)
        self.assertIsNone(paneler)
        self.assertIsNone(table_builder)

    def test_rich_table_builder(self) -> None:
        _reporter, _paneler, table_builder = make_reporter(use_rich=True)
        assert table_builder is not None
        table = table_builder(CATALOG_COLUMNS, catalog_rows(COMMANDS[:3]), title="Commands")
        self.assertIsInstance(table, Table)
        assert isinstance(table, Table)
        self.assertEqual(table.row_count, 3)


class CliTests(unittest.TestCase):
    def _run(self, argv: list[str]) -> tuple[int, str]:
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(argv)
        return status, out.getvalue()

    def test_parse_definitions(self) -> None:
        status, output = self._run(["--plain", "--log-level", "ERROR", "ScrollUp 5", "Close"])
        self.assertEqual(status, 0)
        self.assertIn("ScrollUp 5 | ok", output)
        self.assertIn("Instance:", output)
        self.assertIn("- n=5 (int)", output)

    def test_failure_sets_exit_status(self) -> None:
        status, output = self._run(["--plain", "--log-level", "ERROR", "NotACommand"])
        self.assertEqual(status, 1)
        self.assertIn(CODE_UNKNOWN_COMMAND, output)

    def test_describe_by_description(self) -> None:
        status, output = self._run(["--plain", "--describe", "scroll down"])
        self.assertEqual(status, 0)
        self.assertIn("Shares arguments with: ScrollUp", output)

    def test_describe_unknown(self) -> None:
        status, output = self._run(["--plain", "--describe", "Teleport"])
        self.assertEqual(status, 1)
        self.assertIn("Unknown command: Teleport", output)

    def test_list(self) -> None:
        status, output = self._run(["--plain", "--list"])
        self.assertEqual(status, 0)
        close = find_command(CMD_CLOSE)
        assert close is not None
        self.assertIn(close.description, output)


if __name__ == "__main__":
    unittest.main()
