from __future__ import annotations

import unittest

from commands.parser import scan_arguments, try_parse_default_arg, try_parse_named_arg
from commands.schemas import specs_for_command
from protocol.arguments import BoolArg, ColorArg, IntArg, ParsedColor, StringArg
from protocol.command_ids import CMD_CREATE_ANNOT_TEXT, CMD_EXEC, CMD_SCROLL_UP

ANNOT_SPECS = specs_for_command(CMD_CREATE_ANNOT_TEXT)
EXEC_SPECS = specs_for_command(CMD_EXEC)
SCROLL_SPECS = specs_for_command(CMD_SCROLL_UP)

RED = ParsedColor(255, 0, 0)
GREEN = ParsedColor(0, 255, 0)
BLUE = ParsedColor(0, 0, 255)


class NamedArgTests(unittest.TestCase):
    def test_equals_form(self) -> None:
        step = try_parse_named_arg(ANNOT_SPECS, "color=#ff0000 openedit")
        self.assertTrue(step.matched)
        self.assertEqual(step.arg, ColorArg("color", RED))
        self.assertEqual(step.rest, "openedit")

    def test_space_and_colon_forms(self) -> None:
        self.assertEqual(try_parse_named_arg(ANNOT_SPECS, "color #0000ff").arg, ColorArg("color", BLUE))
        self.assertEqual(try_parse_named_arg(ANNOT_SPECS, "Color: #0000ff").arg, ColorArg("color", BLUE))

    def test_colon_without_space_is_not_named(self) -> None:
        step = try_parse_named_arg(ANNOT_SPECS, "color:#0000ff")
        self.assertFalse(step.matched)
        self.assertEqual(step.rest, "color:#0000ff")

    def test_no_matching_name(self) -> None:
        step = try_parse_named_arg(EXEC_SPECS, "notepad.exe")
        self.assertFalse(step.matched)
        self.assertIsNone(step.arg)

    def test_name_prefix_of_longer_word_is_not_named(self) -> None:
        self.assertFalse(try_parse_named_arg(EXEC_SPECS, "specialtool.exe").matched)

    def test_bare_bool_at_end_is_true(self) -> None:
        step = try_parse_named_arg(ANNOT_SPECS, "OpenEdit")
        self.assertEqual(step.arg, BoolArg("openedit", True))
        self.assertEqual(step.rest, "")

    def test_bool_tokens_are_consumed(self) -> None:
        step = try_parse_named_arg(ANNOT_SPECS, "openedit=no color=#00ff00")
        self.assertEqual(step.arg, BoolArg("openedit", False))
        self.assertEqual(step.rest, "color=#00ff00")
        step = try_parse_named_arg(ANNOT_SPECS, "openedit yes")
        self.assertEqual(step.arg, BoolArg("openedit", True))
        self.assertEqual(step.rest, "")

    def test_unknown_bool_token_is_left_for_next_step(self) -> None:
        step = try_parse_named_arg(ANNOT_SPECS, "openedit #00ff00")
        self.assertEqual(step.arg, BoolArg("openedit", True))
        self.assertEqual(step.rest, "#00ff00")

    def test_invalid_value_is_matched_but_dropped(self) -> None:
        with self.assertLogs("protocol.values", level="WARNING"):
            step = try_parse_named_arg(ANNOT_SPECS, "color=nope openedit")
        self.assertTrue(step.matched)
        self.assertIsNone(step.arg)
        self.assertEqual(step.rest, "openedit")

    def test_non_bool_name_at_end_is_not_named(self) -> None:
        self.assertFalse(try_parse_named_arg(SCROLL_SPECS, "n").matched)


class DefaultArgTests(unittest.TestCase):
    def test_default_string_takes_everything(self) -> None:
        step = try_parse_default_arg(EXEC_SPECS, "notepad.exe --flag x")
        self.assertEqual(step.arg, StringArg("spec", "notepad.exe --flag x"))
        self.assertEqual(step.rest, "")

    def test_default_int_stops_at_space(self) -> None:
        step = try_parse_default_arg(SCROLL_SPECS, "5 more")
        self.assertEqual(step.arg, IntArg("n", 5))
        self.assertEqual(step.rest, "more")


class ScanTests(unittest.TestCase):
    def test_color_and_bool(self) -> None:
        args = scan_arguments(ANNOT_SPECS, "color=#FF0000 openEdit")
        self.assertEqual(args, [BoolArg("openedit", True), ColorArg("color", RED)])

    def test_default_color_after_bool(self) -> None:
        args = scan_arguments(ANNOT_SPECS, "openedit #00ff00")
        self.assertEqual(args, [ColorArg("color", GREEN), BoolArg("openedit", True)])

    def test_false_bool(self) -> None:
        args = scan_arguments(ANNOT_SPECS, "openedit false color: #0000ff")
        self.assertEqual(args, [ColorArg("color", BLUE), BoolArg("openedit", False)])

    def test_invalid_color_keeps_scanning(self) -> None:
        with self.assertLogs("protocol.values", level="WARNING"):
            args = scan_arguments(ANNOT_SPECS, "color=not-a-color openEdit")
        self.assertEqual(args, [BoolArg("openedit", True)])

    def test_named_before_default_string(self) -> None:
        args = scan_arguments(EXEC_SPECS, "filter=*.pdf notepad.exe --flag")
        self.assertEqual(args, [StringArg("spec", "notepad.exe --flag"), StringArg("filter", "*.pdf")])

    def test_extra_spaces_between_tokens(self) -> None:
        args = scan_arguments(ANNOT_SPECS, "color=#ff0000    openedit")
        self.assertEqual(args, [BoolArg("openedit", True), ColorArg("color", RED)])

    def test_int_fallback(self) -> None:
        self.assertEqual(scan_arguments(SCROLL_SPECS, "n"), [IntArg("n", 0)])
        self.assertEqual(scan_arguments(SCROLL_SPECS, "n=3"), [IntArg("n", 3)])

    def test_most_recent_first(self) -> None:
        self.assertEqual(scan_arguments(SCROLL_SPECS, "1 n=2"), [IntArg("n", 2), IntArg("n", 1)])

    def test_empty(self) -> None:
        self.assertEqual(scan_arguments(SCROLL_SPECS, "   "), [])


if __name__ == "__main__":
    unittest.main()
