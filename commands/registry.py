"""Registry of parsed, argument-bearing command instances."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from commands.catalog import command_id_by_name, max_command_id
from commands.parser import scan_arguments
from commands.schemas import accepts_arguments, first_spec_index, group_of, group_specs
from config.defaults import CMD_FIRST_WITH_ARG, NOT_FOUND
from protocol.arguments import ArgType, BoolArg, ColorArg, CommandArg, IntArg, ParsedColor, StringArg
from protocol.envelope import (
    CODE_EMPTY_DEFINITION,
    CODE_MALFORMED_DEFINITION,
    CODE_NO_ARGUMENTS,
    CODE_UNKNOWN_COMMAND,
    DefinitionParseError,
    ParseOutcome,
    outcome_error,
    outcome_ok,
)
from protocol.tokens import split_definition

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandWithArg:
    id: int
    orig_id: int
    definition: str
    args: tuple[CommandArg, ...]

    @property
    def group_id(self) -> int:
        return group_of(self.orig_id)


class CommandRegistry:
    """Turns definitions like ``ScrollUp 5`` into command ids.

    Plain definitions resolve to the built-in id. Definitions with arguments
    get a fresh instance id, never reused, even across `clear()`.
    """

    def __init__(self, logger: logging.Logger | None = None, first_id: int = CMD_FIRST_WITH_ARG) -> None:
        if first_id <= max_command_id():
            raise ValueError(f"first instance id {first_id} collides with built-in command ids")
        self.logger = logger or logging.getLogger("commands.registry")
        self._instances: dict[int, CommandWithArg] = {}
        self._first_id = first_id
        self._next_id = first_id

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[CommandWithArg]:
        return iter(list(self._instances.values()))

    def __contains__(self, cmd_id: object) -> bool:
        return cmd_id in self._instances

    @property
    def last_id(self) -> int:
        """Most recently issued instance id, or NOT_FOUND if none was issued."""
        if self._next_id == self._first_id:
            return NOT_FOUND
        return self._next_id - 1

    def resolve(self, definition: str) -> int:
        name, remainder = split_definition(definition)
        if not name:
            raise DefinitionParseError(CODE_EMPTY_DEFINITION, "definition is empty")

        cmd_id = command_id_by_name(name)
        if cmd_id == NOT_FOUND:
            raise DefinitionParseError(CODE_UNKNOWN_COMMAND, f"unknown command name in '{definition}'")
        if remainder is None:
            return cmd_id

        if not accepts_arguments(cmd_id):
            raise DefinitionParseError(CODE_NO_ARGUMENTS, f"command in '{definition}' doesn't accept arguments")
        first_index = first_spec_index(group_of(cmd_id))
        if first_index == NOT_FOUND:
            raise DefinitionParseError(CODE_NO_ARGUMENTS, f"no argument specs for command in '{definition}'")

        args = scan_arguments(group_specs(first_index), remainder)
        if not args:
            raise DefinitionParseError(CODE_MALFORMED_DEFINITION, f"failed to parse arguments for '{definition}'")

        instance = CommandWithArg(id=self._next_id, orig_id=cmd_id, definition=definition, args=tuple(args))
        self._next_id += 1
        self._instances[instance.id] = instance
        self.logger.debug("[PARSE] '%s' -> id=%s orig_id=%s args=%s", definition, instance.id, cmd_id, len(args))
        return instance.id

    def parse_definition(self, definition: str) -> int:
        try:
            return self.resolve(definition)
        except DefinitionParseError as exc:
            self.logger.warning("[PARSE] %s: %s", exc.code, exc.message)
            return NOT_FOUND

    def try_parse(self, definition: str) -> ParseOutcome:
        try:
            cmd_id = self.resolve(definition)
        except DefinitionParseError as exc:
            self.logger.warning("[PARSE] %s: %s", exc.code, exc.message)
            return outcome_error(definition, exc.code, exc.message)
        return outcome_ok(definition, cmd_id)

    def find(self, cmd_id: int) -> CommandWithArg | None:
        return self._instances.get(cmd_id)

    def clear(self) -> None:
        self.logger.debug("[PARSE] clearing %s command instances", len(self._instances))
        self._instances.clear()


def get_arg(instance: CommandWithArg | None, name: str, arg_type: ArgType | None = None) -> CommandArg | None:
    """Find an argument by name (case-insensitive).

    With `arg_type`, arguments of that name but another type are skipped and
    the scan goes on.
    """
    if instance is None:
        return None
    wanted = name.casefold()
    for arg in instance.args:
        if arg.name.casefold() != wanted:
            continue
        if arg_type is None or arg.arg_type is arg_type:
            return arg
        _logger.debug(
            "[ARGS] found `%s` of a different type (wanted: %s, is: %s)", name, arg_type.value, arg.arg_type.value
        )
    return None


def _typed_value(instance: CommandWithArg | None, name: str, arg_class: Any, default: Any) -> Any:
    arg = get_arg(instance, name, arg_class.arg_type)
    if isinstance(arg, arg_class):
        return arg.value
    return default


def get_int_arg(instance: CommandWithArg | None, name: str, default: int) -> int:
    return _typed_value(instance, name, IntArg, default)


def get_bool_arg(instance: CommandWithArg | None, name: str, default: bool) -> bool:
    return _typed_value(instance, name, BoolArg, default)


def get_string_arg(instance: CommandWithArg | None, name: str, default: str | None = None) -> str | None:
    return _typed_value(instance, name, StringArg, default)


def get_color_arg(
    instance: CommandWithArg | None, name: str, default: ParsedColor | None = None
) -> ParsedColor | None:
    return _typed_value(instance, name, ColorArg, default)
