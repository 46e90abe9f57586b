"""Scanner for the argument part of a command definition.

Accepted forms, tried left to right until the text is used up:

    <name> <value>
    <name>: <value>
    <name>=<value>
    <name>              (bool arguments only, means true)
    <value>             (the group's default argument)

A default argument of type string takes the whole remaining text, so named
arguments have to come before it.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from commands.schemas import ArgSpec
from protocol.arguments import ArgType, BoolArg, CommandArg
from protocol.tokens import split_token, starts_with_ignore_case
from protocol.values import parse_bool_token, parse_value


class ScanStep(NamedTuple):
    arg: CommandArg | None
    rest: str
    matched: bool


def _value_start(after_name: str) -> str | None:
    if after_name.startswith(" "):
        return after_name.lstrip(" ")
    if after_name.startswith(": "):
        return after_name[1:].lstrip(" ")
    if after_name.startswith("="):
        return after_name[1:]
    return None


def try_parse_named_arg(specs: Sequence[ArgSpec], text: str) -> ScanStep:
    for spec in specs:
        if not starts_with_ignore_case(text, spec.name):
            continue
        after_name = text[len(spec.name) :]
        if after_name == "":
            if spec.arg_type is ArgType.BOOL:
                return ScanStep(BoolArg(name=spec.name, value=True), "", True)
            continue
        value_start = _value_start(after_name)
        if value_start is None:
            continue
        raw, rest = split_token(value_start)
        if spec.arg_type is ArgType.BOOL:
            flag = parse_bool_token(raw)
            if flag is None:
                # not a bool token: the name alone means true, the token is parsed next
                return ScanStep(BoolArg(name=spec.name, value=True), value_start, True)
            return ScanStep(BoolArg(name=spec.name, value=flag), rest, True)
        return ScanStep(parse_value(spec.name, spec.arg_type, raw), rest, True)
    return ScanStep(None, text, False)


def try_parse_default_arg(specs: Sequence[ArgSpec], text: str) -> ScanStep:
    spec = specs[0]
    if spec.arg_type is ArgType.STRING:
        raw, rest = text, ""
    else:
        raw, rest = split_token(text)
    return ScanStep(parse_value(spec.name, spec.arg_type, raw), rest, True)


def scan_arguments(specs: Sequence[ArgSpec], remainder: str) -> list[CommandArg]:
    """Parse every argument in `remainder`; the most recently parsed comes first."""
    args: list[CommandArg] = []
    cursor = remainder
    while True:
        cursor = cursor.lstrip(" ")
        if not cursor:
            break
        step = try_parse_named_arg(specs, cursor)
        if not step.matched:
            step = try_parse_default_arg(specs, cursor)
        if step.arg is not None:
            args.insert(0, step.arg)
        cursor = step.rest
    return args
