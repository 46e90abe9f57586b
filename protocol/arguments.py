"""Typed argument values produced by the definition parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias


class ArgType(Enum):
    NONE = "none"
    STRING = "str"
    INT = "int"
    BOOL = "bool"
    COLOR = "color"


@dataclass(frozen=True)
class ParsedColor:
    red: int
    green: int
    blue: int
    alpha: int = 255

    @property
    def hex(self) -> str:
        if self.alpha == 255:
            return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        return f"#{self.alpha:02x}{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class StringArg:
    arg_type: ClassVar[ArgType] = ArgType.STRING
    name: str
    value: str


@dataclass(frozen=True)
class IntArg:
    arg_type: ClassVar[ArgType] = ArgType.INT
    name: str
    value: int


@dataclass(frozen=True)
class BoolArg:
    arg_type: ClassVar[ArgType] = ArgType.BOOL
    name: str
    value: bool


@dataclass(frozen=True)
class ColorArg:
    arg_type: ClassVar[ArgType] = ArgType.COLOR
    name: str
    value: ParsedColor


CommandArg: TypeAlias = StringArg | IntArg | BoolArg | ColorArg


def format_arg(arg: CommandArg) -> str:
    if isinstance(arg, ColorArg):
        return f"{arg.name}={arg.value.hex}"
    if isinstance(arg, BoolArg):
        return f"{arg.name}={'true' if arg.value else 'false'}"
    return f"{arg.name}={arg.value}"
