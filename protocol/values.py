"""Per-type conversion of raw argument text into typed values."""

from __future__ import annotations

import logging
import re

from rich.color import Color, ColorParseError, ColorType

from config.defaults import FALSE_TOKENS, TRUE_TOKENS
from protocol.arguments import ArgType, ColorArg, CommandArg, IntArg, ParsedColor, StringArg

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_ARGB_RE = re.compile(r"#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)
_RGBA_RE = re.compile(r"rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.IGNORECASE)


def parse_int(text: str) -> int:
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def _channels(values: tuple[str, ...]) -> tuple[int, ...] | None:
    channels = tuple(int(value) for value in values)
    if any(channel > 255 for channel in channels):
        return None
    return channels


def parse_color(text: str) -> ParsedColor | None:
    """Decode `#rrggbb`, `#aarrggbb`, `rgb(r,g,b)` or `rgba(r,g,b,a)`.

    Terminal color names are rejected, they have no fixed RGB value.
    """
    value = text.strip()
    match = _HEX_ARGB_RE.match(value)
    if match is not None:
        alpha, red, green, blue = (int(match.group(index), 16) for index in range(1, 5))
        return ParsedColor(red=red, green=green, blue=blue, alpha=alpha)
    match = _RGBA_RE.match(value)
    if match is not None:
        channels = _channels(match.groups())
        if channels is None:
            return None
        red, green, blue, alpha = channels
        return ParsedColor(red=red, green=green, blue=blue, alpha=alpha)

    try:
        color = Color.parse(value)
    except ColorParseError:
        return None
    if color.type is not ColorType.TRUECOLOR:
        return None
    red, green, blue = color.get_truecolor()
    return ParsedColor(red=red, green=green, blue=blue)


def parse_bool_token(text: str) -> bool | None:
    token = text.casefold()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None


def parse_value(name: str, arg_type: ArgType, raw: str) -> CommandArg | None:
    """Convert `raw` into an argument of `arg_type`.

    Returns None when the value is rejected (only colors can be rejected);
    the caller drops that argument and keeps parsing.
    """
    if arg_type is ArgType.STRING:
        return StringArg(name=name, value=raw)
    if arg_type is ArgType.INT:
        return IntArg(name=name, value=parse_int(raw))
    if arg_type is ArgType.COLOR:
        color = parse_color(raw)
        if color is None:
            logger.warning("[ARGS] invalid color value '%s' for `%s`", raw, name)
            return None
        return ColorArg(name=name, value=color)
    raise ValueError(f"argument `{name}` of type {arg_type.value} has no value parser")
