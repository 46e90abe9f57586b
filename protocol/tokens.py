"""Low-level token helpers for command definition strings."""

from __future__ import annotations


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    return text[: len(prefix)].casefold() == prefix.casefold()


def matches_name(text: str, name: str) -> bool:
    """Return True if `text` is `name`, or `name` directly followed by `=`.

    Comparison is case-insensitive. Used by the catalog for name and
    description lookup.
    """
    if text.casefold() == name.casefold():
        return True
    if not starts_with_ignore_case(text, name):
        return False
    return text[len(name) : len(name) + 1] == "="


def split_definition(definition: str) -> tuple[str, str | None]:
    """Split a definition into command name and the raw argument remainder.

    Trailing spaces inside the remainder are kept; a remainder of only
    spaces counts as none.
    """
    name, _sep, remainder = definition.lstrip().partition(" ")
    remainder = remainder.lstrip(" ")
    if not remainder.strip():
        return name.rstrip(), None
    return name.rstrip(), remainder


def split_token(text: str) -> tuple[str, str]:
    """Return the token up to the next space and the rest after that space."""
    token, _sep, rest = text.partition(" ")
    return token, rest
