"""Outcome records and error codes for command definition parsing."""

from __future__ import annotations

from dataclasses import dataclass

from config.defaults import NOT_FOUND

CODE_OK = "OK"
CODE_UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
CODE_NO_ARGUMENTS = "NO_ARGUMENTS"
CODE_MALFORMED_DEFINITION = "MALFORMED_DEFINITION"
CODE_EMPTY_DEFINITION = "EMPTY_DEFINITION"


@dataclass(frozen=True)
class ParseOutcome:
    definition: str
    ok: bool
    code: str
    text: str
    cmd_id: int = NOT_FOUND


class DefinitionParseError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def outcome_ok(definition: str, cmd_id: int, text: str = "") -> ParseOutcome:
    return ParseOutcome(definition=definition, ok=True, code=CODE_OK, text=text, cmd_id=cmd_id)


def outcome_error(definition: str, code: str, text: str) -> ParseOutcome:
    return ParseOutcome(definition=definition, ok=False, code=code, text=text)
