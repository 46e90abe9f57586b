"""Argument specifications for commands that accept arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from config.defaults import NOT_FOUND
from protocol import command_ids as ids
from protocol.arguments import ArgType


@dataclass(frozen=True)
class ArgSpec:
    group_id: int
    name: str
    arg_type: ArgType


# Specs of one group must be contiguous.
# The first spec of a group is its default argument and may be given without a name.
# A default String argument swallows the rest of the definition, so it is declared first
# and any named arguments must precede it in the definition text.
ARG_SPECS: tuple[ArgSpec, ...] = (
    ArgSpec(ids.CMD_EXEC, ids.ARG_SPEC, ArgType.STRING),
    ArgSpec(ids.CMD_EXEC, ids.ARG_FILTER, ArgType.STRING),
    ArgSpec(ids.CMD_CREATE_ANNOT_TEXT, ids.ARG_COLOR, ArgType.COLOR),
    ArgSpec(ids.CMD_CREATE_ANNOT_TEXT, ids.ARG_OPEN_EDIT, ArgType.BOOL),
    ArgSpec(ids.CMD_SCROLL_UP, ids.ARG_N, ArgType.INT),
)

_ANNOTATION_COMMANDS = (
    ids.CMD_CREATE_ANNOT_TEXT,
    ids.CMD_CREATE_ANNOT_LINK,
    ids.CMD_CREATE_ANNOT_FREE_TEXT,
    ids.CMD_CREATE_ANNOT_LINE,
    ids.CMD_CREATE_ANNOT_SQUARE,
    ids.CMD_CREATE_ANNOT_CIRCLE,
    ids.CMD_CREATE_ANNOT_POLYGON,
    ids.CMD_CREATE_ANNOT_POLY_LINE,
    ids.CMD_CREATE_ANNOT_HIGHLIGHT,
    ids.CMD_CREATE_ANNOT_UNDERLINE,
    ids.CMD_CREATE_ANNOT_SQUIGGLY,
    ids.CMD_CREATE_ANNOT_STRIKE_OUT,
    ids.CMD_CREATE_ANNOT_REDACT,
    ids.CMD_CREATE_ANNOT_STAMP,
    ids.CMD_CREATE_ANNOT_CARET,
    ids.CMD_CREATE_ANNOT_INK,
    ids.CMD_CREATE_ANNOT_POPUP,
    ids.CMD_CREATE_ANNOT_FILE_ATTACHMENT,
)

_SCROLL_COMMANDS = (
    ids.CMD_SCROLL_UP,
    ids.CMD_SCROLL_DOWN,
    ids.CMD_GO_TO_NEXT_PAGE,
    ids.CMD_GO_TO_PREV_PAGE,
)

# concrete command id -> representative id of its argument group
ARG_GROUPS: dict[int, int] = {
    **{cmd_id: ids.CMD_CREATE_ANNOT_TEXT for cmd_id in _ANNOTATION_COMMANDS},
    **{cmd_id: ids.CMD_SCROLL_UP for cmd_id in _SCROLL_COMMANDS},
    ids.CMD_EXEC: ids.CMD_EXEC,
}


def check_arg_specs(specs: Sequence[ArgSpec], groups: Mapping[int, int]) -> None:
    finished: set[int] = set()
    names: set[str] = set()
    current: int | None = None
    for spec in specs:
        if spec.arg_type is ArgType.NONE:
            raise ValueError(f"argument `{spec.name}` has no type")
        if spec.group_id != current:
            if spec.group_id in finished:
                raise ValueError(f"argument specs for group {spec.group_id} are not contiguous")
            if current is not None:
                finished.add(current)
            if spec.arg_type is ArgType.BOOL:
                raise ValueError(f"default argument `{spec.name}` cannot be a bool")
            current = spec.group_id
            names = set()
        if spec.name.casefold() in names:
            raise ValueError(f"duplicate argument `{spec.name}` in group {spec.group_id}")
        names.add(spec.name.casefold())

    owners = {spec.group_id for spec in specs}
    for cmd_id, group_id in groups.items():
        if group_id not in owners:
            raise ValueError(f"command {cmd_id} maps to group {group_id} which has no argument specs")


def group_of(cmd_id: int) -> int:
    return ARG_GROUPS.get(cmd_id, cmd_id)


def accepts_arguments(cmd_id: int) -> bool:
    return cmd_id in ARG_GROUPS


def first_spec_index(group_id: int, specs: Sequence[ArgSpec] = ARG_SPECS) -> int:
    for index, spec in enumerate(specs):
        if spec.group_id == group_id:
            return index
    return NOT_FOUND


def group_specs(first_index: int, specs: Sequence[ArgSpec] = ARG_SPECS) -> tuple[ArgSpec, ...]:
    """Return the contiguous run of specs starting at `first_index`."""
    group_id = specs[first_index].group_id
    run: list[ArgSpec] = []
    for spec in specs[first_index:]:
        if spec.group_id != group_id:
            break
        run.append(spec)
    return tuple(run)


def specs_for_command(cmd_id: int) -> tuple[ArgSpec, ...]:
    if not accepts_arguments(cmd_id):
        return ()
    index = first_spec_index(group_of(cmd_id))
    if index == NOT_FOUND:
        return ()
    return group_specs(index)


check_arg_specs(ARG_SPECS, ARG_GROUPS)
