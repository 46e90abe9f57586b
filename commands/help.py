"""Plain-text help for commands and parsed command instances."""

from __future__ import annotations

from commands.catalog import find_command
from commands.registry import CommandWithArg
from commands.schemas import group_of, specs_for_command
from protocol.arguments import format_arg


def render_command_help(cmd_id: int) -> str:
    command = find_command(cmd_id)
    if command is None:
        return f"Unknown command: {cmd_id}"

    lines = [
        f"Command: {command.name}",
        f"Description: {command.description}",
        f"Id: {command.id}",
    ]
    specs = specs_for_command(cmd_id)
    if not specs:
        lines.append("Args: none")
        return "\n".join(lines)

    group = find_command(group_of(cmd_id))
    if group is not None and group.id != command.id:
        lines.append(f"Shares arguments with: {group.name}")
    lines.append("Args:")
    for index, spec in enumerate(specs):
        role = "default" if index == 0 else "named"
        lines.append(f"- {spec.name} ({spec.arg_type.value}, {role})")
    lines.append("")
    lines.append(f"Usage: {command.name} [<{specs[0].name}>] [<name>=<value> ...]")
    return "\n".join(lines)


def render_instance(instance: CommandWithArg) -> str:
    command = find_command(instance.orig_id)
    name = command.name if command is not None else str(instance.orig_id)
    lines = [
        f"Instance: {instance.id}",
        f"Command: {name} ({instance.orig_id})",
        f"Definition: {instance.definition}",
        "Args:",
    ]
    for arg in instance.args:
        lines.append(f"- {format_arg(arg)} ({arg.arg_type.value})")
    return "\n".join(lines)
