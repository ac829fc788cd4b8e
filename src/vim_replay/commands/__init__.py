"""Command values, parse errors and the command-string parser."""

from .errors import CommandParseError, MissingArgumentError, UnsupportedCommandError
from .models import (
    COMMAND_TYPES,
    UNBOUNDED_COUNT,
    Command,
    Delete,
    MoveLeft,
    MoveRight,
    MoveToNext,
    Replace,
    Undo,
    format_commands,
)
from .parser import CommandParser, parse_commands, resolve_count

__all__ = [
    "Command",
    "COMMAND_TYPES",
    "UNBOUNDED_COUNT",
    "MoveLeft",
    "MoveRight",
    "Delete",
    "Undo",
    "Replace",
    "MoveToNext",
    "format_commands",
    "CommandParser",
    "parse_commands",
    "resolve_count",
    "CommandParseError",
    "UnsupportedCommandError",
    "MissingArgumentError",
]
