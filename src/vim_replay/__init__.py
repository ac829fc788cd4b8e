"""Replay vi-style command strings against an in-memory text buffer."""

from .commands import (
    CommandParseError,
    MissingArgumentError,
    UnsupportedCommandError,
    parse_commands,
)
from .editor import Editor

__all__ = [
    "Editor",
    "parse_commands",
    "CommandParseError",
    "MissingArgumentError",
    "UnsupportedCommandError",
    "adapters",
    "buffer",
    "commands",
    "runtime",
]

__version__ = "0.1.0"
