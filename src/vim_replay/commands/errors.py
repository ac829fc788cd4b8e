"""Errors raised while tokenizing a command string."""

from __future__ import annotations


class CommandParseError(ValueError):
    """Base class for command strings that cannot be tokenized."""

    def __init__(self, message: str, *, command: str, position: int) -> None:
        super().__init__(message)
        self.command = command
        self.position = position


class UnsupportedCommandError(CommandParseError):
    """Raised for a character that is neither a digit nor a known letter."""

    def __init__(self, command: str, *, position: int) -> None:
        super().__init__(
            f"Unsupported command: {command}", command=command, position=position
        )


class MissingArgumentError(CommandParseError):
    """Raised when ``r`` or ``f`` ends the string without its argument."""

    def __init__(self, command: str, *, position: int) -> None:
        super().__init__(
            f"Command '{command}' requires an argument",
            command=command,
            position=position,
        )


__all__ = ["CommandParseError", "UnsupportedCommandError", "MissingArgumentError"]
