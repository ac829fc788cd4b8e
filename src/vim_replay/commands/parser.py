"""Tokenizer turning a command string into command values.

Grammar: ``[<digits>]<letter>[<argument>]`` repeated, where ``<letter>`` is
one of ``h l x u r f`` and ``r``/``f`` consume the following character as
their argument. The whole string is tokenized before anything runs, so a
malformed command anywhere aborts the run without touching a buffer.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from vim_replay.runtime import telemetry
from vim_replay.runtime.telemetry import span

from .errors import CommandParseError, MissingArgumentError, UnsupportedCommandError
from .models import (
    UNBOUNDED_COUNT,
    Command,
    Delete,
    MoveLeft,
    MoveRight,
    MoveToNext,
    Replace,
    Undo,
)

CommandBuilder = Callable[[int, Optional[str]], Command]

_MAX_COUNT_DIGITS = len(str(UNBOUNDED_COUNT))


def _move_to_next(count: int, char: Optional[str]) -> Command:
    del count  # f ignores repeat counts
    return MoveToNext(char or "")


_BUILDERS: Dict[str, CommandBuilder] = {
    "h": lambda count, _: MoveLeft(count),
    "l": lambda count, _: MoveRight(count),
    "x": lambda count, _: Delete(count),
    "u": lambda count, _: Undo(count),
    "r": lambda count, char: Replace(char=char or "", count=count),
    "f": _move_to_next,
}

ARGUMENT_LETTERS = frozenset({"r", "f"})


def resolve_count(digits: str) -> int:
    """Turn an accumulated digit run into a repeat count.

    An empty run means 1. Values that do not fit a signed 32-bit integer
    become :data:`UNBOUNDED_COUNT`. The length check runs before ``int`` so
    arbitrarily long runs never hit the interpreter's digit limit.
    """

    if not digits:
        return 1
    significant = digits.lstrip("0")
    if len(significant) > _MAX_COUNT_DIGITS:
        return UNBOUNDED_COUNT
    return min(int(digits), UNBOUNDED_COUNT)


class CommandParser:
    """Tokenizes command strings; stateless between calls."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name

    def parse(self, source: str) -> Tuple[Command, ...]:
        with span(
            "commands::parse",
            logger_name=self._logger_name,
            component="commands",
            metadata={"length": len(source)},
        ) as handle:
            try:
                commands = self._tokenize(source)
            except CommandParseError as exc:
                telemetry.record_event(
                    "commands.parse_error",
                    level="warning",
                    data={
                        "command": exc.command,
                        "position": exc.position,
                        "reason": type(exc).__name__,
                    },
                    logger_name=self._logger_name,
                )
                raise
            handle.add_metadata("commands", len(commands))

        telemetry.record_event(
            "commands.parsed",
            level="debug",
            data={"count": len(commands)},
            logger_name=self._logger_name,
        )
        return commands

    @staticmethod
    def _tokenize(source: str) -> Tuple[Command, ...]:
        commands: List[Command] = []
        digits: List[str] = []
        index = 0
        while index < len(source):
            char = source[index]
            if char.isdecimal():
                digits.append(str(int(char)))  # folds non-ASCII digits
                index += 1
                continue

            count = resolve_count("".join(digits))
            digits.clear()

            builder = _BUILDERS.get(char)
            if builder is None:
                raise UnsupportedCommandError(char, position=index)

            argument: Optional[str] = None
            if char in ARGUMENT_LETTERS:
                if index + 1 >= len(source):
                    raise MissingArgumentError(char, position=index)
                argument = source[index + 1]
                index += 1

            commands.append(builder(count, argument))
            index += 1

        # a dangling digit run names no command and is dropped
        return tuple(commands)


_DEFAULT_PARSER = CommandParser(logger_name="vim_replay.commands")


def parse_commands(source: str) -> Tuple[Command, ...]:
    """Parse ``source`` with the shared default parser."""

    return _DEFAULT_PARSER.parse(source)


__all__ = [
    "ARGUMENT_LETTERS",
    "CommandParser",
    "parse_commands",
    "resolve_count",
]
