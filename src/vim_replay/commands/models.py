"""Immutable command values produced by the parser and consumed by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

# Largest signed 32-bit value; counts that overflow it collapse to this.
UNBOUNDED_COUNT = 2**31 - 1


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _count_prefix(count: int) -> str:
    return "" if count == 1 else str(count)


@dataclass(frozen=True, slots=True)
class MoveLeft:
    """``h``: move the cursor ``count`` characters towards the start."""

    count: int = 1
    letter: ClassVar[str] = "h"

    def __post_init__(self) -> None:
        _check_count(self.count)

    @property
    def token(self) -> str:
        return f"{_count_prefix(self.count)}{self.letter}"


@dataclass(frozen=True, slots=True)
class MoveRight:
    """``l``: move the cursor ``count`` characters towards the end."""

    count: int = 1
    letter: ClassVar[str] = "l"

    def __post_init__(self) -> None:
        _check_count(self.count)

    @property
    def token(self) -> str:
        return f"{_count_prefix(self.count)}{self.letter}"


@dataclass(frozen=True, slots=True)
class Delete:
    """``x``: delete ``count`` characters starting at the cursor."""

    count: int = 1
    letter: ClassVar[str] = "x"

    def __post_init__(self) -> None:
        _check_count(self.count)

    @property
    def token(self) -> str:
        return f"{_count_prefix(self.count)}{self.letter}"


@dataclass(frozen=True, slots=True)
class Undo:
    """``u``: roll back ``count`` history snapshots."""

    count: int = 1
    letter: ClassVar[str] = "u"

    def __post_init__(self) -> None:
        _check_count(self.count)

    @property
    def token(self) -> str:
        return f"{_count_prefix(self.count)}{self.letter}"


@dataclass(frozen=True, slots=True, kw_only=True)
class Replace:
    """``r<char>``: overwrite ``count`` characters, advancing the cursor."""

    char: str
    count: int = 1
    letter: ClassVar[str] = "r"

    def __post_init__(self) -> None:
        _check_count(self.count)
        _check_char(self.char)

    @property
    def token(self) -> str:
        return f"{_count_prefix(self.count)}{self.letter}{self.char}"


@dataclass(frozen=True, slots=True)
class MoveToNext:
    """``f<char>``: jump to the next occurrence of ``char``. Takes no count."""

    char: str
    letter: ClassVar[str] = "f"

    def __post_init__(self) -> None:
        _check_char(self.char)

    @property
    def token(self) -> str:
        return f"{self.letter}{self.char}"


Command = Union[MoveLeft, MoveRight, Delete, Undo, Replace, MoveToNext]

COMMAND_TYPES: tuple[type, ...] = (
    MoveLeft,
    MoveRight,
    Delete,
    Undo,
    Replace,
    MoveToNext,
)


def format_commands(commands) -> str:
    """Join command tokens back into a readable command string."""

    return "".join(command.token for command in commands)


__all__ = [
    "UNBOUNDED_COUNT",
    "Command",
    "COMMAND_TYPES",
    "MoveLeft",
    "MoveRight",
    "Delete",
    "Undo",
    "Replace",
    "MoveToNext",
    "format_commands",
]
