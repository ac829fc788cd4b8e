"""Editor facade: parse a command string, then run it against a text."""

from __future__ import annotations

from typing import Tuple

from vim_replay.buffer import BufferEngine, Snapshot
from vim_replay.commands import Command, parse_commands


class Editor:
    """Runs ``commands`` against ``text`` at construction time.

    Parsing finishes before the buffer exists, so a malformed command string
    raises a :class:`~vim_replay.commands.CommandParseError` and no editor
    (hence no partially edited text) is ever observable.
    """

    def __init__(self, text: str, commands: str, *, name: str = "default") -> None:
        parsed = parse_commands(commands)
        self.name = name
        self.commands: Tuple[Command, ...] = parsed
        self.engine = BufferEngine(text, name=name)
        self.engine.run(parsed)

    @property
    def text(self) -> str:
        return self.engine.text

    @property
    def cursor(self) -> int:
        return self.engine.cursor

    @property
    def history_depth(self) -> int:
        return self.engine.history_depth

    def snapshot(self) -> Snapshot:
        return self.engine.snapshot()

    def render(self) -> str:
        """Text on the first line, ``Cursor: <n>`` on the second."""

        return f"{self.text}\nCursor: {self.cursor}"

    def __repr__(self) -> str:
        return f"Editor(name={self.name!r}, cursor={self.cursor}, text={self.text!r})"
