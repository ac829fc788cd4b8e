"""Buffer engine executing parsed commands against one cursor/text pair."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from vim_replay.commands.models import (
    COMMAND_TYPES,
    Command,
    Delete,
    MoveLeft,
    MoveRight,
    MoveToNext,
    Replace,
    Undo,
)
from vim_replay.runtime import telemetry

from .history import SnapshotHistory
from .state import BufferMirror, BufferState, Snapshot

Applier = Callable[[BufferState, SnapshotHistory, Command], None]


def _move_left(state: BufferState, history: SnapshotHistory, command: MoveLeft) -> None:
    del history
    state.cursor = max(0, state.cursor - command.count)


def _move_right(
    state: BufferState, history: SnapshotHistory, command: MoveRight
) -> None:
    del history
    # last_index is 0 for empty text
    state.cursor = min(state.last_index, state.cursor + command.count)


def _delete(state: BufferState, history: SnapshotHistory, command: Delete) -> None:
    del history
    cursor = state.cursor
    end = cursor + command.count
    if end >= len(state.text):
        state.text = state.text[:cursor]
    else:
        state.text = state.text[:cursor] + state.text[end:]
    # cursor is not re-clamped and may now sit past the end


def _replace_at_cursor(state: BufferState, char: str) -> None:
    cursor = state.cursor
    if cursor < len(state.text):
        state.text = state.text[:cursor] + char + state.text[cursor + 1 :]


def _replace(state: BufferState, history: SnapshotHistory, command: Replace) -> None:
    del history
    if command.count == 1:
        _replace_at_cursor(state, command.char)
        return
    for _ in range(command.count):
        _replace_at_cursor(state, command.char)
        state.cursor += 1
        if state.cursor >= len(state.text):
            state.cursor -= 1
            break


def _move_to_next(
    state: BufferState, history: SnapshotHistory, command: MoveToNext
) -> None:
    del history
    index = state.text.find(command.char, state.cursor)
    if index >= 0:
        state.cursor = index


def _undo(state: BufferState, history: SnapshotHistory, command: Undo) -> None:
    restored = history.pop_many(command.count)
    if restored is not None:
        state.restore(restored)


_APPLIERS: Dict[type, Applier] = {
    MoveLeft: _move_left,  # type: ignore[dict-item]
    MoveRight: _move_right,  # type: ignore[dict-item]
    Delete: _delete,  # type: ignore[dict-item]
    Replace: _replace,  # type: ignore[dict-item]
    MoveToNext: _move_to_next,  # type: ignore[dict-item]
    Undo: _undo,  # type: ignore[dict-item]
}

_missing = sorted(t.__name__ for t in set(COMMAND_TYPES) - set(_APPLIERS))
if _missing:  # pragma: no cover - every command type needs an applier
    raise RuntimeError(f"No applier registered for {_missing}")


class BufferEngine:
    """Owns the buffer state and its snapshot history for one editing run."""

    def __init__(self, text: str = "", *, name: str = "default") -> None:
        self.name = name
        self.state = BufferState(text=text, cursor=0)
        self.history = SnapshotHistory()
        self.history.push(self.state.snapshot())
        self.executed = 0

    @property
    def text(self) -> str:
        return self.state.text

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def history_depth(self) -> int:
        return self.history.depth

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.state.text,
            cursor=self.state.cursor,
            attributes=dict(attributes or {}),
        )

    def execute(self, command: Command) -> Snapshot:
        """Apply one command and return the resulting state."""

        applier = _APPLIERS.get(type(command))
        if applier is None:
            raise TypeError(f"Unsupported command value: {command!r}")
        if not isinstance(command, Undo):
            self.history.push(self.state.snapshot())
        applier(self.state, self.history, command)
        self.executed += 1
        telemetry.record_event(
            "engine.execute",
            level="debug",
            data={
                "buffer": self.name,
                "command": command.token,
                "cursor": self.state.cursor,
                "length": len(self.state.text),
                "history": self.history.depth,
            },
            logger_name="vim_replay.engine",
        )
        return self.state.snapshot()

    def run(self, commands: Iterable[Command]) -> Snapshot:
        """Execute ``commands`` in order and return the final state."""

        with telemetry.span(
            "engine::run",
            logger_name="vim_replay.engine",
            component="engine",
            metadata={"buffer": self.name},
        ) as handle:
            before = self.executed
            for command in commands:
                self.execute(command)
            handle.add_metadata("executed", self.executed - before)
            handle.add_metadata("history", self.history.depth)
        return self.state.snapshot()


__all__ = ["BufferEngine"]
