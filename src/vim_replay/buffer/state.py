"""Cursor/text state and the value types copied out of it."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Immutable ``(cursor, text)`` capture used by the undo history."""

    cursor: int
    text: str


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly copy of the buffer handed to UI adapters."""

    text: str
    cursor: int
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + text pair owned by a single engine."""

    text: str = ""
    cursor: int = 0

    @property
    def last_index(self) -> int:
        return max(0, len(self.text) - 1)

    def snapshot(self) -> Snapshot:
        return Snapshot(cursor=self.cursor, text=self.text)

    def restore(self, snapshot: Snapshot) -> None:
        self.cursor = snapshot.cursor
        self.text = snapshot.text
