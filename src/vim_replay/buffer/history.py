"""Linear snapshot stack backing the undo command."""

from __future__ import annotations

from typing import List, Optional

from .state import Snapshot


class SnapshotHistory:
    """Newest-on-top stack of full buffer snapshots.

    Every entry is a complete copy of the text, so memory grows with the
    number of executed commands times the text length. Diff-based entries
    would fix that without changing what undo restores.
    """

    def __init__(self) -> None:
        self._stack: List[Snapshot] = []

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def is_empty(self) -> bool:
        return not self._stack

    def push(self, snapshot: Snapshot) -> None:
        self._stack.append(snapshot)

    def peek(self) -> Optional[Snapshot]:
        return self._stack[-1] if self._stack else None

    def pop(self) -> Optional[Snapshot]:
        if not self._stack:
            return None
        return self._stack.pop()

    def pop_many(self, count: int) -> Optional[Snapshot]:
        """Pop up to ``count`` entries and return the last one popped.

        Stops silently once the stack is empty; returns ``None`` when nothing
        could be popped at all.
        """

        restored: Optional[Snapshot] = None
        for _ in range(count):
            if not self._stack:
                break
            restored = self._stack.pop()
        return restored
