"""Buffer state, snapshot history and the command-executing engine."""

from .engine import BufferEngine
from .history import SnapshotHistory
from .state import BufferMirror, BufferState, Snapshot

__all__ = [
    "BufferEngine",
    "BufferMirror",
    "BufferState",
    "Snapshot",
    "SnapshotHistory",
]
