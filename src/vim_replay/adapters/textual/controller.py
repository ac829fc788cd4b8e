"""Step-through replay controller that reports progress through UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Callable, Dict, Optional

from vim_replay.buffer import BufferEngine, BufferMirror
from vim_replay.commands import Command, format_commands, parse_commands


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def render_buffer(mirror: BufferMirror) -> str:
    """Text, a caret under the cursor, then the remaining commands."""

    caret = " " * mirror.cursor + "^"
    lines = [mirror.text, caret, f"Cursor: {mirror.cursor}"]
    remaining = mirror.attributes.get("remaining")
    if remaining:
        lines.append(f"Next: {remaining}")
    return "\n".join(lines)


class TextualReplayAdapter:
    """Replays a parsed command string one command at a time.

    The command string is parsed in the constructor, before any hook fires,
    so hosts never render a buffer for a string that cannot run.
    """

    def __init__(
        self,
        text: str,
        commands: str,
        hooks: TextualUIHooks,
        *,
        name: str = "default",
    ) -> None:
        self.commands = parse_commands(commands)
        # token start offsets into the canonical command string
        self._source = format_commands(self.commands)
        self._offsets = (
            0,
            *accumulate(len(command.token) for command in self.commands),
        )
        self.engine = BufferEngine(text, name=name)
        self.hooks = hooks
        self._position = 0
        self._refresh_buffer()
        self.hooks.update_status(self._status("ready"))

    @property
    def position(self) -> int:
        return self._position

    @property
    def total(self) -> int:
        return len(self.commands)

    @property
    def finished(self) -> bool:
        return self._position >= len(self.commands)

    @property
    def remaining(self) -> str:
        """Canonical text of the commands that have not run yet."""

        return self._source[self._offsets[self._position] :]

    @property
    def next_command(self) -> Optional[Command]:
        if self.finished:
            return None
        return self.commands[self._position]

    def step(self) -> Optional[Command]:
        """Execute the next command; ``None`` once the replay is done."""

        command = self.next_command
        if command is None:
            self.hooks.update_status(self._status("done"))
            return None
        self.engine.execute(command)
        self._position += 1
        self._log_state("step ->", command=command.token)
        self._refresh_buffer()
        self.hooks.update_status(self._status(command.token))
        return command

    def run_to_end(self) -> int:
        """Execute every remaining command and return how many ran."""

        executed = 0
        while self.step() is not None:
            executed += 1
        return executed

    def _status(self, label: str) -> str:
        return f"{label} [{self._position}/{self.total}]"

    def _refresh_buffer(self) -> None:
        attributes = {
            "position": str(self._position),
            "total": str(self.total),
            "remaining": self.remaining,
        }
        self.hooks.update_buffer(self.engine.mirror(attributes=attributes))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "buffer": self.engine.name,
            "cursor": self.engine.cursor,
            "length": len(self.engine.text),
            "history": self.engine.history_depth,
        }


__all__ = ["TextualReplayAdapter", "TextualUIHooks", "render_buffer"]
