from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from vim_replay.adapters.textual import (
    TextualReplayAdapter,
    TextualUIHooks,
    render_buffer,
)
from vim_replay.buffer import BufferMirror
from vim_replay.commands import UnsupportedCommandError


@dataclass
class Recorder:
    mirrors: List[BufferMirror] = field(default_factory=list)
    statuses: List[str] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)

    def hooks(self) -> TextualUIHooks:
        return TextualUIHooks(
            update_buffer=self.mirrors.append,
            update_status=self.statuses.append,
            log=self.logs.append,
        )


def make_adapter(text: str, commands: str, recorder: Recorder) -> TextualReplayAdapter:
    return TextualReplayAdapter(text, commands, recorder.hooks())


def test_adapter_renders_initial_buffer_before_any_step() -> None:
    recorder = Recorder()

    adapter = make_adapter("abcdef", "2l3rX", recorder)

    assert adapter.position == 0
    assert adapter.total == 2
    assert recorder.mirrors[-1].text == "abcdef"
    assert recorder.mirrors[-1].attributes["remaining"] == "2l3rX"
    assert recorder.statuses == ["ready [0/2]"]


def test_adapter_steps_one_command_at_a_time() -> None:
    recorder = Recorder()
    adapter = make_adapter("abcdef", "2l3rX", recorder)

    first = adapter.step()

    assert first is not None and first.token == "2l"
    assert recorder.mirrors[-1].cursor == 2
    assert recorder.mirrors[-1].attributes["remaining"] == "3rX"
    assert recorder.statuses[-1] == "2l [1/2]"

    adapter.step()

    assert recorder.mirrors[-1].text == "abXXXf"
    assert recorder.mirrors[-1].cursor == 5
    assert adapter.finished


def test_adapter_step_after_finish_reports_done() -> None:
    recorder = Recorder()
    adapter = make_adapter("abc", "l", recorder)
    adapter.step()

    assert adapter.step() is None
    assert recorder.statuses[-1] == "done [1/1]"


def test_adapter_run_to_end_matches_editor_result() -> None:
    recorder = Recorder()
    adapter = make_adapter("hello world", "5l3rXu2x", recorder)

    executed = adapter.run_to_end()

    assert executed == 4
    assert recorder.mirrors[-1].text == "helloorld"
    assert recorder.mirrors[-1].cursor == 5


def test_adapter_rejects_bad_command_string_before_rendering() -> None:
    recorder = Recorder()

    with pytest.raises(UnsupportedCommandError):
        make_adapter("abc", "lz", recorder)

    assert recorder.mirrors == []


def test_adapter_emits_log_lines() -> None:
    recorder = Recorder()
    adapter = make_adapter("abc", "x", recorder)

    adapter.step()

    assert recorder.logs
    assert recorder.logs[-1].startswith("step ->")
    assert "command='x'" in recorder.logs[-1]


def test_adapter_remaining_shrinks_by_one_token_per_step() -> None:
    recorder = Recorder()
    adapter = make_adapter("abcdef", "12l3rXfz2u", recorder)
    seen = [adapter.remaining]

    while adapter.step() is not None:
        seen.append(adapter.remaining)

    assert seen == ["12l3rXfz2u", "3rXfz2u", "fz2u", "2u", ""]
    assert [m.attributes["remaining"] for m in recorder.mirrors] == seen


def test_adapter_remaining_uses_canonical_tokens() -> None:
    recorder = Recorder()

    adapter = make_adapter("abc", "1l7fa", recorder)

    assert adapter.remaining == "lfa"


def test_render_buffer_places_caret_under_cursor() -> None:
    mirror = BufferMirror("abcdef", 3, {"remaining": "2x"})

    assert render_buffer(mirror) == "abcdef\n   ^\nCursor: 3\nNext: 2x"


def test_render_buffer_omits_next_line_when_nothing_remains() -> None:
    mirror = BufferMirror("abc", 0, {"remaining": ""})

    assert render_buffer(mirror) == "abc\n^\nCursor: 0"
