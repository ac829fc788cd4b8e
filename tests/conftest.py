from __future__ import annotations

from vim_replay.runtime import telemetry

telemetry.configure(preset="quiet")
