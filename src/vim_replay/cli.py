"""Command line entry point: run a command string and print the result."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Tuple

from vim_replay.commands import CommandParseError
from vim_replay.editor import Editor
from vim_replay.runtime import telemetry

EXIT_OK = 0
EXIT_PARSE_ERROR = 2
ENV_PRESET = "env"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vim-replay",
        description="Apply a vi-style command string to a text and print the result.",
    )
    parser.add_argument("text", nargs="?", help="Initial buffer text")
    parser.add_argument("commands", nargs="?", help="Command string, e.g. 3rXfzu")
    parser.add_argument(
        "--text-file",
        type=Path,
        help="Read the initial text from a file (trailing newline stripped)",
    )
    parser.add_argument(
        "--commands-file",
        type=Path,
        help="Read the command string from a file (trailing newline stripped)",
    )
    parser.add_argument(
        "--log-preset",
        default=os.environ.get("VIM_REPLAY_LOG_PRESET", "quiet"),
        choices=sorted(telemetry.PRESETS) + [ENV_PRESET],
        help="Telemetry preset (default: quiet; 'env' reads VIM_REPLAY_* variables)",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Step through the commands in the Textual viewer instead of printing",
    )
    return parser


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = _build_parser()
    args = parser.parse_args(argv)
    given = [value for value in (args.text, args.commands) if value is not None]
    files = sum(1 for path in (args.text_file, args.commands_file) if path)
    if len(given) > 2 - files:
        parser.error(
            f"too many positional arguments: {len(given)} given "
            f"alongside {files} file option(s)"
        )
    return args


def _read_file(path: Path) -> str:
    return path.read_text(encoding="utf-8").rstrip("\r\n")


def _resolve_inputs(args: argparse.Namespace, stdin: TextIO) -> Tuple[str, str]:
    # positionals fill whichever inputs no file option supplied, in order
    positionals = [value for value in (args.text, args.commands) if value is not None]
    text: Optional[str] = None
    commands: Optional[str] = None
    if args.text_file:
        text = _read_file(args.text_file)
    elif positionals:
        text = positionals.pop(0)
    if args.commands_file:
        commands = _read_file(args.commands_file)
    elif positionals:
        commands = positionals.pop(0)

    if text is None or commands is None:
        lines = stdin.read().splitlines()
        if text is None:
            text = lines.pop(0) if lines else ""
        if commands is None:
            commands = lines.pop(0) if lines else ""
    return text, commands


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    args = _parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if args.log_preset == ENV_PRESET:
        telemetry.configure()
    else:
        telemetry.configure(preset=args.log_preset)

    text, commands = _resolve_inputs(args, stdin)

    if args.tui:
        from vim_replay.adapters.textual.app import run_app

        try:
            run_app(text, commands)
        except CommandParseError as exc:
            print(f"error: {exc}", file=stderr)
            return EXIT_PARSE_ERROR
        return EXIT_OK

    try:
        editor = Editor(text, commands)
    except CommandParseError as exc:
        print(f"error: {exc}", file=stderr)
        return EXIT_PARSE_ERROR

    print(editor.render(), file=stdout)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
