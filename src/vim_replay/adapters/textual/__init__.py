"""Textual integration: replay controller (``app`` needs the textual package)."""

from .controller import TextualReplayAdapter, TextualUIHooks, render_buffer

__all__ = ["TextualReplayAdapter", "TextualUIHooks", "render_buffer"]
