"""
Browser shell for the central TUI layout.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, OptionList, Static


class BrowserShell(Container):
    """Path bar with Up/Exit, the notice row and the entry list."""

    def compose(self) -> ComposeResult:
        with Horizontal(id="path-bar"):
            yield Static("", id="path-text")
            yield Button("Up", id="up")
            yield Button("Exit", id="exit")
        with Horizontal(id="notice-bar"):
            yield Static("", id="notice-text")
            yield Button("Close", id="close-notice")
        yield OptionList(id="entry-list")
