"""
Textual TUI App
===============
Directory browser that rips MKV files to MP3 on selection.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, OptionList, Static

from ripper.app import AppController
from ripper.browse.models import DirectoryEntry
from ripper.tui.screens.browser import BrowserShell
from ripper.tui.styles import APP_CSS
from ripper.tui.theme import DIRECTORY_BLUE

logger = logging.getLogger(__name__)


class RipperTUI(App):
    """Browse folders, select an MKV file and rip its audio."""

    CSS = APP_CSS
    TITLE = "Ripper"

    BINDINGS = [
        ("q", "exit_session", "Exit"),
        ("backspace", "go_up", "Up"),
        ("u", "go_up", "Up"),
        ("escape", "dismiss_notice", "Close"),
    ]

    def __init__(
        self,
        controller: Optional[AppController] = None,
        start_directory: Optional[Path] = None,
    ):
        super().__init__()
        self.controller = controller or AppController(start_directory=start_directory)
        self._listed: Optional[tuple[Path, tuple[DirectoryEntry, ...]]] = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield BrowserShell(id="root")
        yield Footer()

    def on_mount(self) -> None:
        if not self.controller.runner.is_available():
            logger.warning("%s not found on PATH; ripping will fail", self.controller.runner.binary)
        self._render_state()
        self.query_one("#entry-list", OptionList).focus()

    @staticmethod
    def _entry_prompt(entry: DirectoryEntry) -> Text:
        if entry.is_directory:
            return Text(f"{entry.name}/", style=f"bold {DIRECTORY_BLUE}")
        return Text.assemble(entry.name, ("  enter to rip", "dim"))

    def _render_state(self) -> None:
        state = self.controller.state
        self.query_one("#path-text", Static).update(Text(str(state.current_directory)))

        outcome = self.controller.last_outcome
        notice_bar = self.query_one("#notice-bar", Horizontal)
        notice_bar.set_class(state.has_notice, "-visible")
        notice_bar.set_class(state.has_notice and outcome is not None and not outcome.success, "-failed")
        self.query_one("#notice-text", Static).update(Text(state.notice or ""))

        # Only rebuild the list after a navigation so the highlight survives
        # conversions and dismissals.
        listing = (state.current_directory, state.entries)
        if listing == self._listed:
            return
        self._listed = listing

        entry_list = self.query_one("#entry-list", OptionList)
        entry_list.clear_options()
        entry_list.add_options([self._entry_prompt(entry) for entry in state.entries])
        if state.entries:
            entry_list.highlighted = 0

    def open_entry(self, index: int) -> None:
        entries = self.controller.state.entries
        if index < 0 or index >= len(entries):
            return
        self.controller.open_entry(entries[index])
        self._render_state()

    def action_go_up(self) -> None:
        self.controller.go_up()
        self._render_state()

    def action_dismiss_notice(self) -> None:
        self.controller.dismiss()
        self._render_state()

    def action_exit_session(self) -> None:
        self.controller.exit()
        self.exit()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "entry-list":
            return
        self.open_entry(event.option_index)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "up":
            self.action_go_up()
        elif event.button.id == "exit":
            self.action_exit_session()
        elif event.button.id == "close-notice":
            self.action_dismiss_notice()
