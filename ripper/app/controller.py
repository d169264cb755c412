"""
Application Controller
======================
Owns the browse state and handles one user intent at a time.

Keeps navigation and conversion out of the UI layer so the TUI and CLI
drive the same state machine:
- Browsing: no notice shown
- NoticeShown: the text of the last conversion outcome is shown until
  dismissed

Every intent runs to completion before the next is accepted. A conversion
blocks the caller until FFmpeg exits.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ripper.audio.encoder import ConversionRunner
from ripper.audio.models import ConversionOutcome
from ripper.browse.models import BrowseState, DirectoryEntry
from ripper.browse.navigator import initial_state, navigate_to, parent_of
from ripper.config import AppConfig
from ripper.app.events import (
    ConvertIntent,
    DismissIntent,
    ExitIntent,
    Intent,
    NavigateIntent,
    make_convert_intent,
    make_dismiss_intent,
    make_exit_intent,
    make_navigate_intent,
)

logger = logging.getLogger(__name__)


class AppController:
    """
    Central controller for the ripper.

    Responsibilities:
        - Holding the single BrowseState of the session
        - Routing intents to the navigator and the conversion runner
        - Turning conversion outcomes into the notice
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        runner: Optional[ConversionRunner] = None,
        start_directory: Optional[Path | str] = None,
    ):
        """
        Initialize the controller.

        Args:
            config: Application configuration
            runner: Conversion runner (injectable for tests)
            start_directory: Initial directory, defaults to the working directory
        """
        self.config = config or AppConfig()
        self.runner = runner or ConversionRunner(self.config)
        self.state: BrowseState = initial_state(start_directory, self.config.source_suffix)
        self.last_outcome: Optional[ConversionOutcome] = None
        self.exited = False

    def dispatch(self, intent: Intent) -> BrowseState:
        """
        Apply an intent to the current state.

        Args:
            intent: Intent to handle

        Returns:
            The new state (also stored on the controller)
        """
        if self.exited:
            logger.debug("Ignoring %s after exit", intent.intent_type.value)
            return self.state

        if isinstance(intent, NavigateIntent):
            self.state = navigate_to(self.state, intent.path, self.config.source_suffix)
        elif isinstance(intent, ConvertIntent):
            outcome = self.runner.convert(intent.path)
            self.last_outcome = outcome
            self.state = self.state.with_notice(outcome.notice_text())
        elif isinstance(intent, DismissIntent):
            self.state = self.state.dismiss_notice()
        elif isinstance(intent, ExitIntent):
            logger.info("Session ended in %s", self.state.current_directory)
            self.exited = True
        else:
            raise TypeError(f"Unknown intent: {intent!r}")

        return self.state

    # ===========================================
    # Convenience wrappers
    # ===========================================

    def navigate(self, path: Path | str) -> BrowseState:
        return self.dispatch(make_navigate_intent(path))

    def go_up(self) -> BrowseState:
        """Navigate to the parent directory; a root stays where it is."""
        return self.navigate(parent_of(self.state.current_directory))

    def convert(self, path: Path | str) -> BrowseState:
        return self.dispatch(make_convert_intent(path))

    def open_entry(self, entry: DirectoryEntry) -> BrowseState:
        """Open a directory or convert an eligible file from the listing."""
        path = entry.path_in(self.state.current_directory)
        if entry.is_directory:
            return self.navigate(path)
        return self.convert(path)

    def dismiss(self) -> BrowseState:
        return self.dispatch(make_dismiss_intent())

    def exit(self) -> BrowseState:
        return self.dispatch(make_exit_intent())
