"""
TUI screens package.
"""

from ripper.tui.screens.browser import BrowserShell

__all__ = ["BrowserShell"]
