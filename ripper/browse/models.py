"""
Browse Data Models
==================
Immutable records describing what the user is looking at.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional


class EntryKind(str, Enum):
    """Kinds of entries shown in a listing."""

    DIRECTORY = "directory"
    ELIGIBLE_FILE = "eligible_file"


@dataclass(frozen=True)
class DirectoryEntry:
    """A single child of the current directory."""

    name: str
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    def path_in(self, directory: Path | str) -> Path:
        """Full path of this entry inside ``directory``."""
        return Path(directory) / self.name


@dataclass(frozen=True)
class BrowseState:
    """
    Snapshot of the browser.

    ``entries`` is always the complete listing of ``current_directory`` taken
    at the last navigation, directories first. ``notice`` holds the text of
    the last conversion outcome until it is dismissed.
    """

    current_directory: Path
    entries: tuple[DirectoryEntry, ...] = ()
    notice: Optional[str] = None

    @property
    def has_notice(self) -> bool:
        return self.notice is not None

    @property
    def directories(self) -> tuple[DirectoryEntry, ...]:
        return tuple(entry for entry in self.entries if entry.is_directory)

    @property
    def eligible_files(self) -> tuple[DirectoryEntry, ...]:
        return tuple(entry for entry in self.entries if not entry.is_directory)

    def with_notice(self, notice: str) -> BrowseState:
        return replace(self, notice=notice)

    def dismiss_notice(self) -> BrowseState:
        """Clear the notice; returns ``self`` untouched when there is none."""
        if self.notice is None:
            return self
        return replace(self, notice=None)
