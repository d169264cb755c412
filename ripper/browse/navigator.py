"""
Directory Navigator
===================
Lists a directory as folders plus eligible source files and moves the
browse state between directories.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..config import SOURCE_SUFFIX
from .models import BrowseState, DirectoryEntry, EntryKind

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = SOURCE_SUFFIX


def _is_displayable(name: str) -> bool:
    # Undecodable names come back from os.scandir as surrogate escapes.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def list_directory(path: Path | str, suffix: str = DEFAULT_SUFFIX) -> tuple[DirectoryEntry, ...]:
    """
    List the immediate children of ``path``.

    Directories come first, then files whose name ends with ``suffix``
    (case-sensitive). Other files are dropped. Within each group entries keep
    the order the filesystem enumerates them in.

    An unreadable path (missing, not a directory, no permission, a NUL byte
    in the name) yields an empty tuple instead of raising, so navigating to
    a stale path never crashes the caller.

    Args:
        path: Directory to list
        suffix: File name suffix that marks an eligible source

    Returns:
        Ordered tuple of entries
    """
    directories: list[DirectoryEntry] = []
    files: list[DirectoryEntry] = []

    try:
        with os.scandir(path) as children:
            for child in children:
                if not _is_displayable(child.name):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    continue

                if is_dir:
                    directories.append(DirectoryEntry(child.name, EntryKind.DIRECTORY))
                elif child.name.endswith(suffix):
                    files.append(DirectoryEntry(child.name, EntryKind.ELIGIBLE_FILE))
    except (OSError, ValueError) as exc:
        logger.debug("Cannot list %s: %s", path, exc)
        return ()

    return tuple(directories + files)


def parent_of(path: Path | str) -> Path:
    """Parent directory of ``path``; a filesystem root is its own parent."""
    return Path(path).parent


def navigate_to(
    state: BrowseState,
    path: Path | str,
    suffix: str = DEFAULT_SUFFIX,
) -> BrowseState:
    """Move to ``path``, relisting it and clearing any notice."""
    directory = Path(path)
    entries = list_directory(directory, suffix)
    logger.debug("Navigated to %s (%d entries)", directory, len(entries))
    return BrowseState(current_directory=directory, entries=entries, notice=None)


def navigate_up(state: BrowseState, suffix: str = DEFAULT_SUFFIX) -> BrowseState:
    return navigate_to(state, parent_of(state.current_directory), suffix)


def initial_state(directory: Optional[Path | str] = None, suffix: str = DEFAULT_SUFFIX) -> BrowseState:
    """Browsing state for ``directory``, defaulting to the working directory."""
    start = Path(directory) if directory is not None else Path.cwd()
    return BrowseState(current_directory=start, entries=list_directory(start, suffix))
