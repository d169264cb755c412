"""
Browse Module
=============
Directory listing and navigation state.
"""

from .models import BrowseState, DirectoryEntry, EntryKind
from .navigator import (
    DEFAULT_SUFFIX,
    initial_state,
    list_directory,
    navigate_to,
    navigate_up,
    parent_of,
)

__all__ = [
    "BrowseState",
    "DirectoryEntry",
    "EntryKind",
    "DEFAULT_SUFFIX",
    "initial_state",
    "list_directory",
    "navigate_to",
    "navigate_up",
    "parent_of",
]
