"""
Application Intent Contracts
============================
Typed user intents dispatched by the TUI and CLI surfaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


class IntentType(str, Enum):
    """What the user asked for."""

    NAVIGATE = "navigate"
    CONVERT = "convert"
    DISMISS = "dismiss"
    EXIT = "exit"


@dataclass(frozen=True)
class NavigateIntent:
    """Open a directory (a child, or the parent when going up)."""

    intent_type: IntentType
    path: Path


@dataclass(frozen=True)
class ConvertIntent:
    """Rip the audio out of a video file."""

    intent_type: IntentType
    path: Path


@dataclass(frozen=True)
class DismissIntent:
    """Close the notice left by the last conversion."""

    intent_type: IntentType


@dataclass(frozen=True)
class ExitIntent:
    """End the session."""

    intent_type: IntentType


Intent = Union[NavigateIntent, ConvertIntent, DismissIntent, ExitIntent]


def make_navigate_intent(path: Path | str) -> NavigateIntent:
    return NavigateIntent(intent_type=IntentType.NAVIGATE, path=Path(path))


def make_convert_intent(path: Path | str) -> ConvertIntent:
    return ConvertIntent(intent_type=IntentType.CONVERT, path=Path(path))


def make_dismiss_intent() -> DismissIntent:
    return DismissIntent(intent_type=IntentType.DISMISS)


def make_exit_intent() -> ExitIntent:
    return ExitIntent(intent_type=IntentType.EXIT)
