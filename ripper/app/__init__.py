"""
Application Module
==================
Session controller and user intents.

Key Components:
    - AppController: Owns the browse state and dispatches intents
    - Intent records: Navigate, Convert, Dismiss, Exit
"""

from .controller import AppController
from .events import (
    ConvertIntent,
    DismissIntent,
    ExitIntent,
    Intent,
    IntentType,
    NavigateIntent,
    make_convert_intent,
    make_dismiss_intent,
    make_exit_intent,
    make_navigate_intent,
)

__all__ = [
    "AppController",
    "Intent",
    "IntentType",
    "NavigateIntent",
    "ConvertIntent",
    "DismissIntent",
    "ExitIntent",
    "make_navigate_intent",
    "make_convert_intent",
    "make_dismiss_intent",
    "make_exit_intent",
]
