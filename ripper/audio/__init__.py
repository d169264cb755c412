"""
Audio Module
============
FFmpeg-driven audio extraction.
"""

from .encoder import ConversionRunner, has_parent_directory
from .models import ConversionOutcome, OutcomeKind

__all__ = [
    "ConversionRunner",
    "ConversionOutcome",
    "OutcomeKind",
    "has_parent_directory",
]
