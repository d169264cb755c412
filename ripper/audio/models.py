"""
Conversion Outcome Model
========================
Result of one conversion attempt, rendered into the browser notice.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class OutcomeKind(str, Enum):
    """How a conversion attempt ended."""

    SUCCESS = "success"
    TOOL_FAILURE = "tool_failure"
    LAUNCH_FAILURE = "launch_failure"
    INVALID_SOURCE = "invalid_source"


@dataclass(frozen=True)
class ConversionOutcome:
    """
    Outcome of a conversion.

    Attributes:
        kind: Outcome category
        message: FFmpeg stderr for tool failures, the OS error text for
            launch failures, empty otherwise
        output_path: Audio file written on success
    """

    kind: OutcomeKind
    message: str = ""
    output_path: Optional[Path] = None

    @classmethod
    def succeeded(cls, output_path: Optional[Path] = None) -> ConversionOutcome:
        return cls(OutcomeKind.SUCCESS, output_path=output_path)

    @classmethod
    def tool_failure(cls, message: str) -> ConversionOutcome:
        return cls(OutcomeKind.TOOL_FAILURE, message=message)

    @classmethod
    def launch_failure(cls, message: str) -> ConversionOutcome:
        return cls(OutcomeKind.LAUNCH_FAILURE, message=message)

    @classmethod
    def invalid_source(cls) -> ConversionOutcome:
        return cls(OutcomeKind.INVALID_SOURCE)

    @property
    def success(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    def notice_text(self) -> str:
        """User-visible text for the notice row."""
        if self.kind == OutcomeKind.SUCCESS:
            return "Ripped successfully!"
        if self.kind == OutcomeKind.TOOL_FAILURE:
            return f"Ripping failed:\n{self.message}"
        if self.kind == OutcomeKind.LAUNCH_FAILURE:
            return f"Failed to run ffmpeg:\n{self.message}"
        return "Invalid file path!"
