"""
Error Handling Module
=====================
Custom exceptions for the ripper.
Provides consistent error codes and messages for conversion failures.

None of these escape ``ConversionRunner.convert``: the runner raises them
internally and classifies them into a ``ConversionOutcome``.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional
from pathlib import Path


class ErrorCode(Enum):
    """Error codes for the ripper."""
    # Source errors (E100-E199)
    E100 = "Invalid source path"

    # Tool errors (E200-E299)
    E200 = "FFmpeg not found"
    E201 = "FFmpeg could not be launched"
    E202 = "FFmpeg conversion failed"


@dataclass
class RipperError(Exception):
    """Base exception for the ripper with error codes."""
    code: ErrorCode
    message: str
    details: Optional[str] = None
    file_path: Optional[Path] = None

    def __str__(self) -> str:
        base = f"[{self.code.name}] {self.code.value}: {self.message}"
        if self.details:
            base += f" ({self.details})"
        if self.file_path:
            base += f" - File: {self.file_path}"
        return base


class InvalidSourceError(RipperError):
    """Source path has no parent directory to write the output into."""
    def __init__(self, file_path: Path = None):
        super().__init__(
            code=ErrorCode.E100,
            message="Source path has no parent directory",
            file_path=file_path
        )


class FFmpegNotFoundError(RipperError):
    """Error when FFmpeg is not installed."""

    INSTALL_INSTRUCTIONS = """FFmpeg is required but not found in PATH.

Installation instructions:
  macOS:    brew install ffmpeg
  Ubuntu:   sudo apt update && sudo apt install ffmpeg
  Windows:  winget install Gyan.FFmpeg
            or download from: https://ffmpeg.org/download.html

After installation, ensure 'ffmpeg' is available in your system PATH."""

    def __init__(self, binary: str = "ffmpeg"):
        super().__init__(
            code=ErrorCode.E200,
            message=f"'{binary}' is required but not found",
            details=self.INSTALL_INSTRUCTIONS
        )


class ToolLaunchError(RipperError):
    """The FFmpeg process could not be started at all."""
    def __init__(self, reason: str, binary: str = "ffmpeg"):
        super().__init__(
            code=ErrorCode.E201,
            message=reason,
            details=binary
        )
        self.reason = reason


class ToolExitError(RipperError):
    """FFmpeg ran but exited with a non-zero status."""
    def __init__(self, returncode: int, stderr: str, file_path: Path = None):
        super().__init__(
            code=ErrorCode.E202,
            message=f"exit status {returncode}",
            file_path=file_path
        )
        self.returncode = returncode
        self.stderr = stderr
