"""
Audio Encoder Module
====================
FFmpeg-based extraction of an MP3 audio track from a video container.

The FFmpeg call is synchronous: ``convert`` blocks until the process exits
or fails to start. There is no timeout and no cancellation.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from ..config import AppConfig
from ..errors import (
    FFmpegNotFoundError,
    InvalidSourceError,
    ToolExitError,
    ToolLaunchError,
)
from .models import ConversionOutcome

logger = logging.getLogger(__name__)


def _check_ffmpeg(binary: str = "ffmpeg") -> bool:
    """Check if FFmpeg is available in PATH."""
    return shutil.which(binary) is not None


def has_parent_directory(path: Path | str) -> bool:
    """
    True when ``path`` names a file inside some directory.

    Bare file names, filesystem roots and empty paths have no directory
    component to write the output into.
    """
    return len(Path(path).parts) >= 2


class ConversionRunner:
    """
    Converts a video file to ``output.mp3`` next to it.

    Every conversion in a directory writes the same output file, so a
    second conversion overwrites the first.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the runner.

        Args:
            config: Application config (binary, output name)
        """
        self.config = config or AppConfig()

    @property
    def binary(self) -> str:
        return self.config.ffmpeg_binary

    def is_available(self) -> bool:
        return _check_ffmpeg(self.binary)

    def require_available(self) -> None:
        """Raise FFmpegNotFoundError unless the binary is on PATH."""
        if not self.is_available():
            raise FFmpegNotFoundError(self.binary)

    def output_path_for(self, source_path: Path | str) -> Path:
        """
        Derive the output path for a source file.

        Args:
            source_path: Video file to convert

        Returns:
            ``<parent of source>/output.mp3``
        """
        source_path = Path(source_path)
        if not has_parent_directory(source_path):
            raise InvalidSourceError(source_path)
        return self.config.output_path_in(source_path.parent)

    def build_command(self, input_path: Path | str, output_path: Path | str) -> list[str]:
        """Build the FFmpeg command line."""
        return [
            self.binary,
            "-i", str(input_path),
            "-y",  # Overwrite output
            str(output_path),
        ]

    def run(self, cmd: list[str], source_path: Optional[Path] = None) -> None:
        """
        Run FFmpeg to completion.

        Raises:
            ToolLaunchError: The process could not be started
            ToolExitError: The process exited with a non-zero status
        """
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except (OSError, ValueError) as exc:
            raise ToolLaunchError(str(exc), binary=cmd[0]) from exc

        if result.returncode != 0:
            raise ToolExitError(result.returncode, result.stderr, file_path=source_path)

    def convert(self, source_path: Path | str) -> ConversionOutcome:
        """
        Convert ``source_path`` and classify the result.

        Never raises for conversion problems; every failure is returned as
        an outcome.

        Args:
            source_path: Video file to convert

        Returns:
            ConversionOutcome describing what happened
        """
        source_path = Path(source_path)

        try:
            output_path = self.output_path_for(source_path)
            logger.info("Ripping %s -> %s", source_path, output_path)
            self.run(self.build_command(source_path, output_path), source_path)
        except InvalidSourceError:
            logger.warning("Invalid source path: %r", str(source_path))
            return ConversionOutcome.invalid_source()
        except ToolLaunchError as exc:
            logger.warning("Failed to launch %s: %s", self.binary, exc.reason)
            return ConversionOutcome.launch_failure(exc.reason)
        except ToolExitError as exc:
            logger.warning("FFmpeg failed for %s (exit %d)", source_path, exc.returncode)
            return ConversionOutcome.tool_failure(exc.stderr)

        logger.info("Ripped %s", output_path)
        return ConversionOutcome.succeeded(output_path)
