"""
Application Configuration
=========================
Fixed settings for the ripper: which files are eligible, where the audio
goes and which FFmpeg binary runs the conversion.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Matched with the dot, so "moviemkv" is not a source.
SOURCE_SUFFIX = ".mkv"


def _default_ffmpeg_binary() -> str:
    return "ffmpeg.exe" if os.name == "nt" else "ffmpeg"


@dataclass
class AppConfig:
    """
    Application configuration.

    Attributes:
        source_suffix: Case-sensitive file name suffix of eligible sources
        audio_extension: Extension of the produced audio file
        output_stem: File name (without extension) of the produced audio file
        ffmpeg_binary: FFmpeg executable name or path
    """

    source_suffix: str = SOURCE_SUFFIX
    audio_extension: str = "mp3"
    output_stem: str = "output"
    ffmpeg_binary: str = field(default_factory=_default_ffmpeg_binary)

    @property
    def output_name(self) -> str:
        """File name written next to every converted source."""
        return f"{self.output_stem}.{self.audio_extension}"

    def output_path_in(self, directory: Path) -> Path:
        return Path(directory) / self.output_name

    def to_dict(self) -> dict:
        """
        Convert config to dictionary.

        Returns:
            Configuration dictionary
        """
        return {
            "source_suffix": self.source_suffix,
            "audio_extension": self.audio_extension,
            "output_stem": self.output_stem,
            "ffmpeg_binary": self.ffmpeg_binary,
        }
