import os
import stat
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from ripper.audio.models import ConversionOutcome
from ripper.config import AppConfig


FAKE_FFMPEG = """#!{python}
import sys

args = sys.argv[1:]
if {fail!r}:
    sys.stderr.write("boom")
    sys.exit(1)
with open(args[-1], "wb") as fh:
    fh.write(b"ID3")
"""

posix_only = pytest.mark.skipif(os.name == "nt", reason="fake ffmpeg is a shebang script")


def write_fake_ffmpeg(directory: Path, fail: bool = False) -> Path:
    """Write an executable stand-in for ffmpeg."""
    script = directory / ("ffmpeg-fail" if fail else "ffmpeg-ok")
    script.write_text(FAKE_FFMPEG.format(python=sys.executable, fail=fail))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


class StubRunner:
    """Conversion runner that records calls and returns a fixed outcome."""

    def __init__(self, outcome: ConversionOutcome = None, available: bool = True):
        self.outcome = outcome or ConversionOutcome.succeeded()
        self.available = available
        self.binary = "ffmpeg"
        self.calls = []

    def convert(self, source_path):
        self.calls.append(Path(source_path))
        return self.outcome

    def is_available(self) -> bool:
        return self.available


@pytest.fixture
def videos_dir(tmp_path):
    """Directory with a.mkv, b.txt and a clips/ subdirectory."""
    root = tmp_path / "videos"
    root.mkdir()
    (root / "a.mkv").write_bytes(b"\x1aE\xdf\xa3")
    (root / "b.txt").write_text("notes")
    (root / "clips").mkdir()
    return root


@pytest.fixture
def fake_ffmpeg(tmp_path):
    """Path to a fake ffmpeg that succeeds and writes its output file."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    return write_fake_ffmpeg(bin_dir)


@pytest.fixture
def failing_ffmpeg(tmp_path):
    """Path to a fake ffmpeg that prints 'boom' to stderr and exits 1."""
    bin_dir = tmp_path / "bin-fail"
    bin_dir.mkdir()
    return write_fake_ffmpeg(bin_dir, fail=True)


@pytest.fixture
def fake_config(fake_ffmpeg):
    return AppConfig(ffmpeg_binary=str(fake_ffmpeg))


@pytest.fixture
def stub_runner():
    return StubRunner()
