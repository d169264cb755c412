"""
Ripper
======
Browse a directory tree and rip the audio track out of MKV files with FFmpeg.
"""

__version__ = "0.1.0"
