#!/usr/bin/env python3
"""
Ripper TUI launcher.

Usage:
    python ripper_tui.py
    python ripper_tui.py --directory /path/to/videos
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ripper", description="Ripper Textual TUI")
    parser.add_argument(
        "--directory",
        type=Path,
        help="Directory to start browsing in (default: working directory)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for the Textual devtools console (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        from textual.logging import TextualHandler

        from ripper.app import AppController
        from ripper.tui.app import RipperTUI
    except ImportError:
        print("error: Textual is not installed. Run `pip install textual rich`.", file=sys.stderr)
        return 1

    logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])

    start_directory = args.directory.expanduser().resolve() if args.directory else None
    app = RipperTUI(controller=AppController(start_directory=start_directory))
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
