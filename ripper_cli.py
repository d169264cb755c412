#!/usr/bin/env python3
"""
Project-level CLI launcher.

Usage:
    python ripper_cli.py <command> [options]
"""

from ripper.cli.main import main


if __name__ == "__main__":
    raise SystemExit(main())
