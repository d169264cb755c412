"""
Ripper CLI
==========
Headless command surface for listing directories and ripping single files.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from ripper.app.controller import AppController
from ripper.audio.models import OutcomeKind
from ripper.errors import FFmpegNotFoundError

EXIT_CODES = {
    OutcomeKind.SUCCESS: 0,
    OutcomeKind.TOOL_FAILURE: 1,
    OutcomeKind.LAUNCH_FAILURE: 1,
    OutcomeKind.INVALID_SOURCE: 2,
}


def build_parser() -> argparse.ArgumentParser:
    """Create the root CLI parser."""
    parser = argparse.ArgumentParser(prog="ripper-cli", description="Rip MKV audio tracks to MP3 with FFmpeg")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ls
    ls_parser = subparsers.add_parser("ls", help="List folders and MKV files in a directory")
    ls_parser.add_argument("directory", nargs="?", help="Directory to list (default: working directory)")
    ls_parser.set_defaults(handler=handle_ls)

    # convert
    convert_parser = subparsers.add_parser("convert", help="Rip one MKV file to output.mp3 next to it")
    convert_parser.add_argument("source", help="Path to the MKV file")
    convert_parser.set_defaults(handler=handle_convert)

    # check
    check_parser = subparsers.add_parser("check", help="Check that FFmpeg is on PATH")
    check_parser.set_defaults(handler=handle_check)

    return parser


def _print(msg: str, out: TextIO) -> None:
    out.write(msg + "\n")
    out.flush()


def handle_ls(args: argparse.Namespace, controller: AppController, out: TextIO) -> int:
    """Print the filtered listing, folders first."""
    if args.directory:
        controller.navigate(Path(args.directory).expanduser().resolve())

    state = controller.state
    _print(f"{state.current_directory}:", out)
    if not state.entries:
        _print("  (empty)", out)
        return 0

    for entry in state.entries:
        suffix = "/" if entry.is_directory else ""
        _print(f"  {entry.name}{suffix}", out)
    return 0


def handle_convert(args: argparse.Namespace, controller: AppController, out: TextIO) -> int:
    """Run one conversion and print the resulting notice."""
    # An empty argument stays empty so it is reported as an invalid path.
    source = Path(args.source).expanduser().resolve() if args.source else Path(args.source)

    state = controller.convert(source)
    outcome = controller.last_outcome
    _print(state.notice or "", out)
    if outcome is not None and outcome.output_path is not None:
        _print(f"output: {outcome.output_path}", out)
    return EXIT_CODES[outcome.kind] if outcome is not None else 1


def handle_check(args: argparse.Namespace, controller: AppController, out: TextIO) -> int:
    """Report whether the FFmpeg binary can be found, then the active settings."""
    try:
        controller.runner.require_available()
    except FFmpegNotFoundError as exc:
        _print(f"error: {exc}", out)
        code = 1
    else:
        _print(f"ok: {controller.runner.binary} found", out)
        code = 0

    for key, value in controller.config.to_dict().items():
        _print(f"  {key}: {value}", out)
    return code


def main(
    argv: Optional[list[str]] = None,
    controller_factory: Callable[[], AppController] = AppController,
    out: TextIO = sys.stdout,
) -> int:
    """
    CLI entrypoint.

    Args:
        argv: Optional argv override for testing.
        controller_factory: Dependency-injection hook for tests.
        out: Output stream.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(file=out)
        return 2

    controller = controller_factory()
    try:
        return int(handler(args, controller, out))
    finally:
        controller.exit()


if __name__ == "__main__":
    raise SystemExit(main())
