"""
Test TUI Browser
================
Script-style tests for the browser shell and the RipperTUI app, driven
through Textual's pilot.
"""

import asyncio
import sys
import tempfile
from pathlib import Path

from textual.app import App, ComposeResult
from textual.widgets import OptionList

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from conftest import StubRunner
from ripper.app import AppController
from ripper.audio.models import ConversionOutcome


def _make_videos(root: Path) -> Path:
    videos = root / "videos"
    videos.mkdir()
    (videos / "a.mkv").write_bytes(b"")
    (videos / "b.txt").write_text("notes")
    (videos / "clips").mkdir()
    return videos


def _test_bindings() -> None:
    from ripper.tui.app import RipperTUI

    binding_map = {binding[0]: binding[1] for binding in RipperTUI.BINDINGS}
    assert binding_map["q"] == "exit_session"
    assert binding_map["backspace"] == "go_up"
    assert binding_map["escape"] == "dismiss_notice"
    print("✓ app bindings")


def _test_css_uses_palette() -> None:
    from ripper.tui.app import RipperTUI
    from ripper.tui.theme import AUTUMN_RED, BLACK, DIRECTORY_BLUE, SPRING_GREEN

    for color in [BLACK, DIRECTORY_BLUE, SPRING_GREEN, AUTUMN_RED]:
        assert color in RipperTUI.CSS
    print("✓ app css includes palette")


async def _test_shell_widget_tree_async() -> None:
    from ripper.tui.screens import BrowserShell

    class Harness(App[None]):
        def compose(self) -> ComposeResult:
            yield BrowserShell(id="root")

    app = Harness()
    async with app.run_test() as pilot:
        app.query_one("#path-bar")
        app.query_one("#path-text")
        app.query_one("#up")
        app.query_one("#exit")
        app.query_one("#notice-bar")
        app.query_one("#close-notice")
        app.query_one("#entry-list")
        await pilot.pause()


async def _test_browse_and_rip_async(videos: Path) -> None:
    from ripper.tui.app import RipperTUI

    runner = StubRunner()
    controller = AppController(runner=runner, start_directory=videos)
    app = RipperTUI(controller=controller)

    async with app.run_test() as pilot:
        await pilot.pause()
        entry_list = app.query_one("#entry-list", OptionList)
        notice_bar = app.query_one("#notice-bar")
        assert entry_list.option_count == 2
        assert not notice_bar.has_class("-visible")

        # a.mkv is listed after clips/
        app.open_entry(1)
        await pilot.pause()
        assert runner.calls == [videos / "a.mkv"]
        assert controller.state.notice == "Ripped successfully!"
        assert notice_bar.has_class("-visible")
        assert not notice_bar.has_class("-failed")
        assert entry_list.option_count == 2

        app.action_dismiss_notice()
        await pilot.pause()
        assert controller.state.notice is None
        assert not notice_bar.has_class("-visible")

        # Enter on the highlighted folder opens it
        entry_list.highlighted = 0
        await pilot.press("enter")
        await pilot.pause()
        assert controller.state.current_directory == videos / "clips"
        assert entry_list.option_count == 0

        app.action_go_up()
        await pilot.pause()
        assert controller.state.current_directory == videos
        assert entry_list.option_count == 2

        app.action_exit_session()
        assert controller.exited


async def _test_failed_rip_async(videos: Path) -> None:
    from ripper.tui.app import RipperTUI

    runner = StubRunner(ConversionOutcome.tool_failure("[boom] not a [b]valid[/b] file"))
    controller = AppController(runner=runner, start_directory=videos)
    app = RipperTUI(controller=controller)

    async with app.run_test() as pilot:
        await pilot.pause()
        app.open_entry(1)
        await pilot.pause()
        notice_bar = app.query_one("#notice-bar")
        assert notice_bar.has_class("-visible")
        assert notice_bar.has_class("-failed")
        assert controller.state.notice.startswith("Ripping failed:\n[boom]")

        # Navigating clears the notice and the failure styling
        app.open_entry(0)
        await pilot.pause()
        assert not notice_bar.has_class("-visible")
        assert not notice_bar.has_class("-failed")

        # Out-of-range selections are ignored
        app.open_entry(5)
        await pilot.pause()
        assert controller.state.current_directory == videos / "clips"


def _test_shell_widget_tree() -> None:
    asyncio.run(_test_shell_widget_tree_async())
    print("✓ browser shell widget tree")


def _test_browse_and_rip() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        asyncio.run(_test_browse_and_rip_async(_make_videos(Path(tmp))))
    print("✓ browse, rip, dismiss, go up, exit")


def _test_failed_rip() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        asyncio.run(_test_failed_rip_async(_make_videos(Path(tmp))))
    print("✓ failed rip notice")


def test_tui_browser() -> None:
    print("\n" + "=" * 50)
    print("TUI BROWSER TEST SUITE")
    print("=" * 50 + "\n")

    _test_bindings()
    _test_css_uses_palette()
    _test_shell_widget_tree()
    _test_browse_and_rip()
    _test_failed_rip()

    print("\n" + "=" * 50)
    print("ALL TUI BROWSER TESTS PASSED ✓")
    print("=" * 50 + "\n")


if __name__ == "__main__":
    test_tui_browser()
    sys.exit(0)
