"""Textual-based TUI for TunePicker."""

from __future__ import annotations

import logging

try:
    from textual.app import App, ComposeResult
    from textual.binding import Binding
except Exception as exc:  # pragma: no cover - depends on environment
    raise RuntimeError(
        "Textual is required for the TUI. Install the 'textual' dependency."
    ) from exc

from tune_picker.catalog import Catalog
from tune_picker.config import DEFAULT_THEME, Theme
from tune_picker.logging_setup import set_console_level
from tune_picker.playback import Player, spawn_playback
from tune_picker.ui.picker_state import KeyPress, PickerMachine
from tune_picker.ui.picker_view import PickerView

logger = logging.getLogger(__name__)


class TunePickerApp(App):
    """Single-screen app hosting the track picker."""

    TITLE = "TunePicker"
    CSS = """
    Screen {
        overflow: hidden;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        *,
        catalog: Catalog,
        player: Player,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        super().__init__()
        self.player = player
        self._machine = PickerMachine(catalog, theme)

    @property
    def machine(self) -> PickerMachine:
        return self._machine

    def compose(self) -> ComposeResult:
        yield PickerView(self._machine, id="picker")

    def on_mount(self) -> None:
        self.query_one("#picker", PickerView).focus()

    def action_interrupt(self) -> None:
        self.query_one("#picker", PickerView).feed_event(KeyPress("ctrl+c"))

    def on_picker_view_track_activated(self, message: PickerView.TrackActivated) -> None:
        spawn_playback(self.player, message.track)

    def on_picker_view_quit_requested(self, message: PickerView.QuitRequested) -> None:
        del message
        logger.info("TUI exit requested")
        self.exit()


def run_tui(catalog: Catalog, player: Player, *, theme: Theme = DEFAULT_THEME) -> int:
    """Run the TUI and return an exit code."""
    logger.info("TUI start tracks=%d", len(catalog))
    try:
        set_console_level(logging.WARNING)
    except Exception:
        logger.exception("Failed to set console log level for TUI")
    app = TunePickerApp(catalog=catalog, player=player, theme=theme)
    app.run()
    logger.info("TUI exit")
    return 0
