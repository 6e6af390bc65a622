from __future__ import annotations

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from tune_picker.catalog import Track
from tune_picker.ui.picker_state import (
    KNOWN_KEYS,
    KeyPress,
    PickerEvent,
    PickerMachine,
    PlayTrack,
    Quit,
    Resize,
    Transition,
)


class PickerView(Widget):
    """Full-screen track list driven by a PickerMachine."""

    DEFAULT_CSS = """
    PickerView {
        width: 1fr;
        height: 1fr;
    }
    """

    class TrackActivated(Message):
        def __init__(self, track: Track) -> None:
            super().__init__()
            self.track = track

    class QuitRequested(Message):
        pass

    def __init__(self, machine: PickerMachine, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.can_focus = True
        self.machine = machine

    def on_resize(self, event: events.Resize) -> None:
        self.feed_event(Resize(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        if event.key not in KNOWN_KEYS:
            return
        self.feed_event(KeyPress(event.key))
        event.stop()

    def feed_event(self, event: PickerEvent) -> Transition:
        result = self.machine.feed(event)
        for command in result.commands:
            if isinstance(command, PlayTrack):
                self.post_message(self.TrackActivated(command.track))
            elif isinstance(command, Quit):
                self.post_message(self.QuitRequested())
        if result.redraw:
            self.refresh()
        return result

    def render(self) -> Text:
        return self.machine.render()
