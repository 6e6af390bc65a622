"""Cursor and viewport state machine for the track picker.

Terminal events come in as ``Resize`` or ``KeyPress`` values and are folded
into an immutable ``PickerState`` by :func:`transition`. Side effects are not
performed here; a transition returns commands (``PlayTrack``, ``Quit``) for the
driver to carry out.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import logging
from typing import Optional, Union

from rich.text import Text
from typing_extensions import TypeAlias

from tune_picker.catalog import Catalog, Track
from tune_picker.config import DEFAULT_THEME, Theme
from tune_picker.ui.layout_frame import HEADER_HEIGHT, content_height, render_frame
from tune_picker.ui.list_renderer import render_track_lines
from tune_picker.ui.viewport import Viewport

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "ctrl+c"})
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
ACTIVATE_KEYS = frozenset({"enter", "space"})
KNOWN_KEYS = QUIT_KEYS | UP_KEYS | DOWN_KEYS | ACTIVATE_KEYS


class Phase(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class KeyPress:
    key: str


PickerEvent: TypeAlias = Union[Resize, KeyPress]


@dataclass(frozen=True)
class PlayTrack:
    track: Track


@dataclass(frozen=True)
class Quit:
    pass


PickerCommand: TypeAlias = Union[PlayTrack, Quit]


@dataclass(frozen=True)
class PickerState:
    catalog: Catalog
    theme: Theme = DEFAULT_THEME
    phase: Phase = Phase.UNINITIALIZED
    cursor: int = 0
    viewport: Optional[Viewport] = None

    @property
    def selection(self) -> Track:
        return self.catalog[self.cursor]

    @property
    def ready(self) -> bool:
        return self.phase is Phase.READY

    @property
    def terminated(self) -> bool:
        return self.phase is Phase.TERMINATED


@dataclass(frozen=True)
class Transition:
    state: PickerState
    commands: tuple[PickerCommand, ...] = ()
    redraw: bool = False


def initial_state(catalog: Catalog, theme: Theme = DEFAULT_THEME) -> PickerState:
    if catalog.is_empty():
        raise ValueError("Picker needs at least one track")
    return PickerState(catalog=catalog, theme=theme)


def transition(state: PickerState, event: PickerEvent) -> Transition:
    """Apply one event to state and return the result."""
    if state.terminated:
        return Transition(state)
    if isinstance(event, Resize):
        return _on_resize(state, event)
    if isinstance(event, KeyPress):
        return _on_key(state, event.key)
    return Transition(state)


def render_screen(state: PickerState) -> Text:
    """Return the full screen text for state."""
    return render_frame(state.viewport, state.theme)


def _render_lines(state: PickerState, cursor: int, width: int) -> list[Text]:
    return render_track_lines(state.catalog, cursor, state.theme, width=width)


def _on_resize(state: PickerState, event: Resize) -> Transition:
    height = content_height(event.height)
    if state.viewport is None:
        viewport = Viewport.create(event.width, height, y_position=HEADER_HEIGHT)
        viewport = viewport.set_content(
            _render_lines(state, state.cursor, viewport.width)
        )
        logger.debug("Viewport ready width=%d height=%d", viewport.width, height)
        return Transition(
            replace(state, phase=Phase.READY, viewport=viewport), redraw=True
        )
    viewport = state.viewport.resize(event.width, height)
    viewport = viewport.set_content(_render_lines(state, state.cursor, viewport.width))
    return Transition(replace(state, viewport=viewport), redraw=True)


def _on_key(state: PickerState, key: str) -> Transition:
    if key in QUIT_KEYS:
        return Transition(replace(state, phase=Phase.TERMINATED), commands=(Quit(),))
    if not state.ready:
        return Transition(state)
    if key in UP_KEYS:
        return _move_cursor(state, -1)
    if key in DOWN_KEYS:
        return _move_cursor(state, 1)
    if key in ACTIVATE_KEYS:
        return Transition(state, commands=(PlayTrack(state.selection),))
    return Transition(state)


def _move_cursor(state: PickerState, delta: int) -> Transition:
    cursor = state.cursor + delta
    if not 0 <= cursor < len(state.catalog):
        return Transition(state)
    if state.viewport is None:
        return Transition(state)
    viewport = state.viewport.set_content(
        _render_lines(state, cursor, state.viewport.width)
    )
    viewport = viewport.scroll_into_view(cursor, align_top=delta < 0)
    return Transition(replace(state, cursor=cursor, viewport=viewport), redraw=True)


class PickerMachine:
    """Holds the current picker state and feeds events through it in order."""

    def __init__(self, catalog: Catalog, theme: Theme = DEFAULT_THEME) -> None:
        self._state = initial_state(catalog, theme)

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def selection(self) -> Track:
        return self._state.selection

    @property
    def terminated(self) -> bool:
        return self._state.terminated

    def feed(self, event: PickerEvent) -> Transition:
        result = transition(self._state, event)
        if result.state.phase is not self._state.phase:
            logger.info(
                "Picker phase %s -> %s",
                self._state.phase.value,
                result.state.phase.value,
            )
        self._state = result.state
        return result

    def render(self) -> Text:
        return render_screen(self._state)
