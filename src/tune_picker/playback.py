"""Fire-and-forget playback requests."""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from tune_picker.catalog import Track

logger = logging.getLogger(__name__)


class Player(Protocol):
    def play_path(self, path: str) -> None: ...


def _play_blocking(player: Player, track: Track) -> None:
    logger.info("Playback start path=%s", track.path)
    try:
        player.play_path(str(track.path))
    except Exception:
        logger.exception("Playback failed for %s", track.path)


def spawn_playback(player: Player, track: Track) -> threading.Thread:
    """Start playing track on a detached daemon thread and return it.

    The picker never joins the thread or inspects its outcome; a later request
    simply starts another thread.
    """
    thread = threading.Thread(
        target=_play_blocking,
        args=(player, track),
        name=f"Playback-{track.label}",
        daemon=True,
    )
    thread.start()
    return thread
