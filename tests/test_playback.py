"""Tests for detached playback dispatch."""

from __future__ import annotations

import logging
from pathlib import Path
import threading

from tune_picker.catalog import Track
from tune_picker.playback import spawn_playback


class RecordingPlayer:
    def __init__(self) -> None:
        self.played: list[str] = []

    def play_path(self, path: str) -> None:
        self.played.append(path)


class FailingPlayer:
    def play_path(self, path: str) -> None:
        raise RuntimeError(f"cannot play {path}")


class BlockingPlayer:
    def __init__(self) -> None:
        self.release = threading.Event()
        self.started: list[str] = []

    def play_path(self, path: str) -> None:
        self.started.append(path)
        self.release.wait(timeout=2)


def test_spawn_playback_runs_on_daemon_thread() -> None:
    player = RecordingPlayer()
    track = Track(Path("/music/song.mp3"))
    thread = spawn_playback(player, track)
    assert thread.daemon
    assert thread.name == "Playback-song"
    thread.join(timeout=2)
    assert player.played == [str(track.path)]


def test_playback_failure_is_logged_not_raised(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="tune_picker.playback")
    thread = spawn_playback(FailingPlayer(), Track(Path("bad.mp3")))
    thread.join(timeout=2)
    assert "Playback failed for bad.mp3" in caplog.text


def test_requests_do_not_wait_for_each_other() -> None:
    player = BlockingPlayer()
    first = spawn_playback(player, Track(Path("one.mp3")))
    second = spawn_playback(player, Track(Path("two.mp3")))
    try:
        for _ in range(200):
            if len(player.started) == 2:
                break
            threading.Event().wait(0.01)
        assert sorted(player.started) == ["one.mp3", "two.mp3"]
    finally:
        player.release.set()
        first.join(timeout=2)
        second.join(timeout=2)
