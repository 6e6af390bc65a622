"""VLC-backed audio player."""

from __future__ import annotations

from typing import Any, Optional, cast
import threading

vlc: Any | None = None
_VLC_IMPORT_ERROR: Optional[Exception] = None


def _load_vlc() -> Any:
    """Import python-vlc once and return it, caching a failed import."""
    global vlc
    global _VLC_IMPORT_ERROR
    if vlc is None and _VLC_IMPORT_ERROR is None:
        try:
            import vlc as vlc_module  # type: ignore
        except Exception as exc:  # pragma: no cover - platform-dependent import
            _VLC_IMPORT_ERROR = exc
        else:
            vlc = cast(Any, vlc_module)
    if vlc is None:
        raise RuntimeError(
            "VLC backend is unavailable. Install VLC and the python-vlc package."
        ) from _VLC_IMPORT_ERROR
    return vlc


class VlcPlayer:
    """Single python-vlc MediaPlayer that switches to whatever path it is given."""

    def __init__(self) -> None:
        self._instance = _load_vlc().Instance()
        self._player = self._instance.media_player_new()
        self._current_media: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def current_media(self) -> Optional[str]:
        """Return the current media path if loaded."""
        return self._current_media

    def load(self, path: str) -> None:
        """Load media into the player."""
        media = self._instance.media_new(path)
        self._player.set_media(media)
        self._current_media = path

    def play(self) -> None:
        """Start playback of the loaded media."""
        if self._player.play() == -1:
            raise RuntimeError(f"VLC failed to start {self._current_media}")

    def play_path(self, path: str) -> None:
        """Replace whatever is playing with path."""
        with self._lock:
            self._player.stop()
            self.load(path)
            self.play()
