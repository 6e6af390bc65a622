"""Track catalog modeling and directory scanning for TunePicker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator
import logging

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".mp3", ".flac", ".wav", ".ogg", ".m4a", ".aac"})


class CatalogError(RuntimeError):
    """Raised when no usable catalog can be built from the scan root."""


@dataclass(frozen=True)
class Track:
    """A single playable file."""

    path: Path

    @property
    def label(self) -> str:
        """Display name: the file name without its directory and extension."""
        return self.path.stem


@dataclass(frozen=True)
class Catalog:
    """Fixed, ordered sequence of tracks discovered at startup."""

    tracks: tuple[Track, ...] = ()

    def __post_init__(self) -> None:
        if len(set(self.tracks)) != len(self.tracks):
            raise ValueError("Catalog tracks must be unique")

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> Catalog:
        return cls(tuple(Track(path=Path(path)) for path in paths))

    def __len__(self) -> int:
        return len(self.tracks)

    def __getitem__(self, index: int) -> Track:
        return self.tracks[index]

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def is_empty(self) -> bool:
        return not self.tracks


def _is_supported(path: Path, extensions: frozenset[str]) -> bool:
    return path.suffix.lower() in extensions


def scan_directory(
    root: Path, extensions: frozenset[str] = SUPPORTED_EXTENSIONS
) -> list[Path]:
    """Return supported files below root, ordered by relative path."""
    files = [
        entry
        for entry in root.rglob("*")
        if entry.is_file() and _is_supported(entry, extensions)
    ]
    files.sort(key=lambda entry: entry.relative_to(root).as_posix().lower())
    return files


def load_catalog(
    root: Path, extensions: frozenset[str] = SUPPORTED_EXTENSIONS
) -> Catalog:
    """Scan root once and build the catalog, failing when nothing is playable."""
    if not root.is_dir():
        raise CatalogError(f"Cannot read directory: {root}")
    try:
        paths = scan_directory(root, extensions)
    except OSError as exc:
        raise CatalogError(f"Cannot read directory: {root} ({exc})") from exc
    if not paths:
        raise CatalogError(f"No audio files found under {root}")
    logger.info("Catalog loaded root=%s tracks=%d", root, len(paths))
    return Catalog.from_paths(paths)
