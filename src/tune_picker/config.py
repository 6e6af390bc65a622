"""Read-only configuration and display theme for TunePicker."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from tune_picker.catalog import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Select Song To Play!"
DEFAULT_HINT = "Press q to exit"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AppConfig:
    """Immutable settings taken from the environment at startup."""

    root: Path = field(default_factory=Path.cwd)
    extensions: frozenset[str] = SUPPORTED_EXTENSIONS
    title: str = DEFAULT_TITLE
    color: bool = True


@dataclass(frozen=True)
class Theme:
    """Text and styles used by the list renderer and layout frame."""

    title: str = DEFAULT_TITLE
    hint: str = DEFAULT_HINT
    placeholder: str = "\n  Initializing..."
    rule_char: str = "─"
    row_padding: int = 1
    normal_style: str = "bold bright_white"
    selected_style: str = "bold bright_white on bright_red"
    border_style: str = ""


DEFAULT_THEME = Theme()


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build configuration from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    root_value = _get_str(env, "TUNE_PICKER_ROOT", "")
    root = Path(root_value).expanduser() if root_value else Path.cwd()
    return AppConfig(
        root=root,
        extensions=_get_extensions(env, "TUNE_PICKER_EXTENSIONS", SUPPORTED_EXTENSIONS),
        title=_get_str(env, "TUNE_PICKER_TITLE", DEFAULT_TITLE),
        color=_get_bool(env, "TUNE_PICKER_COLOR", True),
    )


def theme_from_config(cfg: AppConfig) -> Theme:
    """Return the display theme for a configuration."""
    if cfg.color:
        return Theme(title=cfg.title)
    return Theme(
        title=cfg.title,
        normal_style="bold",
        selected_style="bold reverse",
    )


def _get_str(env: Mapping[str, str], key: str, default: str) -> str:
    """Fetch a string value; blank values keep the default."""
    value = env.get(key, default).strip()
    if not value:
        return default
    return value


def _get_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    """Fetch a boolean flag; unrecognized values keep the default."""
    value = env.get(key)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid %s=%r", key, value)
    return default


def _get_extensions(
    env: Mapping[str, str], key: str, default: frozenset[str]
) -> frozenset[str]:
    """Parse a comma separated extension list such as 'mp3,.flac'."""
    raw = env.get(key)
    if not raw:
        return default
    extensions = set()
    for part in raw.split(","):
        part = part.strip().lower()
        if not part:
            continue
        extensions.add(part if part.startswith(".") else f".{part}")
    return frozenset(extensions) or default
