from __future__ import annotations

from typing import Optional

from rich.text import Text

from tune_picker.catalog import Catalog
from tune_picker.config import DEFAULT_THEME, Theme


def render_track_line(
    label: str,
    *,
    selected: bool,
    theme: Theme = DEFAULT_THEME,
    width: Optional[int] = None,
) -> Text:
    padding = " " * max(0, theme.row_padding)
    style = theme.selected_style if selected else theme.normal_style
    label = " ".join(label.splitlines())
    line = Text(f"{padding}{label}{padding}", style=style, no_wrap=True, end="")
    if width is not None:
        overflow = "ellipsis" if width > 1 else "crop"
        line.truncate(max(0, width), overflow=overflow, pad=True)
    return line


def render_track_lines(
    catalog: Catalog,
    cursor: int,
    theme: Theme = DEFAULT_THEME,
    *,
    width: Optional[int] = None,
) -> list[Text]:
    """Render one line per track, highlighting the line at cursor."""
    return [
        render_track_line(
            track.label, selected=index == cursor, theme=theme, width=width
        )
        for index, track in enumerate(catalog)
    ]
