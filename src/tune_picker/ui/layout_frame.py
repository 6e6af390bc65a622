"""Header, content and footer composition for the picker screen."""

from __future__ import annotations

from typing import Optional

from rich.cells import cell_len
from rich.text import Text

from tune_picker.config import DEFAULT_THEME, Theme
from tune_picker.ui.viewport import Viewport

HEADER_HEIGHT = 1
FOOTER_HEIGHT = 1


def content_height(total_height: int) -> int:
    """Return the rows left for the list once header and footer are placed."""
    return max(0, total_height - HEADER_HEIGHT - FOOTER_HEIGHT)


def _rule(theme: Theme, width: int, badge: str) -> str:
    return theme.rule_char * max(0, width - cell_len(badge))


def header_view(width: int, theme: Theme = DEFAULT_THEME) -> Text:
    title = f"│ {theme.title} ├"
    return Text.assemble(
        (title, theme.border_style),
        (_rule(theme, width, title), theme.border_style),
        no_wrap=True,
        end="",
    )


def footer_view(width: int, theme: Theme = DEFAULT_THEME) -> Text:
    info = f"┤ {theme.hint} │"
    return Text.assemble(
        (_rule(theme, width, info), theme.border_style),
        (info, theme.border_style),
        no_wrap=True,
        end="",
    )


def render_frame(viewport: Optional[Viewport], theme: Theme = DEFAULT_THEME) -> Text:
    """Compose the full screen, or the placeholder before the first resize."""
    if viewport is None:
        return Text(theme.placeholder, end="")
    frame = Text(no_wrap=True, overflow="crop", end="")
    frame.append_text(header_view(viewport.width, theme))
    frame.append("\n")
    frame.append_text(Text("\n").join(viewport.visible_lines()))
    frame.append("\n")
    frame.append_text(footer_view(viewport.width, theme))
    return frame
