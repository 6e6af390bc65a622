from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from rich.text import Text


@dataclass(frozen=True)
class Viewport:
    """Scrollable window over a list of rendered lines taller than the screen.

    Every operation returns a new viewport. Out-of-range sizes and offsets are
    clamped to the nearest valid value rather than rejected.
    """

    width: int = 0
    height: int = 0
    y_offset: int = 0
    y_position: int = 0
    content: tuple[Text, ...] = ()

    @classmethod
    def create(cls, width: int, height: int, *, y_position: int = 0) -> Viewport:
        return cls(width=max(0, width), height=max(0, height), y_position=y_position)

    @property
    def line_count(self) -> int:
        return len(self.content)

    @property
    def max_y_offset(self) -> int:
        return max(0, self.line_count - self.height)

    def resize(self, width: int, height: int) -> Viewport:
        resized = replace(self, width=max(0, width), height=max(0, height))
        return resized.scroll_to(resized.y_offset)

    def set_content(self, lines: Iterable[Text]) -> Viewport:
        updated = replace(self, content=tuple(lines))
        return updated.scroll_to(updated.y_offset)

    def scroll_to(self, offset: int) -> Viewport:
        clamped = max(0, min(offset, self.max_y_offset))
        if clamped == self.y_offset:
            return self
        return replace(self, y_offset=clamped)

    def visible_lines(self) -> list[Text]:
        return list(self.content[self.y_offset : self.y_offset + self.height])

    def line_is_visible(self, index: int) -> bool:
        return self.y_offset <= index < self.y_offset + self.height

    def scroll_into_view(
        self, index: int, *, align_top: Optional[bool] = None
    ) -> Viewport:
        """Bring line index on screen if it is not already visible.

        With align_top unset the line lands on the edge it lies beyond;
        True pins it to the first visible row, False to the last.
        """
        if self.line_is_visible(index):
            return self
        if align_top is None:
            align_top = index < self.y_offset
        if align_top:
            return self.scroll_to(index)
        return self.scroll_to(index - self.height + 1)
