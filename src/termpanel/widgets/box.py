"""Bordered box renderer with an optional inline title."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

from ..layout.terminal import ANSI_RESET, FG_GRAY
from ..layout.text import close_styles, drop_incomplete, truncate, visible_width
from .styles import ROUNDED_BOX, BoxStyle

MIN_BOX_WIDTH = 4


@dataclass(frozen=True)
class Box:
    """
    A rectangular bordered region ``width`` columns wide.

    The title is drawn inside the top border only when it fits together with the
    style's title brackets; otherwise the top border is a plain run and the title
    is left out. Content lines are padded or truncated to the inner width.
    """

    width: int
    title: str = ""
    title_color: str = ""
    border_color: str = FG_GRAY
    style: BoxStyle = ROUNDED_BOX
    content: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))

    def with_lines(self, *lines: str) -> "Box":
        """Return a copy of this box with ``lines`` appended to its content."""

        return replace(self, content=self.content + tuple(lines))

    @property
    def outer_width(self) -> int:
        return max(self.width, MIN_BOX_WIDTH)

    @property
    def inner_width(self) -> int:
        return self.outer_width - 2

    def title_fits(self) -> bool:
        if not self.title:
            return False
        brackets = visible_width(self.style.title_left) + visible_width(self.style.title_right)
        return visible_width(self.title) + brackets <= self.inner_width

    def _top_border(self) -> str:
        style = self.style
        inner = self.inner_width
        parts = [self.border_color, style.top_left]
        if self.title_fits():
            used = (
                visible_width(style.title_left)
                + visible_width(self.title)
                + visible_width(style.title_right)
            )
            parts += [
                style.title_left,
                self.title_color,
                self.title,
                self.border_color,
                style.title_right,
                style.horizontal * (inner - used),
            ]
        else:
            parts.append(style.horizontal * inner)
        parts += [style.top_right, ANSI_RESET]
        return "".join(parts)

    def _content_line(self, line: str) -> str:
        inner = self.inner_width
        edge = f"{self.border_color}{self.style.vertical}{ANSI_RESET}"
        line = drop_incomplete(line)
        line_width = visible_width(line)
        if line_width < inner:
            body = close_styles(line) + " " * (inner - line_width)
        else:
            body = truncate(line, inner)
            body += " " * (inner - visible_width(body))
        return f"{edge}{body}{edge}"

    def _bottom_border(self) -> str:
        style = self.style
        return (
            f"{self.border_color}{style.bottom_left}"
            f"{style.horizontal * self.inner_width}{style.bottom_right}{ANSI_RESET}"
        )

    def render_lines(self) -> List[str]:
        lines = [self._top_border()]
        lines.extend(self._content_line(line) for line in self.content)
        lines.append(self._bottom_border())
        return lines

    def render(self) -> str:
        """Return the box as newline-joined lines, each exactly ``outer_width`` columns."""

        return "\n".join(self.render_lines())


__all__ = ["Box", "MIN_BOX_WIDTH"]
