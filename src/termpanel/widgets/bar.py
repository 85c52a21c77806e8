"""Progress bar with eighth-of-a-cell fill resolution."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..layout.terminal import ANSI_RESET, FG_GREEN
from ..layout.text import visible_width
from .styles import BRACKET_BAR, SUB_BLOCK_CHARS, BarStyle

PERCENT_MIN = 0.0
PERCENT_MAX = 100.0
SUB_BLOCK_LEVELS = 8


def clamp_percent(value: float) -> float:
    """Clamp ``value`` into [0, 100]; NaN becomes 0."""

    if math.isnan(value):
        return PERCENT_MIN
    return min(max(value, PERCENT_MIN), PERCENT_MAX)


def fill_units(bar_width: int, percent: float) -> Tuple[int, int, int]:
    """
    Quantize ``percent`` of ``bar_width`` cells into eighths.

    Returns:
        Tuple[int, int, int]: ``(full_chars, partial_eighths, empty_chars)`` where
        ``partial_eighths`` indexes ``SUB_BLOCK_CHARS`` (0 means no partial cell)
        and the three parts always cover exactly ``bar_width`` cells.
    """
    total_sub_units = bar_width * SUB_BLOCK_LEVELS
    filled_sub_units = int(total_sub_units * clamp_percent(percent) / PERCENT_MAX)
    full_chars, partial_eighths = divmod(filled_sub_units, SUB_BLOCK_LEVELS)
    empty_chars = bar_width - full_chars - (1 if partial_eighths else 0)
    return full_chars, partial_eighths, empty_chars


def format_percent_suffix(percent: float) -> str:
    """Right-align the integer percentage in three columns, e.g. ``"  5%"``."""

    return f"{int(percent):>3}%"


@dataclass(frozen=True)
class ProgressBar:
    """A labelled horizontal bar; ``width`` includes the bracket glyphs."""

    width: int
    percent: float
    label: str = ""
    show_value: bool = True
    style: BarStyle = BRACKET_BAR
    color: str = FG_GREEN

    def __post_init__(self) -> None:
        object.__setattr__(self, "percent", clamp_percent(float(self.percent)))

    @property
    def bar_width(self) -> int:
        width = self.width
        if self.style.left:
            width -= visible_width(self.style.left)
        if self.style.right:
            width -= visible_width(self.style.right)
        return max(width, 1)

    def render_bar(self) -> str:
        """Render only the bracketed bar, without label or value suffix."""

        bar_width = self.bar_width
        full_chars, partial_eighths, empty_chars = fill_units(bar_width, self.percent)
        parts = [self.style.left, self.color, self.style.full * full_chars]
        if partial_eighths:
            parts.append(SUB_BLOCK_CHARS[partial_eighths])
        parts += [ANSI_RESET, self.style.empty * empty_chars, self.style.right]
        return "".join(parts)

    def render(self) -> str:
        parts = []
        if self.label:
            parts.append(f"{self.label} ")
        parts.append(self.render_bar())
        if self.show_value:
            parts.append(f" {format_percent_suffix(self.percent)}")
        return "".join(parts)


__all__ = [
    "PERCENT_MAX",
    "PERCENT_MIN",
    "ProgressBar",
    "SUB_BLOCK_LEVELS",
    "clamp_percent",
    "fill_units",
    "format_percent_suffix",
]
