"""Sparkline renderer mapping a sample series onto eight block levels."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..layout.terminal import ANSI_RESET, FG_CYAN
from .styles import SPARKS

TOP_LEVEL = len(SPARKS) - 1


def spark_index(value: float, low: float, span: float) -> int:
    """Map ``value`` to a level in ``[0, 7]`` relative to ``low`` and ``span``."""

    if not math.isfinite(value):
        return 0
    level = int((value - low) / span * TOP_LEVEL)
    return min(max(level, 0), TOP_LEVEL)


def _bounds(window: Sequence[float]) -> Tuple[float, float]:
    finite = [value for value in window if math.isfinite(value)]
    if not finite:
        return 0.0, 1.0
    low, high = min(finite), max(finite)
    span = high - low
    if span == 0:
        span = 1.0
    return low, span


@dataclass(frozen=True)
class SparkLine:
    """
    The most recent ``width`` samples drawn as one block glyph each.

    The line is right-aligned: with fewer samples than ``width`` the oldest
    positions on the left are blank. A flat series renders at the lowest level.
    """

    values: Tuple[float, ...]
    width: int
    color: str = FG_CYAN

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(float(value) for value in self.values))

    def render(self) -> str:
        width = max(self.width, 0)
        if width == 0:
            return ""
        window = self.values[-width:]
        if not window:
            return " " * width
        low, span = _bounds(window)
        glyphs = "".join(SPARKS[spark_index(value, low, span)] for value in window)
        return f"{' ' * (width - len(window))}{self.color}{glyphs}{ANSI_RESET}"


__all__ = ["SparkLine", "spark_index"]
