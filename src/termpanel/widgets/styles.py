"""Immutable glyph sets shared by the widget renderers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class BoxStyle:
    """Border glyphs for a box plus the brackets wrapped around an inline title."""

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    title_left: str
    title_right: str


ROUNDED_BOX = BoxStyle(
    top_left="╭",
    top_right="╮",
    bottom_left="╰",
    bottom_right="╯",
    horizontal="─",
    vertical="│",
    title_left="─ ",
    title_right=" ─",
)

SQUARE_BOX = BoxStyle(
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    horizontal="─",
    vertical="│",
    title_left="─ ",
    title_right=" ─",
)

ASCII_BOX = BoxStyle(
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    horizontal="-",
    vertical="|",
    title_left="- ",
    title_right=" -",
)

BOX_STYLES: Dict[str, BoxStyle] = {
    "rounded": ROUNDED_BOX,
    "square": SQUARE_BOX,
    "ascii": ASCII_BOX,
}


@dataclass(frozen=True)
class BarStyle:
    """Fill glyphs for a progress bar; empty ``left``/``right`` means no brackets."""

    full: str
    empty: str
    left: str = ""
    right: str = ""


BRACKET_BAR = BarStyle(full="█", empty="░", left="[", right="]")
BLOCK_BAR = BarStyle(full="█", empty="░")

BAR_STYLES: Dict[str, BarStyle] = {
    "bracket": BRACKET_BAR,
    "block": BLOCK_BAR,
}

# Index n is a cell filled n/8 from the left; index 0 is never rendered.
SUB_BLOCK_CHARS: Tuple[str, ...] = ("", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")

SPARKS: Tuple[str, ...] = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")

HORIZONTAL_RULE = "─"


def horizontal_bar(width: int) -> str:
    """Return a horizontal rule ``width`` columns wide."""

    if width <= 0:
        return ""
    return HORIZONTAL_RULE * width


__all__ = [
    "ASCII_BOX",
    "BAR_STYLES",
    "BLOCK_BAR",
    "BOX_STYLES",
    "BRACKET_BAR",
    "BarStyle",
    "BoxStyle",
    "HORIZONTAL_RULE",
    "ROUNDED_BOX",
    "SPARKS",
    "SQUARE_BOX",
    "SUB_BLOCK_CHARS",
    "horizontal_bar",
]
