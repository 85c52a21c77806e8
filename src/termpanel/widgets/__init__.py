from __future__ import annotations

from .bar import ProgressBar
from .box import Box
from .spark import SparkLine
from .styles import (
    ASCII_BOX,
    BLOCK_BAR,
    BRACKET_BAR,
    ROUNDED_BOX,
    SQUARE_BOX,
    BarStyle,
    BoxStyle,
)
from .table import Table

__all__ = [
    "ASCII_BOX",
    "BLOCK_BAR",
    "BRACKET_BAR",
    "BarStyle",
    "Box",
    "BoxStyle",
    "ProgressBar",
    "ROUNDED_BOX",
    "SQUARE_BOX",
    "SparkLine",
    "Table",
]
