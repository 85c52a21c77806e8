"""Width measurement, truncation, padding, and column allocation."""
from __future__ import annotations

from .columns import ColumnSpec, allocate_widths
from .text import (
    Align,
    pad,
    pad_left_ansi,
    pad_right_ansi,
    truncate,
    truncate_with_ellipsis,
    visible_width,
)

__all__ = [
    "Align",
    "ColumnSpec",
    "allocate_widths",
    "pad",
    "pad_left_ansi",
    "pad_right_ansi",
    "truncate",
    "truncate_with_ellipsis",
    "visible_width",
]
