"""Display-width measurement, escape-safe truncation, and padding."""
from __future__ import annotations

from enum import Enum

from .scanner import SegmentKind, char_width, scan
from .terminal import ANSI_RESET

ELLIPSIS = "…"


class Align(str, Enum):
    """Horizontal alignment of text inside a fixed-width cell."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def visible_width(text: str) -> int:
    """
    Return the number of terminal columns ``text`` occupies.

    Control sequences (complete or not) contribute nothing; visible characters
    contribute their display width, so wide glyphs count as two columns.
    """
    if not text:
        return 0
    return sum(segment.width for segment in scan(text) if segment.kind is SegmentKind.VISIBLE)


def truncate(text: str, max_visible: int) -> str:
    """
    Cut ``text`` down to at most ``max_visible`` display columns.

    Control sequences are copied whole and never count against the limit.
    Copying of visible characters stops at the first character that would
    overflow the limit (a wide glyph is never split). Unterminated sequences
    are dropped rather than emitted partially. The result always ends in a
    reset sequence so styling cannot bleed into whatever follows it.

    Parameters:
        text (str): Input that may contain ANSI control sequences.
        max_visible (int): Column budget; ``<= 0`` yields an empty string.

    Returns:
        str: The truncated string, terminated by ``ANSI_RESET``.
    """
    if max_visible <= 0:
        return ""

    parts: list[str] = []
    used = 0
    for segment in scan(text):
        if segment.kind is SegmentKind.CONTROL:
            parts.append(segment.text)
            continue
        if segment.kind is SegmentKind.INCOMPLETE:
            continue
        if used + segment.width > max_visible:
            break
        parts.append(segment.text)
        used += segment.width

    result = "".join(parts)
    if not result.endswith(ANSI_RESET):
        result += ANSI_RESET
    return result


def drop_incomplete(text: str) -> str:
    """Return ``text`` without any unterminated control sequences."""

    return "".join(
        segment.text for segment in scan(text) if segment.kind is not SegmentKind.INCOMPLETE
    )


def close_styles(text: str) -> str:
    """Append a reset when the last control sequence in ``text`` leaves styling open."""

    controls = [segment.text for segment in scan(text) if segment.kind is SegmentKind.CONTROL]
    if controls and controls[-1] != ANSI_RESET:
        return text + ANSI_RESET
    return text


def truncate_with_ellipsis(text: str, max_visible: int) -> str:
    """Truncate ``text`` to ``max_visible`` columns, marking the cut with an ellipsis."""

    if max_visible <= 0:
        return ""
    if visible_width(text) <= max_visible:
        return drop_incomplete(text)
    if max_visible <= 3:
        return truncate(text, max_visible)
    return truncate(text, max_visible - char_width(ELLIPSIS)) + ELLIPSIS


def pad(text: str, width: int, align: Align = Align.LEFT) -> str:
    """
    Fit ``text`` into exactly ``width`` display columns.

    Unterminated control sequences are dropped first. Shorter input is padded
    with spaces according to ``align`` (centre puts the odd space on the right)
    and input that fits exactly is returned as is. Wider input is truncated; if
    a wide glyph at the boundary could not fit, the gap is filled with spaces so
    the width is still exact.
    """
    if width <= 0:
        return ""
    text = drop_incomplete(text)
    current = visible_width(text)
    if current == width:
        return text
    if current > width:
        fitted = truncate(text, width)
        return fitted + " " * (width - visible_width(fitted))

    padding = width - current
    if align is Align.RIGHT:
        return " " * padding + text
    if align is Align.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding


def pad_right_ansi(text: str, width: int) -> str:
    """Append spaces until ``text`` spans ``width`` columns; never truncates."""

    text = drop_incomplete(text)
    current = visible_width(text)
    if current >= width:
        return text
    return text + " " * (width - current)


def pad_left_ansi(text: str, width: int) -> str:
    """Prepend spaces until ``text`` spans ``width`` columns; never truncates."""

    text = drop_incomplete(text)
    current = visible_width(text)
    if current >= width:
        return text
    return " " * (width - current) + text


__all__ = [
    "Align",
    "ELLIPSIS",
    "close_styles",
    "drop_incomplete",
    "pad",
    "pad_left_ansi",
    "pad_right_ansi",
    "truncate",
    "truncate_with_ellipsis",
    "visible_width",
]
