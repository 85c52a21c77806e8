"""Two-state scanner separating visible text from terminal control sequences.

A control sequence starts at the escape marker (``\\x1b``) and ends at the first
ASCII letter. Everything between is zero-width payload. Width measurement and
truncation both walk strings through :func:`scan`, so they always agree on what
counts as "inside a control sequence".
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

import wcwidth

from .terminal import ESCAPE


class ScanState(enum.Enum):
    NORMAL = "normal"
    IN_CONTROL = "in_control"


class SegmentKind(enum.Enum):
    VISIBLE = "visible"
    CONTROL = "control"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class Segment:
    """One scanned unit: a visible character or a whole control sequence."""

    kind: SegmentKind
    text: str
    width: int = 0


def is_terminator(char: str) -> bool:
    """Return True when ``char`` ends a control sequence (ASCII letter)."""

    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def char_width(char: str) -> int:
    """
    Return the number of terminal columns a single visible character occupies.

    ASCII is always one column so plain ASCII text measures as its length.
    Other characters defer to ``wcwidth``: wide East-Asian glyphs and emoji are
    two columns, combining marks are zero, and non-printable characters (which
    ``wcwidth`` reports as -1) are treated as zero.
    """
    if ord(char) < 0x80:
        return 1
    width = wcwidth.wcwidth(char)
    if width < 0:
        return 0
    return width


def scan(text: str) -> Iterator[Segment]:
    """
    Split ``text`` into visible characters and control sequences.

    Yields:
        Segment: ``VISIBLE`` segments carry one character and its column width;
        ``CONTROL`` segments carry a complete escape sequence. A sequence left
        unterminated, either at the end of input or because a new escape marker
        started before a terminator arrived, is yielded as ``INCOMPLETE``.
    """
    state = ScanState.NORMAL
    pending: list[str] = []
    for char in text:
        if char == ESCAPE:
            if state is ScanState.IN_CONTROL:
                yield Segment(SegmentKind.INCOMPLETE, "".join(pending))
            state = ScanState.IN_CONTROL
            pending = [char]
            continue
        if state is ScanState.IN_CONTROL:
            pending.append(char)
            if is_terminator(char):
                yield Segment(SegmentKind.CONTROL, "".join(pending))
                state = ScanState.NORMAL
                pending = []
            continue
        yield Segment(SegmentKind.VISIBLE, char, char_width(char))
    if pending:
        yield Segment(SegmentKind.INCOMPLETE, "".join(pending))


__all__ = [
    "ScanState",
    "Segment",
    "SegmentKind",
    "char_width",
    "is_terminator",
    "scan",
]
