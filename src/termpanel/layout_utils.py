"""Console-safety and Rich summary helpers used by the CLI."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

from rich.markup import escape

from .layout.scanner import char_width
from .layout.text import ELLIPSIS

# Broader than the layout scanner: also catches two-byte (non-CSI) escapes.
_ESCAPE_SEQUENCE_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
_LINE_BREAKS = str.maketrans({"\r": " ", "\n": " ", "\t": " "})
_SPACE_RUN_RE = re.compile(r" {2,}")


def _clip_columns(text: str, max_columns: int) -> str:
    used = 0
    kept = []
    for char in text:
        width = char_width(char)
        if used + width > max_columns:
            break
        kept.append(char)
        used += width
    return "".join(kept)


def sanitize_console_text(text: str, *, max_len: Optional[int] = 512) -> str:
    """
    Reduce untrusted *text* to one printable line before it is drawn.

    Escape sequences are removed outright, line breaks and tabs become single
    spaces, and non-printable characters are dropped. ``max_len`` is measured in
    display columns; longer text is clipped and marked with an ellipsis so a
    box title never carries a half-drawn wide glyph.
    """

    flattened = _ESCAPE_SEQUENCE_RE.sub("", str(text or "")).translate(_LINE_BREAKS)
    printable = "".join(ch for ch in flattened if ch == " " or ch.isprintable())
    clean = _SPACE_RUN_RE.sub(" ", printable).strip()

    if max_len is None or max_len < 0:
        return clean
    if sum(char_width(ch) for ch in clean) <= max_len:
        return clean
    if max_len < char_width(ELLIPSIS):
        return ""
    clipped = _clip_columns(clean, max_len - char_width(ELLIPSIS)).rstrip()
    return f"{clipped}{ELLIPSIS}"


def color_text(text: str, style: Optional[str]) -> str:
    """Wrap *text* in Rich markup for ``style``; an empty style leaves it bare."""

    return f"[{style}]{text}[/]" if style else text


def format_kv(
    label: str,
    value: object,
    *,
    label_style: Optional[str] = "dim",
    value_style: Optional[str] = "bright_white",
) -> str:
    """Render ``label=value`` as Rich markup, escaping both sides."""

    return f"{color_text(escape(str(label)), label_style)}={color_text(escape(str(value)), value_style)}"


def format_summary(pairs: Iterable[Tuple[str, object]]) -> str:
    """Join several :func:`format_kv` pairs into one space-separated line."""

    return " ".join(format_kv(label, value) for label, value in pairs)


__all__ = [
    "color_text",
    "format_kv",
    "format_summary",
    "sanitize_console_text",
]
