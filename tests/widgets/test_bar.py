from __future__ import annotations

import math

import pytest

from src.termpanel.layout.terminal import ANSI_RESET
from src.termpanel.layout.text import visible_width
from src.termpanel.widgets.bar import ProgressBar, clamp_percent, fill_units, format_percent_suffix
from src.termpanel.widgets.styles import BLOCK_BAR, SUB_BLOCK_CHARS


def test_half_bar_has_no_partial_glyph() -> None:
    assert fill_units(10, 50) == (5, 0, 5)
    bar = ProgressBar(width=12, percent=50, color="")
    assert bar.bar_width == 10
    rendered = bar.render_bar()
    assert rendered == "[" + "█" * 5 + ANSI_RESET + "░" * 5 + "]"
    assert not any(glyph in rendered for glyph in SUB_BLOCK_CHARS[1:8])


@pytest.mark.parametrize(
    ("width", "percent", "expected"),
    [
        (10, 0, (0, 0, 10)),
        (10, 100, (10, 0, 0)),
        (10, 55, (5, 4, 4)),
        (10, 5, (0, 4, 9)),
        (3, 33.3, (0, 7, 2)),
        (1, 99, (0, 7, 0)),
    ],
)
def test_fill_units_quantize_to_eighths(width: int, percent: float, expected: tuple) -> None:
    full, partial, empty = fill_units(width, percent)
    assert (full, partial, empty) == expected
    assert full + (1 if partial else 0) + empty == width


def test_partial_glyph_follows_full_glyphs() -> None:
    rendered = ProgressBar(width=12, percent=5, color="").render_bar()
    assert rendered == "[" + "▌" + ANSI_RESET + "░" * 9 + "]"


@pytest.mark.parametrize(("raw", "expected"), [(150, 100.0), (-5, 0.0), (math.nan, 0.0), (42.5, 42.5)])
def test_percent_is_clamped(raw: float, expected: float) -> None:
    assert clamp_percent(raw) == expected
    assert ProgressBar(width=10, percent=raw).percent == expected


def test_render_adds_label_and_value() -> None:
    bar = ProgressBar(width=12, percent=5, label="cpu", color="")
    assert bar.render() == "cpu " + bar.render_bar() + "   5%"


def test_value_can_be_hidden() -> None:
    bar = ProgressBar(width=6, percent=100, show_value=False, color="")
    assert bar.render() == "[" + "█" * 4 + ANSI_RESET + "]"


def test_color_wraps_filled_portion() -> None:
    rendered = ProgressBar(width=6, percent=50, color="\x1b[32m").render_bar()
    assert rendered == "[\x1b[32m██" + ANSI_RESET + "░░]"


def test_bar_spans_requested_width() -> None:
    for percent in (0, 12.5, 37, 99.9, 100):
        assert visible_width(ProgressBar(width=20, percent=percent).render_bar()) == 20


def test_bracketless_style_uses_full_width() -> None:
    bar = ProgressBar(width=8, percent=25, style=BLOCK_BAR, color="")
    assert bar.bar_width == 8
    assert bar.render_bar() == "██" + ANSI_RESET + "░" * 6


def test_bar_width_never_drops_below_one() -> None:
    assert ProgressBar(width=1, percent=50).bar_width == 1


def test_format_percent_suffix() -> None:
    assert format_percent_suffix(100) == "100%"
    assert format_percent_suffix(7.9) == "  7%"
    assert format_percent_suffix(0) == "  0%"
