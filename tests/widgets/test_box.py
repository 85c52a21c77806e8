from __future__ import annotations

import pytest

from src.termpanel.layout.terminal import ANSI_RESET
from src.termpanel.layout.text import visible_width
from src.termpanel.widgets.box import MIN_BOX_WIDTH, Box
from src.termpanel.widgets.styles import ASCII_BOX, BOX_STYLES, SQUARE_BOX

EDGE = "│" + ANSI_RESET


def _box(**kwargs: object) -> Box:
    kwargs.setdefault("border_color", "")
    return Box(**kwargs)  # type: ignore[arg-type]


def test_plain_box_renders_three_parts() -> None:
    lines = _box(width=10, content=("hi",)).render_lines()
    assert lines == [
        "╭────────╮" + ANSI_RESET,
        EDGE + "hi      " + EDGE,
        "╰────────╯" + ANSI_RESET,
    ]


def test_title_inlined_when_it_fits() -> None:
    box = _box(width=10, title="Logs")
    assert box.inner_width == 8
    assert box.title_fits()
    assert box.render_lines()[0] == "╭─ Logs ─╮" + ANSI_RESET


def test_title_omitted_when_too_wide() -> None:
    box = _box(width=10, title="Queue")
    assert not box.title_fits()
    assert box.render_lines()[0] == "╭────────╮" + ANSI_RESET


def test_title_fills_remaining_border() -> None:
    top = _box(width=14, title="ab", title_color="\x1b[36m").render_lines()[0]
    assert top == "╭─ \x1b[36mab ───────╮" + ANSI_RESET
    assert visible_width(top) == 14


def test_title_brackets_measured_from_style() -> None:
    top = _box(width=12, title="ASCII", style=ASCII_BOX).render_lines()[0]
    assert top == "+- ASCII --+" + ANSI_RESET


def test_line_equal_to_inner_width_goes_through_truncate() -> None:
    line = _box(width=10, content=("abcdefgh",)).render_lines()[1]
    assert line == EDGE + "abcdefgh" + ANSI_RESET + EDGE


def test_long_line_is_truncated() -> None:
    line = _box(width=10, content=("abcdefghijkl",)).render_lines()[1]
    assert line == EDGE + "abcdefgh" + ANSI_RESET + EDGE


def test_wide_glyph_cut_is_topped_up_with_spaces() -> None:
    line = _box(width=7, content=("日本語",)).render_lines()[1]
    assert line == EDGE + "日本" + ANSI_RESET + " " + EDGE
    assert visible_width(line) == 7


def test_width_is_clamped_to_minimum() -> None:
    box = _box(width=1)
    assert box.outer_width == MIN_BOX_WIDTH
    assert box.inner_width == MIN_BOX_WIDTH - 2
    assert box.render_lines()[0] == "╭──╮" + ANSI_RESET


@pytest.mark.parametrize("style_name", sorted(BOX_STYLES))
def test_every_line_spans_outer_width(style_name: str) -> None:
    box = Box(
        width=16,
        title="Status",
        style=BOX_STYLES[style_name],
        content=("\x1b[32mok\x1b[0m", "x" * 40, "", "日本語テキストです"),
    )
    assert all(visible_width(line) == 16 for line in box.render_lines())


def test_with_lines_returns_new_box() -> None:
    box = _box(width=10)
    grown = box.with_lines("a", "b").with_lines("c")
    assert box.content == ()
    assert grown.content == ("a", "b", "c")
    assert grown.render().count("\n") == 4


def test_content_list_is_stored_as_tuple() -> None:
    box = _box(width=10, content=["a"], style=SQUARE_BOX)
    assert box.content == ("a",)
    assert box.render().startswith("┌")


def test_unterminated_sequence_never_reaches_content_line() -> None:
    line = _box(width=10, content=("ok\x1b[2",)).render_lines()[1]
    assert line == EDGE + "ok      " + EDGE
    assert visible_width(line) == 10


def test_open_styling_is_reset_before_padding() -> None:
    line = _box(width=10, content=("\x1b[31mred",)).render_lines()[1]
    assert line == EDGE + "\x1b[31mred" + ANSI_RESET + "     " + EDGE
