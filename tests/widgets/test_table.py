from __future__ import annotations

from src.termpanel.layout.columns import ColumnSpec
from src.termpanel.layout.terminal import ANSI_RESET
from src.termpanel.layout.text import Align, visible_width
from src.termpanel.widgets.table import Table


def _table(**kwargs: object) -> Table:
    kwargs.setdefault("columns", (ColumnSpec.fixed("ID", 3), ColumnSpec.flex("Name", 4)))
    kwargs.setdefault("width", 12)
    kwargs.setdefault("header_color", "")
    kwargs.setdefault("border_color", "")
    return Table(**kwargs)  # type: ignore[arg-type]


def test_render_header_rule_and_rows() -> None:
    table = _table(rows=[("1", "alice")])
    assert table.widths() == [3, 7]
    assert table.render().split("\n") == [
        "ID   Name   " + ANSI_RESET,
        "───  ───────" + ANSI_RESET,
        "1    alice  ",
    ]


def test_render_compact_omits_rule() -> None:
    table = _table(rows=[("1", "alice")])
    assert table.render_compact().split("\n") == [
        "ID   Name   " + ANSI_RESET,
        "1    alice  ",
    ]


def test_short_rows_render_blank_cells() -> None:
    lines = _table(rows=[("2",)]).render().split("\n")
    assert lines[-1] == "2  " + "  " + " " * 7


def test_extra_cells_are_ignored() -> None:
    lines = _table(rows=[("3", "bob", "extra")]).render().split("\n")
    assert lines[-1] == "3    bob    "


def test_long_cells_are_truncated_to_column_width() -> None:
    lines = _table(rows=[("12345", "a much longer name")]).render().split("\n")
    assert lines[-1] == "123" + ANSI_RESET + "  " + "a much " + ANSI_RESET


def test_cells_follow_column_alignment() -> None:
    columns = (ColumnSpec.fixed("N", 4, Align.RIGHT), ColumnSpec.fixed("S", 4, Align.CENTER))
    lines = _table(columns=columns, width=9, rows=[("7", "ok")]).render().split("\n")
    assert lines[-1] == "   7   ok "


def test_header_can_be_hidden() -> None:
    rendered = _table(rows=[("1", "alice")], show_header=False).render()
    assert rendered == "1    alice  "


def test_colored_header_and_rule() -> None:
    lines = _table(header_color="\x1b[1m", border_color="\x1b[90m").render().split("\n")
    assert lines[0].startswith("\x1b[1mID")
    assert lines[1].startswith("\x1b[90m───")


def test_every_line_spans_budget_when_flexible() -> None:
    table = _table(width=30, rows=[("1", "\x1b[31mred\x1b[0m"), ("2", "日本語")])
    assert all(visible_width(line) == 30 for line in table.render().split("\n"))


def test_with_rows_appends_without_mutating() -> None:
    table = _table()
    grown = table.with_rows(["1", "a"], ["2", "b"])
    assert table.rows == ()
    assert grown.rows == (("1", "a"), ("2", "b"))


def test_no_columns_renders_nothing() -> None:
    assert Table(columns=(), width=40, rows=[("x",)]).render() == ""


def test_header_color_applies_to_every_cell() -> None:
    columns = (ColumnSpec("ID"), ColumnSpec("Name"))
    header = _table(columns=columns, header_color="\x1b[1m").render().split("\n")[0]
    assert header == "\x1b[1mID  \x1b[1mName" + ANSI_RESET
    assert header.count(ANSI_RESET) == 1


def test_open_cell_styling_does_not_bleed_into_row() -> None:
    lines = _table(rows=[("\x1b[31m1", "alice")]).render().split("\n")
    assert lines[-1] == "\x1b[31m1" + ANSI_RESET + "    alice  "


def test_unterminated_cell_sequence_is_dropped() -> None:
    lines = _table(rows=[("1", "al\x1b[3")]).render().split("\n")
    assert lines[-1] == "1    al     "
