"""Data table renderer built on the column width allocator."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Sequence, Tuple

from ..layout.columns import ColumnSpec, allocate_widths
from ..layout.terminal import ANSI_RESET, BOLD, FG_GRAY, FG_WHITE
from ..layout.text import close_styles, pad
from .styles import horizontal_bar

DEFAULT_SEPARATOR = "  "


def _empty_rows() -> Tuple[Tuple[str, ...], ...]:
    return ()


@dataclass(frozen=True)
class Table:
    """Columns, rows, and styling for one table render."""

    columns: Tuple[ColumnSpec, ...]
    width: int
    rows: Tuple[Tuple[str, ...], ...] = field(default_factory=_empty_rows)
    separator: str = DEFAULT_SEPARATOR
    show_header: bool = True
    header_color: str = BOLD + FG_WHITE
    border_color: str = FG_GRAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))

    def with_rows(self, *rows: Sequence[str]) -> "Table":
        """Return a copy of this table with ``rows`` appended."""

        return replace(self, rows=self.rows + tuple(tuple(row) for row in rows))

    def widths(self) -> List[int]:
        return allocate_widths(self.columns, self.rows, self.width, self.separator)

    def _header_line(self, widths: Sequence[int]) -> str:
        cells = [
            f"{self.header_color}{pad(column.header, widths[i], column.align)}"
            for i, column in enumerate(self.columns)
        ]
        return f"{self.separator.join(cells)}{ANSI_RESET}"

    def _rule_line(self, widths: Sequence[int]) -> str:
        rule = self.separator.join(horizontal_bar(width) for width in widths)
        return f"{self.border_color}{rule}{ANSI_RESET}"

    def _row_line(self, row: Sequence[str], widths: Sequence[int]) -> str:
        cells = []
        for index, column in enumerate(self.columns):
            cell = row[index] if index < len(row) else ""
            cells.append(pad(close_styles(cell), widths[index], column.align))
        return self.separator.join(cells)

    def _render(self, *, with_rule: bool) -> str:
        if not self.columns:
            return ""
        widths = self.widths()
        lines: List[str] = []
        if self.show_header:
            lines.append(self._header_line(widths))
            if with_rule:
                lines.append(self._rule_line(widths))
        lines.extend(self._row_line(row, widths) for row in self.rows)
        return "\n".join(lines)

    def render(self) -> str:
        """Render header, header rule, and rows."""

        return self._render(with_rule=True)

    def render_compact(self) -> str:
        """Render header and rows without the rule beneath the header."""

        return self._render(with_rule=False)


__all__ = ["DEFAULT_SEPARATOR", "Table"]
