"""Column width allocation for table-style layouts."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .text import Align, visible_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSpec:
    """
    Sizing constraints for one table column.

    ``fixed_width > 0`` wins over every other field. Otherwise a ``flexible``
    column starts at ``min_width`` and absorbs leftover budget, and any other
    column is sized to its widest content. ``max_width == 0`` means unlimited.
    """

    header: str
    fixed_width: int = 0
    min_width: int = 0
    max_width: int = 0
    align: Align = Align.LEFT
    flexible: bool = False

    @classmethod
    def fixed(cls, header: str, width: int, align: Align = Align.LEFT) -> "ColumnSpec":
        """Fixed-width column; ``width <= 0`` falls back to auto sizing."""

        return cls(header=header, fixed_width=width, min_width=visible_width(header), align=align)

    @classmethod
    def flex(
        cls,
        header: str,
        min_width: int,
        align: Align = Align.LEFT,
        *,
        max_width: int = 0,
    ) -> "ColumnSpec":
        return cls(
            header=header,
            min_width=min_width,
            max_width=max_width,
            align=align,
            flexible=True,
        )


def _auto_width(index: int, column: ColumnSpec, rows: Sequence[Sequence[str]]) -> int:
    width = max(column.min_width, visible_width(column.header))
    for row in rows:
        if index < len(row):
            width = max(width, visible_width(row[index]))
    if column.max_width > 0 and width > column.max_width:
        width = column.max_width
    return width


def allocate_widths(
    columns: Sequence[ColumnSpec],
    rows: Sequence[Sequence[str]],
    total_width: int,
    separator: str,
) -> List[int]:
    """
    Compute a concrete display width for every column.

    First pass: fixed columns take ``fixed_width``, flexible columns take
    ``min_width``, and auto columns take the widest of ``min_width``, the header,
    and every cell at that index (clamped to ``max_width`` when set).

    Second pass: when flexible columns exist and the table is narrower than
    ``total_width``, the leftover budget is split evenly between them by floor
    division (the remainder is dropped), then each is re-clamped to its own
    ``max_width``. Columns are never shrunk when the table overflows.

    Parameters:
        columns (Sequence[ColumnSpec]): Column constraints in display order.
        rows (Sequence[Sequence[str]]): Cell strings; rows may be shorter or longer
            than the column list.
        total_width (int): Column budget for the whole line, separators included.
        separator (str): String placed between adjacent columns.

    Returns:
        List[int]: One width per column, in input order.
    """
    if not columns:
        return []

    widths: List[int] = []
    flex_count = 0
    for index, column in enumerate(columns):
        if column.fixed_width > 0:
            widths.append(column.fixed_width)
        elif column.flexible:
            widths.append(max(column.min_width, 0))
            flex_count += 1
        else:
            widths.append(_auto_width(index, column, rows))

    used = sum(widths) + visible_width(separator) * (len(columns) - 1)
    if flex_count and used < total_width:
        remaining = total_width - used
        extra = remaining // flex_count
        if remaining % flex_count:
            logger.debug(
                "Dropping %d column(s) of flex remainder across %d flexible column(s)",
                remaining % flex_count,
                flex_count,
            )
        for index, column in enumerate(columns):
            if not column.flexible or column.fixed_width > 0:
                continue
            widths[index] += extra
            if column.max_width > 0 and widths[index] > column.max_width:
                widths[index] = column.max_width
    elif used > total_width:
        logger.debug("Table overflows budget: %d > %d columns", used, total_width)

    logger.debug("Allocated column widths %s for budget %d", widths, total_width)
    return widths


__all__ = ["ColumnSpec", "allocate_widths"]
