from __future__ import annotations

from typing import Iterable, TypeVar


T = TypeVar("T")

PLACEHOLDER = None

# (min viewport width, columns), widest first.
_WIDTH_STEPS: tuple[tuple[int, int], ...] = (
    (1300, 8),
    (1200, 7),
    (1100, 6),
    (1000, 5),
    (900, 4),
)
_NARROW_COLUMNS = 3
_MIN_COLUMNS_WITH_DETAIL = 2


def items_per_row(viewport_width: int, detail_panel_open: bool) -> int:
    """
    Grid columns for a viewport width.

    The detail panel takes half the width, so columns are halved (never below 2).
    """
    value = _NARROW_COLUMNS
    for min_w, cols in _WIDTH_STEPS:
        if viewport_width >= min_w:
            value = cols
            break
    if detail_panel_open:
        value = value // 2
        if value <= 1:
            value = _MIN_COLUMNS_WITH_DETAIL
    return value


def arrange_rows(items: Iterable[T], per_row: int) -> list[tuple[T | None, ...]]:
    """
    Split items into rows of exactly `per_row` slots.

    The last row is padded with PLACEHOLDER. No items gives a single all-placeholder row.
    """
    if per_row < 1:
        raise ValueError(f"per_row must be >= 1, got {per_row}")
    rows: list[tuple[T | None, ...]] = []
    row: list[T | None] = []
    for item in items:
        row.append(item)
        if len(row) == per_row:
            rows.append(tuple(row))
            row = []
    if row or not rows:
        row.extend([PLACEHOLDER] * (per_row - len(row)))
        rows.append(tuple(row))
    return rows
