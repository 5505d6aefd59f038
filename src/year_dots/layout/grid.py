"""Day-to-cell mapping for the two-weeks-per-row grid."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ..constants import DAYS_PER_ROW, DAYS_PER_WEEK, GAP_COLUMN, GRID_COLUMNS


class CellKind(Enum):
    LEADING = "leading"
    GAP = "gap"
    DAY = "day"


@dataclass(frozen=True, slots=True)
class GridCell:
    """A single slot of the grid.

    ``day_index`` is negative for leading placeholders and ``None`` for gap cells.
    """
    day_index: int | None
    row: int
    col: int
    kind: CellKind = CellKind.DAY

    @property
    def is_placeholder(self) -> bool:
        return self.kind is not CellKind.DAY


def cell_position(structural_offset: int) -> tuple[int, int]:
    """Return ``(row, col)`` for a structural offset, skipping the gap column."""
    row, position_in_row = divmod(structural_offset, DAYS_PER_ROW)
    col = position_in_row if position_in_row < DAYS_PER_WEEK else position_in_row + 1
    return row, col


@dataclass(frozen=True)
class GridLayout:
    """Grid topology for a year of ``total_days`` starting ``weekday_offset`` cells in."""
    total_days: int
    weekday_offset: int

    @property
    def rows(self) -> int:
        return math.ceil((self.total_days + self.weekday_offset) / DAYS_PER_ROW)

    @property
    def cols(self) -> int:
        return GRID_COLUMNS

    @property
    def has_leading_gap_at_row0(self) -> bool:
        """Whether the leading placeholders reach past the gap column of row 0."""
        return self.weekday_offset >= DAYS_PER_WEEK

    def cells(self) -> Iterator[GridCell]:
        """Yield every cell in day order: leading placeholders, gap cells and days."""
        for day_index in range(-self.weekday_offset, 0):
            row, col = cell_position(self.weekday_offset + day_index)
            yield GridCell(day_index=day_index, row=row, col=col, kind=CellKind.LEADING)

        if self.has_leading_gap_at_row0:
            yield GridCell(day_index=None, row=0, col=GAP_COLUMN, kind=CellKind.GAP)

        for day_index in range(self.total_days):
            structural_offset = self.weekday_offset + day_index
            row, col = cell_position(structural_offset)
            if structural_offset % DAYS_PER_ROW == DAYS_PER_WEEK:
                yield GridCell(day_index=None, row=row, col=GAP_COLUMN, kind=CellKind.GAP)
            yield GridCell(day_index=day_index, row=row, col=col)

    def day_cells(self) -> Iterator[GridCell]:
        """Yield only the cells that hold a day."""
        for cell in self.cells():
            if not cell.is_placeholder:
                yield cell


def layout_cells(total_days: int, weekday_offset: int) -> GridLayout:
    """
    Build the grid layout for a year.

    Raises:
        ValueError: If ``total_days`` is not positive or ``weekday_offset`` is outside 0-6
    """
    if total_days < 1:
        raise ValueError(f"total_days must be positive, got {total_days}")
    if not 0 <= weekday_offset < DAYS_PER_WEEK:
        raise ValueError(f"weekday_offset must be in [0, 6], got {weekday_offset}")
    return GridLayout(total_days=total_days, weekday_offset=weekday_offset)
