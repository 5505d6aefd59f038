"""Tests for the two-weeks-per-row grid layout."""

import pytest

from year_dots.constants import GAP_COLUMN
from year_dots.layout.grid import CellKind, cell_position, layout_cells


def test_rows_for_2025():
    """365 days starting on a Wednesday need 27 rows."""
    layout = layout_cells(365, 2)

    assert layout.rows == 27
    assert layout.cols == 15


@pytest.mark.parametrize(
    "total_days, offset, rows",
    [(365, 0, 27), (366, 0, 27), (364, 0, 26), (366, 6, 27), (365, 6, 27), (14, 0, 1), (15, 0, 2)],
)
def test_rows_formula(total_days: int, offset: int, rows: int):
    assert layout_cells(total_days, offset).rows == rows


@pytest.mark.parametrize(
    "offset, row, col",
    [(0, 0, 0), (6, 0, 6), (7, 0, 8), (13, 0, 14), (14, 1, 0), (21, 1, 8), (366, 26, 2)],
)
def test_cell_position_skips_gap_column(offset: int, row: int, col: int):
    assert cell_position(offset) == (row, col)


def test_leading_placeholders_precede_day_zero():
    """Offset 2 emits two leading placeholders in columns 0 and 1."""
    cells = list(layout_cells(365, 2).cells())

    leading = [cell for cell in cells if cell.kind is CellKind.LEADING]
    assert [(c.day_index, c.row, c.col) for c in leading] == [(-2, 0, 0), (-1, 0, 1)]
    assert cells[2].day_index == 0
    assert (cells[2].row, cells[2].col) == (0, 2)


def test_zero_offset_has_no_leading_placeholders():
    """With a Monday start, day 0 sits in row 0, column 0."""
    layout = layout_cells(366, 0)
    cells = list(layout.cells())

    assert not any(cell.kind is CellKind.LEADING for cell in cells)
    assert (cells[0].day_index, cells[0].row, cells[0].col) == (0, 0, 0)
    assert layout.has_leading_gap_at_row0 is False


@pytest.mark.parametrize("total_days", [365, 366])
@pytest.mark.parametrize("offset", range(7))
def test_gap_column_never_holds_a_day(total_days: int, offset: int):
    layout = layout_cells(total_days, offset)

    day_cells = list(layout.day_cells())

    assert len(day_cells) == total_days
    assert [cell.day_index for cell in day_cells] == list(range(total_days))
    assert all(cell.col != GAP_COLUMN for cell in day_cells)
    assert all(0 <= cell.col <= 14 for cell in day_cells)
    assert max(cell.row for cell in day_cells) == layout.rows - 1


def test_gap_cells_mark_second_week_of_each_row():
    """A gap cell is emitted right before every day landing in column 8."""
    cells = list(layout_cells(365, 2).cells())

    for index, cell in enumerate(cells):
        if cell.kind is CellKind.GAP:
            assert cell.col == GAP_COLUMN
            assert cell.day_index is None
            following = cells[index + 1]
            assert following.kind is CellKind.DAY
            assert (following.row, following.col) == (cell.row, GAP_COLUMN + 1)


def test_cells_are_restartable():
    """Iterating twice yields the same sequence."""
    layout = layout_cells(365, 3)

    assert list(layout.cells()) == list(layout.cells())


def test_unique_positions():
    """No two cells share a grid position."""
    cells = list(layout_cells(366, 5).cells())
    positions = [(cell.row, cell.col) for cell in cells]

    assert len(positions) == len(set(positions))


@pytest.mark.parametrize("total_days, offset", [(0, 0), (365, -1), (365, 7)])
def test_invalid_inputs_raise(total_days: int, offset: int):
    with pytest.raises(ValueError):
        layout_cells(total_days, offset)


def test_day_cells_skip_placeholders():
    """Leading and gap cells are placeholders; day_cells yields everything else."""
    layout = layout_cells(365, 4)
    cells = list(layout.cells())

    placeholders = [cell for cell in cells if cell.is_placeholder]
    assert {cell.kind for cell in placeholders} == {CellKind.LEADING, CellKind.GAP}
    assert sum(1 for cell in placeholders if cell.kind is CellKind.LEADING) == 4
    assert list(layout.day_cells()) == [cell for cell in cells if not cell.is_placeholder]
