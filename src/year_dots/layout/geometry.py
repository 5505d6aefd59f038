"""Pixel geometry of the card and its grid, shared by every renderer."""

import math
from dataclasses import dataclass

from ..constants import (
    CARD_HEIGHT_RATIO,
    CARD_PADDING_RATIO,
    CARD_TOP_RATIO,
    CARD_WIDTH_RATIO,
    DOT_SIZE_RATIO,
    GAP_DIVISOR,
    GRID_COLUMNS,
)
from ..errors import InvalidCanvasSize


@dataclass(frozen=True)
class CanvasGeometry:
    canvas_w: float
    canvas_h: float
    card_w: float
    card_h: float
    card_left: float
    card_top: float
    padding: float
    border_radius: float
    rows: int
    cols: int
    cell_w: float
    cell_h: float
    gap: float
    dot_size: float

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        """Pixel center of the grid cell at ``(row, col)``."""
        x = self.card_left + self.padding + col * self.cell_w + self.cell_w / 2
        y = self.card_top + self.padding + row * self.cell_h + self.cell_h / 2
        return x, y


def validate_canvas_size(canvas_w: float, canvas_h: float) -> None:
    """
    Reject canvas sizes that cannot produce finite, positive geometry.

    Raises:
        InvalidCanvasSize: If either dimension is non-positive or not finite
    """
    for name, value in (("width", canvas_w), ("height", canvas_h)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidCanvasSize(f"Canvas {name} must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise InvalidCanvasSize(f"Canvas {name} must be positive, got {value}")


def resolve_geometry(canvas_w: float, canvas_h: float, rows: int) -> CanvasGeometry:
    """
    Compute card and cell geometry for a canvas and a grid of ``rows`` rows.

    The gap is the same along both axes so the two weeks of a row line up with
    the rows below them. Identical inputs always give identical output.

    Args:
        canvas_w: Canvas width in pixels
        canvas_h: Canvas height in pixels
        rows: Number of grid rows

    Returns:
        The resolved CanvasGeometry

    Raises:
        InvalidCanvasSize: If the canvas is degenerate
        ValueError: If ``rows`` is not positive
    """
    validate_canvas_size(canvas_w, canvas_h)
    if rows < 1:
        raise ValueError(f"rows must be positive, got {rows}")

    card_w = canvas_w * CARD_WIDTH_RATIO
    card_h = canvas_h * CARD_HEIGHT_RATIO
    padding = min(card_w, card_h) * CARD_PADDING_RATIO

    available_w = card_w - padding * 2
    available_h = card_h - padding * 2

    gap = min(
        available_w / (GRID_COLUMNS * GAP_DIVISOR),
        available_h / (rows * GAP_DIVISOR),
    )

    return CanvasGeometry(
        canvas_w=canvas_w,
        canvas_h=canvas_h,
        card_w=card_w,
        card_h=card_h,
        card_left=(canvas_w - card_w) / 2,
        card_top=canvas_h * CARD_TOP_RATIO,
        padding=padding,
        border_radius=padding,
        rows=rows,
        cols=GRID_COLUMNS,
        cell_w=available_w / GRID_COLUMNS,
        cell_h=available_h / rows,
        gap=gap,
        dot_size=gap * DOT_SIZE_RATIO,
    )
