"""Assembly of the renderer-agnostic description of a year-progress image."""

import logging
from dataclasses import dataclass

from ..constants import (
    CROSS_ARM_RATIO,
    CROSS_STROKE_RATIO,
    FUTURE_RADIUS_RATIO,
    FUTURE_SIZE_FACTOR,
    LABEL_BASELINE_OFFSET,
    LABEL_FONT_RATIO,
    LABEL_OFFSET_RATIO,
    PAST_SIZE_FACTOR,
    TODAY_RADIUS_RATIO,
    TODAY_SIZE_FACTOR,
)
from .classifier import DotKind, classify
from .geometry import CanvasGeometry, resolve_geometry, validate_canvas_size
from .grid import GridLayout, layout_cells
from .temporal import ReferenceDate, TemporalModel, compute_temporal

logger = logging.getLogger(__name__)

SIZE_FACTORS: dict[DotKind, float] = {
    DotKind.PAST: PAST_SIZE_FACTOR,
    DotKind.TODAY: TODAY_SIZE_FACTOR,
    DotKind.FUTURE: FUTURE_SIZE_FACTOR,
}

RADIUS_RATIOS: dict[DotKind, float] = {
    DotKind.PAST: 0.0,
    DotKind.TODAY: TODAY_RADIUS_RATIO,
    DotKind.FUTURE: FUTURE_RADIUS_RATIO,
}


@dataclass(frozen=True, slots=True)
class Drawable:
    """A shape centered on a day cell. ``size`` is the shape's diameter in pixels."""
    center_x: float
    center_y: float
    kind: DotKind
    size: float
    stroke_width: float
    day_index: int
    row: int
    col: int

    @property
    def radius(self) -> float:
        """Drawn circle radius; zero for crosses."""
        return self.size * RADIUS_RATIOS[self.kind]

    @property
    def cross_arm(self) -> float:
        """Half-diagonal of a cross, from center to line end."""
        return self.size * CROSS_ARM_RATIO


@dataclass(frozen=True)
class ProgressLabel:
    days_left: int
    percent_elapsed: float

    @property
    def percent_text(self) -> str:
        return f"{self.percent_elapsed:.1f}%"

    @property
    def days_text(self) -> str:
        return f"{self.days_left} days"

    @property
    def text(self) -> str:
        return f"{self.days_text} | {self.percent_text}"


@dataclass(frozen=True)
class LabelPlacement:
    """Where both renderers put the label below the card."""
    center_x: float
    top: float
    baseline: float
    font_size: float


@dataclass(frozen=True)
class RenderModel:
    temporal: TemporalModel
    layout: GridLayout
    geometry: CanvasGeometry
    drawables: tuple[Drawable, ...]
    label: ProgressLabel
    label_placement: LabelPlacement


def build_progress_label(temporal: TemporalModel) -> ProgressLabel:
    """Days remaining after today and the share of the year already elapsed."""
    days_left = max(0, temporal.total_days - temporal.elapsed_days - 1)
    percent_elapsed = temporal.elapsed_days / temporal.total_days * 100
    return ProgressLabel(days_left=days_left, percent_elapsed=percent_elapsed)


def place_label(geometry: CanvasGeometry) -> LabelPlacement:
    top = geometry.card_top + geometry.card_h + geometry.card_h * LABEL_OFFSET_RATIO
    return LabelPlacement(
        center_x=geometry.canvas_w / 2,
        top=top,
        baseline=top + LABEL_BASELINE_OFFSET,
        font_size=min(geometry.canvas_w, geometry.canvas_h) * LABEL_FONT_RATIO,
    )


def build_drawables(
    layout: GridLayout, geometry: CanvasGeometry, elapsed_days: int
) -> tuple[Drawable, ...]:
    """Resolve one drawable per day, in day order; placeholders draw nothing."""
    drawables = []
    for cell in layout.day_cells():
        kind = classify(cell.day_index, elapsed_days)
        size = geometry.dot_size * SIZE_FACTORS[kind]
        center_x, center_y = geometry.cell_center(cell.row, cell.col)
        drawables.append(
            Drawable(
                center_x=center_x,
                center_y=center_y,
                kind=kind,
                size=size,
                stroke_width=size * CROSS_STROKE_RATIO if kind is DotKind.PAST else 0.0,
                day_index=cell.day_index,
                row=cell.row,
                col=cell.col,
            )
        )
    return tuple(drawables)


def build_render_model(now: ReferenceDate, canvas_w: float, canvas_h: float) -> RenderModel:
    """
    Build everything a renderer needs to draw the year-progress card.

    Args:
        now: Reference date; never read from the system clock here
        canvas_w: Canvas width in pixels
        canvas_h: Canvas height in pixels

    Raises:
        InvalidDateInput: If ``now`` cannot be parsed
        InvalidCanvasSize: If the canvas is degenerate
    """
    temporal = compute_temporal(now)
    validate_canvas_size(canvas_w, canvas_h)

    layout = layout_cells(temporal.total_days, temporal.weekday_offset)
    geometry = resolve_geometry(canvas_w, canvas_h, layout.rows)
    drawables = build_drawables(layout, geometry, temporal.elapsed_days)

    logger.debug(
        "Built render model for %s on %sx%s canvas (%d rows, %d drawables)",
        temporal.reference.date().isoformat(),
        canvas_w,
        canvas_h,
        layout.rows,
        len(drawables),
    )
    return RenderModel(
        temporal=temporal,
        layout=layout,
        geometry=geometry,
        drawables=drawables,
        label=build_progress_label(temporal),
        label_placement=place_label(geometry),
    )
