"""Calendar grid layout engine for the year-progress visualization."""

from .classifier import DotKind, classify
from .geometry import CanvasGeometry, resolve_geometry, validate_canvas_size
from .grid import CellKind, GridCell, GridLayout, cell_position, layout_cells
from .render_model import (
    Drawable,
    LabelPlacement,
    ProgressLabel,
    RenderModel,
    build_render_model,
)
from .temporal import (
    ReferenceDate,
    TemporalModel,
    YearWindow,
    compute_temporal,
    parse_reference_date,
)

__all__ = [
    "CanvasGeometry",
    "CellKind",
    "DotKind",
    "Drawable",
    "GridCell",
    "GridLayout",
    "LabelPlacement",
    "ProgressLabel",
    "ReferenceDate",
    "RenderModel",
    "TemporalModel",
    "YearWindow",
    "build_render_model",
    "cell_position",
    "classify",
    "compute_temporal",
    "layout_cells",
    "parse_reference_date",
    "resolve_geometry",
    "validate_canvas_size",
]
