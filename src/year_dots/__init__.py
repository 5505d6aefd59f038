"""Year progress dot grid: layout engine and renderers."""

from .errors import InvalidCanvasSize, InvalidDateInput, YearDotsError
from .layout import RenderModel, build_render_model

__version__ = "0.1.0"

__all__ = [
    "InvalidCanvasSize",
    "InvalidDateInput",
    "RenderModel",
    "YearDotsError",
    "build_render_model",
]
