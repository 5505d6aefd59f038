"""Drawing of render models."""

from .render_context import RenderContext
from .renderer import Renderer

__all__ = ["RenderContext", "Renderer"]
