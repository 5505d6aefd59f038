"""SVG output provider."""

from ..layout import RenderModel
from ._svg_encoder import encode_svg_document
from .base import OutputProvider


class SvgOutputProvider(OutputProvider):
    """Output provider for vector markup with the label inline."""

    def encode(self, model: RenderModel) -> bytes:
        if not isinstance(model, RenderModel):
            raise TypeError(
                f"SVG output only supports render models (got {type(model).__name__})"
            )
        return encode_svg_document(model, self.context, include_label=True).encode("utf-8")
