"""Base class for output format providers."""

from abc import ABC, abstractmethod
from io import BytesIO

from ..layout import RenderModel
from ..render.render_context import RenderContext
from ..render.renderer import Renderer


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = "", render_context: RenderContext | None = None):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
            render_context: Theming used when drawing, dark mode by default
        """
        self.path = path
        self.context = render_context or RenderContext.darkmode()

    @abstractmethod
    def encode(self, model: RenderModel) -> bytes:
        """
        Encode a render model into the output format.

        Args:
            model: The render model to draw

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)


class PillowOutputProvider(OutputProvider, ABC):
    """Template output provider for Pillow-supported raster formats."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``png`` or ``webp``)."""
        raise NotImplementedError

    def encode(self, model: RenderModel) -> bytes:
        image = Renderer(model, self.context, include_label=True).render()
        buffer = BytesIO()
        image.save(buffer, format=self.output_format, **self.save_options)
        return buffer.getvalue()

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}
