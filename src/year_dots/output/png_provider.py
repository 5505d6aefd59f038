"""PNG output provider."""

from .base import PillowOutputProvider


class PngOutputProvider(PillowOutputProvider):
    """Output provider for PNG format."""

    @property
    def output_format(self) -> str:
        return "png"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": True}
