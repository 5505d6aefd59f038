"""Colours and rendering options shared by the SVG and raster renderers."""

from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class RenderContext:
    background_color: RGB
    card_color: RGB
    past_color: RGB
    today_color: RGB
    future_color: RGB
    future_opacity: float
    label_color: RGB
    separator_color: RGB
    separator_opacity: float
    percent_color: RGB
    font_family: str = "monospace"
    supersample: int = 2

    @staticmethod
    def darkmode(supersample: int = 2) -> "RenderContext":
        return RenderContext(
            background_color=(0, 0, 0),
            card_color=(0x11, 0x11, 0x11),
            past_color=(0xD9, 0xD9, 0xD9),
            today_color=(0xF5, 0x5E, 0x00),
            future_color=(0xD9, 0xD9, 0xD9),
            future_opacity=0.3,
            label_color=(255, 255, 255),
            separator_color=(255, 255, 255),
            separator_opacity=0.1,
            percent_color=(0xF5, 0x5E, 0x00),
            supersample=supersample,
        )
