"""Renderer for drawing year-progress images using Pillow."""

from PIL import Image, ImageDraw, ImageFont

from ..constants import MAX_SUPERSAMPLED_PIXELS
from ..layout import DotKind, Drawable, RenderModel
from .render_context import RGB, RenderContext


class Renderer:
    """Renders a RenderModel as a PIL Image."""

    def __init__(self, model: RenderModel, render_context: RenderContext, include_label: bool = True):
        """
        Initialize renderer.

        Args:
            model: The render model to draw
            render_context: Rendering configuration and theming
            include_label: Whether to composite the progress label below the card
        """
        self.model = model
        self.context = render_context
        self.include_label = include_label

        self.width = max(1, round(self.model.geometry.canvas_w))
        self.height = max(1, round(self.model.geometry.canvas_h))
        self.scale = effective_supersample(self.width, self.height, self.context.supersample)

    def render(self) -> Image.Image:
        """
        Render the model at canvas size.

        Returns:
            RGB PIL Image of the canvas
        """
        size = (self.width * self.scale, self.height * self.scale)
        img = Image.new("RGB", size, self.context.background_color)
        self._draw_card(ImageDraw.Draw(img))

        # Translucent shapes go on an overlay so they blend with the card
        overlay = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay, "RGBA")
        for drawable in self.model.drawables:
            self._draw_drawable(draw, drawable)

        if self.include_label:
            self._draw_label(draw)

        combined = Image.alpha_composite(img.convert("RGBA"), overlay).convert("RGB")
        if self.scale == 1:
            return combined
        return combined.resize((self.width, self.height), Image.Resampling.LANCZOS)

    def _s(self, value: float) -> float:
        return value * self.scale

    def _draw_card(self, draw: ImageDraw.ImageDraw) -> None:
        geometry = self.model.geometry
        left = self._s(geometry.card_left)
        top = self._s(geometry.card_top)
        draw.rounded_rectangle(
            [left, top, left + self._s(geometry.card_w), top + self._s(geometry.card_h)],
            radius=self._s(geometry.border_radius),
            fill=self.context.card_color,
        )

    def _draw_drawable(self, draw: ImageDraw.ImageDraw, drawable: Drawable) -> None:
        x = self._s(drawable.center_x)
        y = self._s(drawable.center_y)
        radius = self._s(drawable.radius)

        if drawable.kind is DotKind.PAST:
            self._draw_cross(
                draw, x, y, self._s(drawable.cross_arm), self._s(drawable.stroke_width)
            )
        elif drawable.kind is DotKind.TODAY:
            _draw_circle(draw, x, y, radius, _rgba(self.context.today_color))
        else:
            color = _rgba(self.context.future_color, self.context.future_opacity)
            _draw_circle(draw, x, y, radius, color)

    def _draw_cross(
        self, draw: ImageDraw.ImageDraw, x: float, y: float, arm: float, stroke_width: float
    ) -> None:
        color = _rgba(self.context.past_color)
        width = max(1, round(stroke_width))
        for start, end in (
            ((x - arm, y - arm), (x + arm, y + arm)),
            ((x + arm, y - arm), (x - arm, y + arm)),
        ):
            draw.line([start, end], fill=color, width=width)
            # Round caps
            for cap_x, cap_y in (start, end):
                _draw_circle(draw, cap_x, cap_y, stroke_width / 2, color)

    def _draw_label(self, draw: ImageDraw.ImageDraw) -> None:
        """Draw the three label parts centred on the canvas, sharing the SVG baseline."""
        placement = self.model.label_placement
        label = self.model.label
        font = ImageFont.load_default(size=max(1.0, self._s(placement.font_size)))

        parts = [
            (label.days_text, _rgba(self.context.label_color)),
            (" | ", _rgba(self.context.separator_color, self.context.separator_opacity)),
            (label.percent_text, _rgba(self.context.percent_color)),
        ]
        total_width = sum(draw.textlength(text, font=font) for text, _ in parts)

        x = self._s(placement.center_x) - total_width / 2
        baseline = self._s(placement.baseline)
        for text, color in parts:
            draw.text((x, baseline), text, font=font, fill=color, anchor="ls")
            x += draw.textlength(text, font=font)


def effective_supersample(width: int, height: int, requested: int) -> int:
    """Largest factor up to ``requested`` whose scaled canvas fits ``MAX_SUPERSAMPLED_PIXELS``."""
    scale = max(1, requested)
    while scale > 1 and width * height * scale * scale > MAX_SUPERSAMPLED_PIXELS:
        scale -= 1
    return scale


def _rgba(color: RGB, opacity: float = 1.0) -> tuple[int, int, int, int]:
    return (color[0], color[1], color[2], round(255 * opacity))


def _draw_circle(
    draw: ImageDraw.ImageDraw, x: float, y: float, radius: float, fill: tuple[int, int, int, int]
) -> None:
    draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=fill)
