"""SVG markup encoder for a RenderModel."""

from ..layout import DotKind, Drawable, RenderModel
from ..render.render_context import RenderContext
from ._svg_shared import _svg_hex, _svg_num

_SVG_NS = "http://www.w3.org/2000/svg"


def encode_svg_document(
    model: RenderModel,
    context: RenderContext,
    include_label: bool = True,
) -> str:
    """Render the model as a standalone SVG document.

    Without the label, the markup is the background layer a raster surface can
    composite its own text onto.
    """
    geometry = model.geometry
    width = _svg_num(geometry.canvas_w)
    height = _svg_num(geometry.canvas_h)

    parts = [
        f'<svg xmlns="{_SVG_NS}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        f'<rect width="{width}" height="{height}" fill="{_svg_hex(context.background_color)}"/>',
        (
            f'<rect x="{_svg_num(geometry.card_left)}" y="{_svg_num(geometry.card_top)}" '
            f'width="{_svg_num(geometry.card_w)}" height="{_svg_num(geometry.card_h)}" '
            f'rx="{_svg_num(geometry.border_radius)}" fill="{_svg_hex(context.card_color)}"/>'
        ),
    ]
    parts.extend(_drawable_markup(drawable, context) for drawable in model.drawables)
    if include_label:
        parts.append(_label_markup(model, context))
    parts.append("</svg>")
    return "\n".join(parts)


def _drawable_markup(drawable: Drawable, context: RenderContext) -> str:
    x = drawable.center_x
    y = drawable.center_y
    if drawable.kind is DotKind.PAST:
        arm = drawable.cross_arm
        stroke = (
            f'stroke="{_svg_hex(context.past_color)}" '
            f'stroke-width="{_svg_num(drawable.stroke_width)}" stroke-linecap="round"'
        )
        return (
            f'<line x1="{_svg_num(x - arm)}" y1="{_svg_num(y - arm)}" '
            f'x2="{_svg_num(x + arm)}" y2="{_svg_num(y + arm)}" {stroke}/>'
            f'<line x1="{_svg_num(x + arm)}" y1="{_svg_num(y - arm)}" '
            f'x2="{_svg_num(x - arm)}" y2="{_svg_num(y + arm)}" {stroke}/>'
        )

    radius = _svg_num(drawable.radius)
    if drawable.kind is DotKind.TODAY:
        return (
            f'<circle cx="{_svg_num(x)}" cy="{_svg_num(y)}" r="{radius}" '
            f'fill="{_svg_hex(context.today_color)}"/>'
        )
    return (
        f'<circle cx="{_svg_num(x)}" cy="{_svg_num(y)}" r="{radius}" '
        f'fill="{_svg_hex(context.future_color)}" '
        f'fill-opacity="{_svg_num(context.future_opacity)}"/>'
    )


def _label_markup(model: RenderModel, context: RenderContext) -> str:
    placement = model.label_placement
    label = model.label
    return (
        f'<text x="{_svg_num(placement.center_x)}" y="{_svg_num(placement.baseline)}" '
        f'text-anchor="middle" font-family="{context.font_family}" '
        f'font-size="{_svg_num(placement.font_size)}" fill="{_svg_hex(context.label_color)}">'
        f"<tspan>{label.days_text}</tspan>"
        f'<tspan fill="{_svg_hex(context.separator_color)}" '
        f'fill-opacity="{_svg_num(context.separator_opacity)}"> | </tspan>'
        f'<tspan fill="{_svg_hex(context.percent_color)}">{label.percent_text}</tspan>'
        "</text>"
    )
