"""Tests for output providers."""

import xml.etree.ElementTree as ET
from dataclasses import fields
from datetime import datetime
from io import BytesIO

import pytest
from PIL import Image

from year_dots.layout import build_render_model
from year_dots.output import (
    OutputFormatSpec,
    PngOutputProvider,
    SvgOutputProvider,
    WebPOutputProvider,
    media_type_for_output_format,
    output_path_for_format,
    provider_for_format,
    resolve_output_provider,
    supported_output_formats,
)
from year_dots.output._svg_encoder import encode_svg_document
from year_dots.output._svg_shared import _svg_hex, _svg_num
from year_dots.render.render_context import RenderContext
from year_dots.render.renderer import Renderer, effective_supersample
from year_dots.render_pipeline import encode_year_dots, encode_year_dots_format

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def model():
    """June 1st 2025: 151 days elapsed."""
    return build_render_model(datetime(2025, 6, 1), 390, 844)


def test_png_provider_encodes_model(model):
    """PngOutputProvider should encode the model to a canvas-sized PNG."""
    result = PngOutputProvider().encode(model)

    assert result.startswith(b"\x89PNG")
    image = Image.open(BytesIO(result))
    assert image.size == (390, 844)


def test_webp_provider_encodes_model(model):
    """WebPOutputProvider should encode the model to WebP format."""
    result = WebPOutputProvider().encode(model)

    # WebP files start with RIFF....WEBP
    assert result.startswith(b"RIFF")
    assert b"WEBP" in result


def test_png_pixels_follow_model(model):
    """Background, card and today dot land where the model says."""
    provider = PngOutputProvider(render_context=RenderContext.darkmode(supersample=1))
    image = Image.open(BytesIO(provider.encode(model))).convert("RGB")
    geometry = model.geometry

    assert image.getpixel((0, 0)) == (0, 0, 0)

    card_x = round(geometry.card_left + geometry.card_w / 2)
    card_y = round(geometry.card_top + geometry.padding / 2)
    assert image.getpixel((card_x, card_y)) == (0x11, 0x11, 0x11)

    today = model.drawables[151]
    r, g, b = image.getpixel((round(today.center_x), round(today.center_y)))
    assert r > 200 and 60 < g < 130 and b < 40


def test_supersampled_png_keeps_canvas_size(model):
    provider = PngOutputProvider(render_context=RenderContext.darkmode(supersample=3))

    image = Image.open(BytesIO(provider.encode(model)))

    assert image.size == (390, 844)


def test_svg_provider_encodes_model(model):
    """SVG output has one cross per past day and one circle per remaining day."""
    result = SvgOutputProvider().encode(model)
    root = ET.fromstring(result.decode("utf-8"))

    assert root.tag == f"{SVG_NS}svg"
    assert root.get("width") == "390"
    assert root.get("viewBox") == "0 0 390 844"
    assert len(root.findall(f"{SVG_NS}line")) == 151 * 2
    assert len(root.findall(f"{SVG_NS}circle")) == 365 - 151


def test_svg_provider_renders_label_inline(model):
    result = SvgOutputProvider().encode(model).decode("utf-8")
    root = ET.fromstring(result)

    text = root.find(f"{SVG_NS}text")
    assert text is not None
    spans = [span.text for span in text.findall(f"{SVG_NS}tspan")]
    assert spans == ["213 days", " | ", "41.4%"]


def test_svg_today_dot_uses_accent_color(model):
    result = SvgOutputProvider().encode(model).decode("utf-8")

    assert result.count('fill="#f55e00"') == 2  # today dot and percent text


def test_svg_provider_rejects_non_models():
    """SvgOutputProvider should reject payloads that are not render models."""
    with pytest.raises(TypeError, match="SVG output only supports render models"):
        SvgOutputProvider().encode(object())  # type: ignore[arg-type]


def test_svg_number_formatting():
    assert _svg_num(12.0) == "12"
    assert _svg_num(0.5) == ".5"
    assert _svg_num(-0.25) == "-.25"
    assert _svg_num(292.5) == "292.5"
    assert _svg_num(1 / 3) == ".3333"
    assert _svg_hex((0x11, 0x11, 0x11)) == "#111"
    assert _svg_hex((0xF5, 0x5E, 0x00)) == "#f55e00"


def test_provider_writes_to_path(model, tmp_path):
    output_path = tmp_path / "dots.svg"
    provider = resolve_output_provider(str(output_path))

    provider.write(provider.encode(model))

    assert output_path.read_bytes().startswith(b"<svg")


def test_write_without_path_raises(model):
    provider = PngOutputProvider()

    with pytest.raises(ValueError, match="Output path not set"):
        provider.write(b"data")


def test_resolve_png_provider():
    """resolve_output_provider should return PngOutputProvider for .png files."""
    assert isinstance(resolve_output_provider("output.png"), PngOutputProvider)


def test_resolve_webp_provider():
    assert isinstance(resolve_output_provider("output.webp"), WebPOutputProvider)


def test_resolve_svg_provider():
    assert isinstance(resolve_output_provider("output.svg"), SvgOutputProvider)


def test_resolve_unsupported_format():
    """resolve_output_provider should raise ValueError for unsupported formats."""
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider("output.gif")


def test_resolve_case_insensitive():
    """resolve_output_provider should handle uppercase extensions."""
    assert isinstance(resolve_output_provider("output.PNG"), PngOutputProvider)
    assert isinstance(resolve_output_provider("output.WEBP"), WebPOutputProvider)
    assert isinstance(resolve_output_provider("output.SVG"), SvgOutputProvider)


def test_format_registry():
    assert supported_output_formats() == ("png", "webp", "svg")
    assert media_type_for_output_format("SVG") == "image/svg+xml"
    assert media_type_for_output_format("png") == "image/png"
    assert output_path_for_format("webp", "dots") == "dots.webp"
    assert isinstance(provider_for_format("svg"), SvgOutputProvider)

    with pytest.raises(ValueError, match="Invalid format"):
        media_type_for_output_format("bmp")


def test_pipeline_encodes_by_path_and_format():
    """Both pipeline entry points produce the same SVG for the same inputs."""
    by_path = encode_year_dots("2025-06-01", 390, 844, "out.svg")
    by_format = encode_year_dots_format("2025-06-01", 390, 844, "svg")

    assert by_path == by_format
    assert b"213 days" in by_path


def test_svg_background_layer_without_label(model):
    """The label-free markup is the layer a raster surface composites text onto."""
    markup = encode_svg_document(model, RenderContext.darkmode(), include_label=False)
    root = ET.fromstring(markup)

    assert root.find(f"{SVG_NS}text") is None
    assert len(root.findall(f"{SVG_NS}circle")) == 365 - 151


def test_raster_label_changes_pixels_below_card(model):
    """Only the area under the card differs between labelled and bare renders."""
    context = RenderContext.darkmode(supersample=1)
    labelled = Renderer(model, context, include_label=True).render()
    bare = Renderer(model, context, include_label=False).render()

    top = int(model.geometry.card_top + model.geometry.card_h)
    assert labelled.crop((0, 0, 390, top)).tobytes() == bare.crop((0, 0, 390, top)).tobytes()
    assert labelled.crop((0, top, 390, 844)).tobytes() != bare.crop((0, top, 390, 844)).tobytes()


def test_format_spec_fields():
    """A format is fully described by its extension, media type and provider."""
    assert [field.name for field in fields(OutputFormatSpec)] == [
        "extension",
        "media_type",
        "provider_class",
    ]


@pytest.mark.parametrize(
    "width, height, requested, expected",
    [(390, 844, 2, 2), (390, 844, 4, 4), (2048, 2048, 2, 2), (2048, 2048, 3, 2),
     (3000, 3000, 2, 1), (100, 100, 0, 1)],
)
def test_effective_supersample_bounds_buffer_size(width, height, requested, expected):
    assert effective_supersample(width, height, requested) == expected


def test_renderer_drops_supersampling_for_large_canvas():
    model = build_render_model(datetime(2025, 6, 1), 2048, 2048)

    renderer = Renderer(model, RenderContext.darkmode(supersample=4))

    assert renderer.scale == 2
