"""FastAPI web app serving the year-progress visualization."""

import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.requests import Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from year_dots.config import Settings, load_settings
from year_dots.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from year_dots.layout import DotKind, RenderModel, build_render_model
from year_dots.output import media_type_for_output_format, output_path_for_format
from year_dots.render.render_context import RenderContext
from year_dots.render_pipeline import encode_render_model

load_dotenv()

logger = logging.getLogger(__name__)

app = FastAPI(title="Year Dots")

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


def get_settings() -> Settings:
    return load_settings()


def build_model(
    date: str | None,
    width: int,
    height: int,
    settings: Settings,
) -> RenderModel:
    """Build the render model for request parameters; explicit invalid values are rejected."""
    if width > settings.max_canvas_size or height > settings.max_canvas_size:
        raise ValueError(
            f"Canvas {width}x{height} exceeds the maximum of {settings.max_canvas_size} pixels"
        )
    reference = date if date is not None else datetime.now()
    return build_render_model(reference, width, height)


def generate_output(model: RenderModel, output_format: str, settings: Settings) -> bytes:
    """Encode a render model in the requested format."""
    context = RenderContext.darkmode(supersample=settings.supersample)
    output_path = output_path_for_format(output_format)
    return encode_render_model(model, output_path, render_context=context)


def image_response(
    date: str | None,
    width: int,
    height: int,
    output_format: str,
) -> Response:
    settings = get_settings()
    try:
        media_type = media_type_for_output_format(output_format)
        model = build_model(date, width, height, settings)
        encoded = generate_output(model, output_format, settings)
    except ValueError as e:
        logger.info("Rejected image request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Image generation failed")
        raise HTTPException(status_code=500, detail=f"Failed to generate image: {e}")

    return Response(
        content=encoded,
        media_type=media_type,
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
    )


@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    date: str | None = Query(None, description="Reference date (ISO 8601)"),
    width: int = Query(DEFAULT_WIDTH, description="Canvas width in pixels"),
    height: int = Query(DEFAULT_HEIGHT, description="Canvas height in pixels"),
):
    """Serve the interactive page, drawing the model's drawables as inline shapes."""
    try:
        model = build_model(date, width, height, get_settings())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "model": model,
            "context": RenderContext.darkmode(),
            "DotKind": DotKind,
            "date": date or "",
        },
    )


# Plain def so Pillow rendering runs in the threadpool, off the event loop
@app.get("/api/daily-dots")
def daily_dots(
    width: int = Query(DEFAULT_WIDTH, description="Image width in pixels"),
    height: int = Query(DEFAULT_HEIGHT, description="Image height in pixels"),
    date: str | None = Query(None, description="Reference date (ISO 8601), defaults to now"),
):
    """Generate the year-progress PNG."""
    return image_response(date, width, height, "png")


@app.get("/api/daily-dots-svg")
def daily_dots_svg(
    width: int = Query(DEFAULT_WIDTH, description="Image width in pixels"),
    height: int = Query(DEFAULT_HEIGHT, description="Image height in pixels"),
    date: str | None = Query(None, description="Reference date (ISO 8601), defaults to now"),
    output_format: str = Query(
        "png", alias="format", description="Output format: png, webp, or svg"
    ),
):
    """Generate the year-progress image in a configurable format."""
    return image_response(date, width, height, output_format)


@app.get("/api/render-model")
async def render_model(
    width: int = Query(DEFAULT_WIDTH, description="Canvas width in pixels"),
    height: int = Query(DEFAULT_HEIGHT, description="Canvas height in pixels"),
    date: str | None = Query(None, description="Reference date (ISO 8601), defaults to now"),
):
    """Return the render model as JSON for client-side drawing."""
    try:
        model = build_model(date, width, height, get_settings())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return serialize_model(model)


def serialize_model(model: RenderModel) -> dict:
    temporal = model.temporal
    return {
        "reference": temporal.reference.isoformat(),
        "total_days": temporal.total_days,
        "elapsed_days": temporal.elapsed_days,
        "weekday_offset": temporal.weekday_offset,
        "geometry": asdict(model.geometry),
        "drawables": [
            {**asdict(drawable), "kind": drawable.kind.value} for drawable in model.drawables
        ],
        "label": {
            "days_left": model.label.days_left,
            "percent_elapsed": model.label.percent_elapsed,
            "text": model.label.text,
        },
        "label_placement": asdict(model.label_placement),
    }
