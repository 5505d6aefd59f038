"""Shared render orchestration used by CLI and web app entry points."""

import logging

from .layout import RenderModel, build_render_model
from .layout.temporal import ReferenceDate
from .output import provider_for_format, resolve_output_provider
from .output.base import OutputProvider
from .render.render_context import RenderContext

logger = logging.getLogger(__name__)


def encode_render_model(
    model: RenderModel,
    output_path: str,
    provider: OutputProvider | None = None,
    render_context: RenderContext | None = None,
) -> bytes:
    """Encode an already built model for the given output path or provider."""
    target_provider = provider or resolve_output_provider(output_path, render_context)
    encoded = target_provider.encode(model)
    logger.debug(
        "Encoded %s with %s (%d bytes)",
        output_path or "<memory>",
        type(target_provider).__name__,
        len(encoded),
    )
    return encoded


def encode_year_dots(
    now: ReferenceDate,
    width: float,
    height: float,
    output_path: str,
    *,
    provider: OutputProvider | None = None,
    render_context: RenderContext | None = None,
) -> bytes:
    """Build the render model for ``now`` and encode it for the given output path."""
    model = build_render_model(now, width, height)
    return encode_render_model(model, output_path, provider, render_context)


def encode_year_dots_format(
    now: ReferenceDate,
    width: float,
    height: float,
    output_format: str,
    *,
    render_context: RenderContext | None = None,
) -> bytes:
    """Build and encode in a named format (``png``, ``webp`` or ``svg``)."""
    provider = provider_for_format(output_format, render_context)
    return encode_year_dots(now, width, height, "", provider=provider)
