"""CLI interface for year-dots."""

import logging
import sys
from datetime import datetime
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .config import Settings, load_settings
from .console_printer import YearProgressConsolePrinter
from .constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from .errors import YearDotsError
from .layout import RenderModel, build_render_model
from .output import PngDataUrlOutputProvider, resolve_output_provider, supported_output_formats
from .output.base import OutputProvider
from .render.render_context import RenderContext
from .render_pipeline import encode_render_model

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    date: str = typer.Option(
        None,
        "--date",
        "-d",
        help="Reference date in ISO 8601 format (defaults to now)",
    ),
    width: int = typer.Option(DEFAULT_WIDTH, "--width", "-w", help="Canvas width in pixels"),
    height: int = typer.Option(DEFAULT_HEIGHT, "--height", "-H", help="Canvas height in pixels"),
    out: str = typer.Option(
        None,
        "--output",
        "-out",
        "-o",
        help=f"Write the image to this file ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    write_dataurl_to: str = typer.Option(
        None,
        "--write-dataurl-to",
        help="Generate PNG as data URL and write it as an img tag to a text file",
    ),
    preview: bool = typer.Option(
        True,
        "--preview/--no-preview",
        help="Print stats and the dot grid to the terminal",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Render the year progress dot grid.

    Examples:
      # Preview today in the terminal
      year-dots

      # Render a wallpaper for a given day
      year-dots --date 2025-06-01 --output wallpaper.png
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    try:
        # Validate mutual exclusivity of output options
        if out and write_dataurl_to:
            raise CLIError(
                "Cannot specify both --output and --write-dataurl-to. Choose one."
            )

        settings = _load_settings()
        _validate_canvas_limit(width, height, settings)
        model = _build_model(date, width, height)

        if preview:
            printer = YearProgressConsolePrinter(console)
            printer.display_stats(model)
            printer.display_grid(model)

        if write_dataurl_to or out:
            context = RenderContext.darkmode(supersample=settings.supersample)
            if write_dataurl_to:
                provider = PngDataUrlOutputProvider(write_dataurl_to, context)
            else:
                provider = _resolve_provider(out, context)
            _generate_output(model, provider)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _load_settings() -> Settings:
    try:
        return load_settings()
    except ValueError as e:
        raise CLIError(f"Invalid configuration: {e}")


def _validate_canvas_limit(width: int, height: int, settings: Settings) -> None:
    if width > settings.max_canvas_size or height > settings.max_canvas_size:
        raise CLIError(
            f"Canvas {width}x{height} exceeds the maximum of {settings.max_canvas_size} pixels"
        )


def _build_model(date: str | None, width: int, height: int) -> RenderModel:
    """Build the render model, reading the clock only when no date is given."""
    reference = date if date is not None else datetime.now()
    try:
        return build_render_model(reference, width, height)
    except YearDotsError as e:
        raise CLIError(str(e))


def _resolve_provider(output_path: str, context: RenderContext) -> OutputProvider:
    try:
        return resolve_output_provider(output_path, context)
    except ValueError as e:
        raise CLIError(str(e))


def _generate_output(model: RenderModel, provider: OutputProvider) -> None:
    """Encode the model and write it through the provider."""
    if isinstance(provider, PngDataUrlOutputProvider):
        console.print("\n[bold blue]Generating PNG data URL...[/bold blue]")
    else:
        ext = Path(provider.path).suffix[1:].upper()
        console.print(f"\n[bold blue]Generating {ext} image...[/bold blue]")

    try:
        encoded = encode_render_model(model, provider.path, provider)
        provider.write(encoded)
    except (OSError, ValueError) as e:
        raise CLIError(f"Failed to generate output: {e}")

    if isinstance(provider, PngDataUrlOutputProvider):
        console.print(f"[green]✓[/green] Data URL written to {provider.path}")
    else:
        ext = Path(provider.path).suffix[1:].upper()
        console.print(f"[green]✓[/green] {ext} saved to {provider.path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
