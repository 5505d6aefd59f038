"""Terminal preview of the year-progress grid."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .constants import GAP_COLUMN, GRID_COLUMNS
from .layout import DotKind, RenderModel

_GLYPHS: dict[DotKind, tuple[str, str]] = {
    DotKind.PAST: ("×", "grey70"),
    DotKind.TODAY: ("●", "bold dark_orange"),
    DotKind.FUTURE: ("·", "grey35"),
}


class YearProgressConsolePrinter:
    """Prints year progress stats and grid to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, model: RenderModel) -> None:
        temporal = model.temporal
        table = Table(title=f"Year {temporal.year}", show_header=False)
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")
        table.add_row("Reference", temporal.reference.isoformat(sep=" "))
        table.add_row("Days in year", str(temporal.total_days))
        table.add_row("Days elapsed", str(temporal.elapsed_days))
        table.add_row("Days left", str(model.label.days_left))
        table.add_row("Elapsed", model.label.percent_text)
        self.console.print(table)

    def display_grid(self, model: RenderModel) -> None:
        """Print one line per grid row, leaving the gap column and placeholders blank."""
        rows = [[" "] * GRID_COLUMNS for _ in range(model.layout.rows)]
        styles = [[""] * GRID_COLUMNS for _ in range(model.layout.rows)]
        for drawable in model.drawables:
            glyph, style = _GLYPHS[drawable.kind]
            rows[drawable.row][drawable.col] = glyph
            styles[drawable.row][drawable.col] = style

        self.console.print()
        for glyphs, row_styles in zip(rows, styles):
            line = Text()
            for col, (glyph, style) in enumerate(zip(glyphs, row_styles)):
                line.append(glyph, style=style or None)
                if col != GRID_COLUMNS - 1 and col != GAP_COLUMN - 1:
                    line.append(" ")
            self.console.print(line)
        self.console.print()
        self.console.print(
            Text.assemble(
                (model.label.days_text, "white"),
                (" | ", "grey23"),
                (model.label.percent_text, "dark_orange"),
            )
        )
