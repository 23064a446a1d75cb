"""CLI interface for geo-svg."""

import json
import logging
import sys

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import load_style_defaults
from .document import to_svg
from .geojson import from_geojson
from .geometry import Geometry
from .style import Color, PointType, Style, supported_point_types
from .viewbox import ViewBox

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    input_path: str = typer.Argument(
        "-", help="GeoJSON file to render ('-' reads from stdin)"
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the SVG to this file instead of stdout",
    ),
    fragment: bool = typer.Option(
        False,
        "--fragment",
        help="Emit only the SVG fragment, without the <svg> root element",
    ),
    show_bounds: bool = typer.Option(
        False,
        "--bounds",
        help="Print the computed viewbox instead of the SVG",
    ),
    radius: float | None = typer.Option(None, "--radius", "-r", help="Point radius"),
    stroke_width: float | None = typer.Option(None, "--stroke-width", "-w", help="Stroke width"),
    fill: str | None = typer.Option(None, "--fill", help="Fill color (name or #hex)"),
    stroke: str | None = typer.Option(None, "--stroke", help="Stroke color (name or #hex)"),
    point_type: str | None = typer.Option(
        None,
        "--point-type",
        "-p",
        help=f"How points are drawn ({', '.join(supported_point_types())})",
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Label text"),
    element_id: str | None = typer.Option(None, "--id", help="Element id (enables text on paths)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Render a GeoJSON geometry as SVG.

    Style defaults come from GEO_SVG_* environment variables (or a .env
    file); command line options override them.

    Examples:
      # Render a file to an SVG document
      geo-svg shapes.geojson --fill "#336699" -o shapes.svg

      # Print only the fragment for a point read from stdin
      echo '{"type": "Point", "coordinates": [1, 2]}' | geo-svg --fragment
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console)],
        )

    try:
        geometry = _load_geometry(input_path)
        style = _build_style(
            radius=radius,
            stroke_width=stroke_width,
            fill=fill,
            stroke=stroke,
            point_type=point_type,
            text=text,
            element_id=element_id,
        )
        document = to_svg(geometry, style)

        if show_bounds:
            _print_bounds(document.viewbox())
            return

        markup = document.fragment() if fragment else str(document)
        if out:
            _write_output(markup, out)
        else:
            typer.echo(markup)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _load_geometry(input_path: str) -> Geometry:
    """Read and convert GeoJSON from a file or stdin."""
    try:
        if input_path == "-":
            data = json.load(sys.stdin)
        else:
            with open(input_path, "r") as f:
                data = json.load(f)
    except FileNotFoundError:
        raise CLIError(f"File '{input_path}' not found")
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON in '{input_path}': {e}")

    try:
        return from_geojson(data)
    except ValueError as e:
        raise CLIError(str(e))


def _build_style(
    *,
    radius: float | None,
    stroke_width: float | None,
    fill: str | None,
    stroke: str | None,
    point_type: str | None,
    text: str | None,
    element_id: str | None,
) -> Style:
    """Overlay command line options on the environment defaults."""
    try:
        style = load_style_defaults()
        if radius is not None:
            style = style.with_radius(radius)
        if stroke_width is not None:
            style = style.with_stroke_width(stroke_width)
        if fill:
            style = style.with_fill_color(Color.parse(fill))
        if stroke:
            style = style.with_stroke_color(Color.parse(stroke))
        if point_type:
            style = style.with_point_type(PointType.from_name(point_type))
    except ValueError as e:
        raise CLIError(str(e))

    if text is not None:
        style = style.with_text(text)
    if element_id is not None:
        style = style.with_id(element_id)
    return style


def _print_bounds(view_box: ViewBox) -> None:
    if view_box.is_empty:
        console.print("[yellow]Warning:[/yellow] Geometry is empty, no bounds to report")
        return
    table = Table(title="Viewbox")
    for column in ("min x", "min y", "max x", "max y", "width", "height"):
        table.add_column(column, justify="right")
    table.add_row(
        *(f"{value:g}" for value in (*view_box.as_tuple(), view_box.width, view_box.height))
    )
    console.print(table)


def _write_output(markup: str, file_path: str) -> None:
    """Save markup to a file."""
    try:
        with open(file_path, "w") as f:
            f.write(markup)
        console.print(f"[green]✓[/green] SVG saved to {file_path}")
    except IOError as e:
        raise CLIError(f"Failed to save file '{file_path}': {e}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
