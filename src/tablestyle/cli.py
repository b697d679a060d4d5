"""Command-line interface for previewing table border styles."""

import logging
import sys

import click

from .borders import BorderGlyphSet, Glyph, RowKind, border_names
from .exceptions import ConfigurationError
from .style import TableStyle


def _glyph(glyph: Glyph) -> str:
    return glyph or ""


def render_rule(style: TableStyle, kind: RowKind, widths: list[int]) -> str:
    """Draw one horizontal rule for columns of the given inner widths."""
    left, bar, cross, right, _down, _up = style.horizontal(kind)
    pad = style.padding_left + style.padding_right
    segments = [_glyph(bar) * (width + pad) for width in widths]
    return style.margin_left + _glyph(left) + _glyph(cross).join(segments) + _glyph(right)


def render_row(style: TableStyle, cells: list[str]) -> str:
    """Draw one content row from already-sized cell text."""
    left, center, right = style.vertical()
    padded = [" " * style.padding_left + cell + " " * style.padding_right for cell in cells]
    return style.margin_left + _glyph(left) + _glyph(center).join(padded) + _glyph(right)


def render_skeleton(style: TableStyle, columns: int, cell_width: int, rows: int) -> list[str]:
    """
    Draw an empty table with a heading row using the style's glyphs.

    Heading labels are truncated to the cell width; body cells are blank.
    """
    widths = [cell_width] * columns
    heading = [f"c{i + 1}"[:cell_width].ljust(cell_width) for i in range(columns)]
    blank = [" " * cell_width] * columns

    lines: list[str] = []
    if style.border_top:
        lines.append(render_rule(style, RowKind.TOP, widths))
    lines.append(render_row(style, heading))
    lines.append(render_rule(style, RowKind.BELOW_HEADING, widths))
    for index in range(rows):
        if index and style.all_separators:
            lines.append(render_rule(style, RowKind.CENTER, widths))
        lines.append(render_row(style, blank))
    if style.border_bottom:
        lines.append(render_rule(style, RowKind.BOTTOM, widths))
    return lines


@click.group()
@click.version_option(package_name="tablestyle")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """tablestyle border preview CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command("borders")
def list_borders() -> None:
    """List registered border variants."""
    for name in border_names():
        left, bar, cross, right, _down, _up = BorderGlyphSet.from_name(name).horizontal("top")
        sample = _glyph(left) + _glyph(bar) * 3 + _glyph(cross) + _glyph(bar) * 3 + _glyph(right)
        click.echo(f"{name:<20} {sample}")


@cli.command()
@click.option(
    "--border",
    default="ascii",
    help="Border variant name (see 'tablestyle borders')",
)
@click.option(
    "--columns",
    type=click.IntRange(1, 20),
    default=3,
    help="Number of columns (1-20, default: 3)",
)
@click.option(
    "--cell-width",
    type=click.IntRange(1, 40),
    default=6,
    help="Inner width of each cell (1-40, default: 6)",
)
@click.option(
    "--rows",
    type=click.IntRange(0, 50),
    default=2,
    help="Number of body rows (default: 2)",
)
@click.option("--padding", type=int, default=1, help="Left and right cell padding")
@click.option("--margin", default="", help="Text printed before every line")
@click.option("--no-verticals", is_flag=True, help="Drop vertical and intersection glyphs")
@click.option("--no-horizontals", is_flag=True, help="Drop horizontal bar glyphs")
@click.option("--all-separators", is_flag=True, help="Draw a rule between every body row")
@click.option("--top/--no-top", default=True, help="Draw the top rule")
@click.option("--bottom/--no-bottom", default=True, help="Draw the bottom rule")
def preview(
    border: str,
    columns: int,
    cell_width: int,
    rows: int,
    padding: int,
    margin: str,
    no_verticals: bool,
    no_horizontals: bool,
    all_separators: bool,
    top: bool,
    bottom: bool,
) -> None:
    """Print an empty table drawn with a border style."""
    try:
        style = TableStyle(
            border=border,
            padding_left=padding,
            padding_right=padding,
            margin_left=margin,
            all_separators=all_separators,
            border_top=top,
            border_bottom=bottom,
        )
    except ConfigurationError as e:
        click.echo(f"✗ Invalid style: {e}", err=True)
        sys.exit(1)

    if no_verticals:
        style.remove_verticals()
    if no_horizontals:
        style.remove_horizontals()

    for line in render_skeleton(style, columns, cell_width, rows):
        click.echo(line)


if __name__ == "__main__":
    cli()
