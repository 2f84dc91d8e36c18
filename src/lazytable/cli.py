"""Command-line interface for lazytable."""

from __future__ import annotations

import csv
import logging
import shutil
import sys
from dataclasses import replace
from typing import TextIO

import click

from .config import load_style, style_from_environment
from .exceptions import LazyTableError
from .layout import LayoutEngine
from .models import Table, TableStyle

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="lazytable")
def cli() -> None:
    """lazytable: lazy tables with stupid wrapping."""
    pass


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_width(width: int | None, fit_terminal: bool) -> int | None:
    if width is not None:
        return width
    if fit_terminal:
        columns = shutil.get_terminal_size().columns
        logger.debug("Using terminal width %d", columns)
        return columns
    return None


def _read_records(source: TextIO, delimiter: str) -> list[list[str]]:
    return list(csv.reader(source, delimiter=delimiter))


def _build_table(
    records: list[list[str]],
    width: int | None,
    header: bool,
    style: TableStyle,
) -> Table:
    table = Table.with_width(width, style=style) if width is not None else Table.new()
    if header and records:
        table.set_title(records[0])
        records = records[1:]
    table.add_rows(records)
    return table


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--width",
    "-w",
    type=int,
    envvar="LAZYTABLE_WIDTH",
    help="Total table width in characters (default: size to content)",
)
@click.option(
    "--fit-terminal",
    is_flag=True,
    help="Wrap to the current terminal width (ignored when --width is set)",
)
@click.option(
    "--delimiter",
    "-d",
    default=",",
    show_default=True,
    help="Field delimiter of the input",
)
@click.option("--tsv", is_flag=True, help="Input is tab separated (same as -d '\\t')")
@click.option(
    "--header/--no-header",
    default=True,
    help="Use the first record as the title row (default: header)",
)
@click.option(
    "--style",
    "-s",
    "style_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with padding, separator, fill, junction and border",
)
@click.option("--border/--no-border", default=None, help="Draw outer borders")
@click.option("--padding", type=click.IntRange(min=0), help="Spaces around each cell")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def render(
    source: TextIO,
    width: int | None,
    fit_terminal: bool,
    delimiter: str,
    tsv: bool,
    header: bool,
    style_path: str | None,
    border: bool | None,
    padding: int | None,
    verbose: bool,
) -> None:
    """Render CSV input from SOURCE (default: stdin) as a wrapped table.

    Examples:

        lazytable render data.csv --width 40

        cat data.tsv | lazytable render --tsv --fit-terminal
    """
    _configure_logging(verbose)
    if not tsv and len(delimiter) != 1:
        raise click.BadParameter("must be a single character", param_hint="--delimiter")

    try:
        style = style_from_environment()
        if style_path:
            style = load_style(style_path, style)
        if border is not None:
            style = replace(style, border=border)
        if padding is not None:
            style = replace(style, padding=padding)

        records = _read_records(source, "\t" if tsv else delimiter)
        table = _build_table(records, _resolve_width(width, fit_terminal), header, style)
    except LazyTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except (UnicodeDecodeError, csv.Error) as e:
        click.echo(f"Error: cannot read input: {e}", err=True)
        sys.exit(1)

    logger.debug("Rendering %d rows", len(table.rows))
    for line in LayoutEngine(style).render(table):
        click.echo(line)


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
