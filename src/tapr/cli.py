"""CLI entry point for tapr. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from tapr.config import load_config
from tapr.errors import TaprError
from tapr.reader import read_lines, sniff_delimiter, splitter_for
from tapr.table import render_table
from tapr.terminal import get_terminal_width
from tapr.theme import PLAIN_THEME, AnsiTableTheme

logger = logging.getLogger(__name__)


@click.command()
@click.option("-c", "--csv", "force_csv", is_flag=True, help="Force treats input file as CSV")
@click.option("-t", "--tsv", "force_tsv", is_flag=True, help="Force treats input file as TSV")
@click.option("-n", "--line-number", is_flag=True, help="Prints line number")
@click.option("-H", "--header", is_flag=True, help="Prints first line as a header")
@click.option(
    "-s",
    "--line-sampling",
    type=click.IntRange(min=0),
    default=None,
    metavar="NUM",
    help="Sampling size of lines to determine width of each column. Specify 0 for +inf",
)
@click.option("-w", "--width", type=click.IntRange(min=1), default=None, help="Override terminal width")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
)
@click.argument("input", type=str)
def main(input, force_csv, force_tsv, line_number, header, line_sampling, width, no_color, log_level):
    """Table Pretty-print. Print TSV or CSV file.

    INPUT is a file path, or - to read from the standard input.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if force_csv and force_tsv:
        raise click.UsageError("options --csv and --tsv are mutually exclusive")

    config = load_config()
    line_number = line_number or config.line_number
    header = header or config.header
    line_sampling = config.line_sampling if line_sampling is None else line_sampling
    color = config.color and not no_color

    terminal_width = width or config.width or get_terminal_width()
    if terminal_width is None:
        click.echo("Error: fail to detect terminal width", err=True)
        sys.exit(1)

    try:
        lines = read_lines(input)
    except OSError as e:
        click.echo(f"Error: fail to open file: {input}: {e.strerror}", err=True)
        sys.exit(1)
    except TaprError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    delimiter = sniff_delimiter(lines, force_csv, force_tsv)
    logger.debug("read %d line(s), delimiter %r, width %d", len(lines), delimiter, terminal_width)

    try:
        for out in render_table(
            lines,
            terminal_width=terminal_width,
            split=splitter_for(delimiter),
            line_number=line_number,
            header=header,
            line_sampling=line_sampling,
            theme=AnsiTableTheme() if color else PLAIN_THEME,
        ):
            click.echo(out, color=color)
    except TaprError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
