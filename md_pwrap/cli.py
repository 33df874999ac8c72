"""
Reflows a Markdown paragraph to a column width.
Reads the paragraph from a file or stdin and writes the wrapped text to stdout.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import ConfigError, build_config
from .constants import BLANK_LINE_PATTERN
from .exceptions import WrapError
from .filesystem import get_max_file_size, read_paragraph, read_stream
from .wrapper import wrap_paragraph

__all__ = ["cli"]

STDIN_PATH = "-"


@click.command()
@click.version_option()
@click.option("-w", "--width", type=int, help="Width of wrapped lines")
@click.option("--first-line-width", type=int, help="Width of the first line (defaults to --width)")
@click.argument(
    "filepath",
    default=STDIN_PATH,
    type=click.Path(dir_okay=False, allow_dash=True),
)
def cli(
    filepath: str,
    width: int | None = None,
    first_line_width: int | None = None,
):
    """
    Entry point for wrapping a Markdown paragraph.

    Args:
        filepath: Path to the file holding the paragraph, or `-` for stdin.
        width: Override for the width of wrapped lines.
        first_line_width: Override for the width of the first line.

    Returns:
        None.

    Raises:
        click.BadParameter: If options or configuration values are invalid.
        click.ClickException: If the input cannot be read, is not UTF-8, or
            exceeds the size limit.

    Examples:
        md-pwrap paragraph.md --width 72
        printf 'aa bb cc' | md-pwrap -w 2
    """
    from_stdin = filepath == STDIN_PATH
    search_path = Path.cwd() if from_stdin else Path(filepath).expanduser().parent
    try:
        config = build_config(search_path, width=width, first_line_width=first_line_width)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        if from_stdin:
            text = read_stream(click.get_binary_stream("stdin"), max_file_size)
        else:
            text = read_paragraph(Path(filepath).expanduser(), max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    if BLANK_LINE_PATTERN.search(text.strip()):
        click.echo(
            "Warning: input contains a blank line; wrapping it as a single paragraph",
            err=True,
        )

    try:
        wrapped = wrap_paragraph(text, config.width, config.effective_first_line_width)
    except WrapError as error:
        raise click.ClickException(str(error)) from error

    click.echo(wrapped, nl=False)


if __name__ == "__main__":
    cli()
