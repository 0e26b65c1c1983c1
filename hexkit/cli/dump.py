"""Hex dump CLI command."""

from pathlib import Path

import rich_click as click

from ..utils import hex_dump
from .utils import read_input_bytes


@click.command()
@click.argument("text", required=False)
@click.option(
    "--file",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Dump the raw bytes of this file instead of TEXT",
)
def dump(text: str | None, file: Path | None) -> None:
    """Print a hex dump of text (as UTF-8) or file contents.

    Examples:

      hexkit dump "Hello, world!"

      hexkit dump --file signature.bin
    """
    click.echo(hex_dump(read_input_bytes(text, file)), nl=False)
