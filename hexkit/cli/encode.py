"""Hex encode CLI command."""

import logging
from pathlib import Path

import rich_click as click

from ..utils import format_hex_string, hex_encode
from .utils import read_input_bytes

logger = logging.getLogger(__name__)


@click.command()
@click.argument("text", required=False)
@click.option(
    "--file",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Encode the raw bytes of this file instead of TEXT",
)
@click.option(
    "--separator",
    default=None,
    help="Separator between bytes (e.g., ' ' or ':'). Default: none",
)
@click.option(
    "--prefix",
    default="",
    help="Prefix for each byte (e.g., 0x)",
)
@click.option(
    "--upper",
    is_flag=True,
    help="Use uppercase hex digits",
)
def encode(
    text: str | None,
    file: Path | None,
    separator: str | None,
    prefix: str,
    upper: bool,
) -> None:
    """Encode text (as UTF-8) or file contents as hexadecimal.

    Examples:

      # Plain lowercase hex

      hexkit encode "Hello"

      # Space-separated uppercase bytes with 0x prefix

      hexkit encode --separator " " --prefix 0x --upper "Hello"
    """
    data = read_input_bytes(text, file)
    logger.debug(f"Encoding {len(data)} bytes")

    if separator is None and not prefix and not upper:
        click.echo(hex_encode(data))
    else:
        click.echo(format_hex_string(data, separator=separator or "", prefix=prefix, upper=upper))
