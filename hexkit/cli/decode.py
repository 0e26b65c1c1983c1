"""Hex decode CLI command."""

import logging
import sys
from pathlib import Path

import rich_click as click

from ..utils import parse_hex_string

logger = logging.getLogger(__name__)


@click.command()
@click.argument("hex_text")
@click.option(
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Write decoded bytes to this file instead of stdout",
)
def decode(hex_text: str, output: Path | None) -> None:
    """Decode hexadecimal text back into raw bytes.

    Accepts raw hex ("48656c6c6f"), space-separated bytes ("48 65 6c")
    and 0x-prefixed bytes ("0x48 0x65"), in either case.

    Examples:

      hexkit decode 48656c6c6f

      hexkit decode "0x48 0x65 0x6C 0x6C 0x6F" --output hello.bin
    """
    data = parse_hex_string(hex_text)
    if isinstance(data, dict):
        logger.error(f"Invalid hex input: {data['error']}")
        sys.exit(1)

    if output is None:
        stdout = click.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()
        return

    try:
        output.write_bytes(data)
    except OSError as e:
        logger.error(f"Failed to write {output}: {e}")
        sys.exit(1)
    logger.info(f"Wrote {len(data)} bytes to {output}")
