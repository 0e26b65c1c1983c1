"""Normalize text CLI command."""

import rich_click as click

from ..utils import normalize as normalize_text
from ..utils import truncate


@click.command()
@click.argument("text")
@click.option(
    "--max-length",
    type=click.IntRange(min=0),
    help="Truncate the normalized text to this many characters",
)
def normalize(text: str, max_length: int | None) -> None:
    """Collapse line breaks and blank runs into single spaces and trim.

    Examples:

      hexkit normalize $'first line\\n\\tsecond   line'

      hexkit normalize --max-length 10 "some long   text"
    """
    result = normalize_text(text)
    if max_length is not None:
        result = truncate(result, max_length)
    click.echo(result)
