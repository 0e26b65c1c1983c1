#!/usr/bin/env python3
"""hexkit - hex codec, hex dump and string normalization tools."""

import logging

import rich_click as click

from hexkit import cli as cli_commands
from hexkit.logging import configure_logging

# Configure rich-click for better CLI UX
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "yellow italic"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    envvar="HEXKIT_LOG_LEVEL",
    show_default=True,
    help="Logging level (also read from HEXKIT_LOG_LEVEL)",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Forward log records to the Zelos trace backend",
)
def cli(log_level: str, trace: bool) -> None:
    """Hex encoding, decoding and dumping of byte buffers.

    Available subcommands:

    - **encode** - Encode text or file bytes as hex
    - **decode** - Decode hex text back into bytes
    - **dump** - Print a 16-bytes-per-line hex dump
    - **normalize** - Collapse whitespace into single spaces

    Examples:

        # Encode a string

        $ hexkit encode "Hello"

        # Decode hex bytes into a file

        $ hexkit decode "48 65 6c 6c 6f" --output hello.bin

        # Dump a binary file

        $ hexkit dump --file signature.bin
    """
    configure_logging(getattr(logging, log_level.upper()), trace=trace)


# Register subcommands
cli.add_command(cli_commands.encode)
cli.add_command(cli_commands.decode)
cli.add_command(cli_commands.dump)
cli.add_command(cli_commands.normalize)


if __name__ == "__main__":
    cli()
