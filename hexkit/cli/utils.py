"""CLI utility functions for hexkit."""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def read_input_bytes(text: str | None, file: Path | None) -> bytes:
    """Resolve command input from a text argument or a file.

    Exits with status 1 if neither or both are given, or the file cannot be read.

    :param text: Text argument, encoded as UTF-8
    :param file: Path to read raw bytes from
    :return: Input bytes
    """
    if (text is None) == (file is None):
        logger.error("Provide exactly one of TEXT or --file")
        sys.exit(1)

    if text is not None:
        return text.encode("utf-8")

    try:
        return file.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read {file}: {e}")
        sys.exit(1)
