"""Helpers that read whole byte streams into text."""

import codecs
import locale
import logging
from importlib import resources
from typing import BinaryIO

logger = logging.getLogger(__name__)


def _resolve_encoding(encoding: str | None) -> str:
    """Return ``encoding`` if Python knows it, else the platform default."""
    if encoding:
        try:
            return codecs.lookup(encoding).name
        except LookupError:
            logger.debug(f"Unsupported encoding '{encoding}', using platform default")
    return locale.getpreferredencoding(False)


def stream_to_string(stream: BinaryIO | None, encoding: str | None = None) -> str | None:
    """Read a byte stream fully and return it as text.

    Read failures are not raised; they produce None.

    :param stream: Binary stream to read, or None
    :param encoding: Text encoding name; unsupported or missing names fall back to the platform default
    :return: Decoded text, or None if ``stream`` is None or the read fails
    """
    if stream is None:
        return None

    try:
        data = stream.read()
    except OSError:
        logger.debug("Failed to read stream", exc_info=True)
        return None

    return data.decode(_resolve_encoding(encoding), errors="replace")


def resource_to_string(
    resource_name: str, encoding: str | None = None, package: str = "hexkit"
) -> str | None:
    """Read a package resource and return it as text.

    :param resource_name: Resource path relative to ``package``
    :param encoding: Text encoding name (see :func:`stream_to_string`)
    :param package: Anchor package the resource belongs to
    :return: Decoded text, or None if the package or resource is missing or unreadable
    """
    try:
        stream = resources.files(package).joinpath(resource_name).open("rb")
    except (ModuleNotFoundError, OSError):
        logger.debug(f"Resource '{resource_name}' not found in {package}", exc_info=True)
        return None

    with stream:
        return stream_to_string(stream, encoding)
