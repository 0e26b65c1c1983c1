"""Hex string conversion and validation utilities."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

HEX_TABLE = "0123456789abcdef"

# Case-insensitive lookup, ASCII hex digits only
_NIBBLE_VALUES = {char: value for value, char in enumerate(HEX_TABLE)}
_NIBBLE_VALUES.update({char.upper(): value for char, value in _NIBBLE_VALUES.items()})


def _check_window(size: int, offset: int, length: int) -> None:
    if offset < 0 or length < 0:
        raise ValueError(f"Offset and length must be non-negative, got {offset} and {length}")
    if offset + length > size:
        raise ValueError(f"Window {offset}+{length} exceeds input of length {size}")


def hex_encode(data: bytes | None, offset: int = 0, length: int | None = None) -> str | None:
    """Encode a byte buffer as lowercase hex, high nibble first.

    The byte at ``data[offset]`` becomes the first two characters of the result.

    :param data: Bytes to encode, or None
    :param offset: Index of the first byte to encode
    :param length: Number of bytes to encode (default: to the end of ``data``)
    :return: Hex string of exactly ``2 * length`` characters, None if ``data`` is None
    :raises ValueError: If the offset/length window does not fit inside ``data``
    """
    if data is None:
        return None
    if length is None:
        length = len(data) - offset
    _check_window(len(data), offset, length)

    chars = []
    for value in data[offset : offset + length]:
        chars.append(HEX_TABLE[(value >> 4) & 0x0F])
        chars.append(HEX_TABLE[value & 0x0F])
    return "".join(chars)


def hex_decode(text: str | None, offset: int = 0, length: int | None = None) -> bytes | None:
    """Decode hex text produced by :func:`hex_encode` back into bytes.

    Digits are accepted in either case. Nothing is returned for malformed input:
    an odd character count or any character outside ``[0-9a-fA-F]`` yields None,
    never a partial buffer.

    :param text: Hex text to decode, or None
    :param offset: Index of the first character to decode
    :param length: Number of characters to decode (default: to the end of ``text``)
    :return: Decoded bytes of length ``length // 2``, or None if malformed
    :raises ValueError: If the offset/length window does not fit inside ``text``
    """
    if text is None:
        return None
    if length is None:
        length = len(text) - offset
    _check_window(len(text), offset, length)

    if length % 2 != 0:
        logger.debug(f"Rejecting hex input of odd length {length}")
        return None

    decoded = bytearray(length // 2)
    for index in range(offset, offset + length, 2):
        high_nibble = _NIBBLE_VALUES.get(text[index])
        low_nibble = _NIBBLE_VALUES.get(text[index + 1])
        if high_nibble is None or low_nibble is None:
            logger.debug(f"Rejecting hex input with invalid digit near index {index}")
            return None
        decoded[(index - offset) // 2] = (high_nibble << 4) | low_nibble

    return bytes(decoded)


def ascii_bytes(text: str) -> bytes:
    """Get 7-bit ASCII bytes from a string.

    The lower 7 bits of each character are taken as its ASCII value; higher bits
    are dropped, so ``"é"`` (U+00E9) becomes ``b"i"``.

    :param text: Input string
    :return: One byte per character
    """
    return bytes(ord(char) & 0x7F for char in text)


def parse_hex_string(hex_str: str) -> bytes | dict[str, Any]:
    """Parse a human-entered hex string into bytes, handling various formats.

    Accepts formats:
    - "01 02 03 04" (space-separated)
    - "0x01020304" (0x prefix)
    - "01020304" (raw hex)
    - "0x01 0x02" (mixed)

    :param hex_str: Hex string to parse
    :return: Bytes if successful, error dict if invalid
    """
    if not hex_str:
        return {"error": "Empty hex string provided"}

    # Remove common prefixes and whitespace
    cleaned = "".join(hex_str.replace("0x", "").replace("0X", "").split())

    if not cleaned:
        return {"error": "Hex string contains only whitespace"}

    if not all(c in _NIBBLE_VALUES for c in cleaned):
        return {"error": f"Invalid hex characters in: {hex_str}"}

    if len(cleaned) % 2 != 0:
        return {"error": f"Hex string must have even length, got: {len(cleaned)}"}

    decoded = hex_decode(cleaned)
    if decoded is None:
        return {"error": f"Failed to parse hex string '{hex_str}'"}
    return decoded


def format_hex_string(
    data: bytes, separator: str = " ", prefix: str = "", upper: bool = False
) -> str:
    """Format bytes as a hex string with optional separator and prefix.

    :param data: Bytes to format
    :param separator: Separator between bytes (default: space)
    :param prefix: Prefix for each byte (e.g., "0x")
    :param upper: Render digits in uppercase
    :return: Formatted hex string
    """
    if not data:
        return ""

    digits = hex_encode(data)
    if upper:
        digits = digits.upper()

    hex_bytes = [f"{prefix}{digits[i : i + 2]}" for i in range(0, len(digits), 2)]
    return separator.join(hex_bytes)
