"""Human-readable hex dumps for debugging."""

from .hex_utils import HEX_TABLE

DUMP_WIDTH = 16
DUMP_HEADER = "Hex dump:\n"


def _render_char(value: int) -> str:
    char = chr(value)
    # Only ASCII letters and digits are shown; everything else is "."
    if value < 0x80 and char.isalnum():
        return char
    return "."


def hex_dump(data: bytes) -> str:
    """Convert a byte buffer to a human-readable hex dump.

    Each line covers a 16-byte window: an 8-digit hex offset, the bytes in hex
    grouped two bytes at a time, then an ASCII column::

        Hex dump:
        00000000: 4865 6c6c 6f2c 2077 6f72 6c64 2100  Hello..world..

    Never fails; an empty buffer yields only the header.

    :param data: Bytes to dump
    :return: Multi-line dump, each line newline-terminated
    """
    parts = [DUMP_HEADER]

    for start in range(0, len(data), DUMP_WIDTH):
        window = data[start : start + DUMP_WIDTH]

        parts.append(f"{start:08x}:")
        for position, value in enumerate(window):
            if position % 2 == 0:
                parts.append(" ")
            parts.append(HEX_TABLE[(value >> 4) & 0x0F])
            parts.append(HEX_TABLE[value & 0x0F])

        parts.append("  ")
        parts.extend(_render_char(value) for value in window)
        parts.append("\n")

    return "".join(parts)
