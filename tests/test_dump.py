"""Unit tests for the hex dump formatter."""

from hexkit.utils import hex_dump


def test_dump_two_bytes():
    """A short buffer renders as one line after the header."""
    assert hex_dump(bytes([0x41, 0x42])) == "Hex dump:\n00000000: 4142  AB\n"


def test_dump_empty_buffer():
    """An empty buffer yields only the header."""
    assert hex_dump(b"") == "Hex dump:\n"


def test_dump_full_and_partial_window(sample_bytes):
    """Sixteen bytes per line, with a shorter final line."""
    lines = hex_dump(sample_bytes).splitlines()

    assert lines == [
        "Hex dump:",
        "00000000: 0001 0203 0405 0607 0809 0a0b 0c0d 0e0f  ................",
        "00000010: 10  .",
    ]


def test_dump_odd_window_length():
    """An odd byte count leaves the last group with a single byte."""
    assert hex_dump(b"abc") == "Hex dump:\n00000000: 6162 63  abc\n"


def test_dump_ascii_column():
    """Only ASCII letters and digits are shown as themselves."""
    dump = hex_dump(b"Hello, world!\x00")
    assert dump.endswith("00000000: 4865 6c6c 6f2c 2077 6f72 6c64 2100  Hello..world..\n")

    # Latin-1 letters are not ASCII and render as dots
    assert hex_dump(b"\xe9\xaa7").endswith("  ..7\n")


def test_dump_offsets_are_padded():
    """Offsets are eight lowercase hex digits."""
    lines = hex_dump(bytes(16 * 11)).splitlines()[1:]

    assert len(lines) == 11
    assert lines[10].startswith("000000a0:")
    assert all(line.endswith("\n") for line in hex_dump(bytes(40)).splitlines(keepends=True))
