"""Unit tests for the stream and resource readers."""

import io

from hexkit.utils import io_utils, resource_to_string, stream_to_string


class FailingStream(io.RawIOBase):
    """Binary stream whose reads always fail."""

    def readable(self) -> bool:
        return True

    def read(self, size=-1):
        raise OSError("device unplugged")


def test_stream_to_string_with_encoding():
    """The named encoding is used to decode the stream."""
    assert stream_to_string(io.BytesIO("héllo".encode("utf-8")), "utf-8") == "héllo"
    assert stream_to_string(io.BytesIO(b"\xe9t\xe9"), "latin-1") == "été"


def test_stream_to_string_falls_back_to_platform_default(monkeypatch):
    """Unknown or missing encodings use the platform default."""
    monkeypatch.setattr(io_utils.locale, "getpreferredencoding", lambda do_setlocale=True: "latin-1")

    assert stream_to_string(io.BytesIO(b"\xe9"), "no-such-encoding") == "é"
    assert stream_to_string(io.BytesIO(b"\xe9")) == "é"


def test_stream_to_string_read_failure():
    """A failing read gives None instead of raising."""
    assert stream_to_string(FailingStream(), "utf-8") is None


def test_stream_to_string_none():
    """A missing stream gives None."""
    assert stream_to_string(None, "utf-8") is None


def test_resource_to_string():
    """Package resources are read and decoded."""
    text = resource_to_string("__init__.py", "utf-8", package="hexkit.utils")

    assert text is not None
    assert '"""Utility modules."""' in text


def test_resource_to_string_missing():
    """A missing resource gives None."""
    assert resource_to_string("no_such_resource.txt", "utf-8") is None


def test_resource_to_string_missing_package():
    """An anchor package that does not exist gives None."""
    assert resource_to_string("__init__.py", "utf-8", package="hexkit.no_such_package") is None
