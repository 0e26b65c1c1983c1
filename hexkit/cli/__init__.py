"""CLI commands for hexkit."""

from .decode import decode
from .dump import dump
from .encode import encode
from .normalize import normalize

__all__ = [
    "encode",
    "decode",
    "dump",
    "normalize",
]
