"""Hex codec, hex dump and locale-stable string helpers.

Low-level text/byte conversion primitives for document-signing tools.
"""

from hexkit.utils import (
    CaseLocale,
    ascii_bytes,
    empty_to_null,
    equals_ignore_case_fixed_locale,
    format_for_print,
    hex_decode,
    hex_dump,
    hex_encode,
    insert_substring,
    is_empty,
    normalize,
    resource_to_string,
    split,
    stream_to_string,
    to_lower_fixed_locale,
    to_string_list,
    to_upper_fixed_locale,
    trim_trailing,
    truncate,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "hex_encode",
    "hex_decode",
    "hex_dump",
    "ascii_bytes",
    "stream_to_string",
    "resource_to_string",
    "CaseLocale",
    "format_for_print",
    "to_string_list",
    "trim_trailing",
    "truncate",
    "to_upper_fixed_locale",
    "to_lower_fixed_locale",
    "equals_ignore_case_fixed_locale",
    "insert_substring",
    "normalize",
    "split",
    "empty_to_null",
    "is_empty",
]


def __getattr__(name: str):
    """Lazy import the CLI package so library users do not pull in rich-click."""
    if name == "cli":
        import importlib

        return importlib.import_module("hexkit.cli")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
