"""Utility modules."""

from .dump import hex_dump
from .hex_utils import (
    ascii_bytes,
    format_hex_string,
    hex_decode,
    hex_encode,
    parse_hex_string,
)
from .io_utils import resource_to_string, stream_to_string
from .string_utils import (
    CaseLocale,
    empty_to_null,
    equals_ignore_case_fixed_locale,
    format_for_print,
    insert_substring,
    is_empty,
    normalize,
    split,
    to_lower_fixed_locale,
    to_string_list,
    to_upper_fixed_locale,
    trim_trailing,
    truncate,
)

__all__ = [
    "hex_encode",
    "hex_decode",
    "hex_dump",
    "ascii_bytes",
    "parse_hex_string",
    "format_hex_string",
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
