"""Locale-stable string normalization and formatting helpers."""

import enum
import re
from collections.abc import Iterable
from typing import Any

PRINT_WIDTH = 60
TRUNCATION_MARKER = "&"

_LINE_BREAKS = re.compile(r"[\r\n]+")
_BLANK_RUNS = re.compile(r"[ \t]+")

# Space and the control characters below it
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))

# Non-breaking spaces and NEL are not trailing whitespace
_NOT_WHITESPACE = frozenset("\x85\xa0\u2007\u202f")


class CaseLocale(enum.Enum):
    """Pinned locale used for case conversion.

    Only English casing is supported. Python's str casing follows the Unicode
    default mappings regardless of the process locale, which is the English
    behaviour (no Turkish dotted/dotless I special-casing).
    """

    ENGLISH = "en"


def format_for_print(text: str) -> str:
    """Chop a string to 60 characters for log and error messages.

    Longer strings get a trailing ``&`` marker.
    """
    if len(text) > PRINT_WIDTH:
        return text[:PRINT_WIDTH] + TRUNCATION_MARKER
    return text


def to_string_list(items: Iterable[Any]) -> list[str]:
    """Convert every element of a sequence to its string form."""
    return [str(item) for item in items]


def trim_trailing(text: str | None) -> str | None:
    """Trim off trailing whitespace but not leading whitespace.

    Non-breaking spaces (U+00A0, U+2007, U+202F) and NEL are kept.
    """
    if text is None:
        return None
    end = len(text)
    while end > 0 and _is_whitespace(text[end - 1]):
        end -= 1
    return text[:end]


def truncate(value: str | None, length: int) -> str | None:
    """Truncate a string to the given length, silently.

    :param value: String to truncate, or None
    :param length: Maximum length of the result
    :return: ``value`` if None or not longer than ``length``, otherwise its first ``length`` characters
    :raises ValueError: If ``length`` is negative
    """
    if length < 0:
        raise ValueError(f"Length cannot be negative: {length}")
    if value is not None and len(value) > length:
        return value[:length]
    return value


def to_upper_fixed_locale(text: str, locale: CaseLocale = CaseLocale.ENGLISH) -> str:
    """Uppercase a string using the pinned locale."""
    _check_locale(locale)
    return text.upper()


def to_lower_fixed_locale(text: str, locale: CaseLocale = CaseLocale.ENGLISH) -> str:
    """Lowercase a string using the pinned locale."""
    _check_locale(locale)
    return text.lower()


def equals_ignore_case_fixed_locale(
    first: str | None, second: str | None, locale: CaseLocale = CaseLocale.ENGLISH
) -> bool:
    """Compare two strings after uppercasing both in the pinned locale.

    Returns False when either side is None.
    """
    if first is None or second is None:
        return False
    return to_upper_fixed_locale(first, locale) == to_upper_fixed_locale(second, locale)


def insert_substring(base: str | None, insertion: str | None, position: int) -> str | None:
    """Return ``base`` with ``insertion`` spliced in at ``position``.

    ``base`` comes back unchanged if either string is None or ``position``
    lies outside ``[0, len(base)]``.
    """
    if base is None or insertion is None or position < 0 or position > len(base):
        return base
    return base[:position] + insertion + base[position:]


def normalize(value: Any) -> str:
    """Convert a value to a single-line string with collapsed blanks.

    Line breaks become one space, runs of tabs and spaces become one space, and
    the result is trimmed of spaces and control characters. None normalizes
    to an empty string.
    """
    if value is None:
        return ""
    text = _LINE_BREAKS.sub(" ", str(value))
    return _BLANK_RUNS.sub(" ", text).strip(_TRIM_CHARS)


def split(line: str | None, pattern: str) -> list[str]:
    """Split a line around a regular expression, keeping trailing empty fields.

    Groups in ``pattern`` never add fields, and a zero-width match at the
    start of the line does not produce a leading empty field. None yields an
    empty list.
    """
    if line is None:
        return []

    fields = []
    start = 0
    for match in re.finditer(pattern, line):
        if match.end() == 0:
            continue
        fields.append(line[start : match.start()])
        start = match.end()
    fields.append(line[start:])
    return fields


def empty_to_null(value: Any) -> str | None:
    """Return the trimmed string form of ``value``, or None if it is empty.

    Trimming removes spaces and control characters only.
    """
    if value is None:
        return None
    text = str(value).strip(_TRIM_CHARS)
    return text or None


def is_empty(value: Any) -> bool:
    """Return True if the string form of ``value`` is None or blank."""
    return empty_to_null(value) is None


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def _check_locale(locale: CaseLocale) -> None:
    if locale is not CaseLocale.ENGLISH:
        raise ValueError(f"Unsupported case locale: {locale!r}")
