"""Small string helpers: word splitting, integer parsing, trimming and search."""

from __future__ import annotations

import re

WHITESPACE = " \t\n\v\f\r"

_NUMBER = re.compile("[" + re.escape(WHITESPACE) + "]*([+-]?)([0-9]*)")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement integer of ``bits`` width."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [piece for piece in text.split(sep) if piece]


def _parse(text: str) -> int:
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. A string without digits yields 0.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    return _wrap(_parse(text), 64)


def is_space(char: str) -> bool:
    """Return True if ``char`` is one of the six ASCII whitespace characters."""
    return len(char) == 1 and char in WHITESPACE


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    Returns the index of the first occurrence, or None when there is none.
    An empty needle is found at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index