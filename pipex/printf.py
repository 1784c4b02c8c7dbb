"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_LOWER = "0123456789abcdef"
_UPPER = "0123456789ABCDEF"


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        return arg
    return chr(int(arg) & 0xFF)


def _pointer(arg: Any) -> str:
    if arg is None or arg == 0:
        return "(nil)"
    address = arg if isinstance(arg, int) else id(arg)
    return "0x" + _hex(address & 0xFFFFFFFFFFFFFFFF, _LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiupxX":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in "di":
        return str(_signed32(int(arg)))
    if spec == "u":
        return str(int(arg) & 0xFFFFFFFF)
    if spec == "p":
        return _pointer(arg)
    return _hex(int(arg) & 0xFFFFFFFF, _LOWER if spec == "x" else _UPPER)


def cformat(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions produce no output; a lone trailing '%' is dropped.
    Integers are treated as 32-bit values as the conversions imply.
    """
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)