"""Formatted output with a small set of conversions: c s p d i u x X %."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
DECIMAL = "0123456789"

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"

_UINT32 = 2**32
_INT32_MIN = -(2**31)
_UINTPTR = 2**64


def to_base(number: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    number = operator.index(number)
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    radix = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, radix)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int32(value: Any) -> int:
    return (operator.index(value) - _INT32_MIN) % _UINT32 + _INT32_MIN


def _as_uint32(value: Any) -> int:
    return operator.index(value) % _UINT32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return NULL_STRING if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return NULL_POINTER
    address = operator.index(value) % _UINTPTR
    if address == 0:
        return NULL_POINTER
    return POINTER_PREFIX + to_base(address, LOWER_HEX)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: str(_as_int32(v)),
    "i": lambda v: str(_as_int32(v)),
    "u": lambda v: to_base(_as_uint32(v), DECIMAL),
    "x": lambda v: to_base(_as_uint32(v), LOWER_HEX),
    "X": lambda v: to_base(_as_uint32(v), UPPER_HEX),
}


def _convert(conversion: str, values: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    handler = _CONVERSIONS.get(conversion)
    if handler is None:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    return handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the very end is dropped.
    """
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        parts.append(_convert(conversion, values))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes just the newline."""
    out = sys.stdout if stream is None else stream
    out.write((text or "") + "\n")