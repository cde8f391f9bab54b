"""Integer parsing and formatting with 32-bit C-style semantics."""

from __future__ import annotations

import re
from typing import Optional

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_UINT_MOD = 2**32

_WHITESPACE = "\t\n\v\f\r "
_LENIENT = re.compile(r"[+-]?([0-9]*)")
_STRICT = re.compile(r"([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % _UINT_MOD + INT_MIN


def atoi(text: Optional[str]) -> int:
    """Parse a leading integer after optional whitespace and sign.

    Trailing garbage is ignored, text without digits gives 0, and values
    beyond 32 bits wrap around as a C int does.
    """
    if text is None:
        return 0
    stripped = text.lstrip(_WHITESPACE)
    match = _LENIENT.match(stripped)
    digits = match.group(1)
    if not digits:
        return 0
    value = int(digits)
    if stripped.startswith("-"):
        value = -value
    return _wrap_int32(value)


def atoi_strict(text: Optional[str]) -> int:
    """Parse a whole string as a 32-bit signed integer.

    Only an optional sign followed by digits is accepted, with no
    whitespace. Leading zeros before further digits, any other character,
    and values outside the 32-bit range raise ValueError. An empty string
    or a lone sign gives 0.
    """
    if text is None:
        return 0
    match = _STRICT.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    sign, digits = match.groups()
    if not digits:
        return 0
    if len(digits) > 1 and digits[0] == "0":
        raise ValueError(f"leading zeros are not allowed: {text!r}")
    value = int(digits)
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading minus when negative."""
    return str(n)


def base_to_uint(text: Optional[str], base: Optional[str]) -> int:
    """Read digits of ``base`` from the start of ``text`` as an unsigned 32-bit number.

    Each character's value is its position in ``base``; reading stops at the
    first character not in ``base``. The result wraps modulo 2**32.
    """
    if not text or base is None:
        return 0
    radix = len(base)
    result = 0
    for ch in text:
        digit = base.find(ch)
        if digit < 0:
            break
        result = (result * radix + digit) % _UINT_MOD
    return result