"""String helpers: splitting, trimming, bounded searching, comparing and copying."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, Optional, Tuple

_NUL = "\0"


def split(text: Optional[str], sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if text is None:
        return []
    return [piece for piece in text.split(sep) if piece]


def split_charset(text: Optional[str], charset: Optional[str]) -> List[str]:
    """Split ``text`` on any character of ``charset``, dropping empty pieces."""
    if text is None:
        return []
    separators = set(charset or "")
    pieces: List[str] = []
    current: List[str] = []
    for ch in text:
        if ch in separators:
            if current:
                pieces.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        pieces.append("".join(current))
    return pieces


def trim(text: str, chars: Optional[str]) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: Optional[str], start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if text is None:
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when absent.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering.

    The result is the code difference at the first position where the
    strings differ or one of them ends, and 0 if none is found.
    """
    pairs = zip_longest(a, b, fillvalue=_NUL)
    for ca, cb in islice(pairs, max(n, 0)):
        if ca != cb or ca == _NUL:
            return ord(ca) - ord(cb)
    return 0


def index_of(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; the NUL character finds the end."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char == _NUL:
        terminator = text.find(_NUL)
        return len(text) if terminator < 0 else terminator
    index = text.find(char)
    return None if index < 0 else index


def rindex_of(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; the NUL character finds the end."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so truncation
    shows as a length at or above ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the new text and the length the full result would have had.
    When ``dst`` already fills the buffer it is left unchanged and the
    reported length is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    if dst_len >= size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)