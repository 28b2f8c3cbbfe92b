"""String helpers with the exact edge-case rules of the classic C routines."""

from __future__ import annotations

import re
from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Any

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_LONG_MAX = 2**63 - 1
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, as a C ``int`` holds it."""
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and no digits gives 0. A magnitude that overflows a 64-bit
    long gives -1 when positive and 0 when negative; otherwise the value is
    reduced to a signed 32-bit integer.
    """
    match = _ATOI.match(text)
    negative = match.group(1) == "-"
    limit = _LONG_MAX + 1 if negative else _LONG_MAX
    value = 0
    for digit in match.group(2):
        value = value * 10 + int(digit)
        if value >= limit:
            return 0 if negative else -1
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(_single_char(sep)) if piece]


def strtrim(text: str | None, charset: str | None) -> str | None:
    """Remove characters found in ``charset`` from both ends of ``text``.

    A ``None`` text gives ``None``; a ``None`` charset trims nothing.
    """
    if text is None:
        return None
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the rest of ``haystack`` from the match, ``haystack`` itself for
    an empty needle, or ``None`` when there is no match.
    """
    if not needle:
        return haystack
    index = haystack[:max(length, 0)].find(needle)
    return None if index == -1 else haystack[index:]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the text that fits (at most ``size - 1`` characters, leaving room
    for the terminator) and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would need:
    ``len(src) + size`` when ``size`` is smaller than ``len(dst)``, else
    ``len(src) + len(dst)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    room = max(size - len(dst) - 1, 0)
    result = dst + src[:room]
    if size < len(dst):
        return result, len(src) + size
    return result, len(src) + len(dst)


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters by code point.

    Returns the difference of the first differing code points, where the end
    of a string counts as 0; equal prefixes give 0.
    """
    pairs = zip_longest(first, second, fillvalue="")
    for a, b in islice(pairs, max(length, 0)):
        code_a = ord(a) if a else 0
        code_b = ord(b) if b else 0
        if code_a != code_b or code_a == 0 or code_b == 0:
            return code_a - code_b
    return 0


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; ``"\\0"`` finds the end."""
    if _single_char(char) == "\0" and "\0" not in text:
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; ``"\\0"`` finds the end."""
    if _single_char(char) == "\0" and "\0" not in text:
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Rewrite a mutable character sequence in place.

    ``func(index, item)`` is called for every item; a result other than
    ``None`` replaces the item.
    """
    for index, item in enumerate(list(text)):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement