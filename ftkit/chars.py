"""ASCII character classification and case conversion.

Each function takes either a code point (``int``) or a one-character
string. Only the ASCII range is recognised; anything else is reported as
not belonging to the class and is left unchanged by the case functions.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return _is_digit(_code(c))


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    code = _code(c)
    return _is_digit(code) or _is_lower(code) or _is_upper(code)


def isascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; return anything else unchanged."""
    code = _code(c)
    if _is_upper(code):
        return _same_kind(c, code - ord("A") + ord("a"))
    return c


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; return anything else unchanged."""
    code = _code(c)
    if _is_lower(code):
        return _same_kind(c, code - ord("a") + ord("A"))
    return c