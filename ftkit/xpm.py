"""Reading XPM images into 32-bit ARGB pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from ftkit.colornames import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour ``None`` (alpha byte means transparency)."""

BITS_PER_PIXEL = 32

_NAME_LIMIT = 63
_QUOTED = re.compile(r'"([^"]*)"')
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]*)")
_HEX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds ``height`` rows of ``width`` values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    @property
    def bits_per_pixel(self) -> int:
        return BITS_PER_PIXEL

    @property
    def size_line(self) -> int:
        """Bytes per row of the image."""
        return self.width * BITS_PER_PIXEL // 8

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y][x]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    parts: list[str] = []
    start = 0
    i = 0
    in_quotes = False
    length = len(text)
    while i < length:
        if text[i] == '"':
            in_quotes = not in_quotes
        if not in_quotes and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = length if end == -1 else end + len(closer)
            parts.append(text[start:i])
            parts.append(" " * (stop - i))
            start = i = stop
            continue
        i += 1
    parts.append(text[start:])
    return "".join(parts)


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comments are replaced by spaces, so the text keeps its length. A line
    comment is blanked together with the newline that ends it.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def split_words(line: str) -> list[str]:
    """Split on spaces and tabs only, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", line) if word]


def _atoi(text: str) -> int:
    digits = _ATOI.match(text).group(1)
    try:
        return int(digits)
    except ValueError:
        return 0


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def color_from_text(name: str, suffix: str | None = None) -> int:
    """Turn an XPM colour spec into a 0xRRGGBB value.

    ``#rrggbb`` is read as hexadecimal. Otherwise ``name`` (joined to
    ``suffix`` with a space when one is given) is looked up among the named
    colours; unknown names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"header needs four values, got {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    labels = ("width", "height", "number of colours", "characters per pixel")
    for label, value in zip(labels, values):
        if value <= 0:
            raise XpmError(f"invalid {label} in header {line!r}")
    return values  # type: ignore[return-value]


def _color_entry(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no 'c' colour key in {line!r}") from None
    if index >= len(words):
        raise XpmError(f"'c' key without a colour in {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], color_from_text(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then rows."""
    source: Iterator[str] = iter(lines)

    def take(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    width, height, ncolors, cpp = _header(take("header"))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _color_entry(take("colour definition"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    rows: list[tuple[int, ...]] = []
    for _ in range(height):
        line = take("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file: comments are dropped, quoted strings read."""
    cleaned = strip_comments(text)
    return parse_xpm(match.group(1) for match in _QUOTED.finditer(cleaned))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file. OSError propagates if it cannot be read."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_xpm_text(text)