"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` as it is."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline."""
    stream.write(text)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of ``n``, with a leading minus when negative."""
    stream.write(str(int(n)))