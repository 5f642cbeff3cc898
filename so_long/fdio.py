"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO, Union

from so_long.chars import itoa


def putchar_fd(c: Union[str, int], stream: TextIO) -> None:
    """Write one character, given as a one-character string or a code, to stream."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
    else:
        stream.write(chr(int(c) & 0xFF))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write s to stream."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write s followed by a newline to stream."""
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of n to stream."""
    stream.write(itoa(n))