"""String helpers: searching, comparing, bounded copying, slicing and splitting.

Positions are returned as indices into the string. A search that finds
nothing returns None.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Turn a one-character string or a character code into a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns 0 when they match, otherwise the difference between the codes
    of the first differing characters; the end of a string counts as code 0.
    """
    _non_negative(n, "count")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return where little first occurs wholly inside the first length characters of big.

    An empty little is found at index 0. Returns None when there is no match.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters) and the full
    length of src, so that truncation shows as the length exceeding
    size - 1. With size 0 nothing is copied.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the concatenation would have
    had without truncation. When dst already fills the buffer, dst comes
    back unchanged and the length reported is size plus the length of src.
    """
    _non_negative(size, "size")
    used = min(len(dst), size)
    if size <= used:
        return dst, used + len(src)
    room = size - 1 - used
    return dst + src[:room], used + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return up to length characters of s beginning at start.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in charset."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split s on the single character sep, dropping empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call f(index, character) for each character of a mutable sequence.

    When f returns a character it replaces the one at that index; when it
    returns None the character is left as it is.
    """
    for index in range(len(s)):
        replacement = f(index, s[index])
        if replacement is not None:
            s[index] = replacement