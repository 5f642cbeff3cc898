"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as int or one-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign, then as many
    ASCII digits as follow. Anything after that is ignored; text with no
    digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading '-' if negative."""
    return str(int(n))