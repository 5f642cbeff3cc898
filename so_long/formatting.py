"""A small printf-style formatter with the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional, TextIO


class FormatError(ValueError):
    """Raised for a missing or malformed format string or missing arguments."""


def _as_int32(value: Any) -> int:
    n = int(value) & 0xFFFFFFFF
    return n - (1 << 32) if n & 0x80000000 else n


def _as_uint32(value: Any) -> int:
    return int(value) & 0xFFFFFFFF


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _conv_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _conv_pointer(value: Any) -> str:
    """Format an address; None or 0 is shown as (nil), other objects by identity."""
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= 0xFFFFFFFFFFFFFFFF
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _conv_signed(value: Any) -> str:
    return str(_as_int32(value))


def _conv_unsigned(value: Any) -> str:
    return str(_as_uint32(value))


def _conv_hex(value: Any) -> str:
    return f"{_as_uint32(value):x}"


def _conv_hex_upper(value: Any) -> str:
    return f"{_as_uint32(value):X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex,
    "X": _conv_hex_upper,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise FormatError(f"not enough arguments for %{spec}") from None


def format_message(fmt: Optional[str], *args: Any) -> str:
    """Expand fmt with args and return the text.

    Integers for d, i, u, x and X are taken as 32-bit values. An unknown
    conversion produces nothing and takes no argument. A format that ends
    in a lone '%' raises FormatError.
    """
    if fmt is None:
        raise FormatError("format string is missing")
    values = iter(args)
    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        if spec == "%":
            out.append("%")
        elif spec in _CONVERTERS:
            out.append(_CONVERTERS[spec](_next_arg(values, spec)))
    return "".join(out)


def print_message(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format and write to stream (standard output by default); return characters written."""
    text = format_message(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)