"""Formatted output: a small printf-style formatter and write helpers."""

from __future__ import annotations

import operator
import sys
from typing import Any, TextIO

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _char_of(value: Any) -> str:
    """Return one character for a %c argument (a string or a code)."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _convert(spec: str, value: Any) -> str:
    if spec in "id":
        return str(_to_int32(operator.index(value)))
    if spec == "c":
        return _char_of(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "x":
        return format(operator.index(value) & _UINT32_MASK, "x")
    if spec == "X":
        return format(operator.index(value) & _UINT32_MASK, "X")
    if spec == "p":
        address = 0 if value is None else operator.index(value) & _UINT64_MASK
        return "0x" + format(address, "x")
    if spec == "u":
        return str(operator.index(value) & _UINT32_MASK)
    raise AssertionError(spec)


_CONSUMING = frozenset("idcsxXpu")


def format_message(template: str, *args: Any) -> str:
    """Format template with the conversions %i %d %c %s %x %X %p %u and %%.

    An unknown conversion, and a lone '%' at the end, produce nothing.
    Raises TypeError when the template needs more arguments than given.
    """
    pieces: list[str] = []
    remaining = iter(args)
    position = 0
    while position < len(template):
        char = template[position]
        if char != "%":
            pieces.append(char)
            position += 1
            continue
        spec = template[position + 1:position + 2]
        position += 2
        if spec == "%":
            pieces.append("%")
        elif spec and spec in _CONSUMING:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format {template!r}"
                ) from None
            pieces.append(_convert(spec, value))
    return "".join(pieces)


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def print_message(template: str, *args: Any, out: TextIO | None = None) -> int:
    """Write the formatted template to out and return the characters written."""
    text = format_message(template, *args)
    _stream(out).write(text)
    return len(text)


def put_char(char: str | int, out: TextIO | None = None) -> None:
    """Write a single character."""
    _stream(out).write(_char_of(char))


def put_str(text: str, out: TextIO | None = None) -> None:
    """Write a string as it is."""
    _stream(out).write(text)


def put_endl(text: str, out: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    stream = _stream(out)
    stream.write(text)
    stream.write("\n")


def put_number(number: int, out: TextIO | None = None) -> None:
    """Write an integer in decimal, wrapped into the signed 32-bit range."""
    _stream(out).write(str(_to_int32(operator.index(number))))