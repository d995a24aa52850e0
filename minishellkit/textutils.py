"""Small string helpers used by the shell: parsing, splitting and comparing."""

from __future__ import annotations

import operator
import re

_ATOI_PATTERN = re.compile(r"[ \t\n\r\v\f]*([+-]?)([0-9]*)")

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _code(char: str | int) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    return operator.index(char)


def _c_bytes(text: str) -> bytes:
    """Encode text as UTF-8, stopping at the first NUL like a C string."""
    return text.encode("utf-8").split(b"\0", 1)[0]


def atoi(text: str) -> int:
    """Parse a leading integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits gives 0. The result
    wraps into the signed 32-bit range.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.groups() if match else ("", "")
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _to_int32(value)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(number))


def split(text: str, separator: str) -> list[str]:
    """Split text on a single separator character, dropping empty pieces.

    An empty separator stands for the NUL character, so the whole text
    becomes one piece.
    """
    if len(separator) > 1:
        raise ValueError("separator must be a single character")
    if not text:
        return []
    if not separator:
        return [text]
    return [piece for piece in text.split(separator) if piece]


def trim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text."""
    if not text or not charset:
        return text
    return text.strip(charset)


def find_within(haystack: str, needle: str, length: int | None = None) -> int | None:
    """Find needle within the first length characters of haystack.

    Returns the index of the match or None. A length of None or a negative
    length searches the whole haystack; an empty needle matches at 0.
    """
    if not haystack and needle:
        return None
    if not needle:
        return 0
    if length is None or length < 0:
        length = len(haystack)
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def compare(first: str | None, second: str | None) -> int:
    """Compare two strings byte-wise.

    Returns the difference of the first differing bytes (0 when equal), or
    -1 if either string is missing.
    """
    if first is None or second is None:
        return -1
    left, right = _c_bytes(first), _c_bytes(second)
    for a, b in zip(left, right):
        if a != b:
            return a - b
    if len(left) == len(right):
        return 0
    return (left[len(right)] if len(left) > len(right) else 0) - (
        right[len(left)] if len(right) > len(left) else 0
    )


def compare_prefix(first: str, second: str, length: int) -> int:
    """Compare at most length bytes of two strings, like compare."""
    if length <= 0:
        return 0
    left, right = _c_bytes(first)[:length], _c_bytes(second)[:length]
    return compare(left.decode("utf-8", "surrogateescape"), right.decode("utf-8", "surrogateescape")) \
        if False else _compare_bytes(left, right)


def _compare_bytes(left: bytes, right: bytes) -> int:
    for a, b in zip(left, right):
        if a != b:
            return a - b
    if len(left) > len(right):
        return left[len(right)]
    if len(right) > len(left):
        return -right[len(left)]
    return 0


def is_alnum(char: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_alpha(char: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_ascii(char: str | int) -> bool:
    """True for a code between 0 and 127."""
    return 0 <= _code(char) <= 127


def is_digit(char: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(char) <= 57


def is_print(char: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(char, str) else code


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(char, str) else code