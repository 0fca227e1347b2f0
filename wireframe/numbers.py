"""Integer parsing and word counting for map lines."""

from __future__ import annotations

__all__ = ["count_words", "atoi", "atoi_base"]

_DIGITS = "0123456789ABCDEF"
_SPACES = " \t\n\v\f\r"


def count_words(text: str, sep: str = " ") -> int:
    """Count the words of ``text`` separated by ``sep``.

    Newlines in front of a word are not part of it, so a piece made only
    of newlines is not counted.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    text = text.split("\0", 1)[0]
    return sum(1 for piece in text.split(sep) if piece.lstrip("\n"))


def atoi(text: str) -> int:
    """Read a decimal integer after optional whitespace and sign; 0 if none."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + ord(char) - ord("0")
    return sign * value


def _digit(char: str, base: int) -> int:
    index = _DIGITS.find(char.upper()) if len(char) == 1 else -1
    return index if 0 <= index < base else -1


def _has_prefix(text: str, base: int) -> bool:
    if base not in (2, 8, 16) or not text.startswith("0"):
        return False
    if base == 8:
        return True
    marker = text[1:2]
    return marker in (("b", "B") if base == 2 else ("x", "X"))


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi_base(text: str, base: int) -> int:
    """Read an integer in base 2 ("0b"), 8 ("0"), 16 ("0x") or 10 (signed).

    Input without the prefix its base needs, or in another base, gives 0.
    The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    if base != 10 and not _has_prefix(rest, base):
        return 0
    sign = 1
    if base in (2, 16):
        rest = rest[2:]
    elif base == 8:
        rest = rest[1:]
    elif rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        digit = _digit(char, base)
        if digit < 0:
            break
        result = (result * base + digit) & 0xFFFFFFFFFFFFFFFF
    return _to_int32(result * sign)