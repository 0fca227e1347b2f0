"""Small text helpers: word splitting and substring search."""

from __future__ import annotations

import re

__all__ = ["str_to_wordtab", "find", "find_outside_quotes"]

_BLANKS = re.compile(r"[ \t]+")


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the first position of ``needle`` in ``text``, or -1.

    A needle longer than ``limit`` is never found.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted runs."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1