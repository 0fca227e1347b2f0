"""Reading XPM pixmaps into :class:`~wireframe.image.Image` objects."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from .colors import color_by_name
from .image import LSB_FIRST, Image, new_image
from .wordtab import find, find_outside_quotes, str_to_wordtab

__all__ = [
    "XpmError",
    "text_rgb",
    "strip_comments",
    "extract_quoted_lines",
    "parse_xpm",
    "xpm_data_to_image",
    "xpm_file_to_image",
]

_TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63

_ATOI = re.compile(r"\s*([+-]?[0-9]+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    digits = match.group(2)
    value = int(digits, 16) if digits else 0
    if match.group(1) == "-":
        value = -value
    return _to_int32(value)


def text_rgb(name: str, end: str | None = None) -> int:
    """Resolve an XPM colour specification to 0xRRGGBB.

    "#rrggbb" is read as hex. Otherwise ``name`` (joined with ``end`` by a
    space when given) is looked up among the named colours; "none" gives -1
    and an unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _blank(text: str, start: int, count: int) -> str:
    count = min(count, len(text) - start)
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces.

    The result has the same length as ``text``.
    """
    size = len(text)
    while (begin := find_outside_quotes(text, "/*", size)) != -1:
        end = find(text[begin + 2:], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", size)) != -1:
        end = find(text[begin + 2:], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def extract_quoted_lines(text: str) -> list[str]:
    """Return the contents of each double-quoted string in ``text``, in order."""
    lines: list[str] = []
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            break
        lines.append(text[start + 1:stop])
        pos = stop + 1
    return lines


def parse_xpm(lines: Iterable[str], bpp: int = 32, byte_order: int = LSB_FIRST) -> Image:
    """Build an image from XPM string lines (header, colours, pixel rows)."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = str_to_wordtab(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {header[:4]}")

    # Short codes keep the last definition, long codes the first.
    keep_last = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        rest = words[index + 2] if index + 2 < len(words) else None
        rgb = text_rgb(words[index + 1], rest)
        code = line[:cpp]
        if keep_last:
            palette[code] = rgb
        else:
            palette.setdefault(code, rgb)

    try:
        image = new_image(width, height, bpp, byte_order)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc

    for y in range(height):
        line = next_line("pixel row")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_data_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM string lines already split out."""
    return parse_xpm(lines)


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(extract_quoted_lines(strip_comments(text)))