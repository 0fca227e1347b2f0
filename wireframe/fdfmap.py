"""Loading height maps with optional per-point colours, and the view state."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field

from .numbers import atoi, atoi_base, count_words

__all__ = [
    "WIDTH",
    "HEIGHT",
    "FdfMap",
    "ViewState",
    "read_height",
    "read_width",
    "parse_line",
    "load_map",
]

WIDTH = 1920
HEIGHT = 1080

PathLike = str | os.PathLike[str]


@dataclass
class FdfMap:
    """A grid of heights and a matching grid of colours (0 where none given)."""

    width: int
    height: int
    grid: list[list[int]] = field(default_factory=list)
    color_grid: list[list[int]] = field(default_factory=list)


@dataclass
class ViewState:
    """Drawing state: projection scratch values, zoom, colour and shifts."""

    xs: float = 0.0
    ys: float = 0.0
    max: int = 0
    z: int = 0
    z1: int = 0
    zoom: int = 0
    color: int = 0
    shift_x: int = 0
    shift_y: int = 0
    shift_check: int = 0
    bpp: int = 0
    line_length: int = 0
    endian: int = 0
    window_zoom: int = 100
    window_height: int = 0
    window_width: int = 0


def _lines(path: PathLike) -> Iterator[str]:
    with open(path, "rb") as handle:
        for raw in handle:
            yield raw.decode("latin-1")


def read_height(path: PathLike) -> int:
    """Return the number of lines in the map file."""
    return sum(1 for _ in _lines(path))


def read_width(path: PathLike) -> int:
    """Return the number of values on the last line of the map file (0 if empty)."""
    width = 0
    for line in _lines(path):
        width = count_words(line, " ")
    return width


def parse_line(line: str) -> tuple[list[int], list[int]]:
    """Split a map line into heights and colours.

    Each value is a height, optionally followed by ",0xRRGGBB".
    """
    heights: list[int] = []
    colors: list[int] = []
    for token in line.split(" "):
        if not token.lstrip("\n"):
            continue
        if "," in token:
            parts = [part for part in token.split(",") if part]
            if len(parts) < 2:
                raise ValueError(f"value without height or colour: {token!r}")
            heights.append(atoi(parts[0]))
            colors.append(atoi_base(parts[1], 16))
        else:
            heights.append(atoi(token))
            colors.append(0)
    return heights, colors


def load_map(path: PathLike) -> FdfMap:
    """Read a map file into an :class:`FdfMap`.

    The width is taken from the last line; shorter rows are padded with 0
    and longer rows are an error.
    """
    lines = list(_lines(path))
    width = count_words(lines[-1], " ") if lines else 0
    result = FdfMap(width=width, height=len(lines))
    for number, line in enumerate(lines, start=1):
        heights, colors = parse_line(line)
        if len(heights) > width:
            raise ValueError(
                f"line {number} has {len(heights)} values, more than the width {width}"
            )
        padding = [0] * (width - len(heights))
        result.grid.append(heights + padding)
        result.color_grid.append(colors + padding)
    return result