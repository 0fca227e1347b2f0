"""Colour conversion for the display's visual (TrueColor channel masks)."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["rgb_shifts", "good_color"]


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive integer, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits).

    Each shift is the position of the lowest set bit of the channel mask and
    each bit count is the number of contiguous set bits from there.
    """
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        result.extend(_shift_and_width(mask))
    return tuple(result)


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual.

    Visuals of depth 24 or more take the colour unchanged; shallower ones pack
    the channels according to ``shifts`` as produced by :func:`rgb_shifts`.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )