"""In-memory pixel images with a configurable pixel size and byte order."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Image", "new_image", "LSB_FIRST", "MSB_FIRST"]

LSB_FIRST = 0
MSB_FIRST = 1

_VALID_BPP = (8, 16, 24, 32)


@dataclass
class Image:
    """A ZPixmap-style image: rows of ``size_line`` bytes, ``bpp`` bits a pixel."""

    width: int
    height: int
    bpp: int = 32
    byte_order: int = LSB_FIRST
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.bpp not in _VALID_BPP:
            raise ValueError(f"unsupported bits per pixel: {self.bpp}")
        if self.byte_order not in (LSB_FIRST, MSB_FIRST):
            raise ValueError(f"byte order must be 0 or 1, got {self.byte_order}")
        # Rows are padded to 32 bits.
        self.size_line = ((self.width * self.bpp + 31) // 32) * 4
        self.data = bytearray(self.size_line * self.height)

    @property
    def _opp(self) -> int:
        return self.bpp // 8

    @property
    def _order(self) -> str:
        return "big" if self.byte_order == MSB_FIRST else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self._opp

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), truncated to the pixel size."""
        opp = self._opp
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at (x, y)."""
        opp = self._opp
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._order)


def new_image(width: int, height: int, bpp: int = 32, byte_order: int = LSB_FIRST) -> Image:
    """Create a zero-filled image."""
    return Image(width, height, bpp, byte_order)