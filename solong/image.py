"""In-memory 32-bit images and sprite blitting."""

from __future__ import annotations

from dataclasses import dataclass, field

_MASK = 0xFFFFFFFF


@dataclass
class Image:
    """A width by height grid of 32-bit ARGB pixels stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError("pixel count does not match image dimensions")

    @classmethod
    def blank(cls, width: int, height: int) -> Image:
        """Return an image of the given size filled with zero pixels."""
        return cls(width, height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self.pixels[self._index(x, y)] = color & _MASK

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def draw_sprite(dst: Image, src: Image, x_offset: int, y_offset: int) -> None:
    """Copy every pixel of ``src`` onto ``dst`` at the given offset, clipped."""
    for y in range(src.height):
        for x in range(src.width):
            dx, dy = x + x_offset, y + y_offset
            if dst._inside(dx, dy):
                dst.pixels[dy * dst.width + dx] = src.pixels[y * src.width + x]


def draw_sprite_flipped(dst: Image, src: Image, x_offset: int, y_offset: int) -> None:
    """Draw ``src`` mirrored left to right, skipping pixels whose alpha byte is zero."""
    for y in range(src.height):
        for x in range(src.width):
            dx, dy = x + x_offset, y + y_offset
            if not dst._inside(dx, dy):
                continue
            color = src.pixels[y * src.width + (src.width - 1 - x)]
            if color >> 24 == 0:
                continue
            dst.pixels[dy * dst.width + dx] = color