"""Monochrome frame buffer with XOR sprite drawing."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

WIDTH = 64
HEIGHT = 32
PIXEL_SIZE = 8
WINDOW_WIDTH = WIDTH * PIXEL_SIZE
WINDOW_HEIGHT = HEIGHT * PIXEL_SIZE


class Screen:
    """A WIDTH x HEIGHT grid of pixels that are either lit or dark."""

    def __init__(self) -> None:
        self._pixels = [[False] * WIDTH for _ in range(HEIGHT)]

    def clear(self) -> None:
        """Turn every pixel dark."""
        for row in self._pixels:
            row[:] = [False] * WIDTH

    def is_lit(self, x: int, y: int) -> bool:
        """Tell whether the pixel at (x, y) is lit."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return self._pixels[y][x]

    def draw_sprite(
        self, memory: Sequence[int], address: int, x: int, y: int, height: int
    ) -> bool:
        """XOR a sprite of `height` bytes read from `address` onto the screen at (x, y).

        Coordinates wrap around the edges. Returns True if any lit pixel was turned off.
        """
        collision = False
        for row in range(height):
            sprite_address = (address + row) & 0xFFFF
            if sprite_address >= len(memory):
                break
            sprite_byte = memory[sprite_address]
            y_pos = (y + row) % HEIGHT
            for bit in range(8):
                if (sprite_byte >> (7 - bit)) & 1:
                    x_pos = (x + bit) % WIDTH
                    if self._pixels[y_pos][x_pos]:
                        collision = True
                    self._pixels[y_pos][x_pos] = not self._pixels[y_pos][x_pos]
        return collision

    def lit_pixels(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) coordinates of lit pixels, column by column."""
        for x in range(WIDTH):
            for y in range(HEIGHT):
                if self._pixels[y][x]:
                    yield x, y