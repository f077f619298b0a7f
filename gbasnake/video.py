"""Mode-3 style frame buffer, colours, button decoding and the random source."""

from __future__ import annotations

import enum
from array import array
from collections.abc import Iterator, Sequence

from gbasnake.font import glyph_rows
from gbasnake.glyphs_low import GLYPH_HEIGHT, GLYPH_WIDTH

WIDTH = 240
HEIGHT = 160
_PIXEL_MASK = 0xFFFF


def color(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, green and blue components into a 15-bit colour."""
    return r | (g << 5) | (b << 10)


WHITE = color(31, 31, 31)
RED = color(31, 0, 0)
GREEN = color(0, 31, 0)
BLUE = color(0, 0, 31)
MAGENTA = color(31, 0, 31)
CYAN = color(0, 31, 31)
YELLOW = color(31, 31, 0)
BLACK = color(0, 0, 0)
GRAY = color(5, 5, 5)


class Button(enum.IntFlag):
    """Bits of the key input register; a cleared bit means the key is held."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    RIGHT = 1 << 4
    LEFT = 1 << 5
    UP = 1 << 6
    DOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9


def key_down(key: int, buttons: int) -> bool:
    """Tell whether ``key`` is held in the active-low ``buttons`` state."""
    return bool(~buttons & key)


def key_just_pressed(key: int, buttons: int, old_buttons: int) -> bool:
    """Tell whether ``key`` is held now but was not held in ``old_buttons``."""
    return key_down(key, buttons) and not key_down(key, old_buttons)


class Random:
    """Linear congruential generator yielding 15-bit values."""

    def __init__(self, seed: int = 42) -> None:
        self._seed = seed & 0xFFFFFFFF

    def next(self) -> int:
        """Advance the generator and return a value in 0-0x7FFF."""
        self._seed = (1664525 * self._seed + 1013904223) & 0xFFFFFFFF
        return (self._seed >> 16) & 0x7FFF

    def randint(self, low: int, high: int) -> int:
        """Return a value in ``low`` (inclusive) to ``high`` (exclusive)."""
        return ((self.next() * (high - low)) >> 15) + low


class Screen:
    """A WIDTH x HEIGHT buffer of 16-bit pixels, addressed row-major."""

    def __init__(self) -> None:
        self._buffer = array("H", bytes(2 * WIDTH * HEIGHT))
        self.vblank_counter = 0

    @staticmethod
    def _offset(row: int, col: int) -> int:
        return col + WIDTH * row

    def _span(self, row: int, col: int, length: int) -> slice:
        if length < 0:
            raise ValueError(f"negative length {length}")
        start = self._offset(row, col)
        if start < 0 or start + length > len(self._buffer):
            raise IndexError(f"span at row {row}, column {col} of {length} pixels is off screen")
        return slice(start, start + length)

    def wait_for_vblank(self) -> None:
        """Mark the start of a new frame."""
        self.vblank_counter += 1

    def pixel(self, row: int, col: int) -> int:
        """Return the colour stored at ``row``, ``col``."""
        return self._buffer[self._span(row, col, 1).start]

    def set_pixel(self, row: int, col: int, value: int) -> None:
        """Store a colour at ``row``, ``col``."""
        self._buffer[self._span(row, col, 1).start] = value & _PIXEL_MASK

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield the screen contents one row at a time, top first."""
        for row in range(HEIGHT):
            yield tuple(self._buffer[row * WIDTH:(row + 1) * WIDTH])

    def draw_rect(self, row: int, col: int, width: int, height: int, value: int) -> None:
        """Fill a ``width`` x ``height`` rectangle whose top left is ``row``, ``col``."""
        fill = array("H", [value & _PIXEL_MASK]) * max(width, 0)
        for i in range(height):
            self._buffer[self._span(row + i, col, width)] = fill

    def draw_image(
        self, row: int, col: int, width: int, height: int, image: Sequence[int]
    ) -> None:
        """Copy a ``width`` x ``height`` image to the screen at ``row``, ``col``."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(image) < width * height:
            raise ValueError(f"image holds {len(image)} pixels, need {width * height}")
        for i in range(height):
            line = array("H", (p & _PIXEL_MASK for p in image[i * width:(i + 1) * width]))
            self._buffer[self._span(row + i, col, width)] = line

    def draw_full_screen_image(self, image: Sequence[int]) -> None:
        """Copy a full-screen image to the screen."""
        self.draw_image(0, 0, WIDTH, HEIGHT, image)

    def undraw_image(
        self, row: int, col: int, width: int, height: int, image: Sequence[int]
    ) -> None:
        """Restore a rectangle of the screen from the same area of a full-screen image."""
        if len(image) < WIDTH * HEIGHT:
            raise ValueError(f"image holds {len(image)} pixels, need {WIDTH * HEIGHT}")
        for i in range(height):
            span = self._span(row + i, col, width)
            self._buffer[span] = array("H", (p & _PIXEL_MASK for p in image[span]))

    def fill(self, value: int) -> None:
        """Set every pixel of the screen to ``value``."""
        self.draw_rect(0, 0, WIDTH, HEIGHT, value)

    def draw_char(self, row: int, col: int, ch: int | str, value: int) -> None:
        """Draw the set pixels of a 6x8 glyph with its top left at ``row``, ``col``."""
        for j, bits in enumerate(glyph_rows(ch)):
            for i, bit in enumerate(bits):
                if bit:
                    self.set_pixel(row + j, col + i, value)

    def draw_string(self, row: int, col: int, text: str, value: int) -> None:
        """Draw ``text`` left to right, one glyph width per character."""
        for offset, ch in enumerate(text):
            self.draw_char(row, col + offset * GLYPH_WIDTH, ch, value)

    def draw_centered_string(
        self, row: int, col: int, width: int, height: int, text: str, value: int
    ) -> None:
        """Draw ``text`` centred in the given box."""
        text_width = GLYPH_WIDTH * len(text)
        new_row = row + ((height - GLYPH_HEIGHT) >> 1)
        new_col = col + ((width - text_width) >> 1)
        self.draw_string(new_row, new_col, text, value)