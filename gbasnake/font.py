"""Lookup of the full 256-character 6x8 screen font."""

from __future__ import annotations

from gbasnake.glyphs_high import FIRST_CODE as _HIGH_FIRST
from gbasnake.glyphs_high import high_glyph
from gbasnake.glyphs_low import GLYPH_HEIGHT, GLYPH_WIDTH, Glyph, low_glyph

CHAR_COUNT = 256


def _code_of(code: int | str) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        code = ord(code)
    if not 0 <= code < CHAR_COUNT:
        raise ValueError(f"glyph code {code} is outside 0-{CHAR_COUNT - 1}")
    return code


def glyph_rows(code: int | str) -> Glyph:
    """Return the bitmap of a character as eight rows of six 0/1 pixels.

    ``code`` is a character code in 0-255 or a single character whose
    code point lies in that range.
    """
    value = _code_of(code)
    return low_glyph(value) if value < _HIGH_FIRST else high_glyph(value)


def glyph_pixel(code: int | str, row: int, col: int) -> bool:
    """Tell whether the pixel at ``row`` (0-7) and ``col`` (0-5) of a glyph is set."""
    if not 0 <= row < GLYPH_HEIGHT:
        raise IndexError(f"glyph row {row} is outside 0-{GLYPH_HEIGHT - 1}")
    if not 0 <= col < GLYPH_WIDTH:
        raise IndexError(f"glyph column {col} is outside 0-{GLYPH_WIDTH - 1}")
    return bool(glyph_rows(code)[row][col])