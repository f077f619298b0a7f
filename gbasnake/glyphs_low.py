"""Bitmaps for the first half (codes 0-127) of the 6x8 screen font."""

from __future__ import annotations

GLYPH_WIDTH = 6
GLYPH_HEIGHT = 8
FIRST_CODE = 0
LAST_CODE = 127

Glyph = tuple[tuple[int, ...], ...]

# One entry per character code; eight rows of six pixels, top row first.
_RAW: tuple[str, ...] = (
    "000000 000000 000000 001100 001100 000000 000000 000000",  # 0
    "001110 010001 011011 010001 010101 010001 001110 000000",  # 1
    "001110 011111 010101 011111 010001 011111 001110 000000",  # 2
    "000000 001010 011111 011111 011111 001110 000100 000000",  # 3
    "000000 000000 001010 001110 001110 000100 000000 000000",  # 4
    "000100 001110 001110 000100 011111 011111 000100 000000",  # 5
    "000000 000100 001110 011111 011111 000100 001110 000000",  # 6
    "000000 000000 000000 001100 001100 000000 000000 000000",  # 7
    "111111 111111 111111 110011 110011 111111 111111 111111",  # 8
    "000000 000000 011110 010010 010010 011110 000000 000000",  # 9
    "111111 111111 100001 101101 101101 100001 111111 111111",  # 10
    "000000 000111 000011 001101 010010 010010 001100 000000",  # 11
    "001110 010001 010001 001110 000100 001110 000100 000000",  # 12
    "000100 000110 000101 000100 001100 011100 011000 000000",  # 13
    "000011 001101 001011 001101 001011 011011 011000 000000",  # 14
    "000000 010101 001110 011011 001110 010101 000000 000000",  # 15
    "001000 001100 001110 001111 001110 001100 001000 000000",  # 16
    "000010 000110 001110 011110 001110 000110 000010 000000",  # 17
    "000100 001110 011111 000100 011111 001110 000100 000000",  # 18
    "001010 001010 001010 001010 001010 000000 001010 000000",  # 19
    "001111 010101 010101 001101 000101 000101 000101 000000",  # 20
    "001110 010001 001100 001010 000110 010001 001110 000000",  # 21
    "000000 000000 000000 000000 000000 011110 011110 000000",  # 22
    "000100 001110 011111 000100 011111 001110 000100 001110",  # 23
    "000100 001110 011111 000100 000100 000100 000100 000000",  # 24
    "000100 000100 000100 000100 011111 001110 000100 000000",  # 25
    "000000 000100 000110 011111 000110 000100 000000 000000",  # 26
    "000000 000100 001100 011111 001100 000100 000000 000000",  # 27
    "000000 000000 000000 010000 010000 010000 011111 000000",  # 28
    "000000 001010 001010 011111 001010 001010 000000 000000",  # 29
    "000100 000100 001110 001110 011111 011111 000000 000000",  # 30
    "011111 011111 001110 001110 000100 000100 000000 000000",  # 31
    "000000 000000 000000 000000 000000 000000 000000 000000",  # 32
    "000100 001110 001110 000100 000100 000000 000100 000000",  # 33
    "011011 011011 010010 000000 000000 000000 000000 000000",  # 34
    "000000 001010 011111 001010 001010 011111 001010 000000",  # 35
    "001000 001110 010000 001100 000010 011100 000100 000000",  # 36
    "011001 011001 000010 000100 001000 010011 010011 000000",  # 37
    "001000 010100 010100 001000 010101 010010 001101 000000",  # 38
    "001100 001100 001000 000000 000000 000000 000000 000000",  # 39
    "000100 001000 001000 001000 001000 001000 000100 000000",  # 40
    "001000 000100 000100 000100 000100 000100 001000 000000",  # 41
    "000000 001010 001110 011111 001110 001010 000000 000000",  # 42
    "000000 000100 000100 011111 000100 000100 000000 000000",  # 43
    "000000 000000 000000 000000 000000 001100 001100 001000",  # 44
    "000000 000000 000000 011111 000000 000000 000000 000000",  # 45
    "000000 000000 000000 000000 000000 001100 001100 000000",  # 46
    "000000 000001 000010 000100 001000 010000 000000 000000",  # 47
    "001110 010001 010011 010101 011001 010001 001110 000000",  # 48
    "000100 001100 000100 000100 000100 000100 001110 000000",  # 49
    "001110 010001 000001 000110 001000 010000 011111 000000",  # 50
    "001110 010001 000001 001110 000001 010001 001110 000000",  # 51
    "000010 000110 001010 010010 011111 000010 000010 000000",  # 52
    "011111 010000 010000 011110 000001 010001 001110 000000",  # 53
    "000110 001000 010000 011110 010001 010001 001110 000000",  # 54
    "011111 000001 000010 000100 001000 001000 001000 000000",  # 55
    "001110 010001 010001 001110 010001 010001 001110 000000",  # 56
    "001110 010001 010001 001111 000001 000010 001100 000000",  # 57
    "000000 000000 001100 001100 000000 001100 001100 000000",  # 58
    "000000 000000 001100 001100 000000 001100 001100 001000",  # 59
    "000010 000100 001000 010000 001000 000100 000010 000000",  # 60
    "000000 000000 011111 000000 000000 011111 000000 000000",  # 61
    "001000 000100 000010 000001 000010 000100 001000 000000",  # 62
    "001110 010001 000001 000110 000100 000000 000100 000000",  # 63
    "001110 010001 010111 010101 010111 010000 001110 000000",  # 64
    "001110 010001 010001 010001 011111 010001 010001 000000",  # 65
    "011110 010001 010001 011110 010001 010001 011110 000000",  # 66
    "001110 010001 010000 010000 010000 010001 001110 000000",  # 67
    "011110 010001 010001 010001 010001 010001 011110 000000",  # 68
    "011111 010000 010000 011110 010000 010000 011111 000000",  # 69
    "011111 010000 010000 011110 010000 010000 010000 000000",  # 70
    "001110 010001 010000 010111 010001 010001 001111 000000",  # 71
    "010001 010001 010001 011111 010001 010001 010001 000000",  # 72
    "001110 000100 000100 000100 000100 000100 001110 000000",  # 73
    "000001 000001 000001 000001 010001 010001 001110 000000",  # 74
    "010001 010010 010100 011000 010100 010010 010001 000000",  # 75
    "010000 010000 010000 010000 010000 010000 011111 000000",  # 76
    "010001 011011 010101 010001 010001 010001 010001 000000",  # 77
    "010001 011001 010101 010011 010001 010001 010001 000000",  # 78
    "001110 010001 010001 010001 010001 010001 001110 000000",  # 79
    "011110 010001 010001 011110 010000 010000 010000 000000",  # 80
    "001110 010001 010001 010001 010101 010010 001101 000000",  # 81
    "011110 010001 010001 011110 010010 010001 010001 000000",  # 82
    "001110 010001 010000 001110 000001 010001 001110 000000",  # 83
    "011111 000100 000100 000100 000100 000100 000100 000000",  # 84
    "010001 010001 010001 010001 010001 010001 001110 000000",  # 85
    "010001 010001 010001 010001 010001 001010 000100 000000",  # 86
    "010001 010001 010101 010101 010101 010101 001010 000000",  # 87
    "010001 010001 001010 000100 001010 010001 010001 000000",  # 88
    "010001 010001 010001 001010 000100 000100 000100 000000",  # 89
    "011110 000010 000100 001000 010000 010000 011110 000000",  # 90
    "001110 001000 001000 001000 001000 001000 001110 000000",  # 91
    "000000 010000 001000 000100 000010 000001 000000 000000",  # 92
    "001110 000010 000010 000010 000010 000010 001110 000000",  # 93
    "000100 001010 010001 000000 000000 000000 000000 000000",  # 94
    "000000 000000 000000 000000 000000 000000 000000 111111",  # 95
    "001100 001100 000100 000000 000000 000000 000000 000000",  # 96
    "000000 000000 001110 000001 001111 010001 001111 000000",  # 97
    "010000 010000 011110 010001 010001 010001 011110 000000",  # 98
    "000000 000000 001110 010001 010000 010001 001110 000000",  # 99
    "000001 000001 001111 010001 010001 010001 001111 000000",  # 100
    "000000 000000 001110 010001 011110 010000 001110 000000",  # 101
    "000110 001000 001000 011110 001000 001000 001000 000000",  # 102
    "000000 000000 001111 010001 010001 001111 000001 001110",  # 103
    "010000 010000 011100 010010 010010 010010 010010 000000",  # 104
    "000100 000000 000100 000100 000100 000100 000110 000000",  # 105
    "000010 000000 000110 000010 000010 000010 010010 001100",  # 106
    "010000 010000 010010 010100 011000 010100 010010 000000",  # 107
    "000100 000100 000100 000100 000100 000100 000110 000000",  # 108
    "000000 000000 011010 010101 010101 010001 010001 000000",  # 109
    "000000 000000 011100 010010 010010 010010 010010 000000",  # 110
    "000000 000000 001110 010001 010001 010001 001110 000000",  # 111
    "000000 000000 011110 010001 010001 010001 011110 010000",  # 112
    "000000 000000 001111 010001 010001 010001 001111 000001",  # 113
    "000000 000000 010110 001001 001000 001000 011100 000000",  # 114
    "000000 000000 001110 010000 001110 000001 001110 000000",  # 115
    "000000 001000 011110 001000 001000 001010 000100 000000",  # 116
    "000000 000000 010010 010010 010010 010110 001010 000000",  # 117
    "000000 000000 010001 010001 010001 001010 000100 000000",  # 118
    "000000 000000 010001 010001 010101 011111 001010 000000",  # 119
    "000000 000000 010010 010010 001100 010010 010010 000000",  # 120
    "000000 000000 010010 010010 010010 001110 000100 011000",  # 121
    "000000 000000 011110 000010 001100 010000 011110 000000",  # 122
    "000110 001000 001000 011000 001000 001000 000110 000000",  # 123
    "000100 000100 000100 000100 000100 000100 000100 000100",  # 124
    "001100 000010 000010 000011 000010 000010 001100 000000",  # 125
    "001010 010100 000000 000000 000000 000000 000000 000000",  # 126
    "000100 001110 011011 010001 010001 011111 000000 000000",  # 127
)


def _parse(raw: str) -> Glyph:
    return tuple(tuple(int(bit) for bit in row) for row in raw.split())


_GLYPHS: tuple[Glyph, ...] = tuple(_parse(raw) for raw in _RAW)


def low_glyph(code: int) -> Glyph:
    """Return the bitmap for a character code in 0-127.

    The result is eight rows, top first, each a tuple of six 0/1 pixels,
    leftmost first.
    """
    if not FIRST_CODE <= code <= LAST_CODE:
        raise ValueError(f"glyph code {code} is outside {FIRST_CODE}-{LAST_CODE}")
    return _GLYPHS[code]