"""Bitmaps for the second half (codes 128-255) of the 6x8 screen font."""

from __future__ import annotations

from gbasnake.glyphs_low import GLYPH_HEIGHT, GLYPH_WIDTH, Glyph

FIRST_CODE = 128
LAST_CODE = 255

# One entry per character code from 128; eight rows of six pixels, top first.
_RAW: tuple[str, ...] = (
    "001110 010001 010000 010000 010001 001110 000100 001100",  # 128
    "010010 000000 010010 010010 010010 010110 001010 000000",  # 129
    "000011 000000 001110 010001 011110 010000 001110 000000",  # 130
    "001110 000000 001110 000001 001111 010001 001111 000000",  # 131
    "001010 000000 001110 000001 001111 010001 001111 000000",  # 132
    "001100 000000 001110 000001 001111 010001 001111 000000",  # 133
    "001110 001010 001110 000001 001111 010001 001111 000000",  # 134
    "000000 001110 010001 010000 010001 001110 000100 001100",  # 135
    "001110 000000 001110 010001 011110 010000 001110 000000",  # 136
    "001010 000000 001110 010001 011110 010000 001110 000000",  # 137
    "001100 000000 001110 010001 011110 010000 001110 000000",  # 138
    "001010 000000 000100 000100 000100 000100 000110 000000",  # 139
    "000100 001010 000000 000100 000100 000100 000110 000000",  # 140
    "001000 000000 000100 000100 000100 000100 000110 000000",  # 141
    "001010 000000 000100 001010 010001 011111 010001 000000",  # 142
    "001110 001010 001110 011011 010001 011111 010001 000000",  # 143
    "000011 000000 011111 010000 011110 010000 011111 000000",  # 144
    "000000 000000 011110 000101 011111 010100 001111 000000",  # 145
    "001111 010100 010100 011111 010100 010100 010111 000000",  # 146
    "001110 000000 001100 010010 010010 010010 001100 000000",  # 147
    "001010 000000 001100 010010 010010 010010 001100 000000",  # 148
    "011000 000000 001100 010010 010010 010010 001100 000000",  # 149
    "001110 000000 010010 010010 010010 010110 001010 000000",  # 150
    "011000 000000 010010 010010 010010 010110 001010 000000",  # 151
    "001010 000000 010010 010010 010010 001110 000100 011000",  # 152
    "010010 001100 010010 010010 010010 010010 001100 000000",  # 153
    "001010 000000 010010 010010 010010 010010 001100 000000",  # 154
    "000000 000100 001110 010000 010000 001110 000100 000000",  # 155
    "000110 001001 001000 011110 001000 001001 010111 000000",  # 156
    "010001 001010 000100 011111 000100 011111 000100 000000",  # 157
    "011000 010100 010100 011010 010111 010010 010010 000000",  # 158
    "000010 000101 000100 001110 000100 000100 010100 001000",  # 159
    "000110 000000 001110 000001 001111 010001 001111 000000",  # 160
    "000110 000000 000100 000100 000100 000100 000110 000000",  # 161
    "000110 000000 001100 010010 010010 010010 001100 000000",  # 162
    "000110 000000 010010 010010 010010 010110 001010 000000",  # 163
    "001010 010100 000000 011100 010010 010010 010010 000000",  # 164
    "001010 010100 000000 010010 011010 010110 010010 000000",  # 165
    "001110 000001 001111 010001 001111 000000 001111 000000",  # 166
    "001100 010010 010010 010010 001100 000000 011110 000000",  # 167
    "000100 000000 000100 001100 010000 010001 001110 000000",  # 168
    "000000 000000 011111 010000 010000 010000 000000 000000",  # 169
    "000000 000000 111111 000001 000001 000000 000000 000000",  # 170
    "010000 010010 010100 001110 010001 000010 000111 000000",  # 171
    "010000 010010 010100 001011 010101 000111 000001 000000",  # 172
    "000100 000000 000100 000100 001110 001110 000100 000000",  # 173
    "000000 000000 001001 010010 001001 000000 000000 000000",  # 174
    "000000 000000 010010 001001 010010 000000 000000 000000",  # 175
    "010101 000000 101010 000000 010101 000000 101010 000000",  # 176
    "010101 101010 010101 101010 010101 101010 010101 101010",  # 177
    "101010 111111 010101 111111 101010 111111 010101 111111",  # 178
    "000100 000100 000100 000100 000100 000100 000100 000100",  # 179
    "000100 000100 000100 111100 000100 000100 000100 000100",  # 180
    "000000 000000 010010 010010 010010 011100 010000 010000",  # 181
    "010100 010100 010100 110100 010100 010100 010100 010100",  # 182
    "000000 000000 000000 111100 010100 010100 010100 010100",  # 183
    "000000 111100 000100 111100 000100 000100 000100 000100",  # 184
    "010100 110100 000100 110100 010100 010100 010100 010100",  # 185
    "010100 010100 010100 010100 010100 010100 010100 010100",  # 186
    "000000 111100 000100 110100 010100 010100 010100 010100",  # 187
    "010100 110100 000100 111100 000000 000000 000000 000000",  # 188
    "010100 010100 010100 111100 000000 000000 000000 000000",  # 189
    "000100 111100 000100 111100 000000 000000 000000 000000",  # 190
    "000000 000000 000000 111100 000100 000100 000100 000100",  # 191
    "000100 000100 000100 000111 000000 000000 000000 000000",  # 192
    "000100 000100 000100 111111 000000 000000 000000 000000",  # 193
    "000000 000000 000000 111111 000100 000100 000100 000100",  # 194
    "000100 000100 000100 000111 000100 000100 000100 000100",  # 195
    "000000 000000 000000 111111 000000 000000 000000 000000",  # 196
    "000100 000100 000100 111111 000100 000100 000100 000100",  # 197
    "000100 000111 000100 000111 000100 000100 000100 000100",  # 198
    "010100 010100 010100 010111 010100 010100 010100 010100",  # 199
    "010100 010111 010000 011111 000000 000000 000000 000000",  # 200
    "000000 011111 010000 010111 010100 010100 010100 010100",  # 201
    "010100 110111 000000 111111 000000 000000 000000 000000",  # 202
    "000000 111111 000000 110111 010100 010100 010100 010100",  # 203
    "010100 010111 010000 010111 010100 010100 010100 010100",  # 204
    "000000 111111 000000 111111 000000 000000 000000 000000",  # 205
    "010100 110111 000000 110111 010100 010100 010100 010100",  # 206
    "000100 111111 000000 111111 000000 000000 000000 000000",  # 207
    "010100 010100 010100 111111 000000 000000 000000 000000",  # 208
    "000000 111111 000000 111111 000100 000100 000100 000100",  # 209
    "000000 000000 000000 111111 010100 010100 010100 010100",  # 210
    "010100 010100 010100 011111 000000 000000 000000 000000",  # 211
    "000000 000000 000000 000000 000000 000000 000000 111111",  # 212
    "000000 000000 000000 000000 000000 000000 111111 111111",  # 213
    "000000 000000 000000 000000 000000 111111 111111 111111",  # 214
    "000000 000000 000000 000000 111111 111111 111111 111111",  # 215
    "000000 000000 000000 111111 111111 111111 111111 111111",  # 216
    "000000 000000 111111 111111 111111 111111 111111 111111",  # 217
    "000000 111111 111111 111111 111111 111111 111111 111111",  # 218
    "111111 111111 111111 111111 111111 111111 111111 111111",  # 219
    "100000 100000 100000 100000 100000 100000 100000 100000",  # 220
    "110000 110000 110000 110000 110000 110000 110000 110000",  # 221
    "111000 111000 111000 111000 111000 111000 111000 111000",  # 222
    "111100 111100 111100 111100 111100 111100 111100 111100",  # 223
    "111110 111110 111110 111110 111110 111110 111110 111110",  # 224
    "000000 011100 010010 011100 010010 010010 011100 010000",  # 225
    "011110 010010 010000 010000 010000 010000 010000 000000",  # 226
    "000000 011111 001010 001010 001010 001010 001010 000000",  # 227
    "001010 000000 001110 000001 001111 010001 001111 000000",  # 228
    "000000 000000 001111 010010 010010 001100 000000 000000",  # 229
    "000000 000000 010010 010010 010010 011100 010000 010000",  # 230
    "000000 000000 001010 010100 000100 000100 000100 000000",  # 231
    "001110 000100 001110 010001 001110 000100 001110 000000",  # 232
    "001100 010010 010010 011110 010010 010010 001100 000000",  # 233
    "000000 001110 010001 010001 001010 001010 011011 000000",  # 234
    "001100 010000 001000 000100 001110 010010 001100 000000",  # 235
    "000000 000000 001010 010101 010101 001010 000000 000000",  # 236
    "000000 000100 001110 010101 010101 001110 000100 000000",  # 237
    "000000 001110 010000 011110 010000 001110 000000 000000",  # 238
    "000000 001100 010010 010010 010010 010010 000000 000000",  # 239
    "000000 011110 000000 011110 000000 011110 000000 000000",  # 240
    "000000 000100 001110 000100 000000 001110 000000 000000",  # 241
    "010000 001100 000010 001100 010000 000000 011110 000000",  # 242
    "000000 000000 111111 111000 100110 100001 100000 111111",  # 243
    "000000 000000 111111 000111 011001 100001 000001 111111",  # 244
    "000100 000100 000100 000100 000100 010100 001000 000000",  # 245
    "001010 000000 001110 010001 010001 010001 001110 000000",  # 246
    "111110 111110 111110 111110 111110 111110 111110 111110",  # 247
    "111100 111100 111100 111100 111100 111100 111100 111100",  # 248
    "111000 111000 111000 111000 111000 111000 111000 111000",  # 249
    "110000 110000 110000 110000 110000 110000 110000 110000",  # 250
    "100000 100000 100000 100000 100000 100000 100000 100000",  # 251
    "001010 000000 010010 010010 010010 010110 001010 000000",  # 252
    "011000 000100 001000 011100 000000 000000 000000 000000",  # 253
    "000000 000000 000000 011110 110010 110011 111110 001111",  # 254
    "010010 111111 010010 010010 111111 010010 000000 000000",  # 255
)


def _parse(raw: str) -> Glyph:
    rows = tuple(tuple(int(bit) for bit in row) for row in raw.split())
    if len(rows) != GLYPH_HEIGHT or any(len(row) != GLYPH_WIDTH for row in rows):
        raise ValueError(f"malformed glyph bitmap: {raw!r}")
    return rows


_GLYPHS: tuple[Glyph, ...] = tuple(_parse(raw) for raw in _RAW)


def high_glyph(code: int) -> Glyph:
    """Return the bitmap for a character code in 128-255.

    The result is eight rows, top first, each a tuple of six 0/1 pixels,
    leftmost first.
    """
    if not FIRST_CODE <= code <= LAST_CODE:
        raise ValueError(f"glyph code {code} is outside {FIRST_CODE}-{LAST_CODE}")
    return _GLYPHS[code - FIRST_CODE]