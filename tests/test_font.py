import pytest

from gbasnake.font import CHAR_COUNT, glyph_pixel, glyph_rows
from gbasnake.glyphs_high import high_glyph
from gbasnake.glyphs_low import GLYPH_HEIGHT, GLYPH_WIDTH, low_glyph


@pytest.mark.parametrize("code", [0, 65, 127])
def test_low_codes_come_from_low_table(code):
    assert glyph_rows(code) == low_glyph(code)


@pytest.mark.parametrize("code", [128, 200, 255])
def test_high_codes_come_from_high_table(code):
    assert glyph_rows(code) == high_glyph(code)


@pytest.mark.parametrize("char", ["A", "z", "0", " ", ":"])
def test_character_and_code_give_same_glyph(char):
    assert glyph_rows(char) == glyph_rows(ord(char))


def test_space_is_blank():
    assert glyph_rows(" ") == ((0, 0, 0, 0, 0, 0),) * 8


@pytest.mark.parametrize("code", [-1, CHAR_COUNT, 300])
def test_out_of_range_code_is_rejected(code):
    with pytest.raises(ValueError):
        glyph_rows(code)


@pytest.mark.parametrize("text", ["", "AB", "\u0100"])
def test_bad_characters_are_rejected(text):
    with pytest.raises(ValueError):
        glyph_rows(text)


@pytest.mark.parametrize("code", [1, 33, 83, 176, 254])
def test_pixels_agree_with_rows(code):
    rows = glyph_rows(code)
    for r in range(GLYPH_HEIGHT):
        for c in range(GLYPH_WIDTH):
            assert glyph_pixel(code, r, c) is bool(rows[r][c])


def test_full_block_pixel_is_set():
    assert glyph_pixel(219, 7, 5) is True


@pytest.mark.parametrize("row, col", [(-1, 0), (8, 0), (0, -1), (0, 6)])
def test_pixel_outside_glyph_is_rejected(row, col):
    with pytest.raises(IndexError):
        glyph_pixel(65, row, col)


def test_every_code_resolves():
    glyphs = [glyph_rows(code) for code in range(CHAR_COUNT)]
    assert len(glyphs) == CHAR_COUNT
    assert all(len(g) == GLYPH_HEIGHT for g in glyphs)