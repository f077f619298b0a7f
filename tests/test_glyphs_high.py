import pytest

from gbasnake.glyphs_high import FIRST_CODE, LAST_CODE, high_glyph
from gbasnake.glyphs_low import GLYPH_HEIGHT, GLYPH_WIDTH, low_glyph


@pytest.mark.parametrize("code", range(FIRST_CODE, LAST_CODE + 1))
def test_every_glyph_has_eight_rows_of_six_bits(code):
    glyph = high_glyph(code)
    assert len(glyph) == GLYPH_HEIGHT
    for row in glyph:
        assert len(row) == GLYPH_WIDTH
        assert set(row) <= {0, 1}


@pytest.mark.parametrize("code", [-1, 0, 127, 256, 1000])
def test_codes_outside_range_are_rejected(code):
    with pytest.raises(ValueError):
        high_glyph(code)


def test_full_block_is_all_set():
    assert all(all(bit == 1 for bit in row) for row in high_glyph(219))


def test_left_bar_uses_only_first_column():
    assert all(row == (1, 0, 0, 0, 0, 0) for row in high_glyph(220))


@pytest.mark.parametrize("left, right", [(220, 251), (221, 250), (222, 249), (223, 248), (224, 247)])
def test_bar_glyphs_repeat_in_reverse(left, right):
    assert high_glyph(left) == high_glyph(right)


def test_lower_blocks_grow_one_row_at_a_time():
    counts = [sum(1 for row in high_glyph(code) if all(row)) for code in range(212, 220)]
    assert counts == list(range(1, 9))


def test_checker_shades_are_complementary():
    light = high_glyph(177)
    for row in light:
        assert tuple(1 - bit for bit in row) in light


def test_vertical_line_matches_pipe_in_low_half():
    assert high_glyph(179) == low_glyph(124)


def test_duplicate_glyphs_in_source_are_equal():
    assert high_glyph(181) == high_glyph(230)
    assert high_glyph(132) == high_glyph(228)


def test_glyphs_are_distinct_where_expected():
    assert high_glyph(128) != high_glyph(135)