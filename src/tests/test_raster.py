import numpy as np
import pytest

from fv1font.decoders import GlyphRecord, decode_font
from fv1font.decoders.glyphs import bitmap_size
from fv1font.processing.raster import PixelGrid, raster_size, rasterize

from conftest import make_font


def test_concrete_checkerboard():
    """8x4 glyph F0 0F F0 0F unpacks MSB first."""
    font = decode_font(make_font({65: dict(width=8, height=4, data=bytes([0xF0, 0x0F, 0xF0, 0x0F]))}))
    grid = rasterize(font.glyph(65))
    assert list(grid.rows()) == [
        [1, 1, 1, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 1, 1, 1],
        [1, 1, 1, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 1, 1, 1],
    ]
    assert grid.pixels.dtype == bool


def test_empty_glyph_has_zero_rows():
    grid = rasterize(GlyphRecord(0, 0, 0, 0, 0))
    assert grid.is_empty
    assert grid.shape == (0, 0)
    assert list(grid.rows()) == []


def test_negative_width_is_empty():
    grid = rasterize(GlyphRecord(-4, 6, 0, 0, 0))
    assert grid.is_empty


def test_width_padded_to_byte():
    """Bits past the logical width are still emitted up to W."""
    glyph = GlyphRecord(3, 1, 0, 0, 0, bytes([0b10111111, 0xFF, 0xFF, 0xFF]))
    grid = rasterize(glyph)
    assert grid.shape == (4, 8)
    assert grid.width == 3 and grid.height == 1
    assert list(grid.rows())[0] == [1, 0, 1, 1, 1, 1, 1, 1]


def test_two_byte_rows():
    """12-pixel rows span two bytes, padding rows are included."""
    data = bytes([0xFF, 0xF0, 0x80, 0x10, 0xFF, 0xF0, 0xAA, 0xBB])
    grid = rasterize(GlyphRecord(12, 3, 0, 0, 0, data))
    rows = [''.join(map(str, r)) for r in grid.rows()]
    assert rows == [
        "1111111111110000",
        "1000000000010000",
        "1111111111110000",
        "1010101010111011",
    ]


def test_short_payload_pads_with_zeros():
    """A 24x1 glyph has 4 payload bytes but rasterizes to 4 rows of 3 bytes."""
    glyph = GlyphRecord(24, 1, 0, 0, 0, bytes([0xFF, 0x00, 0x81, 0x42]))
    assert len(glyph.data) == bitmap_size(24, 1) == 4
    grid = rasterize(glyph)
    assert grid.shape == (4, 24)
    assert grid.pixels[0].tolist() == [True] * 8 + [False] * 8 + [True] + [False] * 6 + [True]
    assert grid.pixels[1, :8].tolist() == [False, True, False, False, False, False, True, False]
    assert not grid.pixels[1, 8:].any()
    assert not grid.pixels[2:].any()


def test_dimension_law():
    """Every non-empty glyph rasterizes to round8(w) x round4(h)."""
    glyphs = {}
    cp = 33
    for w in range(1, 20):
        for h in range(1, 12):
            size = bitmap_size(w, h)
            glyphs[cp] = dict(width=w, height=h, data=bytes((i * 37) & 0xFF for i in range(size)))
            cp += 1
    font = decode_font(make_font(glyphs))

    checked = 0
    for cp, glyph in font.non_empty():
        grid = rasterize(glyph)
        assert grid.shape == raster_size(glyph.width, glyph.height)
        assert grid.shape[1] % 8 == 0 and grid.shape[0] % 4 == 0
        assert grid.shape[1] >= glyph.width and grid.shape[0] >= glyph.height
        checked += 1
    assert checked == 19 * 11


def test_bits_match_payload():
    """Packing the grid back gives the payload bytes it came from."""
    data = bytes([0x12, 0x34, 0x56, 0x78, 0x9A, 0xBC, 0xDE, 0xF0])
    grid = rasterize(GlyphRecord(16, 4, 0, 0, 0, data))
    assert np.packbits(grid.pixels, axis=1).tobytes() == data


def test_raster_size():
    assert raster_size(8, 4) == (4, 8)
    assert raster_size(9, 5) == (8, 16)
    assert raster_size(0, 0) == (0, 0)
    assert raster_size(-3, 2) == (4, 0)


def test_pixel_grid_is_frozen():
    grid = rasterize(GlyphRecord(8, 1, 0, 0, 0, b"\x80\x00\x00\x00"))
    assert isinstance(grid, PixelGrid)
    with pytest.raises(AttributeError):
        grid.width = 2
