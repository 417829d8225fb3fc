import numpy as np
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..decoders.glyphs import GlyphRecord, round_up_to_4, round_up_to_8


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """Rasterized glyph bitmap.

    ``pixels`` is a boolean array of shape (H, W) where W is the glyph
    width rounded up to 8 and H the height rounded up to 4. ``width`` and
    ``height`` keep the logical glyph extent.
    """
    pixels: np.ndarray
    width: int
    height: int

    @property
    def shape(self) -> Tuple[int, int]:
        return self.pixels.shape

    @property
    def is_empty(self) -> bool:
        return self.pixels.shape[0] == 0

    def rows(self) -> Iterator[List[int]]:
        """Yield each row as a list of 0/1 ints."""
        for row in self.pixels:
            yield [int(p) for p in row]


def raster_size(width: int, height: int) -> Tuple[int, int]:
    """Return the (H, W) shape of the grid a glyph of this size rasterizes to."""
    return round_up_to_4(max(height, 0)), round_up_to_8(max(width, 0))


def rasterize(glyph: GlyphRecord) -> PixelGrid:
    """Unpack a glyph's bitmap into a PixelGrid.

    Bits are read MSB first, row-major, W / 8 bytes per row. Rows past the
    logical height up to H are included. A payload that runs out before H
    rows are filled reads as unset pixels.
    """
    H, W = raster_size(glyph.width, glyph.height)

    if not glyph.data:
        return PixelGrid(np.zeros((0, W), dtype=bool), glyph.width, glyph.height)

    row_bytes = W // 8
    needed = H * row_bytes
    raw = np.frombuffer(glyph.data, dtype=np.uint8)[:needed]
    if raw.size < needed:
        raw = np.concatenate([raw, np.zeros(needed - raw.size, dtype=np.uint8)])

    bits = np.unpackbits(raw.reshape(H, row_bytes), axis=1, bitorder='big')
    return PixelGrid(bits.astype(bool), glyph.width, glyph.height)
