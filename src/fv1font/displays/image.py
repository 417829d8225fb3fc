import logging
import numpy as np
from PIL import Image, ImageDraw

from ..decoders.glyphs import Font
from ..processing.raster import PixelGrid, rasterize

logger = logging.getLogger(__name__)


def grid_to_image(grid: PixelGrid, scale: int = 1) -> Image.Image:
    """Convert a PixelGrid to a 1-bit Pillow image.

    Args:
        grid: rasterized glyph, must have at least one row
        scale: integer magnification, each pixel becomes scale x scale

    Returns:
        Image in mode '1', set pixels white
    """
    if grid.is_empty or grid.shape[1] == 0:
        raise ValueError("Cannot build an image from an empty grid")
    if scale < 1:
        raise ValueError(f"Scale must be at least 1, got {scale}")

    image = Image.fromarray(grid.pixels.astype(np.uint8) * 255).convert('1', dither=Image.Dither.NONE)
    if scale > 1:
        h, w = grid.shape
        image = image.resize((w * scale, h * scale), Image.Resampling.NEAREST)
    return image


def glyph_sheet(font: Font, start: int, end: int, columns: int = 16, scale: int = 1) -> Image.Image:
    """Lay out every glyph in [start, end] on one image, in codepoint order.

    Each glyph gets a fixed-size cell large enough for the biggest grid in
    the range. Empty glyphs leave their cell blank.
    """
    cells = [(cp, rasterize(font.glyph(cp))) for cp in range(start, end + 1)]
    if not cells:
        raise ValueError(f"Empty codepoint range {start}..{end}")

    cell_w = max(grid.shape[1] for _, grid in cells) or 8
    cell_h = max(grid.shape[0] for _, grid in cells) or 4
    gap = 1
    rows = (len(cells) + columns - 1) // columns
    cols = min(columns, len(cells))

    sheet = Image.new('1', (cols * (cell_w + gap) + gap, rows * (cell_h + gap) + gap))
    draw = ImageDraw.Draw(sheet)

    for i, (cp, grid) in enumerate(cells):
        x = gap + (i % columns) * (cell_w + gap)
        y = gap + (i // columns) * (cell_h + gap)
        if grid.is_empty:
            continue
        sheet.paste(grid_to_image(grid), (x, y))

    # Cell borders
    for c in range(cols + 1):
        draw.line([(c * (cell_w + gap), 0), (c * (cell_w + gap), sheet.height - 1)], fill=1)
    for r in range(rows + 1):
        draw.line([(0, r * (cell_h + gap)), (sheet.width - 1, r * (cell_h + gap))], fill=1)

    logger.debug(f"Built glyph sheet for {start}..{end}: {sheet.width}x{sheet.height}")

    if scale > 1:
        sheet = sheet.resize((sheet.width * scale, sheet.height * scale), Image.Resampling.NEAREST)
    return sheet
