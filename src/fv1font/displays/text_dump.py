"""
Text dump of fv1 fonts.
Formats headers and glyphs as plain text, one character per pixel, to help inspect font files.
"""

from typing import List, Optional

from ..decoders.glyphs import GlyphRecord
from ..decoders.header import FontHeader
from ..processing.raster import PixelGrid, rasterize

ON_PIXEL = '1'
OFF_PIXEL = '0'


def char_label(codepoint: int) -> str:
    """Return the glyph's character for display, or 'n/a' if it has no visible form."""
    ch = chr(codepoint)
    if ch.isprintable() and not ch.isspace():
        return ch
    return 'n/a'


def format_header(header: FontHeader) -> List[str]:
    return [
        "Header OK!" if header.magic_ok else "Header Error!",
        f"Font Family: {header.family}",
        f"Font Size: {header.size}",
        f"Font style: {header.style}",
    ]


def format_ruler(width: int, indent: str = "\t      ") -> str:
    """Column ruler matching the rows of a grid ``width`` pixels wide."""
    return indent + ''.join(str(x % 10) for x in range(width))


def format_rows(grid: PixelGrid, row_bytes: Optional[int] = None) -> List[str]:
    """Render grid rows as '1'/'0' strings.

    Each row is labelled with the 1-based index of its first payload byte.
    """
    if row_bytes is None:
        row_bytes = grid.shape[1] // 8
    lines = []
    for y, row in enumerate(grid.rows()):
        bits = ''.join(ON_PIXEL if p else OFF_PIXEL for p in row)
        lines.append(f"\t{y * row_bytes + 1:4d}: {bits}")
    return lines


def format_glyph(codepoint: int, glyph: GlyphRecord, ruler: bool = False) -> List[str]:
    """Full dump of one glyph: metadata, character, then its bitmap rows."""
    lines = [
        f"\twidth: {glyph.width}",
        f"\theight: {glyph.height}",
        f"\tbaseline: {glyph.baseline}",
        f"\toffset: {glyph.offset}",
        f"\tincby: {glyph.incby}",
        f"\tchar: '{char_label(codepoint)}' {codepoint}",
        f"\tglyph data ({len(glyph.data)} bytes):",
    ]
    if glyph.is_empty:
        return lines

    grid = rasterize(glyph)
    if ruler:
        lines.append(format_ruler(grid.shape[1]))
    lines.extend(format_rows(grid))
    return lines
