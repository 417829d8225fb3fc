"""
Decoder package initialization
Makes the header and glyph table decoders available for import directly from the package
"""

from .errors import FontDecodeError, InvalidCodepoint, InvalidMagic, SourceError, TruncatedInput
from .header import FontHeader, MagicPolicy, decode_header
from .glyphs import (
    Font, GlyphRecord, bitmap_size, codepoint_to_index, decode_font,
    decode_glyphs, iter_glyphs, load_font, read_glyph,
)
from .source import ByteSource

__all__ = [
    'ByteSource', 'Font', 'FontDecodeError', 'FontHeader', 'GlyphRecord',
    'InvalidCodepoint', 'InvalidMagic', 'MagicPolicy', 'SourceError',
    'TruncatedInput', 'bitmap_size', 'codepoint_to_index', 'decode_font',
    'decode_glyphs', 'decode_header', 'iter_glyphs', 'load_font', 'read_glyph',
]
