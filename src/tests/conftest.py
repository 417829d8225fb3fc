import sys
import os
import struct

import pytest

# Add src directory to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fv1font.decoders.constants import FIRST_CODEPOINT, GLYPH_COUNT
from fv1font.decoders.glyphs import bitmap_size


def make_header(magic=b"FNT1", family=b"Test", size=12, style=0):
    """Build the 48-byte font header."""
    return struct.pack("<4s32shh8s", magic, family, size, style, b"\x00" * 8)


def make_glyph(width, height, baseline=0, offset=0, incby=0, data=None, padding=b"\x00" * 6):
    """Build one glyph slot: metadata, padding, payload."""
    if data is None:
        data = bytes(bitmap_size(width, height))
    assert len(data) == bitmap_size(width, height)
    return struct.pack("<hhhhh", width, height, baseline, offset, incby) + padding + bytes(data)


def make_table(glyphs=None, count=GLYPH_COUNT):
    """Build a glyph table; ``glyphs`` maps codepoint to make_glyph kwargs, other slots are empty."""
    glyphs = glyphs or {}
    parts = []
    for index in range(count):
        kwargs = glyphs.get(index + FIRST_CODEPOINT)
        parts.append(make_glyph(**kwargs) if kwargs else make_glyph(0, 0))
    return b"".join(parts)


def make_font(glyphs=None, **header_kwargs):
    return make_header(**header_kwargs) + make_table(glyphs)


class ChunkedReader:
    """Byte stream that never returns more than ``chunk`` bytes per read."""

    def __init__(self, data, chunk=3):
        self.data = data
        self.pos = 0
        self.chunk = chunk
        self.reads = 0

    def read(self, n):
        self.reads += 1
        out = self.data[self.pos:self.pos + min(n, self.chunk)]
        self.pos += len(out)
        return out


class FailingReader:
    """Byte stream that raises OSError once ``fail_at`` bytes have been read."""

    def __init__(self, data, fail_at):
        self.data = data
        self.pos = 0
        self.fail_at = fail_at

    def read(self, n):
        if self.pos >= self.fail_at:
            raise OSError(5, "Input/output error")
        out = self.data[self.pos:min(self.pos + n, self.fail_at)]
        self.pos += len(out)
        return out


# Glyphs used across tests, keyed by codepoint
SAMPLE_GLYPHS = {
    ord('A'): dict(width=8, height=4, baseline=-4, offset=0, incby=9,
                   data=bytes([0xF0, 0x0F, 0xF0, 0x0F])),
    ord('B'): dict(width=12, height=3, baseline=-3, offset=1, incby=13,
                   data=bytes([0xFF, 0xF0, 0x80, 0x10, 0xFF, 0xF0, 0xAA, 0xBB])),
    ord('C'): dict(width=-1, height=5),
}


@pytest.fixture(scope="session")
def font_bytes():
    return make_font(SAMPLE_GLYPHS)


@pytest.fixture
def font_file(tmp_path, font_bytes):
    path = tmp_path / "test.fv1"
    path.write_bytes(font_bytes)
    return path
