import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .constants import (
    BITMAP_ALIGN_BYTES, END_CODEPOINT, FIRST_CODEPOINT, GLYPH_COUNT,
    GLYPH_META_SIZE, GLYPH_META_STRUCT, GLYPH_PADDING_SIZE, GLYPH_RECORD_SIZE,
    HEADER_SIZE, ROW_ALIGN_BITS,
)
from .errors import InvalidCodepoint, SourceError
from .header import FontHeader, MagicPolicy, decode_header
from .source import as_source

logger = logging.getLogger(__name__)


def ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def round_up_to_4(n: int) -> int:
    return ceil_div(n, BITMAP_ALIGN_BYTES) * BITMAP_ALIGN_BYTES


def round_up_to_8(n: int) -> int:
    return ceil_div(n, ROW_ALIGN_BITS) * ROW_ALIGN_BITS


def bitmap_size(width: int, height: int) -> int:
    """Number of payload bytes following a glyph's metadata.

    Each row takes ceil(width / 8) bytes and the total is padded up to a
    multiple of 4. Non-positive dimensions have no payload.
    """
    if width <= 0 or height <= 0:
        return 0
    return round_up_to_4(height * ceil_div(width, ROW_ALIGN_BITS))


def codepoint_to_index(codepoint: int) -> int:
    """Map a codepoint to its glyph table slot."""
    if not FIRST_CODEPOINT <= codepoint < END_CODEPOINT:
        raise InvalidCodepoint(codepoint)
    return codepoint - FIRST_CODEPOINT


def index_to_codepoint(index: int) -> int:
    return index + FIRST_CODEPOINT


@dataclass(frozen=True)
class GlyphRecord:
    width: int
    height: int
    baseline: int
    offset: int
    incby: int
    data: bytes = b""

    @property
    def size(self) -> int:
        return bitmap_size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def row_bytes(self) -> int:
        if self.width <= 0:
            return 0
        return ceil_div(self.width, ROW_ALIGN_BITS)


def read_glyph(source, codepoint: int = FIRST_CODEPOINT) -> GlyphRecord:
    """Read one glyph slot: metadata, padding, then its bitmap payload."""
    src = as_source(source)

    width, height, baseline, offset, incby = GLYPH_META_STRUCT.unpack(
        src.read_exact(GLYPH_META_SIZE, f"glyph {codepoint} metadata"))
    src.skip(GLYPH_PADDING_SIZE, f"glyph {codepoint} padding")

    size = bitmap_size(width, height)
    if size == 0:
        if width < 0 or height < 0:
            logger.warning(f"Glyph {codepoint} has invalid size {width}x{height}, treating as empty")
        else:
            logger.debug(f"Glyph {codepoint} is empty ({width}x{height})")
        data = b""
    else:
        data = src.read_exact(size, f"glyph {codepoint} bitmap")

    return GlyphRecord(width, height, baseline, offset, incby, data)


def iter_glyphs(source, count: int = GLYPH_COUNT,
                stop: Optional[int] = None) -> Iterator[Tuple[int, GlyphRecord]]:
    """Yield (codepoint, glyph) pairs in table order.

    Reading is lazy; each slot is consumed only when the next pair is
    requested. If ``stop`` is given, iteration ends after that codepoint.
    """
    src = as_source(source)
    for index in range(count):
        codepoint = index_to_codepoint(index)
        yield codepoint, read_glyph(src, codepoint)
        if stop is not None and codepoint == stop:
            logger.debug(f"Stopped at codepoint {stop}")
            return


def decode_glyphs(source) -> Tuple[GlyphRecord, ...]:
    """Decode the full glyph table.

    Either all GLYPH_COUNT records are returned or the first failing read
    propagates; no partial table is produced.
    """
    return tuple(glyph for _, glyph in iter_glyphs(source))


@dataclass(frozen=True)
class Font:
    header: FontHeader
    glyphs: Tuple[GlyphRecord, ...]

    def __post_init__(self) -> None:
        if len(self.glyphs) != GLYPH_COUNT:
            raise ValueError(f"Font needs {GLYPH_COUNT} glyphs, got {len(self.glyphs)}")

    def __len__(self) -> int:
        return len(self.glyphs)

    def __iter__(self) -> Iterator[Tuple[int, GlyphRecord]]:
        for index, glyph in enumerate(self.glyphs):
            yield index_to_codepoint(index), glyph

    def glyph(self, codepoint: int) -> GlyphRecord:
        """Return the glyph for ``codepoint``.

        Raises:
            InvalidCodepoint: codepoint outside [32, 0x4E00)
        """
        return self.glyphs[codepoint_to_index(codepoint)]

    def non_empty(self) -> Iterator[Tuple[int, GlyphRecord]]:
        return ((cp, glyph) for cp, glyph in self if not glyph.is_empty)

    @property
    def byte_length(self) -> int:
        """Size in bytes of the encoded font this was decoded from."""
        return HEADER_SIZE + sum(GLYPH_RECORD_SIZE + len(g.data) for g in self.glyphs)


def decode_font(source, policy: MagicPolicy = MagicPolicy.LENIENT) -> Font:
    """Decode a complete font: header followed by the whole glyph table."""
    src = as_source(source)
    header = decode_header(src, policy)
    glyphs = decode_glyphs(src)
    font = Font(header, glyphs)

    empty = sum(1 for g in glyphs if g.is_empty)
    logger.info(f"Decoded font '{header.family}' size {header.size}: "
                f"{len(glyphs) - empty} glyphs with bitmaps, {empty} empty, {src.offset} bytes")
    return font


def load_font(path, policy: MagicPolicy = MagicPolicy.LENIENT) -> Font:
    """Open ``path`` and decode it as an fv1 font."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise SourceError(f"Failed to open font file {path}: {e}", stage="open") from e
    with f:
        return decode_font(f, policy)
