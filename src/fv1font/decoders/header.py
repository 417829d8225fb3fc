import logging
from dataclasses import dataclass
from enum import Enum

from .constants import FAMILY_NAME_ENCODING, FV1_MAGIC, HEADER_SIZE, HEADER_STRUCT
from .errors import InvalidMagic
from .source import as_source

logger = logging.getLogger(__name__)


class MagicPolicy(Enum):
    """What to do when the header tag is not FNT1."""
    STRICT = "strict"    # abort before any glyph is read
    LENIENT = "lenient"  # warn and keep decoding


@dataclass(frozen=True)
class FontHeader:
    magic: bytes
    family: str
    size: int
    style: int

    @property
    def magic_ok(self) -> bool:
        return self.magic == FV1_MAGIC


def decode_family(raw: bytes) -> str:
    """Decode the NUL-padded family name field."""
    return raw.split(b"\x00", 1)[0].decode(FAMILY_NAME_ENCODING)


def decode_header(source, policy: MagicPolicy = MagicPolicy.LENIENT) -> FontHeader:
    """Read and decode the 48-byte font header.

    Args:
        source: ByteSource or any object with a read(n) method
        policy: how a magic mismatch is handled

    Returns:
        The decoded FontHeader

    Raises:
        TruncatedInput: fewer than 48 bytes were available
        SourceError: the source failed while reading
        InvalidMagic: the tag is wrong and policy is STRICT
    """
    src = as_source(source)
    start = src.offset
    raw = src.read_exact(HEADER_SIZE, "header")
    magic, family, size, style = HEADER_STRUCT.unpack(raw)

    header = FontHeader(magic=magic, family=decode_family(family), size=size, style=style)

    if not header.magic_ok:
        if policy is MagicPolicy.STRICT:
            raise InvalidMagic(magic, start)
        logger.warning(f"Header magic {magic!r} is not {FV1_MAGIC!r}, continuing anyway")
    else:
        logger.debug("Header OK")

    logger.debug(f"Font family: {header.family}, size: {header.size}, style: {header.style}")
    return header
