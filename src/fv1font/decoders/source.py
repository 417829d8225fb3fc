import io
import logging
from typing import BinaryIO, Optional, Union

from .errors import SourceError, TruncatedInput

logger = logging.getLogger(__name__)


class ByteSource:
    """Sequential reader over a non-seekable byte stream.

    Wraps anything with a ``read(n)`` method (file objects, sockets made
    into files, pipes). Short reads are retried until the requested count
    is satisfied or the stream signals end of input with ``b""``. The
    number of bytes consumed so far is kept in ``offset`` so errors can
    report where they happened.
    """

    def __init__(self, stream: Union[BinaryIO, bytes, bytearray, memoryview]) -> None:
        if isinstance(stream, (bytes, bytearray, memoryview)):
            stream = io.BytesIO(bytes(stream))
        self.stream = stream
        self.offset = 0

    def read_exact(self, count: int, stage: Optional[str] = None) -> bytes:
        """Read exactly ``count`` bytes or raise.

        Raises:
            TruncatedInput: the stream ended first
            SourceError: the stream raised an OSError or would block
        """
        start = self.offset
        chunks = []
        got = 0
        while got < count:
            try:
                chunk = self.stream.read(count - got)
            except OSError as e:
                raise SourceError(f"Error: {e}", start, stage) from e
            if chunk is None:
                raise SourceError("Source has no data available (non-blocking stream)", start, stage)
            if not chunk:
                raise TruncatedInput(count, got, start, stage)
            if len(chunk) < count - got:
                logger.debug(f"Short read at offset {self.offset}: {len(chunk)} of {count - got} bytes")
            chunks.append(chunk)
            got += len(chunk)
            self.offset += len(chunk)
        return b"".join(chunks)

    def skip(self, count: int, stage: Optional[str] = None) -> None:
        """Consume ``count`` bytes without keeping them."""
        self.read_exact(count, stage)


def as_source(source) -> ByteSource:
    """Return ``source`` unchanged if it is already a ByteSource, else wrap it."""
    if isinstance(source, ByteSource):
        return source
    return ByteSource(source)
