from typing import Optional


class FontDecodeError(RuntimeError):
    """Base class for every failure raised while decoding an fv1 font."""

    def __init__(self, msg: str, offset: Optional[int] = None, stage: Optional[str] = None) -> None:
        RuntimeError.__init__(self, msg)
        self.msg = msg
        self.offset = offset
        self.stage = stage

    def __str__(self) -> str:
        where = []
        if self.stage:
            where.append(self.stage)
        if self.offset is not None:
            where.append(f"offset {self.offset}")
        if not where:
            return self.msg
        return f"{self.msg} ({', '.join(where)})"


class TruncatedInput(FontDecodeError):
    """The byte source ended before the requested number of bytes arrived."""

    def __init__(self, expected: int, got: int, offset: Optional[int] = None, stage: Optional[str] = None) -> None:
        FontDecodeError.__init__(
            self, f"Unexpected end of file: wanted {expected} bytes, got {got}", offset, stage)
        self.expected = expected
        self.got = got


class SourceError(FontDecodeError):
    """The underlying byte source failed for a reason other than end of input."""


class InvalidMagic(FontDecodeError):
    """The header tag is not FNT1 and the caller asked for strict checking."""

    def __init__(self, magic: bytes, offset: Optional[int] = 0, stage: Optional[str] = "header") -> None:
        FontDecodeError.__init__(self, f"Bad header magic {magic!r}", offset, stage)
        self.magic = magic


class InvalidCodepoint(FontDecodeError, ValueError):
    """A codepoint outside the glyph table range was requested."""

    def __init__(self, codepoint: int) -> None:
        FontDecodeError.__init__(self, f"Codepoint {codepoint} (0x{codepoint:04X}) is out of range")
        self.codepoint = codepoint
