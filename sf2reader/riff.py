"""Reading of RIFF-structured streams."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from .errors import SoundFontError, TruncatedDataError

_HEADER = struct.Struct("<4sI")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size) or b""
    if len(data) < size:
        raise TruncatedDataError(f"expected {size} bytes, got {len(data)}")
    return data


def decode_fixed_string(raw: bytes) -> str:
    """Decode a NUL-padded UTF-8 field, dropping everything from the first NUL."""
    text, _, _ = bytes(raw).partition(b"\0")
    try:
        return text.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SoundFontError(f"invalid string data: {exc}") from exc


@dataclass(frozen=True)
class Chunk:
    """A RIFF chunk header located at ``pos`` in a stream."""

    pos: int
    id: str
    length: int

    @classmethod
    def read(cls, stream: BinaryIO, pos: int) -> "Chunk":
        """Read the chunk header found at ``pos``."""
        stream.seek(pos)
        fourcc, length = _HEADER.unpack(_read_exact(stream, _HEADER.size))
        return cls(pos, fourcc.decode("latin-1"), length)

    def content_offset(self) -> int:
        """Offset of the chunk's contents from the start of the stream."""
        return self.pos + 8

    def read_type(self, stream: BinaryIO) -> str:
        """Read the form type of a ``RIFF`` or ``LIST`` chunk."""
        stream.seek(self.content_offset())
        return _read_exact(stream, 4).decode("latin-1")

    def read_contents(self, stream: BinaryIO) -> bytes:
        """Read the whole contents of the chunk."""
        stream.seek(self.content_offset())
        return _read_exact(stream, self.length)

    def children(self, stream: BinaryIO) -> Iterator["Chunk"]:
        """Yield the sub-chunks of a ``RIFF`` or ``LIST`` chunk."""
        cur = self.pos + 12
        end = self.pos + 4 + self.length
        while cur < end:
            child = Chunk.read(stream, cur)
            yield child
            cur += child.length + 8 + child.length % 2