"""Location of the sample data sub-chunks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import UnexpectedChunkError
from .riff import Chunk


@dataclass(frozen=True)
class SampleChunk:
    """Where a sample data sub-chunk's contents lie in the stream.

    Read it with ``stream.seek(offset)`` followed by ``stream.read(length)``.
    """

    offset: int
    length: int

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> "SampleChunk":
        return cls(chunk.content_offset(), chunk.length)


@dataclass(frozen=True)
class SampleData:
    """The ``smpl`` (upper 16 bits) and ``sm24`` (lower 8 bits) sub-chunks."""

    smpl: Optional[SampleChunk] = None
    sm24: Optional[SampleChunk] = None

    @classmethod
    def read(cls, chunk: Chunk, stream: BinaryIO) -> "SampleData":
        """Locate the sub-chunks of an ``sdta`` list."""
        if chunk.id != "LIST":
            raise ValueError(f"expected a LIST chunk, got {chunk.id!r}")
        form = chunk.read_type(stream)
        if form != "sdta":
            raise ValueError(f"expected an sdta list, got {form!r}")

        found: dict[str, SampleChunk] = {}
        for child in chunk.children(stream):
            if child.id not in ("smpl", "sm24"):
                raise UnexpectedChunkError("sample data", child)
            found[child.id] = SampleChunk.from_chunk(child)
        return cls(smpl=found.get("smpl"), sm24=found.get("sm24"))