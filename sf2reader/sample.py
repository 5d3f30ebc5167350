"""Sample header records of the hydra."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

from .errors import InvalidChunkSizeError, TruncatedDataError, UnknownSampleTypeError
from .riff import Chunk, decode_fixed_string

_RECORD = struct.Struct("<20sIIIIIBbHH")
_RECORD_SIZE = _RECORD.size


class SampleLink(IntEnum):
    """The kind of a sample and how it pairs with others."""

    NONE = 0
    MONO_SAMPLE = 0x1
    RIGHT_SAMPLE = 0x2
    LEFT_SAMPLE = 0x4
    LINKED_SAMPLE = 0x8
    ROM_MONO_SAMPLE = 0x8001
    ROM_RIGHT_SAMPLE = 0x8002
    ROM_LEFT_SAMPLE = 0x8004
    ROM_LINKED_SAMPLE = 0x8008
    VORBIS_MONO_SAMPLE = 0x11
    VORBIS_RIGHT_SAMPLE = 0x12
    VORBIS_LEFT_SAMPLE = 0x14
    VORBIS_LINKED_SAMPLE = 0x18

    def is_mono(self) -> bool:
        return self in _MONO

    def is_right(self) -> bool:
        return self in _RIGHT

    def is_left(self) -> bool:
        return self in _LEFT

    def is_linked(self) -> bool:
        return self in _LINKED

    def is_rom(self) -> bool:
        return self in _ROM

    def is_vorbis(self) -> bool:
        return self in _VORBIS


_MONO = frozenset(
    {SampleLink.MONO_SAMPLE, SampleLink.ROM_MONO_SAMPLE, SampleLink.VORBIS_MONO_SAMPLE}
)
_RIGHT = frozenset(
    {SampleLink.RIGHT_SAMPLE, SampleLink.ROM_RIGHT_SAMPLE, SampleLink.VORBIS_RIGHT_SAMPLE}
)
_LEFT = frozenset(
    {SampleLink.LEFT_SAMPLE, SampleLink.ROM_LEFT_SAMPLE, SampleLink.VORBIS_LEFT_SAMPLE}
)
_LINKED = frozenset(
    {
        SampleLink.LINKED_SAMPLE,
        SampleLink.ROM_LINKED_SAMPLE,
        SampleLink.VORBIS_LINKED_SAMPLE,
    }
)
_ROM = frozenset(
    {
        SampleLink.ROM_MONO_SAMPLE,
        SampleLink.ROM_RIGHT_SAMPLE,
        SampleLink.ROM_LEFT_SAMPLE,
        SampleLink.ROM_LINKED_SAMPLE,
    }
)
_VORBIS = frozenset(
    {
        SampleLink.VORBIS_MONO_SAMPLE,
        SampleLink.VORBIS_RIGHT_SAMPLE,
        SampleLink.VORBIS_LEFT_SAMPLE,
        SampleLink.VORBIS_LINKED_SAMPLE,
    }
)


@dataclass(frozen=True)
class SampleHeader:
    """Location, loop points and pitch information of one sample."""

    name: str
    start: int
    end: int
    loop_start: int
    loop_end: int
    sample_rate: int
    origpitch: int
    pitchadj: int
    sample_link: int
    sample_type: SampleLink

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SampleHeader":
        """Decode a 46-byte sample header record."""
        if len(raw) < _RECORD_SIZE:
            raise TruncatedDataError(
                f"sample header needs {_RECORD_SIZE} bytes, got {len(raw)}"
            )
        (
            name,
            start,
            end,
            loop_start,
            loop_end,
            sample_rate,
            origpitch,
            pitchadj,
            sample_link,
            sample_type,
        ) = _RECORD.unpack_from(raw)
        try:
            link = SampleLink(sample_type)
        except ValueError:
            raise UnknownSampleTypeError(sample_type) from None
        return cls(
            name=decode_fixed_string(name).rstrip(),
            start=start,
            end=end,
            loop_start=loop_start,
            loop_end=loop_end,
            sample_rate=sample_rate,
            origpitch=origpitch,
            pitchadj=pitchadj,
            sample_link=sample_link,
            sample_type=link,
        )


def read_sample_headers(chunk: Chunk, stream: BinaryIO) -> list[SampleHeader]:
    """Read every record of an ``shdr`` chunk."""
    if chunk.id != "shdr":
        raise ValueError(f"expected a shdr chunk, got {chunk.id!r}")
    size = chunk.length
    if size == 0 or size % _RECORD_SIZE:
        raise InvalidChunkSizeError("sample", size)
    data = chunk.read_contents(stream)
    return [
        SampleHeader.from_bytes(data[offset : offset + _RECORD_SIZE])
        for offset in range(0, size, _RECORD_SIZE)
    ]