"""Bag, instrument header and preset header records of the hydra."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from .errors import InvalidChunkSizeError
from .riff import Chunk, decode_fixed_string

_BAG = struct.Struct("<HH")
_INSTRUMENT = struct.Struct("<20sH")
_PRESET = struct.Struct("<20sHHHIII")


@dataclass(frozen=True)
class Bag:
    """Indices of the first generator and modulator of a zone."""

    generator_id: int
    modulator_id: int


@dataclass(frozen=True)
class InstrumentHeader:
    """An instrument's name and the index of its first zone."""

    name: str
    bag_id: int


@dataclass(frozen=True)
class PresetHeader:
    """A preset's name, MIDI numbers and the index of its first zone."""

    name: str
    preset: int
    bank: int
    bag_id: int
    library: int
    genre: int
    morphology: int


def _name(raw: bytes) -> str:
    return decode_fixed_string(raw).rstrip()


def _check_id(chunk: Chunk, *allowed: str) -> None:
    if chunk.id not in allowed:
        expected = " or ".join(allowed)
        raise ValueError(f"expected a {expected} chunk, got {chunk.id!r}")


def _records(
    chunk: Chunk, stream: BinaryIO, record: struct.Struct, kind: str
) -> Iterator[tuple]:
    size = chunk.length
    if size == 0 or size % record.size:
        raise InvalidChunkSizeError(kind, size)
    return record.iter_unpack(chunk.read_contents(stream))


def read_bags(chunk: Chunk, stream: BinaryIO) -> list[Bag]:
    """Read every record of a ``pbag`` or ``ibag`` chunk."""
    _check_id(chunk, "pbag", "ibag")
    return [Bag(gen, mod) for gen, mod in _records(chunk, stream, _BAG, "bag")]


def read_instrument_headers(chunk: Chunk, stream: BinaryIO) -> list[InstrumentHeader]:
    """Read every record of an ``inst`` chunk."""
    _check_id(chunk, "inst")
    return [
        InstrumentHeader(_name(name), bag_id)
        for name, bag_id in _records(chunk, stream, _INSTRUMENT, "instrument")
    ]


def read_preset_headers(chunk: Chunk, stream: BinaryIO) -> list[PresetHeader]:
    """Read every record of a ``phdr`` chunk."""
    _check_id(chunk, "phdr")
    return [
        PresetHeader(_name(name), preset, bank, bag_id, library, genre, morphology)
        for name, preset, bank, bag_id, library, genre, morphology in _records(
            chunk, stream, _PRESET, "preset"
        )
    ]