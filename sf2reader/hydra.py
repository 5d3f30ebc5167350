"""The ``pdta`` list: presets, instruments and sample headers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .errors import MissingChunk, MissingChunkError, UnexpectedChunkError
from .generator import Generator, read_generators
from .headers import (
    Bag,
    InstrumentHeader,
    PresetHeader,
    read_bags,
    read_instrument_headers,
    read_preset_headers,
)
from .modulator import Modulator, read_modulators
from .riff import Chunk
from .sample import SampleHeader, read_sample_headers

# Sub-chunk id -> (field name, reader, the error raised when it is absent).
# The order is the order in which missing chunks are reported.
_MEMBERS = {
    "phdr": ("preset_headers", read_preset_headers, MissingChunk.PRESET_HEADERS),
    "pbag": ("preset_bags", read_bags, MissingChunk.PRESET_BAGS),
    "pmod": ("preset_modulators", read_modulators, MissingChunk.PRESET_MODULATORS),
    "pgen": ("preset_generators", read_generators, MissingChunk.PRESET_GENERATORS),
    "inst": (
        "instrument_headers",
        read_instrument_headers,
        MissingChunk.INSTRUMENT_HEADERS,
    ),
    "ibag": ("instrument_bags", read_bags, MissingChunk.INSTRUMENT_BAGS),
    "imod": (
        "instrument_modulators",
        read_modulators,
        MissingChunk.INSTRUMENT_MODULATORS,
    ),
    "igen": (
        "instrument_generators",
        read_generators,
        MissingChunk.INSTRUMENT_GENERATORS,
    ),
    "shdr": ("sample_headers", read_sample_headers, MissingChunk.SAMPLE_HEADERS),
}


@dataclass
class Hydra:
    """The raw preset, instrument and sample lists of a SoundFont."""

    preset_headers: list[PresetHeader]
    preset_bags: list[Bag]
    preset_modulators: list[Modulator]
    preset_generators: list[Generator]

    instrument_headers: list[InstrumentHeader]
    instrument_bags: list[Bag]
    instrument_modulators: list[Modulator]
    instrument_generators: list[Generator]

    sample_headers: list[SampleHeader]

    @classmethod
    def read(cls, chunk: Chunk, stream: BinaryIO) -> "Hydra":
        """Read every sub-chunk of a ``pdta`` list."""
        if chunk.id != "LIST":
            raise ValueError(f"expected a LIST chunk, got {chunk.id!r}")
        form = chunk.read_type(stream)
        if form != "pdta":
            raise ValueError(f"expected a pdta list, got {form!r}")

        fields: dict = {}
        for child in chunk.children(stream):
            member = _MEMBERS.get(child.id)
            if member is None:
                raise UnexpectedChunkError("hydra", child)
            name, reader, _ = member
            fields[name] = reader(child, stream)

        for name, _, missing in _MEMBERS.values():
            if name not in fields:
                raise MissingChunkError(missing)
        return cls(**fields)