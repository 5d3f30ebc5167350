"""Low-level reading of a whole SoundFont file, with no post-processing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .errors import MissingChunk, MissingChunkError, SoundFontError, UnexpectedChunkError
from .hydra import Hydra
from .info import Info
from .riff import Chunk
from .sample_data import SampleData

_LISTS = {
    "INFO": ("info", Info.read),
    "sdta": ("sample_data", SampleData.read),
    "pdta": ("hydra", Hydra.read),
}


@dataclass
class RawSoundFontData:
    """The three top-level lists of a SoundFont file, as stored."""

    info: Info
    sample_data: SampleData
    hydra: Hydra

    @classmethod
    def load(cls, stream: BinaryIO) -> "RawSoundFontData":
        """Read a SoundFont from a seekable binary stream."""
        root = Chunk.read(stream, 0)
        if root.id != "RIFF":
            raise SoundFontError(f"expected a RIFF chunk, got {root.id!r}")
        form = root.read_type(stream)
        if form != "sfbk":
            raise SoundFontError(f"expected an sfbk form, got {form!r}")

        fields: dict = {}
        for child in root.children(stream):
            if child.id != "LIST":
                raise SoundFontError(f"expected a LIST chunk, got {child.id!r}")
            member = _LISTS.get(child.read_type(stream))
            if member is None:
                raise UnexpectedChunkError("root", child)
            name, reader = member
            fields[name] = reader(child, stream)

        if "info" not in fields:
            raise MissingChunkError(MissingChunk.INFO)
        if "sample_data" not in fields:
            raise MissingChunkError(MissingChunk.SAMPLE_DATA)
        if "hydra" not in fields:
            raise MissingChunkError(MissingChunk.HYDRA)
        return cls(**fields)