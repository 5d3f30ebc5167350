"""The ``INFO`` list: version and descriptive text of a SoundFont."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import (
    MissingChunk,
    MissingChunkError,
    TruncatedDataError,
    UnexpectedChunkError,
)
from .riff import Chunk, decode_fixed_string

_VERSION = struct.Struct("<HH")

_TEXT_FIELDS = {
    "isng": "sound_engine",
    "INAM": "bank_name",
    "irom": "rom_name",
    "ICRD": "creation_date",
    "IENG": "engineers",
    "IPRD": "product",
    "ICOP": "copyright",
    "ICMT": "comments",
    "ISFT": "software",
}

_VERSION_FIELDS = {
    "ifil": "version",
    "iver": "rom_version",
}


@dataclass(frozen=True)
class Version:
    """A major/minor version pair."""

    major: int
    minor: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Version":
        """Decode the two little-endian words of a version record."""
        if len(raw) < _VERSION.size:
            raise TruncatedDataError(
                f"version needs {_VERSION.size} bytes, got {len(raw)}"
            )
        return cls(*_VERSION.unpack_from(raw))


@dataclass(frozen=True)
class Info:
    """Supplemental information about a SoundFont bank."""

    version: Version
    sound_engine: str = ""
    bank_name: str = ""
    rom_name: Optional[str] = None
    rom_version: Optional[Version] = None
    creation_date: Optional[str] = None
    engineers: Optional[str] = None
    product: Optional[str] = None
    copyright: Optional[str] = None
    comments: Optional[str] = None
    software: Optional[str] = None

    @classmethod
    def read(cls, chunk: Chunk, stream: BinaryIO) -> "Info":
        """Read an ``INFO`` list.

        The sound engine and bank name are required by the format but often
        missing, so they default to empty strings.
        """
        if chunk.id != "LIST":
            raise ValueError(f"expected a LIST chunk, got {chunk.id!r}")
        form = chunk.read_type(stream)
        if form != "INFO":
            raise ValueError(f"expected an INFO list, got {form!r}")

        fields: dict = {}
        for child in chunk.children(stream):
            if child.id in _VERSION_FIELDS:
                contents = child.read_contents(stream)
                fields[_VERSION_FIELDS[child.id]] = Version.from_bytes(contents)
            elif child.id in _TEXT_FIELDS:
                contents = child.read_contents(stream)
                fields[_TEXT_FIELDS[child.id]] = decode_fixed_string(contents)
            else:
                raise UnexpectedChunkError("INFO", child)

        if "version" not in fields:
            raise MissingChunkError(MissingChunk.VERSION)
        return cls(**fields)