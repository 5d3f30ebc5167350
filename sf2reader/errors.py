"""Exceptions raised while reading SoundFont files."""

from __future__ import annotations

from enum import Enum


class SoundFontError(Exception):
    """Base class for every error raised while reading a SoundFont file."""


class TruncatedDataError(SoundFontError):
    """The data ended before a complete value could be read."""


class InvalidChunkSizeError(SoundFontError):
    """A hydra sub-chunk has a size that is not a whole number of records."""

    def __init__(self, kind, size):
        super().__init__(f"invalid {kind} chunk size: {size}")
        self.kind = kind
        self.size = size


class UnknownGeneratorTypeError(SoundFontError):
    """A generator operator outside the range defined by the format."""

    def __init__(self, value):
        super().__init__(f"unknown generator type: {value}")
        self.value = value


class UnknownSampleTypeError(SoundFontError):
    """A sample header carries a sample type the format does not define."""

    def __init__(self, value):
        super().__init__(f"unknown sample type: {value:#x}")
        self.value = value


class UnknownModulatorTransformError(SoundFontError):
    """A modulator uses a transform the format does not define."""

    def __init__(self, value):
        super().__init__(f"unknown modulator transform: {value}")
        self.value = value


class UnexpectedChunkError(SoundFontError):
    """A chunk turned up inside a list where it does not belong."""

    def __init__(self, parent, chunk):
        chunk_id = getattr(chunk, "id", chunk)
        super().__init__(f"unexpected member of {parent}: {chunk_id!r}")
        self.parent = parent
        self.chunk = chunk


class MissingChunk(Enum):
    """Chunks that must be present, keyed by their four-character code."""

    INFO = "INFO"
    SAMPLE_DATA = "sdta"
    HYDRA = "pdta"
    VERSION = "ifil"

    PRESET_HEADERS = "phdr"
    PRESET_BAGS = "pbag"
    PRESET_MODULATORS = "pmod"
    PRESET_GENERATORS = "pgen"

    INSTRUMENT_HEADERS = "inst"
    INSTRUMENT_BAGS = "ibag"
    INSTRUMENT_MODULATORS = "imod"
    INSTRUMENT_GENERATORS = "igen"

    SAMPLE_HEADERS = "shdr"


class MissingChunkError(SoundFontError):
    """A required chunk was not found in the file."""

    def __init__(self, missing):
        missing = MissingChunk(missing)
        super().__init__(f"missing chunk {missing.value!r} ({missing.name})")
        self.missing = missing