"""Generator records of the preset and instrument hydra lists."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Union

from .errors import (
    InvalidChunkSizeError,
    TruncatedDataError,
    UnknownGeneratorTypeError,
)
from .riff import Chunk

_RECORD_SIZE = 4


class GeneratorType(IntEnum):
    """Generator operators defined by the SoundFont format."""

    START_ADDRS_OFFSET = 0
    END_ADDRS_OFFSET = 1
    STARTLOOP_ADDRS_OFFSET = 2
    ENDLOOP_ADDRS_OFFSET = 3
    START_ADDRS_COARSE_OFFSET = 4
    MOD_LFO_TO_PITCH = 5
    VIB_LFO_TO_PITCH = 6
    MOD_ENV_TO_PITCH = 7
    INITIAL_FILTER_FC = 8
    INITIAL_FILTER_Q = 9
    MOD_LFO_TO_FILTER_FC = 10
    MOD_ENV_TO_FILTER_FC = 11
    END_ADDRS_COARSE_OFFSET = 12
    MOD_LFO_TO_VOLUME = 13
    UNUSED1 = 14
    CHORUS_EFFECTS_SEND = 15
    REVERB_EFFECTS_SEND = 16
    PAN = 17
    UNUSED2 = 18
    UNUSED3 = 19
    UNUSED4 = 20
    DELAY_MOD_LFO = 21
    FREQ_MOD_LFO = 22
    DELAY_VIB_LFO = 23
    FREQ_VIB_LFO = 24
    DELAY_MOD_ENV = 25
    ATTACK_MOD_ENV = 26
    HOLD_MOD_ENV = 27
    DECAY_MOD_ENV = 28
    SUSTAIN_MOD_ENV = 29
    RELEASE_MOD_ENV = 30
    KEYNUM_TO_MOD_ENV_HOLD = 31
    KEYNUM_TO_MOD_ENV_DECAY = 32
    DELAY_VOL_ENV = 33
    ATTACK_VOL_ENV = 34
    HOLD_VOL_ENV = 35
    DECAY_VOL_ENV = 36
    SUSTAIN_VOL_ENV = 37
    RELEASE_VOL_ENV = 38
    KEYNUM_TO_VOL_ENV_HOLD = 39
    KEYNUM_TO_VOL_ENV_DECAY = 40
    INSTRUMENT = 41
    RESERVED1 = 42
    KEY_RANGE = 43
    VEL_RANGE = 44
    STARTLOOP_ADDRS_COARSE_OFFSET = 45
    KEYNUM = 46
    VELOCITY = 47
    INITIAL_ATTENUATION = 48
    RESERVED2 = 49
    ENDLOOP_ADDRS_COARSE_OFFSET = 50
    COARSE_TUNE = 51
    FINE_TUNE = 52
    SAMPLE_ID = 53
    SAMPLE_MODES = 54
    RESERVED3 = 55
    SCALE_TUNING = 56
    EXCLUSIVE_CLASS = 57
    OVERRIDING_ROOT_KEY = 58
    UNUSED5 = 59
    END_OPER = 60


@dataclass(frozen=True)
class GeneratorAmountRange:
    """A low/high byte pair, used for key and velocity ranges."""

    low: int
    high: int


_RANGE_TYPES = frozenset({GeneratorType.KEY_RANGE, GeneratorType.VEL_RANGE})
_UNSIGNED_TYPES = frozenset({GeneratorType.INSTRUMENT, GeneratorType.SAMPLE_ID})


@dataclass(frozen=True)
class Generator:
    """One generator record.

    ``ty`` is a :class:`GeneratorType` when the operator is known, otherwise the
    raw operator number. ``amount`` is a range for key and velocity ranges, an
    unsigned int for instrument and sample indices, and a signed int otherwise.
    """

    ty: Union[GeneratorType, int]
    amount: Union[int, GeneratorAmountRange]

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Generator":
        """Decode a four-byte generator record."""
        if len(raw) < _RECORD_SIZE:
            raise TruncatedDataError(
                f"generator record needs {_RECORD_SIZE} bytes, got {len(raw)}"
            )
        (op,) = struct.unpack_from("<H", raw)
        try:
            ty: Union[GeneratorType, int] = GeneratorType(op)
        except ValueError:
            ty = op

        amount: Union[int, GeneratorAmountRange]
        if ty in _RANGE_TYPES:
            amount = GeneratorAmountRange(low=raw[2], high=raw[3])
        elif ty in _UNSIGNED_TYPES:
            (amount,) = struct.unpack_from("<H", raw, 2)
        else:
            (amount,) = struct.unpack_from("<h", raw, 2)
        return cls(ty, amount)

    def raw_type(self) -> int:
        """The operator number as stored in the file."""
        return int(self.ty)

    def known_type(self) -> GeneratorType:
        """The operator as a :class:`GeneratorType`, or raise if it is unknown."""
        if isinstance(self.ty, GeneratorType):
            return self.ty
        raise UnknownGeneratorTypeError(self.ty)


def read_generators(chunk: Chunk, stream: BinaryIO) -> list[Generator]:
    """Read every record of a ``pgen`` or ``igen`` chunk."""
    if chunk.id not in ("pgen", "igen"):
        raise ValueError(f"expected a pgen or igen chunk, got {chunk.id!r}")
    size = chunk.length
    if size == 0 or size % _RECORD_SIZE:
        raise InvalidChunkSizeError("generator", size)
    data = chunk.read_contents(stream)
    return [
        Generator.from_bytes(data[offset : offset + _RECORD_SIZE])
        for offset in range(0, size, _RECORD_SIZE)
    ]