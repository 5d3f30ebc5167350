"""Modulator records of the preset and instrument hydra lists."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import BinaryIO, Union

from .errors import (
    InvalidChunkSizeError,
    TruncatedDataError,
    UnknownGeneratorTypeError,
    UnknownModulatorTransformError,
)
from .generator import GeneratorType
from .riff import Chunk

_RECORD = struct.Struct("<HHhHH")
_RECORD_SIZE = _RECORD.size


class GeneralPalette(IntEnum):
    """Sources of the general controller palette.

    An index that is not listed here is kept as a plain int; a modulator with
    such a source should be ignored by a synthesizer.
    """

    NO_CONTROLLER = 0
    NOTE_ON_VELOCITY = 2
    NOTE_ON_KEY_NUMBER = 3
    POLY_PRESSURE = 10
    CHANNEL_PRESSURE = 13
    PITCH_WHEEL = 14
    PITCH_WHEEL_SENSITIVITY = 16
    LINK = 127


@dataclass(frozen=True)
class GeneralController:
    """The general controller palette is selected."""

    palette: Union[GeneralPalette, int]

    @classmethod
    def from_index(cls, index: int) -> "GeneralController":
        try:
            return cls(GeneralPalette(index))
        except ValueError:
            return cls(index)


@dataclass(frozen=True)
class MidiController:
    """The MIDI continuous controller palette is selected."""

    index: int


ControllerPalette = Union[GeneralController, MidiController]


class SourceDirection(Enum):
    """Direction in which a controller maps its input."""

    POSITIVE = 0
    NEGATIVE = 1


class SourcePolarity(Enum):
    """Whether a controller maps to 0..1 or to -1..1."""

    UNIPOLAR = 0
    BIPOLAR = 1


class SourceType(IntEnum):
    """Continuity of a controller; unknown values are kept as plain ints."""

    LINEAR = 0
    CONCAVE = 1
    CONVEX = 2
    SWITCH = 3


@dataclass(frozen=True)
class ModulatorSource:
    """A decoded modulator source enumerator."""

    index: int
    controller_palette: ControllerPalette
    direction: SourceDirection
    polarity: SourcePolarity
    ty: Union[SourceType, int]

    @classmethod
    def from_raw(cls, raw: int) -> "ModulatorSource":
        """Decode a 16-bit source enumerator."""
        if not 0 <= raw <= 0xFFFF:
            raise ValueError(f"modulator source must fit in 16 bits, got {raw}")
        index = raw & 0x7F
        if raw & (1 << 7):
            palette: ControllerPalette = MidiController(index)
        else:
            palette = GeneralController.from_index(index)
        direction = (
            SourceDirection.NEGATIVE if raw & (1 << 8) else SourceDirection.POSITIVE
        )
        polarity = (
            SourcePolarity.BIPOLAR if raw & (1 << 9) else SourcePolarity.UNIPOLAR
        )
        raw_type = (raw >> 10) & 0x3F
        try:
            ty: Union[SourceType, int] = SourceType(raw_type)
        except ValueError:
            ty = raw_type
        return cls(index, palette, direction, polarity, ty)

    def is_linear(self) -> bool:
        return self.ty == SourceType.LINEAR

    def is_concave(self) -> bool:
        return self.ty == SourceType.CONCAVE

    def is_convex(self) -> bool:
        return self.ty == SourceType.CONVEX

    def is_switch(self) -> bool:
        return self.ty == SourceType.SWITCH

    def is_unipolar(self) -> bool:
        return self.polarity is SourcePolarity.UNIPOLAR

    def is_bipolar(self) -> bool:
        return self.polarity is SourcePolarity.BIPOLAR

    def is_positive(self) -> bool:
        return self.direction is SourceDirection.POSITIVE

    def is_negative(self) -> bool:
        return self.direction is SourceDirection.NEGATIVE

    def is_cc(self) -> bool:
        """True when the source is a MIDI continuous controller."""
        return isinstance(self.controller_palette, MidiController)

    def is_gc(self) -> bool:
        """True when the source comes from the general controller palette."""
        return isinstance(self.controller_palette, GeneralController)


class ModulatorTransform(Enum):
    """How a modulator's output is fed to its destination."""

    LINEAR = 0
    ABSOLUTE = 2

    @classmethod
    def from_raw(cls, raw: int) -> "ModulatorTransform":
        """Decode a transform enumerator, raising for undefined values."""
        try:
            return cls(raw)
        except ValueError:
            raise UnknownModulatorTransformError(raw) from None


def _generator_type(raw: int) -> GeneratorType:
    try:
        return GeneratorType(raw)
    except ValueError:
        raise UnknownGeneratorTypeError(raw) from None


@dataclass(frozen=True)
class Modulator:
    """One modulator record."""

    src: ModulatorSource
    dest: GeneratorType
    amount: int
    amt_src: ModulatorSource
    transform: ModulatorTransform

    @classmethod
    def from_bytes(cls, raw: bytes, terminal: bool = False) -> "Modulator":
        """Decode a ten-byte modulator record.

        The terminal record is meant to be all zeros but often is not, so when
        ``terminal`` is true its fields are zeroed before decoding.
        """
        if len(raw) < _RECORD_SIZE:
            raise TruncatedDataError(
                f"modulator record needs {_RECORD_SIZE} bytes, got {len(raw)}"
            )
        src, dest, amount, amt_src, transform = _RECORD.unpack_from(raw)
        if terminal:
            src = dest = amount = amt_src = transform = 0
        return cls(
            src=ModulatorSource.from_raw(src),
            dest=_generator_type(dest),
            amount=amount,
            amt_src=ModulatorSource.from_raw(amt_src),
            transform=ModulatorTransform.from_raw(transform),
        )


def read_modulators(chunk: Chunk, stream: BinaryIO) -> list[Modulator]:
    """Read every record of a ``pmod`` or ``imod`` chunk."""
    if chunk.id not in ("pmod", "imod"):
        raise ValueError(f"expected a pmod or imod chunk, got {chunk.id!r}")
    size = chunk.length
    if size == 0 or size % _RECORD_SIZE:
        raise InvalidChunkSizeError("modulator", size)
    data = chunk.read_contents(stream)
    last = size - _RECORD_SIZE
    return [
        Modulator.from_bytes(data[offset : offset + _RECORD_SIZE], offset == last)
        for offset in range(0, size, _RECORD_SIZE)
    ]


_NO_CONTROLLER_SRC = ModulatorSource(
    index=0,
    controller_palette=GeneralController(GeneralPalette.NO_CONTROLLER),
    direction=SourceDirection.POSITIVE,
    polarity=SourcePolarity.UNIPOLAR,
    ty=SourceType.LINEAR,
)


def _midi_source(index, direction, polarity, ty) -> ModulatorSource:
    return ModulatorSource(index, MidiController(index), direction, polarity, ty)


def _general_source(palette, direction, polarity, ty) -> ModulatorSource:
    return ModulatorSource(
        int(palette), GeneralController(palette), direction, polarity, ty
    )


def _default(dest, amount, src) -> Modulator:
    return Modulator(
        src=src,
        dest=dest,
        amount=amount,
        amt_src=_NO_CONTROLLER_SRC,
        transform=ModulatorTransform.LINEAR,
    )


#: MIDI note-on velocity to initial attenuation.
DEFAULT_VEL2ATT_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _general_source(
        GeneralPalette.NOTE_ON_VELOCITY,
        SourceDirection.NEGATIVE,
        SourcePolarity.UNIPOLAR,
        SourceType.CONCAVE,
    ),
)

#: MIDI note-on velocity to filter cutoff.
DEFAULT_VEL2FILTER_MOD = _default(
    GeneratorType.INITIAL_FILTER_FC,
    -2400,
    _general_source(
        GeneralPalette.NOTE_ON_VELOCITY,
        SourceDirection.NEGATIVE,
        SourcePolarity.UNIPOLAR,
        SourceType.LINEAR,
    ),
)

#: MIDI channel pressure to vibrato LFO pitch depth.
DEFAULT_AT2VIBLFO_MOD = _default(
    GeneratorType.VIB_LFO_TO_PITCH,
    50,
    _general_source(
        GeneralPalette.CHANNEL_PRESSURE,
        SourceDirection.POSITIVE,
        SourcePolarity.UNIPOLAR,
        SourceType.LINEAR,
    ),
)

#: MIDI CC 1 (modulation wheel) to vibrato LFO pitch depth.
DEFAULT_MOD2VIBLFO_MOD = _default(
    GeneratorType.VIB_LFO_TO_PITCH,
    50,
    _midi_source(
        1, SourceDirection.POSITIVE, SourcePolarity.UNIPOLAR, SourceType.LINEAR
    ),
)

#: MIDI CC 7 (channel volume) to initial attenuation.
DEFAULT_ATT_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _midi_source(
        7, SourceDirection.NEGATIVE, SourcePolarity.UNIPOLAR, SourceType.CONCAVE
    ),
)

#: MIDI CC 10 (pan) to pan position; 500 is 50% in tenths of a percent.
DEFAULT_PAN_MOD = _default(
    GeneratorType.PAN,
    500,
    _midi_source(
        10, SourceDirection.POSITIVE, SourcePolarity.BIPOLAR, SourceType.LINEAR
    ),
)

#: MIDI CC 11 (expression) to initial attenuation.
DEFAULT_EXPR_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _midi_source(
        11, SourceDirection.NEGATIVE, SourcePolarity.UNIPOLAR, SourceType.CONCAVE
    ),
)

#: MIDI CC 91 (effects 1 depth) to reverb send.
DEFAULT_REVERB_MOD = _default(
    GeneratorType.REVERB_EFFECTS_SEND,
    200,
    _midi_source(
        91, SourceDirection.POSITIVE, SourcePolarity.UNIPOLAR, SourceType.LINEAR
    ),
)

#: MIDI CC 93 (effects 3 depth) to chorus send.
DEFAULT_CHORUS_MOD = _default(
    GeneratorType.CHORUS_EFFECTS_SEND,
    200,
    _midi_source(
        93, SourceDirection.POSITIVE, SourcePolarity.UNIPOLAR, SourceType.LINEAR
    ),
)


def default_pitch_bend_mod(dest: GeneratorType) -> Modulator:
    """Pitch wheel to ``dest``, scaled by pitch wheel sensitivity.

    Initial pitch is not a standard generator, so the caller picks the
    destination.
    """
    return Modulator(
        src=_general_source(
            GeneralPalette.PITCH_WHEEL,
            SourceDirection.POSITIVE,
            SourcePolarity.BIPOLAR,
            SourceType.LINEAR,
        ),
        dest=dest,
        amount=12700,
        amt_src=_general_source(
            GeneralPalette.PITCH_WHEEL_SENSITIVITY,
            SourceDirection.POSITIVE,
            SourcePolarity.UNIPOLAR,
            SourceType.LINEAR,
        ),
        transform=ModulatorTransform.LINEAR,
    )