import io
import struct

import pytest

from sf2reader.errors import (
    InvalidChunkSizeError,
    TruncatedDataError,
    UnknownGeneratorTypeError,
    UnknownModulatorTransformError,
)
from sf2reader.generator import GeneratorType
from sf2reader.modulator import (
    DEFAULT_ATT_MOD,
    DEFAULT_CHORUS_MOD,
    DEFAULT_PAN_MOD,
    DEFAULT_VEL2ATT_MOD,
    GeneralController,
    GeneralPalette,
    MidiController,
    Modulator,
    ModulatorSource,
    ModulatorTransform,
    SourceDirection,
    SourcePolarity,
    SourceType,
    default_pitch_bend_mod,
    read_modulators,
)
from sf2reader.riff import Chunk


def _record(src, dest, amount, amt_src, transform):
    return struct.pack("<HHhHH", src, dest, amount, amt_src, transform)


def _chunk_stream(chunk_id, payload, declared=None):
    size = len(payload) if declared is None else declared
    data = chunk_id.encode("latin-1") + struct.pack("<I", size) + payload
    stream = io.BytesIO(data)
    return Chunk.read(stream, 0), stream


def test_velocity_source_decodes_to_default():
    src = ModulatorSource.from_raw(0x0502)
    assert src == DEFAULT_VEL2ATT_MOD.src
    assert src.is_gc() and not src.is_cc()
    assert src.is_negative() and src.is_unipolar() and src.is_concave()


def test_midi_cc_source():
    src = ModulatorSource.from_raw(0x0587)
    assert src == DEFAULT_ATT_MOD.src
    assert src.controller_palette == MidiController(7)
    assert src.is_cc()


def test_zero_source_is_no_controller():
    src = ModulatorSource.from_raw(0)
    assert src.controller_palette == GeneralController(GeneralPalette.NO_CONTROLLER)
    assert src.is_positive() and src.is_linear() and src.is_unipolar()


def test_pitch_bend_sources():
    mod = default_pitch_bend_mod(GeneratorType.FINE_TUNE)
    assert mod.dest is GeneratorType.FINE_TUNE
    assert mod.amount == 12700
    assert ModulatorSource.from_raw(0x020E) == mod.src
    assert mod.src.is_bipolar()
    assert ModulatorSource.from_raw(0x0010) == mod.amt_src


def test_unknown_source_type_kept_raw():
    src = ModulatorSource.from_raw(5 << 10)
    assert src.ty == 5
    assert not any(
        [src.is_linear(), src.is_concave(), src.is_convex(), src.is_switch()]
    )


def test_unknown_general_palette_kept_raw():
    src = ModulatorSource.from_raw(1)
    assert src.controller_palette == GeneralController(1)
    assert src.index == 1


@pytest.mark.parametrize(
    "ty,check",
    [
        (SourceType.CONVEX, "is_convex"),
        (SourceType.SWITCH, "is_switch"),
        (SourceType.LINEAR, "is_linear"),
    ],
)
def test_source_type_bits(ty, check):
    src = ModulatorSource.from_raw(int(ty) << 10)
    assert src.ty is ty
    assert getattr(src, check)()


def test_source_out_of_range():
    with pytest.raises(ValueError):
        ModulatorSource.from_raw(0x10000)


def test_transform_from_raw():
    assert ModulatorTransform.from_raw(0) is ModulatorTransform.LINEAR
    assert ModulatorTransform.from_raw(2) is ModulatorTransform.ABSOLUTE
    with pytest.raises(UnknownModulatorTransformError) as info:
        ModulatorTransform.from_raw(1)
    assert info.value.value == 1


def test_from_bytes_matches_default():
    raw = _record(0x0502, int(GeneratorType.INITIAL_ATTENUATION), 960, 0, 0)
    assert Modulator.from_bytes(raw) == DEFAULT_VEL2ATT_MOD


def test_from_bytes_negative_amount():
    raw = _record(0, int(GeneratorType.INITIAL_FILTER_FC), -2400, 0, 2)
    mod = Modulator.from_bytes(raw)
    assert mod.amount == -2400
    assert mod.transform is ModulatorTransform.ABSOLUTE


def test_terminal_record_is_zeroed():
    raw = _record(0xFFFF, 999, -5, 0xFFFF, 7)
    mod = Modulator.from_bytes(raw, True)
    assert mod.dest is GeneratorType.START_ADDRS_OFFSET
    assert mod.amount == 0
    assert mod.src == ModulatorSource.from_raw(0)
    assert mod.transform is ModulatorTransform.LINEAR


def test_unknown_destination_raises():
    with pytest.raises(UnknownGeneratorTypeError) as info:
        Modulator.from_bytes(_record(0, 61, 0, 0, 0))
    assert info.value.value == 61


def test_unknown_transform_in_record_raises():
    with pytest.raises(UnknownModulatorTransformError):
        Modulator.from_bytes(_record(0, 0, 0, 0, 3))


def test_short_record_raises():
    with pytest.raises(TruncatedDataError):
        Modulator.from_bytes(b"\x00" * 9)


def test_read_modulators_zeroes_last():
    payload = _record(0x0502, int(GeneratorType.INITIAL_ATTENUATION), 960, 0, 0)
    payload += _record(0x1234, 999, 42, 0x4321, 9)
    chunk, stream = _chunk_stream("pmod", payload)
    mods = read_modulators(chunk, stream)
    assert len(mods) == 2
    assert mods[0] == DEFAULT_VEL2ATT_MOD
    assert mods[1].amount == 0
    assert mods[1].dest is GeneratorType.START_ADDRS_OFFSET


def test_read_modulators_imod_accepted():
    payload = _record(0, 0, 0, 0, 0)
    chunk, stream = _chunk_stream("imod", payload)
    assert len(read_modulators(chunk, stream)) == 1


@pytest.mark.parametrize("size", [0, 15])
def test_read_modulators_bad_size(size):
    chunk, stream = _chunk_stream("pmod", b"\x00" * size)
    with pytest.raises(InvalidChunkSizeError) as info:
        read_modulators(chunk, stream)
    assert info.value.size == size


def test_read_modulators_wrong_chunk():
    chunk, stream = _chunk_stream("pgen", b"\x00" * 10)
    with pytest.raises(ValueError):
        read_modulators(chunk, stream)


def test_default_constants():
    assert DEFAULT_PAN_MOD.amount == 500
    assert DEFAULT_PAN_MOD.src.is_bipolar()
    assert DEFAULT_PAN_MOD.dest is GeneratorType.PAN
    assert DEFAULT_CHORUS_MOD.src.controller_palette == MidiController(93)
    assert DEFAULT_CHORUS_MOD.amt_src.direction is SourceDirection.POSITIVE
    assert DEFAULT_CHORUS_MOD.amt_src.polarity is SourcePolarity.UNIPOLAR