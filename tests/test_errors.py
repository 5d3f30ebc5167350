import pytest

from sf2reader.errors import (
    InvalidChunkSizeError,
    MissingChunk,
    MissingChunkError,
    SoundFontError,
    TruncatedDataError,
    UnexpectedChunkError,
    UnknownGeneratorTypeError,
    UnknownModulatorTransformError,
    UnknownSampleTypeError,
)


class _FakeChunk:
    id = "junk"


def test_invalid_chunk_size_keeps_fields():
    err = InvalidChunkSizeError("bag", 7)
    assert err.kind == "bag"
    assert err.size == 7
    assert "bag" in str(err)
    assert "7" in str(err)


@pytest.mark.parametrize(
    "cls", [UnknownGeneratorTypeError, UnknownSampleTypeError, UnknownModulatorTransformError]
)
def test_unknown_value_errors_are_soundfont_errors(cls):
    err = cls(300)
    assert err.value == 300
    assert isinstance(err, SoundFontError)


def test_truncated_is_caught_as_base():
    err = TruncatedDataError("short")
    assert str(err) == "short"
    assert isinstance(err, SoundFontError)


@pytest.mark.parametrize(
    "member, code",
    [
        (MissingChunk.INFO, "INFO"),
        (MissingChunk.SAMPLE_DATA, "sdta"),
        (MissingChunk.HYDRA, "pdta"),
        (MissingChunk.VERSION, "ifil"),
        (MissingChunk.PRESET_HEADERS, "phdr"),
        (MissingChunk.PRESET_BAGS, "pbag"),
        (MissingChunk.PRESET_MODULATORS, "pmod"),
        (MissingChunk.PRESET_GENERATORS, "pgen"),
        (MissingChunk.INSTRUMENT_HEADERS, "inst"),
        (MissingChunk.INSTRUMENT_BAGS, "ibag"),
        (MissingChunk.INSTRUMENT_MODULATORS, "imod"),
        (MissingChunk.INSTRUMENT_GENERATORS, "igen"),
        (MissingChunk.SAMPLE_HEADERS, "shdr"),
    ],
)
def test_missing_chunk_codes(member, code):
    assert member.value == code
    assert MissingChunk(code) is member


def test_missing_chunk_error_coerces_code():
    err = MissingChunkError("pdta")
    assert err.missing is MissingChunk.HYDRA
    assert "pdta" in str(err)


def test_missing_chunk_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        MissingChunkError("zzzz")


def test_unexpected_chunk_keeps_chunk():
    chunk = _FakeChunk()
    err = UnexpectedChunkError("hydra", chunk)
    assert err.parent == "hydra"
    assert err.chunk is chunk
    assert "junk" in str(err)