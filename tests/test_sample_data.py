import io
import struct

import pytest

from sf2reader.errors import UnexpectedChunkError
from sf2reader.riff import Chunk
from sf2reader.sample_data import SampleChunk, SampleData


def _chunk_bytes(fourcc, payload):
    data = fourcc.encode("latin-1") + struct.pack("<I", len(payload)) + payload
    if len(payload) % 2:
        data += b"\0"
    return data


def _list(form, *children):
    return _chunk_bytes("LIST", form.encode("latin-1") + b"".join(children))


def _read(data):
    stream = io.BytesIO(data)
    return SampleData.read(Chunk.read(stream, 0), stream), stream


def _contents(stream, sample_chunk):
    stream.seek(sample_chunk.offset)
    return stream.read(sample_chunk.length)


def test_reads_smpl_and_sm24():
    smpl = bytes(range(8))
    sm24 = b"\x01\x02\x03\x04"
    data, stream = _read(
        _list("sdta", _chunk_bytes("smpl", smpl), _chunk_bytes("sm24", sm24))
    )
    assert _contents(stream, data.smpl) == smpl
    assert _contents(stream, data.sm24) == sm24


def test_odd_sized_chunk_is_padded():
    smpl = b"\x0a\x0b\x0c"
    sm24 = b"\x0d\x0e"
    data, stream = _read(
        _list("sdta", _chunk_bytes("smpl", smpl), _chunk_bytes("sm24", sm24))
    )
    assert data.smpl.length == len(smpl)
    assert _contents(stream, data.sm24) == sm24


def test_offset_matches_child_chunk():
    raw = _list("sdta", _chunk_bytes("smpl", b"\0" * 4))
    stream = io.BytesIO(raw)
    parent = Chunk.read(stream, 0)
    (child,) = list(parent.children(stream))
    data = SampleData.read(parent, stream)
    assert data.smpl == SampleChunk(child.content_offset(), child.length)


def test_missing_sub_chunks_are_none():
    data, _ = _read(_list("sdta", _chunk_bytes("smpl", b"\0\0")))
    assert data.sm24 is None
    empty, _ = _read(_list("sdta"))
    assert empty == SampleData(None, None)


def test_unexpected_member():
    with pytest.raises(UnexpectedChunkError) as info:
        _read(_list("sdta", _chunk_bytes("junk", b"\0\0")))
    assert info.value.chunk.id == "junk"


def test_requires_list_chunk():
    with pytest.raises(ValueError):
        _read(_chunk_bytes("RIFF", b"sdta"))


def test_requires_sdta_form():
    with pytest.raises(ValueError):
        _read(_list("pdta"))