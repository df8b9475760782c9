import pytest

from catcodec.audio.sample import Sample
from catcodec.errors import CatIoError, OffsetAlreadySetError, UnsupportedRateError


def test_from_wav(tmp_path, make_wav):
    path = tmp_path / "boom.wav"
    path.write_bytes(make_wav(b"\x10\x20\x30", sample_rate=44100))

    sample = Sample.from_wav(str(path), "boom.wav", "Boom")

    assert sample.name == "Boom"
    assert sample.filename == "boom.wav"
    assert sample.offset == 0
    assert sample.size == 47
    assert sample.sample_rate == 44100
    assert sample.payload == b"\x10\x20\x30"


def test_from_wav_rejects_bad_files(tmp_path, make_wav):
    path = tmp_path / "slow.wav"
    path.write_bytes(make_wav(b"\x80", sample_rate=8000))

    with pytest.raises(UnsupportedRateError) as excinfo:
        Sample.from_wav(str(path), "slow.wav", "Slow")
    assert excinfo.value.filename == str(path)

    with pytest.raises(CatIoError):
        Sample.from_wav(str(tmp_path / "missing.wav"), "missing.wav", "Missing")


def test_next_offset(make_sample):
    sample = make_sample(name="foo", filename="foo.wav", payload=b"\x80" * 10)
    sample.set_offset(8)

    assert sample.next_offset == 8 + 1 + 4 + 54 + 1 + 1 + 8


def test_offset_is_set_once(make_sample):
    sample = make_sample()
    sample.set_offset(8)

    with pytest.raises(OffsetAlreadySetError):
        sample.set_offset(16)
    assert sample.offset == 8


def test_derived_fields(make_sample):
    sample = make_sample(sample_rate=22050, bits=16)

    assert sample.byte_rate == 44100
    assert sample.block_align == 2
