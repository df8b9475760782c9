import numpy as np
import pytest

from catcodec.audio import pcm


def test_8_bit_frames_are_centred(make_sample):
    sample = make_sample(payload=bytes([0, 128, 255]))

    np.testing.assert_array_equal(pcm.pcm_frames(sample), np.array([-128, 0, 127], dtype=np.int16))
    assert pcm.peak_level(sample) == 1.0


def test_16_bit_frames_drop_odd_byte(make_sample):
    payload = (1000).to_bytes(2, "little", signed=True) + (-16384).to_bytes(2, "little", signed=True) + b"\x00"
    sample = make_sample(payload=payload, bits=16)

    np.testing.assert_array_equal(pcm.pcm_frames(sample), np.array([1000, -16384], dtype=np.int16))
    assert pcm.peak_level(sample) == 0.5


def test_duration(make_sample):
    assert pcm.duration(make_sample(payload=b"\x80" * 11025)) == pytest.approx(1.0)
    assert pcm.duration(make_sample(payload=b"\x00" * 44100, sample_rate=22050, bits=16)) == pytest.approx(1.0)


def test_silence_and_empty(make_sample):
    assert pcm.peak_level(make_sample(payload=b"\x80" * 100)) == 0.0
    assert pcm.peak_level(make_sample(payload=b"")) == 0.0
