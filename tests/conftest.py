"""Shared fixtures: hand-built .wav files, samples and cat archives."""

import struct

import pytest

from catcodec.audio.sample import Sample


def build_wav(payload: bytes, channels=1, sample_rate=11025, bits=8, *,
              magic=b"RIFF", wave=b"WAVE", fmt=b"fmt ", fmt_size=16, audio_format=1,
              byte_rate=None, block_align=None, data_tag=b"data",
              data_size=None, riff_size=None) -> bytes:
    """Canonical 44-byte header + payload; every field can be overridden to break it."""
    if byte_rate is None:
        byte_rate = sample_rate * channels * bits // 8
    if block_align is None:
        block_align = channels * bits // 8
    if data_size is None:
        data_size = len(payload)
    if riff_size is None:
        riff_size = 36 + len(payload)

    header = struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        magic, riff_size, wave, fmt, fmt_size, audio_format,
        channels, sample_rate, byte_rate, block_align, bits,
        data_tag, data_size,
    )
    return header + payload


def build_sample(name="foo", filename="foo.wav", payload=b"\x80" * 10,
                 sample_rate=11025, bits=8) -> Sample:
    sample = Sample(size=44 + len(payload), name=name, filename=filename)
    sample.channels = 1
    sample.sample_rate = sample_rate
    sample.bits_per_sample = bits
    sample.payload = payload
    return sample


def build_old_cat(entries) -> bytes:
    """
    Old format archive (no flag bits) from (name, body, filename) tuples.

    `body` is written verbatim and its length goes into the offset table.
    """
    table = b""
    bodies = b""
    offset = len(entries) * 8
    for name, body, filename in entries:
        entry = (bytes([len(name) + 1]) + name.encode("latin-1") + b"\x00" + body + b"\x00" +
                 bytes([len(filename) + 1]) + filename.encode("latin-1") + b"\x00")
        table += struct.pack("<II", offset, len(body))
        bodies += entry
        offset += len(entry)
    return table + bodies


@pytest.fixture
def make_wav():
    return build_wav


@pytest.fixture
def make_sample():
    return build_sample


@pytest.fixture
def make_old_cat():
    return build_old_cat


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temporary directory that is also the current directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
