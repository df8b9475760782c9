import numpy as np


def pcm_frames(sample) -> np.ndarray:
    """
    Payload of a mono sample as signed values centred on 0.

    8-bit PCM is unsigned with a bias of 128, 16-bit PCM is signed little
    endian; a trailing odd byte in a 16-bit payload (padding) is dropped.
    """
    if sample.bits_per_sample == 8:
        raw = np.frombuffer(sample.payload, dtype=np.uint8)
        return raw.astype(np.int16) - 128

    usable = len(sample.payload) - (len(sample.payload) % 2)
    return np.frombuffer(sample.payload[:usable], dtype="<i2").astype(np.int16, copy=False)


def duration(sample) -> float:
    if sample.sample_rate == 0:
        return 0.0
    return pcm_frames(sample).size / float(sample.sample_rate)


def peak_level(sample) -> float:
    """Loudest absolute amplitude, 1.0 being full scale."""
    frames = pcm_frames(sample)
    if frames.size == 0:
        return 0.0

    full_scale = 128.0 if sample.bits_per_sample == 8 else 32768.0
    return float(np.abs(frames.astype(np.int32)).max()) / full_scale
