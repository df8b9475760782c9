# Read and write the canonical PCM .wav layout used by sample catalogues.
#
# All numbers are little endian, tags are written verbatim:
#     'RIFF'
#     u32 number of bytes following
#     'WAVE'
#     'fmt '
#     u32 size of the 'fmt ' chunk, always 16
#     u16 audio format, always 1 (PCM)
#     u16 number of channels, always 1
#     u32 sample rate, 11025, 22050 or 44100
#     u32 byte rate, sample rate * channels * bits per sample / 8
#     u16 block align, channels * bits per sample / 8
#     u16 bits per sample, 8 or 16
#     'data'
#     u32 number of bytes following
#     raw PCM data
#
# which makes the whole thing 44 bytes + the payload.
import logging

from catcodec.cat_reader import CatReader
from catcodec.cat_writer import CatWriter
from catcodec.errors import (BadDataSizeError, BadFormatError, BadMagicError,
                             SizeMismatchError, UnsupportedBitDepthError,
                             UnsupportedChannelsError, UnsupportedRateError)
from catcodec.format_helpers import FormatHelper

logger = logging.getLogger()


def read_wav(reader: CatReader, sample, known_size: int = None):
    """
    Fill the format fields and payload of `sample` from a RIFF envelope.

    With known_size (the size from a cat offset table) the RIFF chunk size
    has to agree with it; without it the RIFF chunk size decides the size.
    """
    fn = reader.filename

    if reader.get_tag() != "RIFF":
        raise BadMagicError(f"Unexpected chunk; expected \"RIFF\" in {fn}", fn)

    riff_size = reader.get_u32()
    if known_size is not None:
        if riff_size + 8 != known_size:
            raise SizeMismatchError(f"Unexpected RIFF chunk size in {fn}", fn)
    sample.size = riff_size + 8

    if reader.get_tag() != "WAVE":
        raise BadFormatError(f"Unexpected format; expected \"WAVE\" in {fn}", fn)
    if reader.get_tag() != "fmt ":
        raise BadFormatError(f"Unexpected format; expected \"fmt \" in {fn}", fn)
    if reader.get_u32() != FormatHelper.fmt_chunk_size:
        raise BadFormatError(f"Unexpected fmt chunk size in {fn}", fn)
    if reader.get_u16() != FormatHelper.audio_format_pcm:
        raise BadFormatError(f"Unexpected audio format; expected \"PCM\" in {fn}", fn)

    sample.channels = reader.get_u16()
    if sample.channels not in FormatHelper.supported_channels:
        raise UnsupportedChannelsError(f"Unexpected number of audio channels; expected 1 in {fn}", fn)

    sample.sample_rate = reader.get_u32()
    if sample.sample_rate not in FormatHelper.supported_sample_rates:
        raise UnsupportedRateError(f"Unexpected sample rate {sample.sample_rate}; expected 11025, 22050 or 44100 in {fn}", fn)

    # Only validated, both follow from the other fields
    byte_rate = reader.get_u32()
    block_align = reader.get_u16()

    sample.bits_per_sample = reader.get_u16()
    if sample.bits_per_sample not in FormatHelper.supported_bits_per_sample:
        raise UnsupportedBitDepthError(f"Unexpected number of bits per sample {sample.bits_per_sample}; expected 8 or 16 in {fn}", fn)

    if byte_rate != sample.byte_rate:
        raise BadFormatError(f"Unexpected byte rate in {fn}", fn)
    if block_align != sample.block_align:
        raise BadFormatError(f"Unexpected block align in {fn}", fn)

    if reader.get_tag() != "data":
        raise BadFormatError(f"Unexpected chunk; expected \"data\" in {fn}", fn)

    # Some archives pad their samples. Take everything the RIFF chunk
    # claims, as long as the data chunk fits inside it.
    data_size = reader.get_u32()
    if data_size + FormatHelper.riff_header_size > sample.size:
        raise BadDataSizeError(f"Unexpected data chunk size in {fn}", fn)

    sample.payload = reader.get_raw(sample.size - FormatHelper.riff_header_size)

    if data_size != len(sample.payload):
        logger.debug("%s: data chunk holds %i bytes, RIFF chunk %i", fn, data_size, len(sample.payload))


def write_wav(writer: CatWriter, sample):
    assert len(sample.payload) + FormatHelper.riff_header_size == sample.size, f"Payload of {sample.name} does not match its size"

    writer.put_tag("RIFF")
    writer.put_u32(sample.size - 8)
    writer.put_tag("WAVE")

    writer.put_tag("fmt ")
    writer.put_u32(FormatHelper.fmt_chunk_size)
    writer.put_u16(FormatHelper.audio_format_pcm)
    writer.put_u16(sample.channels)
    writer.put_u32(sample.sample_rate)
    writer.put_u32(sample.byte_rate)
    writer.put_u16(sample.block_align)
    writer.put_u16(sample.bits_per_sample)

    writer.put_tag("data")
    writer.put_u32(len(sample.payload))
    writer.put_raw(sample.payload)
