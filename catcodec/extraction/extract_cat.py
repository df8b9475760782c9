# Credits: catcodec Team - 2026

# Read and write sample catalogues (.cat)
import logging
from typing import Callable, List

from catcodec.audio.sample import Sample
from catcodec.audio.wav import read_wav, write_wav
from catcodec.cat_reader import CatReader
from catcodec.cat_writer import CatWriter
from catcodec.errors import ArchiveTooLargeError, BadFormatError, OffsetMismatchError, StringTooLongError
from catcodec.format_helpers import FormatHelper

logger = logging.getLogger()

# Layout:
#   table: for every entry a u32 offset (top bit set in the new format) and a u32 size
#   every entry at its offset:
#     u8 name length (terminator included), name
#     RIFF envelope of `size` bytes
#     u8 spacer, unused
#     u8 filename length (terminator included), filename
#
# The first offset doubles as the table size, so it gives the entry count.


def read_string(reader: CatReader) -> str:
    length = reader.get_u8()
    if length == 0:
        raise BadFormatError(f"Zero length string at offset {reader.tell() - 1} in {reader.filename}", reader.filename)

    data = reader.get_raw(length)
    # last byte is the terminator
    return data[:-1].decode(FormatHelper.string_encoding)


def write_string(writer: CatWriter, string: str):
    data = string.encode(FormatHelper.string_encoding) + b"\x00"
    if len(data) > FormatHelper.max_string_length:
        raise StringTooLongError(f"String of {len(data) - 1} bytes is too long for {writer.filename} [{string}]", writer.filename)

    writer.put_u8(len(data))
    writer.put_raw(data)


def read_cat_entry(reader: CatReader, sample: Sample, new_format: bool):
    assert len(sample.payload) == 0, f"Entry at {sample.offset} was already read"

    if reader.tell() != sample.offset:
        raise OffsetMismatchError(f"Invalid offset in file {reader.filename}: expected entry at {sample.offset}, at {reader.tell()}", reader.filename)

    sample.name = read_string(reader)

    if not new_format and sample.name == FormatHelper.corrupt_sound_name:
        # The old format has one entry that is raw PCM without an envelope
        sample.payload = reader.get_raw(sample.size)
        sample.size += FormatHelper.riff_header_size
    else:
        read_wav(reader, sample, sample.size)

    if not new_format:
        # Old archives sometimes claim the wrong format, which plays back too fast
        sample.channels = FormatHelper.legacy_channels
        sample.sample_rate = FormatHelper.legacy_sample_rate
        sample.bits_per_sample = FormatHelper.legacy_bits_per_sample

    reader.get_u8() # spacer

    sample.filename = read_string(reader)


def write_cat_entry(writer: CatWriter, sample: Sample):
    if writer.tell() != sample.offset:
        raise OffsetMismatchError(f"Invalid offset when writing file {writer.filename}: expected entry at {sample.offset}, at {writer.tell()}", writer.filename)

    write_string(writer, sample.name)
    write_wav(writer, sample)
    writer.put_u8(FormatHelper.spacer_byte)
    write_string(writer, sample.filename)


def read_cat(reader: CatReader, progress: Callable[[], None] = None) -> List[Sample]:
    count = reader.get_u32()
    new_format = (count & FormatHelper.new_format_flag) != 0
    count = (count & FormatHelper.offset_mask) // FormatHelper.table_entry_size

    logger.info("Got a %s format catalogue with %i samples", "new" if new_format else "old", count)

    reader.seek(0)
    samples = [Sample.from_table(reader) for _ in range(count)]

    for i, sample in enumerate(samples):
        read_cat_entry(reader, sample, new_format)
        logger.debug("Read sample %i of %i - %s (%s)", i + 1, count, sample.name, sample.filename)
        if progress is not None:
            progress()

    return samples


def write_cat(writer: CatWriter, samples: List[Sample], progress: Callable[[], None] = None):
    offset = len(samples) * FormatHelper.table_entry_size
    for sample in samples:
        sample.set_offset(offset)
        offset = sample.next_offset

        if sample.offset > FormatHelper.offset_mask or sample.size > FormatHelper.max_entry_size:
            raise ArchiveTooLargeError(f"Sample {sample.name} at offset {sample.offset} with {sample.size} bytes does not fit in {writer.filename}", writer.filename)

        writer.put_u32(sample.offset | FormatHelper.new_format_flag)
        writer.put_u32(sample.size)

    logger.info("Writing %i samples, %i bytes", len(samples), offset)

    for i, sample in enumerate(samples):
        write_cat_entry(writer, sample)
        logger.debug("Wrote sample %i of %i - %s (%s)", i + 1, len(samples), sample.name, sample.filename)
        if progress is not None:
            progress()
