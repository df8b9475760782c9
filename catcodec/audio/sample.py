import logging

from catcodec.audio.wav import read_wav
from catcodec.cat_reader import CatReader
from catcodec.errors import OffsetAlreadySetError
from catcodec.format_helpers import FormatHelper

logger = logging.getLogger()


class Sample:
    """
    One sound of a sample catalogue.

    A sample either comes out of the offset table of a cat file (only offset
    and size known until its entry body is read) or out of a standalone .wav
    file, in which case everything but the offset is known immediately.
    """

    def __init__(self, offset: int = 0, size: int = 0, name: str = "", filename: str = "") -> None:
        self.offset = offset
        self.size = size # RIFF header + payload
        self.name = name
        self.filename = filename

        self.channels = 0
        self.sample_rate = 0
        self.bits_per_sample = 0
        self.payload = b""

    @classmethod
    def from_table(cls, reader: CatReader):
        offset = reader.get_u32() & FormatHelper.offset_mask
        size = reader.get_u32()
        return cls(offset, size)

    @classmethod
    def from_wav(cls, path: str, filename: str, name: str):
        sample = cls(name=name, filename=filename)
        with CatReader(path) as reader:
            read_wav(reader, sample)
        logger.debug("Loaded %s: %i bytes, %i Hz, %i bits", path, sample.size, sample.sample_rate, sample.bits_per_sample)
        return sample

    @property
    def byte_rate(self):
        return self.sample_rate * self.channels * self.bits_per_sample // 8

    @property
    def block_align(self):
        return self.channels * self.bits_per_sample // 8

    @property
    def next_offset(self):
        return (self.offset +
                1 +                         # length of the name
                (len(self.name) + 1) +      # the name + terminator
                self.size +                 # RIFF envelope
                1 +                         # the spacer
                1 +                         # length of the filename
                (len(self.filename) + 1))   # the filename + terminator

    def set_offset(self, offset: int):
        if self.offset != 0:
            raise OffsetAlreadySetError(f"Sample {self.name} was already placed at offset {self.offset}", self.filename)
        self.offset = offset

    def __eq__(self, other):
        if not isinstance(other, Sample):
            return NotImplemented
        return (self.offset, self.size, self.name, self.filename,
                self.channels, self.sample_rate, self.bits_per_sample, self.payload) == \
               (other.offset, other.size, other.name, other.filename,
                other.channels, other.sample_rate, other.bits_per_sample, other.payload)

    def __repr__(self):
        return f"Sample(name={self.name!r}, filename={self.filename!r}, offset={self.offset}, size={self.size})"
