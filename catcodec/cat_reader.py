# Credits: catcodec Team - 2026

import os
import struct

from catcodec.errors import CatIoError, UnexpectedEofError
from catcodec.format_helpers import FormatHelper


class CatReader:
    """
    Sequential little-endian reader over a single file.

    name len range
    u8  | 1 | 0 to 255
    u16 | 2 | 0 to 65535
    u32 | 4 | 0 to 4294967295

    Every read either returns exactly what was asked for or raises
    UnexpectedEofError naming the file; nothing is ever half-read.
    """

    def __init__(self, filename: str, binary=True):
        self.filename = filename
        self.binary = binary
        self.en = "<"

        try:
            if binary:
                self.f = open(filename, "rb")
            else:
                self.f = open(filename, "r", encoding=FormatHelper.string_encoding)
        except OSError as e:
            raise CatIoError(f"Could not open {filename} for reading ({e.strerror})", filename) from e

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.f.close()

    # unsigned
    def get_u8(self):
        return struct.unpack(self.en + "B", self.get_raw(1))[0]
    def get_u16(self):
        return struct.unpack(self.en + "H", self.get_raw(2))[0]
    def get_u32(self):
        return struct.unpack(self.en + "I", self.get_raw(4))[0]

    # other
    def get_raw(self, length):
        if self.f.closed:
            raise UnexpectedEofError(f"Unexpected end of {self.filename}", self.filename)
        try:
            data = self.f.read(length)
        except OSError as e:
            raise CatIoError(f"Reading {self.filename} failed ({e.strerror})", self.filename) from e

        if len(data) != length:
            raise UnexpectedEofError(f"Unexpected end of {self.filename}", self.filename)
        return data

    def get_tag(self):
        return self.get_raw(4).decode(FormatHelper.string_encoding)

    def get_line(self):
        """Next line including its terminator, or None once the file is exhausted."""
        if self.f.closed:
            raise UnexpectedEofError(f"Unexpected end of {self.filename}", self.filename)
        line = self.f.readline()
        if not line:
            return None
        if isinstance(line, bytes):
            line = line.decode(FormatHelper.string_encoding)
        return line

    def seek(self, pos: int):
        if self.f.closed:
            raise UnexpectedEofError(f"Unexpected end of {self.filename}", self.filename)
        try:
            end = os.fstat(self.f.fileno()).st_size
            if pos < 0:
                raise CatIoError(f"Seeking in {self.filename} failed.", self.filename)
            if pos > end:
                raise UnexpectedEofError(f"Seeking past the end of {self.filename}", self.filename)
            self.f.seek(pos)
        except OSError as e:
            raise CatIoError(f"Seeking in {self.filename} failed.", self.filename) from e

    def tell(self):
        return self.f.tell()
