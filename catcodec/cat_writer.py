# Credits: catcodec Team - 2026

import logging
import os
import struct

from catcodec.errors import CatIoError, CommitFailedError
from catcodec.format_helpers import FormatHelper

logger = logging.getLogger()


class CatWriter:
    """
    Little-endian writer that never touches its target until commit().

    Everything goes to "<filename>.new". commit() shifts the old target to
    "<filename>.bak" and moves the new file into place; leaving the writer
    without committing (or an exception inside a with block) deletes the
    .new file so a previously good output survives.
    """

    def __init__(self, filename: str, binary=True):
        self.filename = filename
        self.filename_new = filename + FormatHelper.new_suffix
        self.filename_bak = filename + FormatHelper.bak_suffix
        self.binary = binary
        self.en = "<"
        self.f = None

        try:
            if binary:
                self.f = open(self.filename_new, "w+b")
            else:
                self.f = open(self.filename_new, "w+", encoding=FormatHelper.string_encoding)
        except OSError as e:
            raise CatIoError(f"Could not open {self.filename_new} for writing ({e.strerror})", self.filename) from e

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.discard()

    def __del__(self):
        # a writer that was never committed must not leave its .new file behind
        if getattr(self, "f", None) is not None:
            self.discard()

    # unsigned
    def put_u8(self, val: int):
        self.put_raw(struct.pack(self.en + "B", val & 0xFF))
    def put_u16(self, val: int):
        self.put_raw(struct.pack(self.en + "H", val & 0xFFFF))
    def put_u32(self, val: int):
        self.put_raw(struct.pack(self.en + "I", val & 0xFFFFFFFF))

    # other
    def put_raw(self, data: bytes):
        self._write(data)

    def put_tag(self, tag: str):
        self.put_raw(tag.encode(FormatHelper.string_encoding))

    def put_text(self, fmt: str, *args):
        text = fmt % args if args else fmt
        if self.binary:
            text = text.encode(FormatHelper.string_encoding)
        self._write(text)

    def _write(self, data):
        assert self.f is not None, f"{self.filename} was already closed"
        try:
            self.f.write(data)
        except (OSError, UnicodeEncodeError) as e:
            raise CatIoError(f"Unexpected failure while writing to {self.filename} ({e})", self.filename) from e

    def tell(self):
        assert self.f is not None, f"{self.filename} was already closed"
        return self.f.tell()

    def commit(self):
        # First close the .new file
        try:
            self.f.close()
        except OSError as e:
            raise CommitFailedError(f"Could not close {self.filename} ({e.strerror})", self.filename) from e
        finally:
            self.f = None

        # Then remove the existing .bak file
        try:
            os.remove(self.filename_bak)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove %s (%s)", self.filename_bak, e.strerror)

        # Then move the existing file to .bak
        try:
            os.rename(self.filename, self.filename_bak)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not rename %s to %s (%s)", self.filename, self.filename_bak, e.strerror)

        # And finally move the .new file to the actual wanted filename
        try:
            os.replace(self.filename_new, self.filename)
        except OSError as e:
            logger.warning("Could not rename %s to %s (%s)", self.filename_new, self.filename, e.strerror)
            raise CommitFailedError(f"Could not close {self.filename}", self.filename) from e

        logger.debug("Committed %s", self.filename)

    def discard(self):
        """Drop everything written so far; a no-op after commit()."""
        if self.f is None:
            return

        self.f.close()
        self.f = None
        try:
            os.remove(self.filename_new)
        except FileNotFoundError:
            pass
