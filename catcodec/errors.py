# Credits: catcodec Team - 2026

class CatcodecError(Exception):
    """Base for every failure raised while reading or writing cat/sfo/wav files."""

    def __init__(self, message: str, filename: str = None):
        super().__init__(message)
        self.filename = filename


class CatIoError(CatcodecError):
    """Opening, reading, writing or seeking a file failed at the OS level."""


class UnexpectedEofError(CatcodecError):
    """A read could not be satisfied with the exact number of bytes asked for."""


class BadMagicError(CatcodecError):
    """The file does not start with a RIFF tag."""


class BadFormatError(CatcodecError):
    """A WAVE/fmt/data tag, fmt chunk size, audio format or derived field is wrong."""


class SizeMismatchError(BadFormatError):
    """The RIFF chunk size disagrees with the size recorded in the offset table."""


class UnsupportedChannelsError(CatcodecError):
    pass


class UnsupportedRateError(CatcodecError):
    pass


class UnsupportedBitDepthError(CatcodecError):
    pass


class BadDataSizeError(CatcodecError):
    """The data chunk claims more bytes than the RIFF chunk holds."""


class OffsetMismatchError(CatcodecError):
    """An entry does not start where the offset table says it does."""


class OffsetAlreadySetError(CatcodecError):
    """A sample was placed in an archive twice."""


class StringTooLongError(CatcodecError):
    """A name or filename does not fit a length byte with its terminator."""


class CommitFailedError(CatcodecError):
    """The temporary file could not be moved onto its target path."""


class SfoFormatError(CatcodecError):
    """A line of an sfo index has no filename/name separator."""


class ArchiveTooLargeError(CatcodecError):
    """An offset or size does not fit its field in the offset table."""
