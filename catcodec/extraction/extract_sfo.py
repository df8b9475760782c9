# Credits: catcodec Team - 2026

# The sfo index maps every .wav file of a decoded catalogue to its internal name:
#     // "file name" internal name
#     "explosion.wav" Explosion
#     tick.wav Tick
import logging
import os
from typing import Callable, List

from catcodec.audio.sample import Sample
from catcodec.audio.wav import write_wav
from catcodec.cat_reader import CatReader
from catcodec.cat_writer import CatWriter
from catcodec.errors import SfoFormatError, StringTooLongError
from catcodec.format_helpers import FormatHelper

logger = logging.getLogger()


def parse_sfo_line(line: str, sfo_filename: str = None):
    """Split one index line into (filename, name); None for comments and blank lines."""
    if line.startswith("//") or not line.strip():
        return None

    if line.startswith('"'):
        filename, sep, name = line[1:].partition('"')
    else:
        filename, sep, name = line.partition(" ")
    if not sep:
        raise SfoFormatError(f"Invalid format for {sfo_filename} at [{line.rstrip()}]", sfo_filename)

    name = name.strip()

    if len(filename) + 1 > FormatHelper.max_string_length:
        raise StringTooLongError(f"Filename is too long in {sfo_filename} at [{line.rstrip()}]", sfo_filename)
    if len(name) + 1 > FormatHelper.max_string_length:
        raise StringTooLongError(f"Name is too long in {sfo_filename} at [{name}]", sfo_filename)

    return filename, name


def read_sfo(reader: CatReader, base_dir: str = "", progress: Callable[[], None] = None) -> List[Sample]:
    samples = []
    while True:
        line = reader.get_line()
        if line is None:
            break

        entry = parse_sfo_line(line, reader.filename)
        if entry is None:
            continue

        filename, name = entry
        samples.append(Sample.from_wav(os.path.join(base_dir, filename), filename, name))
        if progress is not None:
            progress()

    logger.info("Got %i samples from %s", len(samples), reader.filename)
    return samples


def write_sfo(writer: CatWriter, samples: List[Sample], base_dir: str = "", progress: Callable[[], None] = None):
    writer.put_text("// \"file name\" internal name\n")

    for sample in samples:
        writer.put_text("\"%s\" %s\n", sample.filename, sample.name)

        with CatWriter(os.path.join(base_dir, sample.filename)) as sample_writer:
            write_wav(sample_writer, sample)
            sample_writer.commit()

        logger.debug("Wrote %s", sample.filename)
        if progress is not None:
            progress()
