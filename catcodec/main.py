#!/usr/bin/env python3
# Credits: catcodec Team - 2026

import argparse
import logging
import os
import sys

from catcodec.audio import pcm
from catcodec.cat_reader import CatReader
from catcodec.cat_writer import CatWriter
from catcodec.errors import CatcodecError
from catcodec.extraction.extract_cat import read_cat, write_cat
from catcodec.extraction.extract_sfo import read_sfo, write_sfo
from catcodec.util import Utils

logger = logging.getLogger()

TOOL_VERSION = "1.0.0"


def _show_progress():
    print(".", end="", flush=True)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='catcodec',
        description="Decode/encode the sample catalogue (.cat) of a sound pack.",
        epilog="<sample file> denotes the .cat file you want to work on, e.g. sample.cat")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('-d', '--decode', action="store_true", help="Decode all samples in the sample file and put them next to it")
    mode.add_argument('-e', '--encode', action="store_true", help="Encode all samples next to the sample file into the sample file")
    mode.add_argument('-l', '--list', action="store_true", help="List the samples in the sample file")
    parser.add_argument('-v', '--verbose', action="store_true")
    parser.add_argument('--version', action="version", version=f"%(prog)s {TOOL_VERSION}")
    parser.add_argument('sample_file', metavar="<sample file>")
    return parser.parse_args(argv)


def decode(cat_file, sfo_file, progress=None):
    logger.info("Reading %s", cat_file)
    with CatReader(cat_file) as reader:
        samples = read_cat(reader, progress)

    logger.info("Writing %s", sfo_file)
    with CatWriter(sfo_file, binary=False) as sfo_writer:
        write_sfo(sfo_writer, samples, os.path.dirname(sfo_file), progress)
        sfo_writer.commit()
    return samples


def encode(cat_file, sfo_file, progress=None):
    logger.info("Reading %s", sfo_file)
    with CatReader(sfo_file, binary=False) as sfo_reader:
        samples = read_sfo(sfo_reader, os.path.dirname(sfo_file), progress)

    logger.info("Writing %s", cat_file)
    with CatWriter(cat_file) as cat_writer:
        write_cat(cat_writer, samples, progress)
        cat_writer.commit()
    return samples


def list_samples(cat_file):
    with CatReader(cat_file) as reader:
        samples = read_cat(reader)

    print("Offset", "Size", "Rate", "Bits", "Duration", "Peak", "Name", "Filename", sep='\t')
    for sample in samples:
        print(hex(sample.offset), sample.size, sample.sample_rate, sample.bits_per_sample,
              f"{pcm.duration(sample):.3f}", f"{pcm.peak_level(sample):.3f}",
              sample.name, sample.filename, sep='\t')
    return samples


def main(argv=None):
    args = _parse_args(argv)

    logging.basicConfig(
        stream=sys.stdout,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(asctime)s] [%(module)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S')

    logger.debug("Running catcodec v%s", TOOL_VERSION)

    # Only show progress on interactive consoles
    progress = _show_progress if sys.stdout.isatty() else None

    try:
        sfo_file = Utils.sfo_path_for(args.sample_file)
        if sfo_file is None:
            raise CatcodecError("Unexpected extension; expected \".cat\"", args.sample_file)

        if args.decode:
            decode(args.sample_file, sfo_file, progress)
        elif args.encode:
            encode(args.sample_file, sfo_file, progress)
        else:
            list_samples(args.sample_file)

        if progress is not None:
            print()
        logger.info("Done")
    except CatcodecError as e:
        logger.error("An error occured: %s", e)
        return 1

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
