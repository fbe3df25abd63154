# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

"""Command line interface. Compresses or decompresses a whole file (or
stdin) in one shot, or prints its checksum."""

import argparse
import builtins
import logging
import os
import sys

from . import buffers
from ._codec import (ISAL_BEST_COMPRESSION, ISAL_BEST_SPEED,
                     ISAL_DEFAULT_COMPRESSION, ChecksumKind)
from .errors import IsalbufError

logger = logging.getLogger(__name__)

SUFFIX = ".zz"

_CHECKSUM_KINDS = {
    "adler32": ChecksumKind.ADLER32,
    "crc32": ChecksumKind.CRC32,
}


def _argument_parser():
    parser = argparse.ArgumentParser(prog="isalbuf")
    parser.description = (
        "Compress or decompress a file in one shot with isa-l. Output is a "
        "zlib stream.")
    parser.add_argument("file", nargs="?")
    compress_group = parser.add_mutually_exclusive_group()
    compress_group.add_argument(
        "-0", "--fast", action="store_const", dest="compresslevel",
        const=ISAL_BEST_SPEED,
        help="use compression level 0 (fastest)")
    compress_group.add_argument(
        "-1", action="store_const", dest="compresslevel",
        const=1,
        help="use compression level 1")
    compress_group.add_argument(
        "-2", action="store_const", dest="compresslevel",
        const=2,
        help="use compression level 2 (default)")
    compress_group.add_argument(
        "-3", "--best", action="store_const", dest="compresslevel",
        const=ISAL_BEST_COMPRESSION,
        help="use compression level 3 (best)")
    compress_group.set_defaults(compress=True)
    compress_group.add_argument(
        "-d", "--decompress", action="store_const",
        dest="compress",
        const=False,
        help="Decompress the file instead of compressing.")
    compress_group.add_argument(
        "--checksum", choices=sorted(_CHECKSUM_KINDS),
        help="Print the checksum of the file instead of compressing.")
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument("-c", "--stdout", action="store_true",
                              help="write on standard output")
    output_group.add_argument("-o", "--output",
                              help="Write to this output file")
    parser.add_argument("-f", "--force", action="store_true",
                        help="Overwrite output without prompting")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every decompression attempt.")
    return parser


def _read_input(filename):
    if filename is None:
        return sys.stdin.buffer.read()
    with builtins.open(filename, "rb") as in_file:
        return in_file.read()


def _output_path(args):
    if args.output:
        return args.output
    if args.stdout or args.file is None or args.checksum:
        return None  # to stdout
    if args.compress:
        return args.file + SUFFIX
    out_filepath, extension = os.path.splitext(args.file)
    if extension != SUFFIX:
        sys.exit(f"filename doesn't end in {SUFFIX}: {args.file!r}. "
                 f"Cannot determine output filename.")
    return out_filepath


def main():
    args = _argument_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s")

    compresslevel = args.compresslevel
    if compresslevel is None:
        compresslevel = ISAL_DEFAULT_COMPRESSION

    out_filepath = _output_path(args)
    if out_filepath is not None and not args.force:
        if os.path.exists(out_filepath):
            yes_or_no = input(f"{out_filepath} already exists; "
                              f"do you wish to overwrite (y/n)?")
            if yes_or_no not in {"y", "Y", "yes"}:
                sys.exit("not overwritten")

    data = _read_input(args.file)
    try:
        if args.checksum:
            kind = _CHECKSUM_KINDS[args.checksum]
            result = b"%d\n" % buffers.checksum(kind, data)
        elif args.compress:
            result = buffers.compress(data, compresslevel)
        else:
            result = buffers.decompress(data)
    except IsalbufError as error:
        logger.debug("%s failed with status %s", error.operation,
                     error.status)
        sys.exit(f"isalbuf: {error}")

    if out_filepath is None:
        sys.stdout.buffer.write(result)
        sys.stdout.buffer.flush()
    else:
        with builtins.open(out_filepath, "wb") as out_file:
            out_file.write(result)


if __name__ == "__main__":  # pragma: no cover
    main()
