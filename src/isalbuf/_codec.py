# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

"""Typed call surface over isal_zlib.

Each function maps onto a single codec call and reports the outcome as a
(status, used_length) pair. Nothing here retries or grows buffers; that is
left to the callers in isalbuf.buffers.
"""

import enum
from typing import Tuple

from isal import isal_zlib

ISAL_BEST_SPEED = isal_zlib.ISAL_BEST_SPEED
ISAL_BEST_COMPRESSION = isal_zlib.ISAL_BEST_COMPRESSION
ISAL_DEFAULT_COMPRESSION = isal_zlib.ISAL_DEFAULT_COMPRESSION
MAX_WBITS = isal_zlib.MAX_WBITS

# isa-l's ISAL_DEF_MAX_HDR_SIZE: the largest dynamic huffman block header.
_MAX_BLOCK_HEADER_SIZE = 328
# A gzip header (10 bytes) and trailer (8 bytes). zlib and raw deflate
# containers are smaller.
_MAX_CONTAINER_OVERHEAD = 18
# Longest huffman code deflate allows.
_MAX_CODE_BITS = 15


class Status(enum.IntEnum):
    # Values are the zlib return codes.
    OK = 0
    STREAM_ERROR = -2
    DATA_ERROR = -3
    MEMORY_ERROR = -4
    BUFFER_TOO_SMALL = -5


class ChecksumKind(enum.Enum):
    ADLER32 = "rolling"
    CRC32 = "crc"


_CHECKSUM_FUNCTIONS = {
    ChecksumKind.ADLER32: isal_zlib.adler32,
    ChecksumKind.CRC32: isal_zlib.crc32,
}

_CANONICAL_STARTS = {
    ChecksumKind.ADLER32: 1,
    ChecksumKind.CRC32: 0,
}


def compress_bound(src_len: int) -> int:
    """Return the largest size compressing src_len bytes can produce.

    isa-l has no bound function of its own. Level 0 uses a static huffman
    table that expands incompressible data by about a quarter, so the bound
    covers every literal being written with the longest (15-bit) deflate
    code, one maximum size block header for each started 64K of input and
    the largest container overhead.
    """
    if src_len < 0:
        raise ValueError(f"src_len must be non-negative, got {src_len}.")
    return ((src_len * _MAX_CODE_BITS + 7) // 8 +
            ((src_len >> 16) + 1) * _MAX_BLOCK_HEADER_SIZE +
            _MAX_CONTAINER_OVERHEAD)


def compress_into(dest: bytearray, src,
                  level: int = ISAL_DEFAULT_COMPRESSION,
                  wbits: int = MAX_WBITS) -> Tuple[Status, int]:
    """Compress src into the front of dest.

    Nothing is written to dest unless the status is OK.
    """
    try:
        compressed = isal_zlib.compress(src, level=level, wbits=wbits)
    except MemoryError:
        return Status.MEMORY_ERROR, 0
    except isal_zlib.error:
        return Status.STREAM_ERROR, 0
    used = len(compressed)
    if used > len(dest):
        return Status.BUFFER_TOO_SMALL, 0
    dest[:used] = compressed
    return Status.OK, used


def decompress_into(dest: bytearray, src,
                    wbits: int = MAX_WBITS) -> Tuple[Status, int]:
    """Decompress src into the front of dest, producing at most len(dest)
    bytes.

    On BUFFER_TOO_SMALL the bytes in dest are an incomplete prefix of the
    output and must not be used. Data following the end of the compressed
    stream is ignored.
    """
    capacity = len(dest)
    decompressor = isal_zlib.decompressobj(wbits=wbits)
    try:
        # A max_length of 0 means unlimited, so an empty destination is
        # given a limit of one byte instead.
        output = decompressor.decompress(src, max(capacity, 1))
    except MemoryError:
        return Status.MEMORY_ERROR, 0
    except isal_zlib.error:
        return Status.DATA_ERROR, 0
    used = len(output)
    if decompressor.eof and used <= capacity:
        dest[:used] = output
        return Status.OK, used
    if used >= capacity:
        dest[:capacity] = output[:capacity]
        return Status.BUFFER_TOO_SMALL, capacity
    # Room was left in dest but the stream did not end: truncated input.
    return Status.DATA_ERROR, 0


def canonical_start(kind: ChecksumKind) -> int:
    return _CANONICAL_STARTS[kind]


def checksum_update(kind: ChecksumKind, prior: int, data) -> int:
    return _CHECKSUM_FUNCTIONS[kind](data, prior)
