# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

"""One-shot compression, decompression and checksums.

compress() allocates a single buffer of compress_bound() size. decompress()
does not know the size of its output in advance. It starts with a guess based
on the input size and grows the output buffer until the data fits, giving up
after MAX_DECOMPRESS_RETRIES undersized attempts.
"""

import functools
import logging
from typing import NamedTuple, Optional

from . import _codec
from ._codec import (ISAL_BEST_COMPRESSION, ISAL_BEST_SPEED,
                     ISAL_DEFAULT_COMPRESSION, MAX_WBITS, ChecksumKind, Status)
from .errors import (CompressionFailure, DecompressionDataError,
                     DecompressionSizingExhausted)

__all__ = ["compress", "decompress", "checksum", "default_checksum",
           "adler_like_checksum", "crc_checksum", "DecompressPolicy",
           "DEFAULT_POLICY", "MAX_DECOMPRESS_RETRIES"]

logger = logging.getLogger(__name__)

MAX_DECOMPRESS_RETRIES = 10
# The first guess is the input size times this factor, every undersized
# attempt multiplies the guess by the growth factor. After the last retry the
# buffer holds 1536 times the input, above the 1032:1 maximum ratio of
# deflate, so only corrupt input can exhaust the retries.
INITIAL_GUESS_FACTOR = 1.5
GROWTH_FACTOR = 2.0

_CHECKSUM_MAX = 0xFFFFFFFF
# zlib, gzip and raw deflate containers.
_VALID_WBITS = frozenset(
    list(range(9, 16)) + list(range(25, 32)) + list(range(-15, -8)))


class DecompressPolicy(NamedTuple):
    initial_factor: float = INITIAL_GUESS_FACTOR
    growth_factor: float = GROWTH_FACTOR
    max_retries: int = MAX_DECOMPRESS_RETRIES


DEFAULT_POLICY = DecompressPolicy()


def _check_data(data):
    if isinstance(data, str):
        raise TypeError("a bytes-like object is required, not 'str'")
    return memoryview(data)


def _check_wbits(wbits: int):
    if wbits not in _VALID_WBITS:
        raise ValueError(f"wbits should be 9..15 (zlib), 25..31 (gzip) or "
                         f"-15..-9 (raw deflate), got {wbits}.")


def _check_policy(policy: DecompressPolicy):
    if policy.initial_factor <= 0:
        raise ValueError(f"initial_factor should be larger than 0, got "
                         f"{policy.initial_factor}.")
    if policy.growth_factor <= 1:
        raise ValueError(f"growth_factor should be larger than 1, got "
                         f"{policy.growth_factor}.")
    if policy.max_retries < 0:
        raise ValueError(f"max_retries should not be negative, got "
                         f"{policy.max_retries}.")


def compress(data, level: int = ISAL_DEFAULT_COMPRESSION,
             wbits: int = MAX_WBITS) -> bytes:
    """Compress data in one shot and return the compressed bytes.

    The compression level is in range 0-3. By default the output is a zlib
    stream that the stdlib zlib module can decompress. Use wbits=-15 for raw
    deflate or wbits=31 for a gzip member.
    """
    if not ISAL_BEST_SPEED <= level <= ISAL_BEST_COMPRESSION:
        raise ValueError(
            f"Compression level should be between {ISAL_BEST_SPEED} and "
            f"{ISAL_BEST_COMPRESSION}, got {level}.")
    _check_wbits(wbits)
    view = _check_data(data)
    dest = bytearray(_codec.compress_bound(view.nbytes))
    status, used = _codec.compress_into(dest, view, level, wbits)
    if status != Status.OK:
        raise CompressionFailure(status)
    del dest[used:]
    return bytes(dest)


def decompress(data, wbits: int = MAX_WBITS,
               policy: DecompressPolicy = DEFAULT_POLICY) -> bytes:
    """Decompress data in one shot and return the decompressed bytes.

    Raises DecompressionDataError for corrupt or incomplete input and
    DecompressionSizingExhausted when the output still did not fit after
    policy.max_retries larger buffers were tried.
    """
    _check_policy(policy)
    _check_wbits(wbits)
    view = _check_data(data)
    attempt = 1
    guessed_length = round(view.nbytes * policy.initial_factor)
    while True:
        dest = bytearray(guessed_length)
        status, used = _codec.decompress_into(dest, view, wbits)
        if status == Status.OK:
            del dest[used:]
            return bytes(dest)
        if status != Status.BUFFER_TOO_SMALL:
            logger.debug("decompress: codec status %s on attempt %s, "
                         "not retrying", status.name, attempt)
            raise DecompressionDataError(status)
        if attempt > policy.max_retries:
            logger.debug("decompress: output did not fit in %s bytes after "
                         "%s attempts", guessed_length, attempt)
            raise DecompressionSizingExhausted(attempt, guessed_length, status)
        logger.debug("decompress: attempt %s with %s bytes was too small",
                     attempt, guessed_length)
        guessed_length = max(round(guessed_length * policy.growth_factor),
                             guessed_length + 1)
        attempt += 1


# lru_cache with maxsize=None computes each value once and is safe to read
# from multiple threads.
@functools.lru_cache(maxsize=None)
def default_checksum(kind: ChecksumKind) -> int:
    """The checksum of zero-length input for the given algorithm."""
    return _codec.checksum_update(kind, _codec.canonical_start(kind), b"")


def checksum(kind: ChecksumKind, data, prior: Optional[int] = None) -> int:
    """Extend the running checksum prior with data.

    Without a prior the algorithm's default initial value is used. Threading
    the result of each call into the next gives the same value as a single
    call over all chunks concatenated.
    """
    kind = ChecksumKind(kind)
    view = _check_data(data)
    if prior is None:
        prior = default_checksum(kind)
    elif not 0 <= prior <= _CHECKSUM_MAX:
        raise ValueError(f"Checksum state should be between 0 and "
                         f"{_CHECKSUM_MAX}, got {prior}.")
    return _codec.checksum_update(kind, prior, view)


def adler_like_checksum(data, prior: Optional[int] = None) -> int:
    """Adler-32 of data, continuing from prior when given."""
    return checksum(ChecksumKind.ADLER32, data, prior)


def crc_checksum(data, prior: Optional[int] = None) -> int:
    """CRC-32 of data, continuing from prior when given."""
    return checksum(ChecksumKind.CRC32, data, prior)
