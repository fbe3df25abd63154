# Copyright (c) 2020 Leiden University Medical Center
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Tests for the codec adapter. These call the adapter functions directly
and check the (status, used length) pairs they report."""

import itertools
import os
import zlib

from isalbuf import _codec
from isalbuf._codec import ChecksumKind, Status

import pytest

PANGRAM = b"The quick brown fox jumps over the lazy dog. "
DATA = PANGRAM * 23 * 1024  # Approx 1 MB
DATA_SIZES = [0] + [2**i for i in range(3, 20)]
# Wbits for ZLIB compression, GZIP compression, and RAW compressed streams
WBITS = [15, 31, -15]


@pytest.mark.parametrize(["data_size", "level"],
                         itertools.product(DATA_SIZES, range(4)))
def test_compress_into(data_size, level):
    data = DATA[:data_size]
    dest = bytearray(_codec.compress_bound(data_size))
    status, used = _codec.compress_into(dest, data, level)
    assert status == Status.OK
    assert 0 < used <= len(dest)
    assert zlib.decompress(dest[:used]) == data


def test_compress_into_buffer_too_small():
    dest = bytearray(4)
    status, used = _codec.compress_into(dest, DATA[:1024])
    assert status == Status.BUFFER_TOO_SMALL
    assert used == 0
    assert dest == bytearray(4)


@pytest.mark.parametrize("wbits", WBITS)
def test_decompress_into(wbits):
    data = DATA[:64 * 1024]
    compressobj = zlib.compressobj(wbits=wbits)
    compressed = compressobj.compress(data) + compressobj.flush()
    dest = bytearray(len(data) + 100)
    status, used = _codec.decompress_into(dest, compressed, wbits)
    assert status == Status.OK
    assert used == len(data)
    assert dest[:used] == data
    assert dest[used:] == bytearray(100)


def test_decompress_into_buffer_too_small():
    data = DATA[:64 * 1024]
    dest = bytearray(1000)
    status, used = _codec.decompress_into(dest, zlib.compress(data))
    assert status == Status.BUFFER_TOO_SMALL
    # The prefix is what has been decompressed so far.
    assert used == 1000
    assert dest == data[:1000]


def test_decompress_into_zero_capacity():
    status, used = _codec.decompress_into(bytearray(), zlib.compress(b"abc"))
    assert status == Status.BUFFER_TOO_SMALL
    status, used = _codec.decompress_into(bytearray(), zlib.compress(b""))
    assert status == Status.OK
    assert used == 0


def test_decompress_into_ignores_trailing_data():
    compressed = zlib.compress(b"abcdefghijklmnopqrstuvwxyz") + b"0123456789"
    dest = bytearray(100)
    status, used = _codec.decompress_into(dest, compressed)
    assert status == Status.OK
    assert dest[:used] == b"abcdefghijklmnopqrstuvwxyz"


@pytest.mark.parametrize("compressed", [
    b"Not a valid deflate block",
    b"",
    zlib.compress(DATA[:8192])[:-4],  # Missing adler32 trailer
    zlib.compress(DATA[:8192])[:20],
])
def test_decompress_into_data_error(compressed):
    dest = bytearray(len(DATA))
    status, used = _codec.decompress_into(dest, compressed)
    assert status == Status.DATA_ERROR
    assert used == 0


def test_decompress_into_bad_checksum():
    compressed = bytearray(zlib.compress(DATA[:8192]))
    compressed[-1] ^= 0xFF
    status, _ = _codec.decompress_into(bytearray(10_000), compressed)
    assert status == Status.DATA_ERROR


@pytest.mark.parametrize(["data_size", "wbits"], itertools.product(
    DATA_SIZES + [65535, 65537, 200_000, 1 << 20], WBITS))
def test_compress_bound_random_data(data_size, wbits):
    # Random data does not compress and gets closest to the bound. Level 0
    # expands it the most.
    data = os.urandom(data_size)
    for level in range(4):
        dest = bytearray(_codec.compress_bound(data_size))
        status, used = _codec.compress_into(dest, data, level, wbits)
        assert status == Status.OK
        assert used <= len(dest)


def test_compress_bound_increases():
    bounds = [_codec.compress_bound(size) for size in range(0, 300_000, 997)]
    assert bounds == sorted(bounds)
    assert all(bound > size for bound, size in
               zip(bounds, range(0, 300_000, 997)))


def test_compress_bound_negative():
    with pytest.raises(ValueError):
        _codec.compress_bound(-1)


@pytest.mark.parametrize(["data_size", "value"],
                         itertools.product(DATA_SIZES, [0, 1, 3, 2**32 - 1]))
def test_checksum_update_adler32(data_size, value):
    data = DATA[:data_size]
    assert (_codec.checksum_update(ChecksumKind.ADLER32, value, data) ==
            zlib.adler32(data, value))


@pytest.mark.parametrize(["data_size", "value"],
                         itertools.product(DATA_SIZES, [0, 1, 3, 2**32 - 1]))
def test_checksum_update_crc32(data_size, value):
    data = DATA[:data_size]
    assert (_codec.checksum_update(ChecksumKind.CRC32, value, data) ==
            zlib.crc32(data, value))


@pytest.mark.parametrize("kind", list(ChecksumKind))
def test_checksum_update_empty_is_identity(kind):
    start = _codec.canonical_start(kind)
    assert _codec.checksum_update(kind, start, b"") == start


def test_canonical_starts():
    assert _codec.canonical_start(ChecksumKind.ADLER32) == 1
    assert _codec.canonical_start(ChecksumKind.CRC32) == 0
