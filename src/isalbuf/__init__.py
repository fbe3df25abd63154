# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

from ._codec import (ISAL_BEST_COMPRESSION, ISAL_BEST_SPEED,
                     ISAL_DEFAULT_COMPRESSION, ChecksumKind, compress_bound)
from .buffers import (DEFAULT_POLICY, MAX_DECOMPRESS_RETRIES,
                      DecompressPolicy, adler_like_checksum, checksum,
                      compress, crc_checksum, decompress, default_checksum)
from .errors import (CompressionFailure, DecompressionDataError,
                     DecompressionSizingExhausted, IsalbufError)

# Aliases matching the names used by zlib and isal_zlib.
adler32 = adler_like_checksum
crc32 = crc_checksum

__all__ = [
    "compress",
    "decompress",
    "compress_bound",
    "checksum",
    "default_checksum",
    "adler_like_checksum",
    "crc_checksum",
    "adler32",
    "crc32",
    "ChecksumKind",
    "DecompressPolicy",
    "DEFAULT_POLICY",
    "MAX_DECOMPRESS_RETRIES",
    "ISAL_BEST_SPEED",
    "ISAL_BEST_COMPRESSION",
    "ISAL_DEFAULT_COMPRESSION",
    "IsalbufError",
    "CompressionFailure",
    "DecompressionDataError",
    "DecompressionSizingExhausted",
    "__version__"
]

__version__ = "0.1.0"
