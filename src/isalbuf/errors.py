# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

"""Exceptions raised by the one-shot compression functions."""

__all__ = ["IsalbufError", "CompressionFailure",
           "DecompressionSizingExhausted", "DecompressionDataError"]


class IsalbufError(Exception):
    """Base class for errors reported by isalbuf.

    :ivar operation: "compress" or "decompress".
    :ivar status: The codec status that ended the call, if there was one.
    """
    operation = ""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class CompressionFailure(IsalbufError):
    """The codec could not compress into a buffer of compress_bound size.

    Sizing is guaranteed sufficient, so this points at the environment
    (usually memory) and is never retried.
    """
    operation = "compress"

    def __init__(self, status):
        super().__init__(
            f"compress failed with codec status {status!r}", status)


class DecompressionSizingExhausted(IsalbufError):
    """The output buffer was still too small after every allowed retry."""
    operation = "decompress"

    def __init__(self, attempts: int, capacity: int, status=None):
        super().__init__(
            f"decompress gave up after {attempts} attempts, output did not "
            f"fit in {capacity} bytes", status)
        self.attempts = attempts
        self.capacity = capacity


class DecompressionDataError(IsalbufError):
    """The compressed input is corrupt, incomplete or otherwise unusable."""
    operation = "decompress"

    def __init__(self, status, detail=None):
        message = f"decompress failed with codec status {status!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message, status)
