# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

"""Lossy text-mode entry points.

Older callers passed text instead of bytes. Each character was stored as a
single byte, so any code point above 255 kept only its low byte, and trailing
NUL characters were stripped from decompressed text. These functions
reproduce that behaviour for callers that depend on it. Use
isalbuf.compress and isalbuf.decompress for anything new: they are lossless.
"""

import warnings

from . import buffers

__all__ = ["compress_text", "decompress_text"]

_LOSSY_WARNING = ("text-mode compression is lossy, use isalbuf.compress and "
                  "isalbuf.decompress on bytes instead")


def _text_to_bytes(text: str) -> bytes:
    return bytes(ord(char) & 0xFF for char in text)


def compress_text(text: str, level: int = buffers.ISAL_DEFAULT_COMPRESSION
                  ) -> bytes:
    """Compress text, keeping only the low byte of every character."""
    warnings.warn(_LOSSY_WARNING, DeprecationWarning, stacklevel=2)
    if not isinstance(text, str):
        raise TypeError(f"text should be a str, got {type(text).__name__}")
    return buffers.compress(_text_to_bytes(text), level)


def decompress_text(data) -> str:
    """Decompress data to text, dropping trailing NUL characters."""
    warnings.warn(_LOSSY_WARNING, DeprecationWarning, stacklevel=2)
    return buffers.decompress(data).rstrip(b"\x00").decode("latin-1")
