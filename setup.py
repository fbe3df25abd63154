# Copyright (c) 2020 Leiden University Medical Center
# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

from pathlib import Path

from setuptools import find_packages, setup

import versioningit

README = Path(__file__).parent / "README.rst"

setup(
    name="isalbuf",
    version=versioningit.get_version(),
    description="One-shot zlib compatible compression and decompression "
                "with adaptive output buffer sizing, using the ISA-L "
                "library.",
    author="Leiden University Medical Center",
    long_description=README.read_text(),
    long_description_content_type="text/x-rst",
    license="PSF-2.0",
    keywords="isal isa-l compression deflate zlib adler32 crc32",
    zip_safe=False,
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={'isalbuf': ['py.typed']},
    install_requires=["isal>=1.6.0"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["isalbuf = isalbuf.cli:main"]},
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Development Status :: 4 - Beta",
        "Topic :: System :: Archiving :: Compression",
        "License :: OSI Approved :: Python Software Foundation License",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Operating System :: Microsoft :: Windows",
    ],
    python_requires=">=3.8",
)
