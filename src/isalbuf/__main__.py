# Copyright (c) 2001, 2002, 2003, 2004, 2005, 2006, 2007, 2008, 2009, 2010,
# 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018, 2019, 2020, 2021, 2022
# Python Software Foundation; All Rights Reserved

# This file is part of isalbuf which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

from .cli import main

main()
