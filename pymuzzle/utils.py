#!/usr/bin/env python
""" utils.py
Copyright (C) 2020 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines utility functions to read numeric values entered by the user
"""

#__name__ = 'utils'
__license__ = 'GPLv3'
__version__ = '0.0.4'
__date__ = 'July 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import regex as re
import numpy as np

# regex
# decimal literal i.e. 10, -2.5, .5, 3., 1e3, +4.2E-01 (no inf, nan or hex)
re_decimal = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

def to_float(s):
    """
     converts text s to a finite double
    :param s: string to convert, whitespace is not allowed
    :return: np.double of s
    raises ValueError if s is not a decimal literal or does not fit in a double
    """
    if s is None or not re_decimal.fullmatch(s):
        raise ValueError("Invalid decimal literal ({})".format(s))
    x = np.double(float(s))
    if not np.isfinite(x):
        raise ValueError("Decimal literal out of range ({})".format(s))
    return x

def rnd(x,r=3):
    """ rounds x to r places returning a python float (nan, inf are kept) """
    return float(np.round(x,r))
