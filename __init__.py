#!/usr/bin/env python
""" PyMuzzle v 0.1.0 A Python 3.x muzzle energy calculator
Copyright (C) 2020  Dale Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Root distribution directory for PyMuzzle

Do not import from this directory

"""

#__name__ = 'PyMuzzle'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'May 2021'
__author__ = 'Dale V. Patterson'
__maintainer__ = 'Dale V. Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'
