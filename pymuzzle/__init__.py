#!/usr/bin/env python
""" PyMuzzle v 0.1.0: A Python 3.x muzzle energy tool
Copyright (C) 2020 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Top level directory for PyMuzzle program files
 derives the missing shot parameter (mass, velocity or energy) of a projectile
 given the other two in metric or imperial units

Requirements
 - Python 3.x https://www.python.org

External Dependencies
 - regex 2.5.93
    https://bitbucket.org/mrabarnett/mrab-regex
    pip3 install regex
 - numpy 1.20.3
    https://numpy.org
    pip3 install numpy

Usage
 - pip3 install . then run muzzle --help
 - from pymuzzle.ballistics.energy import run, UnitSystem

DO NOT IMPORT *
"""

#__name__ = 'pymuzzle'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'May 2021'
__author__ = 'Dale V. Patterson'
__maintainer__ = 'Dale V. Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

class PyMuzzleException(Exception):
    def __init__(self,msg): super().__init__(msg)

"""
KINETIC ENERGY
from importlib import reload
import pymuzzle.ballistics.energy as energy

reload(energy)
shot = energy.run(energy.UnitSystem.METRIC,mass='10',speed='800')
shot.energy
shot = energy.run(energy.UnitSystem.IMPERIAL,mass='150',energy='2427.648')
shot.speed
"""
