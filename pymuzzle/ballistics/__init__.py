#!/usr/bin/env python
""" ballistics
Copyright (C) 2020 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Top level directory for ballistics package
Contains:
 energy: derivation of mass, muzzle velocity and muzzle energy

Defines conversion functions/constants
"""

#__name__ = 'ballistics'
__license__ = 'GPLv3'
__version__ = '0.0.2'
__date__ = 'May 2021'
__author__ = 'Dale V. Patterson'
__maintainer__ = 'Dale V. Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

# CONSTANTS

GEE_FPS = 32.174 # standard gravity (ft/s^2) converts weight (lb) to mass
GEE_MPS = 1.     # no correction for metric, mass is already mass (kg)

# CONVERSIONS

# units to base units
GM_PER_KG = 1000. # grams in a kilogram
GR_PER_LB = 7000. # grains in a pound

def gm2kg(m): return m/GM_PER_KG # grams to kilograms
def kg2gm(m): return m*GM_PER_KG # kilograms to grams
def gr2lb(m): return m/GR_PER_LB # grains to pounds
def lb2gr(m): return m*GR_PER_LB # pounds to grains
