#!/usr/bin/env python
"""  energy.py
Copyright (C) 2021 Dale Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the shot parameter derivation i.e. given two of mass, muzzle velocity
and muzzle energy derives the third using kinetic energy
 KE = 1/2*m*v^2
"""

#__name__ = 'energy'
__license__ = 'GPLv3'
__version__ = '0.0.3'
__date__ = 'May 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import logging
from enum import Enum
import numpy as np
import pymuzzle.ballistics as bls
import pymuzzle.utils as utils
from pymuzzle import PyMuzzleException

logger = logging.getLogger(__name__)

class EnergyException(PyMuzzleException):
    def __init__(self,msg): super().__init__(msg)

class ParseError(EnergyException):
    """ an input parameter is not a finite decimal number """
    def __init__(self,name,text):
        super().__init__(
            "Failed to parse '{}' ({}) as input parameter".format(name,text)
        )
        self.name = name
        self.text = text

class InsufficientInputsError(EnergyException):
    """ less than two of the three input parameters were given """
    def __init__(self):
        super().__init__(
            "Incorrect parameters set. At least two of three parameters are "
            "required to derive the third."
        )

# UNIT SYSTEMS

class UnitSystem(Enum):
    """ measurement system calculations are performed in """
    METRIC = 0   # grams, meters per second, joules
    IMPERIAL = 1 # grains, feet per second, foot-pounds of energy

"""
 defines the constants and conversions of each unit system, each is a dict
 with keys
  g = gravitational correction applied to energy
  to-base = converts mass from input units to base units (kg or lb)
  from-base = converts mass from base units to input/output units
  mass, speed, energy = the display label of each parameter
"""
unit_specs = {
    UnitSystem.METRIC:{
        'g':bls.GEE_MPS,
        'to-base':bls.gm2kg,
        'from-base':bls.kg2gm,
        'mass':'grams',
        'speed':'m/s',
        'energy':'Joules',
    },
    UnitSystem.IMPERIAL:{
        'g':bls.GEE_FPS,
        'to-base':bls.gr2lb,
        'from-base':bls.lb2gr,
        'mass':'grains',
        'speed':'FPS',
        'energy':'FPE',
    },
}

# parameter names in the order they are parsed/reported
PARAMS = ('mass','speed','energy')

#### DERIVATIONS

"""
 All derivations take/return values in the units of the given unit system,
 mass is converted to base units internally. Zero mass/speed or a negative
 energy yield inf or nan, nothing is raised
"""

def derive_energy(m,v,units):
    """
     derives muzzle energy
    :param m: mass (gr or gm)
    :param v: velocity (FPS or m/s)
    :param units: the UnitSystem
    :return: energy (FPE or J)
     E = m_b * v^2 / 2 * g
     where m_b is mass in base units (lb or kg)
    """
    spec = unit_specs[units]
    with np.errstate(all='ignore'):
        return (spec['to-base'](np.double(m))*np.power(v,2)) / (2*spec['g'])

def derive_speed(m,e,units):
    """
     derives muzzle velocity
    :param m: mass (gr or gm)
    :param e: energy (FPE or J)
    :param units: the UnitSystem
    :return: velocity (FPS or m/s)
     v = sqrt(2 * g * E / m_b)
    """
    spec = unit_specs[units]
    with np.errstate(all='ignore'):
        return np.sqrt((2*spec['g']*np.double(e)) / spec['to-base'](np.double(m)))

def derive_mass(v,e,units):
    """
     derives projectile mass
    :param v: velocity (FPS or m/s)
    :param e: energy (FPE or J)
    :param units: the UnitSystem
    :return: mass (gr or gm)
     m = (2 * g * E / v^2) converted from base units
    """
    spec = unit_specs[units]
    with np.errstate(all='ignore'):
        return spec['from-base']((2*spec['g']*np.double(e)) / np.power(np.double(v),2))

class InputParameters(object):
    """
     The raw (text) mass, speed and energy of a shot as entered by the user
     in the units of the UnitSystem. Any may be None (not provided)
    """
    def __init__(self,units=UnitSystem.METRIC,mass=None,speed=None,energy=None):
        if units not in unit_specs:
            raise EnergyException("Invalid unit system ({})".format(units))
        self._units = units
        self._ps = {'mass':mass,'speed':speed,'energy':energy}

    @property
    def units(self): return self._units

    @property
    def mass(self): return self._ps['mass']

    @property
    def speed(self): return self._ps['speed']

    @property
    def energy(self): return self._ps['energy']

    @property
    def count(self): return len([p for p in PARAMS if self._ps[p] is not None])

    def parse(self):
        """
         parses each provided parameter
        :return: tuple t = (mass,speed,energy) of doubles, None if not provided
        raises ParseError on the first parameter that is not a finite number
        """
        vs = []
        for p in PARAMS:
            if self._ps[p] is None:
                vs.append(None)
                continue
            try:
                vs.append(utils.to_float(self._ps[p]))
            except ValueError:
                raise ParseError(p,self._ps[p])
        return tuple(vs)

class ShotParameters(object):
    """
     The resolved mass, speed and energy of a shot in the units of the
     UnitSystem.
      bogus = all three were given, nothing was derived and values are as is
      derived = name of the derived parameter or None if bogus
    """
    def __init__(self,units,mass,speed,energy,derived=None):
        self._units = units
        self._m = float(mass)
        self._v = float(speed)
        self._e = float(energy)
        self._derived = derived

    def __repr__(self):
        return "ShotParameters({}, mass={}, speed={}, energy={}, derived={})".format(
            self._units.name,self._m,self._v,self._e,self._derived
        )

    @property
    def units(self): return self._units

    @property
    def mass(self): return self._m

    @property
    def speed(self): return self._v

    @property
    def energy(self): return self._e

    @property
    def derived(self): return self._derived

    @property
    def bogus(self): return self._derived is None

    @property
    def labels(self):
        """ :return: tuple t = (mass label,speed label,energy label) """
        spec = unit_specs[self._units]
        return tuple(spec[p] for p in PARAMS)

    def rounded(self,r=3):
        """ :return: tuple t = (mass,speed,energy) rounded to r places """
        return utils.rnd(self._m,r),utils.rnd(self._v,r),utils.rnd(self._e,r)

def derive(params):
    """
     derives the missing parameter of params
    :param params: InputParameters with exactly two (or three) parameters given
    :return: ShotParameters
    raises ParseError if a given parameter is not a number and
     InsufficientInputsError if less than two parameters are given
    """
    units = params.units
    m,v,e = params.parse()

    # mass and speed given, derive energy
    if m is not None and v is not None and e is None:
        logger.debug("deriving energy (%s) from mass and speed",units.name)
        return ShotParameters(units,m,v,derive_energy(m,v,units),'energy')

    # mass and energy given, derive speed
    if m is not None and v is None and e is not None:
        logger.debug("deriving speed (%s) from mass and energy",units.name)
        return ShotParameters(units,m,derive_speed(m,e,units),e,'speed')

    # speed and energy given, derive mass
    if m is None and v is not None and e is not None:
        logger.debug("deriving mass (%s) from speed and energy",units.name)
        return ShotParameters(units,derive_mass(v,e,units),v,e,'mass')

    # all given, nothing to derive
    if params.count == 3:
        logger.debug("all parameters given, nothing to derive")
        return ShotParameters(units,m,v,e)

    raise InsufficientInputsError()

def run(units,mass=None,speed=None,energy=None):
    """
     derives the missing shot parameter from the given two
    :param units: the UnitSystem of mass, speed, energy
    :param mass: projectile mass text (gm or gr) or None
    :param speed: muzzle velocity text (m/s or FPS) or None
    :param energy: muzzle energy text (J or FPE) or None
    :return: ShotParameters
    """
    return derive(InputParameters(units,mass,speed,energy))
