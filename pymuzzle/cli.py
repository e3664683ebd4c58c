#!/usr/bin/env python
""" cli.py
Copyright (C) 2021 Dale V. Patterson (dale.v.patterson@gmail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the muzzle command line tool

 muzzle [--imperial] [--mass NUMBER] [--speed NUMBER] [--energy NUMBER]

 exits 0 on success/help and 1 when arguments or calculation fail
"""

#__name__ = 'cli'
__license__ = 'GPLv3'
__version__ = '0.0.2'
__date__ = 'June 2021'
__author__ = 'Dale Patterson'
__maintainer__ = 'Dale Patterson'
__email__ = 'dale.v.patterson@gmail.com'
__status__ = 'Development'

import sys
import logging
import argparse
import regex as re
import pymuzzle.ballistics.energy as energy
from pymuzzle import PyMuzzleException

logger = logging.getLogger(__name__)

USAGE = "muzzle [--imperial] [--mass NUMBER] [--speed NUMBER] [--energy NUMBER]"
BRIEF = "Enter either two of the three parameters to get the third."
WARN_BOGUS = "WARNING: All shot parameters have been given. Nothing has been " \
             "derived. Displaying as is."

# negative decimal literal i.e. -5, -.5, -1e3, -2.5E-1
re_negative = re.compile(r"^-(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

class MuzzleParser(argparse.ArgumentParser):
    """ ArgumentParser that exits with 1 (not 2) on bad arguments """
    def __init__(self,*args,**kwargs):
        super().__init__(*args,**kwargs)
        # values like -1e3 are numbers not options
        self._negative_number_matcher = re_negative

    def error(self,message):
        self.exit(1,"Failed to parse parameters with: {}\n".format(message))

def parser():
    """ :return: the muzzle ArgumentParser """
    p = MuzzleParser(prog='muzzle',usage=USAGE,description=BRIEF)
    p.add_argument(
        '-i','--imperial',action='store_true',
        help="use imperial units instead of metric"
    )
    p.add_argument(
        '-m','--mass',metavar='NUMBER',
        help="mass of the projectile (grains for imperial or grams for metric)"
    )
    p.add_argument(
        '-s','--speed',metavar='NUMBER',
        help="velocity of the projectile (FPS for imperial or m/s for metric)"
    )
    p.add_argument(
        '-e','--energy',metavar='NUMBER',
        help="muzzle energy of the projectile (FPE for imperial or Joules for metric)"
    )
    p.add_argument(
        '-v','--verbose',action='store_true',help="print debug messages"
    )
    return p

def report(shot):
    """
     formats derived shot parameters for display
    :param shot: ShotParameters
    :return: the report string
    """
    m,s,e = shot.rounded(3)
    ml,sl,el = shot.labels
    txt = WARN_BOGUS + "\n" if shot.bogus else ""
    txt += "Derived shot parameters are:\n" \
           "Projectile mass:\t{:.3f} {}\n" \
           "Projectile speed:\t{:.3f} {}\n" \
           "Projectile energy:\t{:.3f} {}\n".format(m,ml,s,sl,e,el)
    return txt

def main(argv=None):
    """
     runs muzzle with argv (sys.argv[1:] if None)
    :return: exit code
    """
    args = parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s"
    )

    units = energy.UnitSystem.IMPERIAL if args.imperial else energy.UnitSystem.METRIC
    logger.debug(
        "units=%s mass=%s speed=%s energy=%s",
        units.name,args.mass,args.speed,args.energy
    )
    try:
        shot = energy.run(units,args.mass,args.speed,args.energy)
    except PyMuzzleException as e:
        print("Failed to calculate parameters with: {}".format(e),file=sys.stderr)
        return 1

    print(report(shot))
    return 0

if __name__ == '__main__':
    sys.exit(main())
