# TinyRoboVac Module
# -*- coding: utf-8 -*-
"""
 Python module to control Tuya based robot vacuums over the local network

 For more information see README.md

 Core Helper Functions

 Module Functions
    set_debug(toggle, color)          # Activate verbose debugging output
    termcolor(color)                  # Terminal color escape sequences (or blanks)

 Credits
  * TinyTuya https://github.com/jasonacox/tinytuya by jasonacox
    Local Tuya protocol client this module drives
  * TuyaAPI https://github.com/codetheweb/tuyapi by codetheweb
    Data point layout of the RoboVac family
"""

import logging
import sys

try:
    from colorama import init
    HAVE_COLORAMA = True
except ImportError:
    HAVE_COLORAMA = False

import tinytuya

HAVE_COLOR = HAVE_COLORAMA or not sys.platform.startswith('win')

# Colorama terminal color capability for all platforms
if HAVE_COLORAMA:
    init()

version_tuple = (1, 0, 0)  # Major, Minor, Patch
version = __version__ = "%d.%d.%d" % version_tuple

log = logging.getLogger(__name__)


def set_debug(toggle=True, color=True):
    """Enable tinyrobovac (and tinytuya) verbose logging"""
    color = color and HAVE_COLOR
    if toggle:
        if color:
            logging.basicConfig(
                format="\x1b[31;1m%(levelname)s:%(message)s\x1b[0m", level=logging.DEBUG
            )
        else:
            logging.basicConfig(format="%(levelname)s:%(message)s", level=logging.DEBUG)
        logging.getLogger('tinyrobovac').setLevel(logging.DEBUG)
        log.debug("TinyRoboVac [%s]", __version__)
        log.debug("Python %s on %s", sys.version, sys.platform)
        log.debug("Using TinyTuya %s", tinytuya.__version__)
        tinytuya.set_debug(True, color)
    else:
        logging.getLogger('tinyrobovac').setLevel(logging.NOTSET)
        tinytuya.set_debug(False)


# Terminal color helper
def termcolor(color=True):
    color = color and HAVE_COLOR
    if color is False:
        bold = subbold = normal = dim = alert = cyan = ""
    else:
        bold = "\033[0m\033[97m\033[1m"
        subbold = "\033[0m\033[32m"
        normal = "\033[97m\033[0m"
        dim = "\033[0m\033[97m\033[2m"
        alert = "\033[0m\033[91m\033[1m"
        cyan = "\033[0m\033[36m"
    return bold, subbold, normal, dim, alert, cyan
