# TinyRoboVac Module
# -*- coding: utf-8 -*-

from .const import *
from .exceptions import *
from .error_helper import *
from .payload_helper import *

from .core import *
from .core import __version__
