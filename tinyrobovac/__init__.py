# TinyRoboVac Module
# -*- coding: utf-8 -*-
"""
 Python module to control Tuya based robot vacuums over the local network

 The Tuya local protocol (discovery, encryption, framing) is provided by
 tinytuya, this module maps the vacuum data points to an event and command API.

 Classes
    RoboVacDevice(dev_id, address=None, local_key="", version=3.3)

 Module Functions
    set_debug(toggle, color)            # Activate verbose debugging output
    error_message(code)                 # Translate an error register value
    decode_payload(value)               # base64 JSON DP value -> object
    encode_payload(obj)                 # object -> base64 JSON DP value

 Example
    import tinyrobovac

    vac = tinyrobovac.RoboVacDevice('DEVICEID', '10.0.1.99', 'DEVICEKEY')
    vac.register_handler('event', lambda dev, event: print(event))
    vac.initialize()
    print(vac.battery_level(), vac.activity())
    vac.clean()
"""

from .core import *
from .core import __version__

from .RoboVacDevice import RoboVacDevice
