# TinyRoboVac Module
# -*- coding: utf-8 -*-
"""
 Helpers for the base64 encoded JSON sub-payloads carried by some RoboVac DPs
 (consumables, multimaps, rooms, voice, hello, status)
"""

import base64
import binascii
import json
import logging
import time

from .const import ROOM_CLEAN_METHOD

log = logging.getLogger(__name__)


def decode_payload(value):
    """Decode a base64 string (or bytes) holding JSON into a python object

    Raises ValueError if the value is not valid base64 or JSON.
    """
    if isinstance(value, str):
        value = value.encode('ascii', errors='strict')
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, TypeError) as err:
        raise ValueError('invalid base64 payload: %r' % (value,)) from err
    try:
        return json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as err:
        raise ValueError('invalid JSON payload: %r' % (raw,)) from err


def encode_payload(obj):
    """Encode a python object as compact JSON wrapped in base64"""
    raw = json.dumps(obj, separators=(',', ':')).encode('utf-8')
    return base64.b64encode(raw).decode('ascii')


def extract_dps(response):
    """Return the DP dict of a tinytuya response

    Devices send either {"dps": {...}} or, with protocol 3.4+,
    {"data": {"dps": {...}}}.
    """
    if not isinstance(response, dict) or 'Err' in response:
        return {}
    if isinstance(response.get('dps'), dict):
        return response['dps']
    data = response.get('data')
    if isinstance(data, dict) and isinstance(data.get('dps'), dict):
        return data['dps']
    return {}


def build_room_clean(rooms=None, clean_times=1, timestamp=None):
    """Build the selectRoomsClean method call, defaults to room 1"""
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    fn = {
        'method': ROOM_CLEAN_METHOD,
        'data': {
            'roomIds': list(rooms) if rooms else [1],
            'cleanTimes': clean_times,
        },
        'timestamp': timestamp,
    }
    log.debug('room clean payload: %r', fn)
    return fn
