# TinyRoboVac Module
# -*- coding: utf-8 -*-

import tinytuya

NO_ERROR = "no error"

# RoboVac error register (DP 106) values
ERRORS = {
    0: NO_ERROR,
    1: "front bumper stuck",
    2: "wheel stuck",
    3: "side brush",
    4: "rolling brush bar stuck",
    5: "device trapped",
    6: "device trapped",
    7: "wheel suspended",
    8: "low battery",
    9: "magnetic boundary",
    12: "right wall sensor",
    13: "device tilted",
    14: "insert dust collector",
    17: "restricted area detected",
    18: "laser cover stuck",
    19: "laser sensor stuck",
    20: "laser sensor blocked",
    21: "base blocked",
    # self test results
    "S1": "battery",
    "S2": "wheel module",
    "S3": "side brush",
    "S4": "suction fan",
    "S5": "rolling brush",
    "S8": "path tracking sensor",
    # firmware reporting text codes
    "Wheel_stuck": "wheel stuck",
    "R_brush_stuck": "rolling brush stuck",
    "Crash_bar_stuck": "front bumper stuck",
    "sensor_dirty": "sensor dirty",
    "N_enough_pow": "low battery",
    "Stuck_5_min": "device trapped",
    "Fan_stuck": "fan stuck",
    "S_brush_stuck": "side brush stuck",
}

# tinytuya error responses which mean the device can no longer be reached
CONNECTION_ERRORS = (
    tinytuya.ERR_CONNECT,
    tinytuya.ERR_OFFLINE,
    tinytuya.ERR_KEY_OR_VER,
)


def error_message(code):
    """Translate an error register value to text, unknown codes are returned unchanged"""
    if code is None:
        return NO_ERROR
    if isinstance(code, bool):
        return code
    if code in ERRORS:
        return ERRORS[code]
    # some firmware reports the numeric codes as strings
    if isinstance(code, str) and code.isdigit() and int(code) in ERRORS:
        return ERRORS[int(code)]
    return code


def is_error_response(response):
    return isinstance(response, dict) and "Err" in response


def is_connection_error(response):
    """True if a tinytuya error response means the link to the device is down"""
    if not is_error_response(response):
        return False
    try:
        return int(response["Err"]) in CONNECTION_ERRORS
    except (TypeError, ValueError):
        return False
