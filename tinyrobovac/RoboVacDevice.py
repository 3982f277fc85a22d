# TinyRoboVac RoboVac Device
# -*- coding: utf-8 -*-
"""
 Python module to control Tuya based robot vacuums (Eufy RoboVac family)

 The Tuya local protocol is handled by tinytuya, this class maps the vacuum
 data points (DPS) to properties, commands and callbacks.

 Local Control Classes
    RoboVacDevice(dev_id, address=None, local_key="", version=3.3, port=6668, connection_timeout=5)
        If local_key is not given it is looked up in devices.json
        If address is None or 'Auto' the device is found with a network scan

 Functions
    RoboVacDevice:
        initialize()                   # Build the tinytuya client and connect()
        connect()                      # Request status, emits 'tuya.connected'
        disconnect()                   # Close socket, emits 'tuya.disconnected'
        poll()                         # Receive one update from the device
        monitor(status_timer=None)     # Receive updates until stop() or disconnected
        stop()                         # End monitor()
        get() / refresh()              # Request status
        set(data)                      # Set multiple DPS {index: value}

        work_mode()    activity()      battery_level()   error()
        runtime()      coverage()      volume()          going_home()
        auto_return()  consumables()   status()          multimaps()
        rooms()        voice()         hello()           docked()

        clean()                        # Start auto cleaning
        clean_rooms(rooms, clean_times)# Clean the listed room ids
        pause() / resume()
        locate(flag=True)              # Beep to find the vacuum
        go_home(flag=True)             # Return to the charging base
        set_volume(value)              # 0 - 100
        set_auto_return(flag)

        register_handler(event, cb)    # cb(device, *args)
        remove_handler(event, cb)

 Callback Events
    'tuya.connected'     cb(device)
    'tuya.disconnected'  cb(device)
    'tuya.error'         cb(device, TuyaClientError)
    'tuya.data'          cb(device, response)      # response to a status request
    'tuya.dp-refresh'    cb(device, response)      # update pushed by the device
    'event'              cb(device, {'command': name, 'value': value})
    'error'              cb(device, error_message)
    'alert'              cb(device, {'consumable': name, 'duration': value})
"""

import logging
import time

import tinytuya

from .core import (
    BATTERY_STATUS_KEY, BATTERY_STATUS_OK, CONNECTION_TIMEOUT, CONSUMABLE_LIMITS,
    DEFAULT_VERSION, DOCKED_ACTIVITIES, DPS_2_EVENT, DPS_INDEX_ACTIVITY,
    DPS_INDEX_AUTO_RETURN, DPS_INDEX_BATTERY, DPS_INDEX_CLEANING_COVERAGE,
    DPS_INDEX_CLEANING_RUNTIME, DPS_INDEX_CONSUMABLES, DPS_INDEX_ERROR,
    DPS_INDEX_FIND_ROBOT, DPS_INDEX_GO_HOME, DPS_INDEX_HELLO, DPS_INDEX_MULTIMAPS,
    DPS_INDEX_PLAY_PAUSE, DPS_INDEX_ROOMS, DPS_INDEX_STATUS, DPS_INDEX_VOICE,
    DPS_INDEX_VOLUME, DPS_INDEX_WORK_MODE, ENCODED_DPS, EVENT, EVENT_ALERT,
    EVENT_CONNECTED, EVENT_DATA, EVENT_DISCONNECTED, EVENT_DP_REFRESH, EVENT_ERROR,
    EVENT_TUYA_ERROR, EVENTS, KEEPALIVE_TIMER, NO_ERROR, TCPPORT, VOLUME_MAX,
    VOLUME_MIN, WORK_MODE_AUTO,
    DisconnectedError, DockedError, NoDataError, TuyaClientError,
    UnsupportedCommandError, build_room_clean, decode_payload, encode_payload,
    error_message, extract_dps, is_connection_error, is_error_response,
)

log = logging.getLogger(__name__)

ERROR_RETRY_DELAY = 5  # Seconds to wait in monitor() after an error response

# getters without a fallback raise NoDataError before the first update
_REQUIRED = object()


class RoboVacDevice(object):
    """
    Represents a Tuya based robot vacuum.
    """

    def __init__(self, dev_id, address=None, local_key="", version=DEFAULT_VERSION,
                 port=TCPPORT, connection_timeout=CONNECTION_TIMEOUT):
        self.id = dev_id
        self.address = address
        self.local_key = local_key
        self.version = version
        self.port = port
        self.connection_timeout = connection_timeout
        self.auto_ip = (not address) or address == "Auto" or address == "0.0.0.0"

        self.device = None
        self.dps = {}
        self.connected = False
        self._monitoring = False
        self._callbacks = {event: [] for event in EVENTS}

        if not self.local_key:
            devinfo = tinytuya.device_info(self.id)
            if devinfo and devinfo.get('key'):
                log.debug('using local key from device file for %s', self.id)
                self.local_key = devinfo['key']
                if devinfo.get('version'):
                    self.version = float(devinfo['version'])

    def __repr__(self):
        return ("%s( %r, address=%r, version=%r, port=%r, connected=%r )" %
                (self.__class__.__name__, self.id, self.address, self.version, self.port, self.connected))

    def __enter__(self):
        if not self.connected:
            self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()

    #
    # Callbacks
    #
    def register_handler(self, event, cb):
        if event not in self._callbacks:
            raise ValueError('Unknown event %r, expected one of %r' % (event, EVENTS))
        if cb not in self._callbacks[event]:
            self._callbacks[event].append(cb)

    def remove_handler(self, event, cb):
        if cb in self._callbacks.get(event, ()):
            self._callbacks[event].remove(cb)

    def _emit(self, event, *args):
        log.debug('emit %s %r', event, args)
        for cb in list(self._callbacks[event]):
            cb(self, *args)

    #
    # Connection lifecycle
    #
    def find(self):
        """Scan the network for the device and update address and version"""
        bcast_data = tinytuya.find_device(self.id)
        if not bcast_data or not bcast_data.get('ip'):
            log.debug("Unable to find device on network (specify IP address)")
            raise TuyaClientError(tinytuya.error_json(tinytuya.ERR_OFFLINE, {'id': self.id}))
        self.address = bcast_data['ip']
        if bcast_data.get('version'):
            self.version = float(bcast_data['version'])
        log.debug('found %s at %s (version %s)', self.id, self.address, self.version)
        return bcast_data

    def initialize(self):
        """Create the tinytuya client and connect to the vacuum"""
        if self.auto_ip:
            self.find()
        if self.device is not None:
            # reconnecting, drop the old persistent socket
            self.device.close()
        self.device = tinytuya.Device(
            self.id, self.address, self.local_key,
            version=self.version, persist=True, port=self.port,
            connection_timeout=self.connection_timeout,
        )
        return self.connect()

    def connect(self):
        """Open the connection by requesting the current status of all DPS"""
        if self.device is None:
            return self.initialize()
        response = self.device.status()
        if not response:
            response = tinytuya.error_json(tinytuya.ERR_PAYLOAD)
        if is_error_response(response):
            raise self._handle_error(response)
        self.connected = True
        self._emit(EVENT_CONNECTED)
        self._process(response, EVENT_DATA)
        return response

    def disconnect(self):
        self._monitoring = False
        if self.device is not None:
            self.device.close()
        if self.connected:
            self.connected = False
            self._emit(EVENT_DISCONNECTED)

    def _require_connection(self):
        if not self.connected:
            raise DisconnectedError()

    #
    # Raw data point access
    #
    def get(self):
        self._require_connection()
        return self._handle_response(self.device.status(), EVENT_DATA)

    def set(self, data):
        """Set multiple DPS at once, data = {index: value}"""
        self._require_connection()
        log.debug('set %r', data)
        return self._handle_response(self.device.set_multiple_values(data), EVENT_DATA)

    def refresh(self):
        return self.get()

    def poll(self):
        """Wait for one update from the vacuum, returns None on timeout"""
        self._require_connection()
        response = self.device.receive()
        if is_error_response(response) and str(response.get('Err')) == str(tinytuya.ERR_TIMEOUT):
            response = None
        return self._handle_response(response, EVENT_DP_REFRESH)

    def monitor(self, status_timer=None, keepalive_timer=KEEPALIVE_TIMER):
        """Process updates until stop() is called or the connection is lost

        A heartbeat is sent every `keepalive_timer` seconds, and when
        `status_timer` is set a full status is requested that often.
        """
        self._require_connection()
        self._monitoring = True
        heartbeat_time = time.time() + keepalive_timer
        status_time = time.time() + status_timer if status_timer else None

        while self._monitoring and self.connected:
            try:
                if status_time and time.time() >= status_time:
                    self.refresh()
                    status_time = time.time() + status_timer
                    heartbeat_time = time.time() + keepalive_timer
                elif time.time() >= heartbeat_time:
                    self._handle_response(self.device.heartbeat(nowait=False), EVENT_DP_REFRESH)
                    heartbeat_time = time.time() + keepalive_timer
                else:
                    self.poll()
            except TuyaClientError as err:
                if not self.connected:
                    log.debug('monitor stopped: %s', err)
                    break
                # rate limit so we don't hammer the device
                log.debug('monitor error, retrying in %ss: %s', ERROR_RETRY_DELAY, err)
                time.sleep(ERROR_RETRY_DELAY)
        self._monitoring = False

    def stop(self):
        self._monitoring = False

    def _handle_response(self, response, event):
        if response is None:
            return None
        if is_error_response(response):
            raise self._handle_error(response)
        self._process(response, event)
        return response

    def _handle_error(self, response):
        err = TuyaClientError(response)
        log.debug('tinytuya error response: %r', response)
        self._emit(EVENT_TUYA_ERROR, err)
        if is_connection_error(response) and self.connected:
            self.connected = False
            self._emit(EVENT_DISCONNECTED)
        return err

    def _process(self, response, event):
        dps = {}
        decoded = {}
        for index, value in extract_dps(response).items():
            index = str(index)
            if index in ENCODED_DPS:
                try:
                    decoded[index] = decode_payload(value)
                except ValueError as err:
                    # keep the last good value, report the bad one
                    log.debug('dropping undecodable DP %s: %s', index, err)
                    self._emit(EVENT_TUYA_ERROR, TuyaClientError(
                        tinytuya.error_json(tinytuya.ERR_PAYLOAD, {index: value})))
                    continue
            dps[index] = value
        self.dps.update(dps)
        self._emit(event, response)
        for index in dps:
            self._dispatch(index, dps[index], decoded.get(index))

    def _dispatch(self, index, value, decoded=None):
        if index == DPS_INDEX_ERROR:
            self._emit(EVENT_ERROR, self.error())
            return
        command = DPS_2_EVENT.get(index)
        if command is None:
            log.debug('ignoring unmapped DP %s=%r', index, value)
        elif index == DPS_INDEX_CONSUMABLES:
            self._emit(EVENT, {'command': command, 'value': decoded})
            self._check_consumables(decoded)
        elif index in ENCODED_DPS:
            self._emit(EVENT, {'command': command, 'value': decoded})
        else:
            self._emit(EVENT, {'command': command, 'value': value})

    def _check_consumables(self, consumables):
        consumable = consumables.get('consumable') if isinstance(consumables, dict) else None
        duration = consumable.get('duration') if isinstance(consumable, dict) else None
        if not isinstance(duration, dict):
            log.debug('no consumable durations in %r', consumables)
            return
        for key, name, limit in CONSUMABLE_LIMITS:
            value = duration.get(key)
            if value is not None and value >= limit:
                self._emit(EVENT_ALERT, {'consumable': name, 'duration': value})
        battery = duration.get(BATTERY_STATUS_KEY)
        if battery is not None and battery != BATTERY_STATUS_OK:
            self._emit(EVENT_ALERT, {'consumable': 'battery', 'duration': battery})

    #
    # Properties
    #
    def _read(self, index, empty=_REQUIRED):
        if not self.dps:
            if empty is _REQUIRED:
                raise NoDataError()
            log.debug('no data points available yet')
            return empty
        if index not in self.dps:
            raise UnsupportedCommandError(index)
        return self.dps[index]

    def _read_decoded(self, index, empty=_REQUIRED):
        value = self._read(index, empty)
        if not self.dps:
            return value
        return decode_payload(value)

    def work_mode(self):
        return self._read(DPS_INDEX_WORK_MODE, 'unknown')

    def activity(self):
        return self._read(DPS_INDEX_ACTIVITY, 'unknown')

    def battery_level(self):
        """Battery charge in percent, -1 before the first update"""
        return self._read(DPS_INDEX_BATTERY, -1)

    def error(self):
        if not self.dps:
            log.debug('no data points available yet')
            return NO_ERROR
        return error_message(self.dps.get(DPS_INDEX_ERROR))

    def runtime(self):
        return self._read(DPS_INDEX_CLEANING_RUNTIME, -1)

    def coverage(self):
        return self._read(DPS_INDEX_CLEANING_COVERAGE, -1)

    def consumables(self):
        """Decoded consumable report, wear durations are under ['consumable']['duration']"""
        return self._read_decoded(DPS_INDEX_CONSUMABLES, None)

    def status(self):
        return self._read_decoded(DPS_INDEX_STATUS, None)

    def multimaps(self):
        return self._read_decoded(DPS_INDEX_MULTIMAPS)

    def rooms(self):
        return self._read_decoded(DPS_INDEX_ROOMS)

    def voice(self):
        return self._read_decoded(DPS_INDEX_VOICE)

    def hello(self):
        return self._read_decoded(DPS_INDEX_HELLO)

    def going_home(self):
        return self._read(DPS_INDEX_GO_HOME)

    def volume(self):
        return self._read(DPS_INDEX_VOLUME)

    def auto_return(self):
        return self._read(DPS_INDEX_AUTO_RETURN)

    def docked(self):
        return self.activity() in DOCKED_ACTIVITIES

    #
    # Commands
    #
    def clean(self):
        return self.set({DPS_INDEX_WORK_MODE: WORK_MODE_AUTO})

    def clean_rooms(self, rooms=None, clean_times=1):
        value = encode_payload(build_room_clean(rooms, clean_times))
        return self.set({DPS_INDEX_ROOMS: value})

    def resume(self):
        return self.set({DPS_INDEX_PLAY_PAUSE: True})

    def pause(self):
        return self.set({DPS_INDEX_PLAY_PAUSE: False})

    def locate(self, flag=True):
        current = self._read(DPS_INDEX_FIND_ROBOT)
        if self.docked():
            raise DockedError('RoboVac is on the charging base')
        if current == flag:
            log.debug('locate already %r', flag)
            return None
        return self.set({DPS_INDEX_FIND_ROBOT: flag})

    def go_home(self, flag=True):
        if not self.dps:
            raise NoDataError()
        if self.docked():
            raise DockedError('RoboVac is already home')
        if self._read(DPS_INDEX_GO_HOME) == flag:
            log.debug('go home already %r', flag)
            return None
        return self.set({DPS_INDEX_GO_HOME: flag})

    def set_volume(self, value):
        self._read(DPS_INDEX_VOLUME)
        if isinstance(value, bool) or not isinstance(value, (int, float)) \
                or not VOLUME_MIN <= value <= VOLUME_MAX:
            raise ValueError('expecting value between %d to %d' % (VOLUME_MIN, VOLUME_MAX))
        return self.set({DPS_INDEX_VOLUME: value})

    def set_auto_return(self, flag):
        self._read(DPS_INDEX_AUTO_RETURN)
        return self.set({DPS_INDEX_AUTO_RETURN: flag})
