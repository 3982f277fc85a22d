# TinyRoboVac Module
# -*- coding: utf-8 -*-


class RoboVacError(Exception):
    """Base class for all tinyrobovac errors"""


class DisconnectedError(RoboVacError):
    def __init__(self, message="RoboVac is disconnected"):
        super(DisconnectedError, self).__init__(message)


class NoDataError(RoboVacError):
    def __init__(self, message="no data points available yet"):
        super(NoDataError, self).__init__(message)


class UnsupportedCommandError(RoboVacError):
    """The DP backing a property or command was never reported by the device"""

    def __init__(self, dps_index=None, message="RoboVac does not support this command"):
        super(UnsupportedCommandError, self).__init__(message)
        self.dps_index = dps_index


class DockedError(RoboVacError):
    pass


class TuyaClientError(RoboVacError):
    """
    An error response returned by tinytuya, e.g.
        {"Error": "Network Error: Unable to Connect", "Err": "901", "Payload": None}
    """

    def __init__(self, response):
        self.response = response
        self.message = response.get("Error", "Unknown Error")
        self.payload = response.get("Payload")
        try:
            self.code = int(response.get("Err"))
        except (TypeError, ValueError):
            self.code = None
        super(TuyaClientError, self).__init__("%s (%s)" % (self.message, self.code))
