# TinyRoboVac Module
# -*- coding: utf-8 -*-

# Tuya Data Point (DPS) indexes of the RoboVac family
DPS_INDEX_PLAY_PAUSE = "2"
DPS_INDEX_WORK_MODE = "5"
DPS_INDEX_ACTIVITY = "15"
DPS_INDEX_GO_HOME = "101"
DPS_INDEX_FIND_ROBOT = "103"
DPS_INDEX_BATTERY = "104"
DPS_INDEX_ERROR = "106"
DPS_INDEX_CLEANING_RUNTIME = "109"
DPS_INDEX_CLEANING_COVERAGE = "110"
DPS_INDEX_VOLUME = "111"
DPS_INDEX_CONSUMABLES = "116"
DPS_INDEX_MULTIMAPS = "117"
DPS_INDEX_ROOMS = "124"
DPS_INDEX_VOICE = "125"
DPS_INDEX_HELLO = "126"
DPS_INDEX_AUTO_RETURN = "135"
DPS_INDEX_STATUS = "142"

COMMAND = {
    "playPause": DPS_INDEX_PLAY_PAUSE,
    "workMode": DPS_INDEX_WORK_MODE,
    "activity": DPS_INDEX_ACTIVITY,
    "goHome": DPS_INDEX_GO_HOME,
    "findMyRobot": DPS_INDEX_FIND_ROBOT,
    "battery": DPS_INDEX_BATTERY,
    "error": DPS_INDEX_ERROR,
    "cleaningRuntime": DPS_INDEX_CLEANING_RUNTIME,
    "cleaningCoverage": DPS_INDEX_CLEANING_COVERAGE,
    "volume": DPS_INDEX_VOLUME,
    "consumables": DPS_INDEX_CONSUMABLES,
    "multimaps": DPS_INDEX_MULTIMAPS,
    "rooms": DPS_INDEX_ROOMS,
    "voice": DPS_INDEX_VOICE,
    "hello": DPS_INDEX_HELLO,
    "autoReturn": DPS_INDEX_AUTO_RETURN,
    "status": DPS_INDEX_STATUS,
}

# Command name reported in the 'event' callback for each DP
DPS_2_EVENT = {
    DPS_INDEX_PLAY_PAUSE: "playPause",
    DPS_INDEX_WORK_MODE: "workMode",
    DPS_INDEX_ACTIVITY: "activity",
    DPS_INDEX_GO_HOME: "goHome",
    DPS_INDEX_FIND_ROBOT: "locate",
    DPS_INDEX_BATTERY: "battery",
    DPS_INDEX_CLEANING_RUNTIME: "runtime",
    DPS_INDEX_CLEANING_COVERAGE: "coverage",
    DPS_INDEX_VOLUME: "volume",
    DPS_INDEX_CONSUMABLES: "consumables",
    DPS_INDEX_MULTIMAPS: "multimaps",
    DPS_INDEX_ROOMS: "rooms",
    DPS_INDEX_VOICE: "voice",
    DPS_INDEX_HELLO: "hello",
    DPS_INDEX_AUTO_RETURN: "autoReturn",
    DPS_INDEX_STATUS: "status",
}

# DPs carrying base64 encoded JSON
ENCODED_DPS = (
    DPS_INDEX_CONSUMABLES,
    DPS_INDEX_MULTIMAPS,
    DPS_INDEX_ROOMS,
    DPS_INDEX_VOICE,
    DPS_INDEX_HELLO,
    DPS_INDEX_STATUS,
)

# Callback event names
EVENT_CONNECTED = "tuya.connected"
EVENT_DISCONNECTED = "tuya.disconnected"
EVENT_TUYA_ERROR = "tuya.error"
EVENT_DATA = "tuya.data"
EVENT_DP_REFRESH = "tuya.dp-refresh"
EVENT = "event"
EVENT_ERROR = "error"
EVENT_ALERT = "alert"

EVENTS = (
    EVENT_CONNECTED,
    EVENT_DISCONNECTED,
    EVENT_TUYA_ERROR,
    EVENT_DATA,
    EVENT_DP_REFRESH,
    EVENT,
    EVENT_ERROR,
    EVENT_ALERT,
)

# Consumable wear limits (hours) - (duration key, alert name, limit)
CONSUMABLE_LIMITS = (
    ("SB", "side_brush", 250),
    ("RB", "rolling_brush", 450),
    ("FM", "filter", 200),
    ("SS", "sensors", 35),
)
BATTERY_STATUS_KEY = "BatteryStatus"
BATTERY_STATUS_OK = 1

# Activities reported while on the charging base
DOCKED_ACTIVITIES = ("Sleeping", "Charging", "completed")

WORK_MODE_AUTO = "auto"
ROOM_CLEAN_METHOD = "selectRoomsClean"

VOLUME_MIN = 0
VOLUME_MAX = 100

# Connection defaults
DEFAULT_VERSION = 3.3
TCPPORT = 6668
CONNECTION_TIMEOUT = 5
KEEPALIVE_TIMER = 12   # Seconds between heartbeats while monitoring
STATUS_TIMER = 30      # Seconds between forced status refreshes while monitoring
