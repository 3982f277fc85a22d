# TinyRoboVac Example
# -*- coding: utf-8 -*-
"""
 TinyRoboVac - Example script to monitor a robot vacuum and print its events.

 For more information see README.md

"""
import tinyrobovac

# tinyrobovac.set_debug(True)

# Setting the address to 'Auto' or None will trigger a scan which will auto-detect both the address and version
vac = tinyrobovac.RoboVacDevice('DEVICEID', 'Auto', 'DEVICEKEY')
# If you know both the address and version then supplying them is a lot quicker
# vac = tinyrobovac.RoboVacDevice('DEVICEID', 'DEVICEIP', 'DEVICEKEY', version=3.3)

def on_event(device, event):
    print('Event: %s = %r' % (event['command'], event['value']))

def on_error(device, message):
    print('Vacuum error: %s' % message)

def on_alert(device, alert):
    print('Replace %s (used %r hours)' % (alert['consumable'], alert['duration']))

vac.register_handler('event', on_event)
vac.register_handler('error', on_error)
vac.register_handler('alert', on_alert)

print(" > Connecting < ")
vac.initialize()
print('Battery: %r%%  Activity: %r  Docked: %r' % (vac.battery_level(), vac.activity(), vac.docked()))

print(" > Begin Monitor Loop <")
try:
    # request a full status every 30 seconds, otherwise only changes are reported
    vac.monitor(status_timer=tinyrobovac.STATUS_TIMER)
except KeyboardInterrupt:
    pass
finally:
    vac.disconnect()
