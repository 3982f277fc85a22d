#!/usr/bin/env python
# -*- coding: utf-8 -*-
# TinyRoboVac Module
"""
 Python module to control Tuya based robot vacuums over the local network

 Show the vacuum state:
    python -m tinyrobovac status -id DEVICEID -ip 10.0.1.99 -key DEVICEKEY
 Start cleaning (key, address and version are read from devices.json if not given):
    python -m tinyrobovac clean -id DEVICEID
 Print every event until Ctrl-C:
    python -m tinyrobovac monitor -id DEVICEID

"""

# Modules
import json
import sys
import argparse

from . import (
    RoboVacDevice, RoboVacError, version, set_debug, termcolor,
    DEFAULT_VERSION, EVENTS, STATUS_TIMER,
)

cmd_list = {
    'status': 'Show decoded vacuum properties',
    'clean': 'Start auto cleaning',
    'rooms': 'Clean the listed room ids',
    'pause': 'Pause cleaning',
    'resume': 'Resume cleaning',
    'home': 'Return to the charging base',
    'locate': 'Make the vacuum beep',
    'volume': 'Set the speaker volume (0-100)',
    'autoreturn': 'Turn auto return on or off',
    'monitor': 'Print every event sent by the vacuum',
}

# property name -> getter, shown by the 'status' command
STATUS_PROPERTIES = (
    ('activity', 'activity'),
    ('work_mode', 'work_mode'),
    ('battery', 'battery_level'),
    ('error', 'error'),
    ('runtime', 'runtime'),
    ('coverage', 'coverage'),
    ('volume', 'volume'),
    ('going_home', 'going_home'),
    ('auto_return', 'auto_return'),
    ('consumables', 'consumables'),
    ('status', 'status'),
)


def build_parser():
    prog = 'python3 -m tinyrobovac' if sys.argv[0][-11:] == '__main__.py' else None
    description = 'TinyRoboVac [%s]' % (version,)
    parser = argparse.ArgumentParser( prog=prog, description=description )
    parser.add_argument( '-debug', '-d', help='Enable debug messages', action='store_true' )

    subparser = parser.add_subparsers( dest='command', title='commands (run <command> -h to see usage information)' )
    subparsers = {}
    for sp in cmd_list:
        subparsers[sp] = subparser.add_parser(sp, help=cmd_list[sp])
        subparsers[sp].add_argument( '-debug', '-d', help='Enable debug messages', action='store_true', dest='debug2' )
        subparsers[sp].add_argument( '-id', help='Device ID', required=True, dest='dev_id' )
        subparsers[sp].add_argument( '-ip', help='Device IP address [Default: Auto]', default=None, dest='address' )
        subparsers[sp].add_argument( '-key', help='Device local key [Default: from devices.json]', default='', dest='local_key' )
        subparsers[sp].add_argument( '-version', help='Tuya protocol version [Default: %s]' % DEFAULT_VERSION, type=float, default=DEFAULT_VERSION )
        subparsers[sp].add_argument( '-nocolor', help='Disable color text output', action='store_true' )

    subparsers['rooms'].add_argument( 'room_ids', help='Room id(s) to clean', nargs='+', type=int )
    subparsers['rooms'].add_argument( '-times', help='Number of passes [Default: 1]', type=int, default=1 )
    subparsers['home'].add_argument( '-cancel', help='Stop returning to the base', action='store_true' )
    subparsers['locate'].add_argument( '-off', help='Stop beeping', action='store_true' )
    subparsers['volume'].add_argument( 'level', help='Volume 0-100', type=int )
    subparsers['autoreturn'].add_argument( 'state', help='on or off', choices=('on', 'off') )
    subparsers['monitor'].add_argument( '-refresh', help='Seconds between status refreshes [Default: %s]' % STATUS_TIMER, type=int, default=STATUS_TIMER )

    return parser


def read_status(vac):
    result = {}
    for name, getter in STATUS_PROPERTIES:
        try:
            result[name] = getattr(vac, getter)()
        except RoboVacError:
            # register not reported by this model
            continue
    return result


def run_command(vac, args):
    if args.command == 'status':
        return read_status(vac)
    if args.command == 'clean':
        return vac.clean()
    if args.command == 'rooms':
        return vac.clean_rooms(args.room_ids, args.times)
    if args.command == 'pause':
        return vac.pause()
    if args.command == 'resume':
        return vac.resume()
    if args.command == 'home':
        return vac.go_home(not args.cancel)
    if args.command == 'locate':
        return vac.locate(not args.off)
    if args.command == 'volume':
        return vac.set_volume(args.level)
    if args.command == 'autoreturn':
        return vac.set_auto_return(args.state == 'on')
    raise ValueError('Unknown command %r' % args.command)


def monitor(vac, args):
    bold, subbold, normal, dim, alert, cyan = termcolor(not args.nocolor)

    def show(event):
        color = alert if event in ('error', 'alert', 'tuya.error', 'tuya.disconnected') else subbold
        def cb(device, *payload):
            print('%s%-18s%s %s%s%s' % (color, event, normal, dim, ' '.join(repr(p) for p in payload), normal))
        return cb

    for event in EVENTS:
        if event not in ('tuya.data', 'tuya.dp-refresh'):
            vac.register_handler(event, show(event))
    print('%sMonitoring %s%s%s (Ctrl-C to stop)%s' % (bold, cyan, vac.id, bold, normal))
    try:
        vac.monitor(status_timer=args.refresh)
    except KeyboardInterrupt:
        vac.stop()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug or getattr(args, 'debug2', False):
        print('Parsed args:', args)
        set_debug(True, color=not getattr(args, 'nocolor', False))

    if not args.command:
        # No command selected - show help
        parser.print_help()
        return 0

    vac = RoboVacDevice(args.dev_id, args.address, args.local_key, version=args.version)
    try:
        vac.initialize()
        if args.command == 'monitor':
            monitor(vac, args)
        else:
            result = run_command(vac, args)
            if result is not None:
                print(json.dumps(result, indent=4, default=str))
    except (RoboVacError, ValueError) as err:
        print('Error: %s' % err, file=sys.stderr)
        return 1
    finally:
        vac.disconnect()
    return 0


if __name__ == '__main__':
    sys.exit(main())

# End
