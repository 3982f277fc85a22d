#!/usr/bin/env python3
"""
Tests for the tinyrobovac command line interface
"""

import io
import json
import unittest
from unittest.mock import patch

import tinytuya

from tinyrobovac.__main__ import build_parser, main

DEVICE_ARGS = ['-id', 'DEVICE_ID_HERE', '-ip', '192.168.1.100', '-key', '0123456789abcdef']


class TestCommandLine(unittest.TestCase):

    def run_main(self, argv, dps=None):
        with patch('tinytuya.Device') as mock_device, \
             patch('sys.stdout', new_callable=io.StringIO) as stdout, \
             patch('sys.stderr', new_callable=io.StringIO) as stderr:
            client = mock_device.return_value
            client.status.return_value = {"dps": dps if dps is not None else {"15": "Running", "104": 77, "111": 40}}
            client.set_multiple_values.return_value = {"dps": {}}
            result = main(argv)
        return result, client, stdout.getvalue(), stderr.getvalue()

    def test_no_command_shows_help(self):
        result, client, out, err = self.run_main([])
        self.assertEqual(result, 0)
        self.assertIn('commands', out)

    def test_status(self):
        result, client, out, err = self.run_main(['status'] + DEVICE_ARGS)
        self.assertEqual(result, 0)
        status = json.loads(out)
        self.assertEqual(status['battery'], 77)
        self.assertEqual(status['activity'], 'Running')
        self.assertEqual(status['volume'], 40)
        self.assertEqual(status['error'], 'no error')
        self.assertNotIn('consumables', status)
        client.close.assert_called_once_with()

    def test_clean(self):
        result, client, out, err = self.run_main(['clean'] + DEVICE_ARGS)
        self.assertEqual(result, 0)
        client.set_multiple_values.assert_called_once_with({"5": "auto"})

    def test_rooms(self):
        result, client, out, err = self.run_main(['rooms', '2', '4', '-times', '2'] + DEVICE_ARGS)
        self.assertEqual(result, 0)
        self.assertIn("124", client.set_multiple_values.call_args[0][0])

    def test_autoreturn(self):
        result, client, out, err = self.run_main(['autoreturn', 'off'] + DEVICE_ARGS, dps={"15": "Running", "135": True})
        self.assertEqual(result, 0)
        client.set_multiple_values.assert_called_once_with({"135": False})

    def test_pause_resume(self):
        result, client, out, err = self.run_main(['pause'] + DEVICE_ARGS)
        self.assertEqual(result, 0)
        client.set_multiple_values.assert_called_once_with({"2": False})

        result, client, out, err = self.run_main(['resume'] + DEVICE_ARGS)
        self.assertEqual(result, 0)
        client.set_multiple_values.assert_called_once_with({"2": True})

    def test_locate(self):
        result, client, out, err = self.run_main(['locate'] + DEVICE_ARGS, dps={"15": "Running", "103": False})
        self.assertEqual(result, 0)
        client.set_multiple_values.assert_called_once_with({"103": True})

    def test_home(self):
        result, client, out, err = self.run_main(['home'] + DEVICE_ARGS, dps={"15": "Running", "101": False})
        self.assertEqual(result, 0)
        client.set_multiple_values.assert_called_once_with({"101": True})

    def test_monitor(self):
        with patch('tinytuya.Device') as mock_device, \
             patch('sys.stdout', new_callable=io.StringIO) as stdout:
            client = mock_device.return_value
            client.status.return_value = {"dps": {"15": "Running"}}
            client.receive.side_effect = [{"dps": {"104": 50}}, KeyboardInterrupt()]
            result = main(['monitor', '-nocolor'] + DEVICE_ARGS)
        self.assertEqual(result, 0)
        out = stdout.getvalue()
        self.assertIn('Monitoring DEVICE_ID_HERE', out)
        self.assertIn("'command': 'battery', 'value': 50", out)
        self.assertEqual(client.receive.call_count, 2)
        client.close.assert_called_once_with()

    def test_debug_flag(self):
        with patch('tinyrobovac.__main__.set_debug') as mock_debug:
            result, client, out, err = self.run_main(['-debug', 'clean'] + DEVICE_ARGS)
        self.assertEqual(result, 0)
        mock_debug.assert_called_once_with(True, color=True)
        self.assertIn('Parsed args:', out)

    def test_volume_out_of_range(self):
        result, client, out, err = self.run_main(['volume', '150'] + DEVICE_ARGS)
        self.assertEqual(result, 1)
        self.assertIn('between 0 to 100', err)
        client.set_multiple_values.assert_not_called()

    def test_home_while_docked(self):
        result, client, out, err = self.run_main(['home'] + DEVICE_ARGS, dps={"15": "Charging", "101": False})
        self.assertEqual(result, 1)
        self.assertIn('already home', err)

    def test_connection_error(self):
        with patch('tinytuya.Device') as mock_device, \
             patch('sys.stdout', new_callable=io.StringIO), \
             patch('sys.stderr', new_callable=io.StringIO) as stderr:
            mock_device.return_value.status.return_value = tinytuya.error_json(tinytuya.ERR_CONNECT)
            result = main(['status'] + DEVICE_ARGS)
        self.assertEqual(result, 1)
        self.assertIn('Error', stderr.getvalue())

    def test_parser_requires_device_id(self):
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                build_parser().parse_args(['status'])


if __name__ == '__main__':
    unittest.main()
