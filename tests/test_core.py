#!/usr/bin/env python3
"""
Tests for the tinyrobovac core helpers and public names
"""

import logging
import unittest
from unittest.mock import patch

import tinyrobovac
from tinyrobovac import set_debug, termcolor


class TestSetDebug(unittest.TestCase):

    def tearDown(self):
        logging.getLogger('tinyrobovac').setLevel(logging.NOTSET)

    def test_enable(self):
        with patch('logging.basicConfig') as mock_config, \
             patch('tinytuya.set_debug') as mock_tuya_debug:
            set_debug(True, color=False)
        mock_config.assert_called_once_with(format="%(levelname)s:%(message)s", level=logging.DEBUG)
        mock_tuya_debug.assert_called_once_with(True, False)
        self.assertEqual(logging.getLogger('tinyrobovac').level, logging.DEBUG)

    def test_disable(self):
        with patch('logging.basicConfig'), patch('tinytuya.set_debug') as mock_tuya_debug:
            set_debug(True, color=False)
            set_debug(False)
        mock_tuya_debug.assert_called_with(False)
        self.assertEqual(logging.getLogger('tinyrobovac').level, logging.NOTSET)

    def test_public_names(self):
        self.assertTrue(hasattr(tinyrobovac, 'RoboVacDevice'))
        self.assertRegex(tinyrobovac.__version__, r'^\d+\.\d+\.\d+$')
        self.assertFalse(hasattr(tinyrobovac, 'RoboVac'))
        self.assertFalse(hasattr(tinyrobovac, '__author__'))

    def test_termcolor_disabled(self):
        self.assertEqual(set(termcolor(False)), {""})


if __name__ == '__main__':
    unittest.main()
