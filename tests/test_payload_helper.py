#!/usr/bin/env python3
"""
Tests for the base64 JSON sub-payload helpers
"""

import base64
import json
import unittest

from tinyrobovac import (
    build_room_clean, decode_payload, encode_payload, extract_dps,
)


class TestDecodePayload(unittest.TestCase):

    def test_decode_consumables(self):
        value = base64.b64encode(b'{"consumable":{"duration":{"SB":12,"RB":30}}}').decode()
        self.assertEqual(decode_payload(value), {"consumable": {"duration": {"SB": 12, "RB": 30}}})

    def test_decode_bytes(self):
        value = base64.b64encode(b'[1, 2, 3]')
        self.assertEqual(decode_payload(value), [1, 2, 3])

    def test_invalid_base64(self):
        with self.assertRaises(ValueError):
            decode_payload('not base64!')

    def test_invalid_json(self):
        value = base64.b64encode(b'{"broken":').decode()
        with self.assertRaises(ValueError):
            decode_payload(value)

    def test_encode_is_compact(self):
        value = encode_payload({"method": "selectRoomsClean", "data": {"roomIds": [1]}})
        self.assertEqual(base64.b64decode(value), b'{"method":"selectRoomsClean","data":{"roomIds":[1]}}')
        self.assertIsInstance(value, str)


class TestExtractDps(unittest.TestCase):

    def test_plain_dps(self):
        self.assertEqual(extract_dps({"devId": "abc", "dps": {"104": 80}}), {"104": 80})

    def test_nested_data_dps(self):
        self.assertEqual(extract_dps({"protocol": 4, "data": {"dps": {"15": "Running"}}}), {"15": "Running"})

    def test_error_response(self):
        self.assertEqual(extract_dps({"Error": "Network Error: Unable to Connect", "Err": "901", "Payload": None}), {})

    def test_no_dps(self):
        self.assertEqual(extract_dps({"devId": "abc"}), {})
        self.assertEqual(extract_dps(None), {})


class TestBuildRoomClean(unittest.TestCase):

    def test_rooms(self):
        fn = build_room_clean([2, 5], clean_times=2, timestamp=1700000000000)
        self.assertEqual(fn, {
            "method": "selectRoomsClean",
            "data": {"roomIds": [2, 5], "cleanTimes": 2},
            "timestamp": 1700000000000,
        })

    def test_default_room(self):
        fn = build_room_clean()
        self.assertEqual(fn["data"]["roomIds"], [1])
        self.assertEqual(fn["data"]["cleanTimes"], 1)
        self.assertIsInstance(fn["timestamp"], int)

    def test_encoded_room_clean_decodes(self):
        fn = build_room_clean([3], timestamp=1)
        self.assertEqual(json.loads(base64.b64decode(encode_payload(fn))), fn)


if __name__ == '__main__':
    unittest.main()
