"""
Unit tests for fghil/flightgear.py (generic protocol codec and UDP link).

Run with: pytest tests/test_flightgear.py -v
"""

import socket
import struct
import unittest

import pytest

from fghil.flightgear import (
    FDM_FIELDS,
    FDM_STRUCT,
    FlightGearLink,
    PacketSizeError,
    decode_fdm_packet,
    encode_controls,
    encode_fdm_packet,
)
from sample_data import make_sample


class TestCodec(unittest.TestCase):

    def test_packet_layout(self) -> None:
        self.assertEqual(FDM_FIELDS[0], "elapsed_sec")
        self.assertEqual(FDM_STRUCT.size, 8 * len(FDM_FIELDS))

        buf = encode_fdm_packet(make_sample(elapsed_sec=42.25))
        self.assertEqual(buf[:8], struct.pack(">d", 42.25))

    def test_decode(self) -> None:
        sample = make_sample(roll_deg=-3.5, speed_down_fps=1.25)
        self.assertEqual(decode_fdm_packet(encode_fdm_packet(sample)), sample)

    def test_wrong_size(self) -> None:
        with pytest.raises(PacketSizeError):
            decode_fdm_packet(b"\x00" * 12)
        with pytest.raises(ValueError):
            decode_fdm_packet(encode_fdm_packet(make_sample()) + b"\x00")

    def test_encode_controls(self) -> None:
        buf = encode_controls([0.5, -0.25, 0.0, 1.0])
        self.assertEqual(len(buf), 32)
        self.assertEqual(struct.unpack(">4d", buf), (0.5, -0.25, 0.0, 1.0))


class TestFlightGearLink(unittest.TestCase):

    def setUp(self) -> None:
        self.peer = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.peer.bind(("127.0.0.1", 0))
        self.peer.settimeout(1.0)
        self.link = FlightGearLink("127.0.0.1", in_port=0,
                                   out_port=self.peer.getsockname()[1],
                                   timeout_s=1.0)
        self.link_addr = self.link.sock_in.getsockname()

    def tearDown(self) -> None:
        self.link.close()
        self.peer.close()

    def test_receive_sample(self) -> None:
        sample = make_sample(elapsed_sec=7.0)
        self.peer.sendto(encode_fdm_packet(sample), self.link_addr)

        self.assertEqual(self.link.poll_sample(), sample)
        self.assertEqual(self.link.packets, 1)

    def test_bad_packet_dropped(self) -> None:
        self.peer.sendto(b"garbage", self.link_addr)

        self.assertIsNone(self.link.poll_sample())
        self.assertEqual(self.link.bad_packets, 1)

    def test_send_controls(self) -> None:
        self.link.send_controls([0.1, 0.2, 0.3, 0.4])
        raw = self.peer.recv(1024)
        self.assertEqual(struct.unpack(">4d", raw), (0.1, 0.2, 0.3, 0.4))


if __name__ == "__main__":
    unittest.main()
