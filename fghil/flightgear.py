"""
FlightGear Generic Protocol
============================
Binary generic-protocol packets over UDP, network byte order, one double
per chunk.  The protocol XML loaded into FlightGear
(``--generic=socket,out,...``) must list its chunks in FDM_FIELDS order,
and the input protocol in CONTROL_FIELDS order.
"""

import socket
import struct

from . import config as cfg
from .records import FlightDynamicsSample

FDM_FIELDS = FlightDynamicsSample.field_names()
FDM_STRUCT = struct.Struct(">%dd" % len(FDM_FIELDS))

CONTROL_FIELDS = ("aileron", "elevator", "rudder", "throttle")


class PacketSizeError(ValueError):
    """Packet length does not match the configured generic protocol."""


def decode_fdm_packet(buf: bytes) -> FlightDynamicsSample:
    if len(buf) != FDM_STRUCT.size:
        raise PacketSizeError(
            f"FDM packet is {len(buf)} bytes, expected {FDM_STRUCT.size}")
    return FlightDynamicsSample(*FDM_STRUCT.unpack(buf))


def encode_fdm_packet(sample: FlightDynamicsSample) -> bytes:
    return FDM_STRUCT.pack(*(getattr(sample, name) for name in FDM_FIELDS))


def encode_controls(values) -> bytes:
    values = [float(v) for v in values]
    return struct.pack(">%dd" % len(values), *values)


class FlightGearLink:
    """UDP in (FDM state) and out (controls) to a FlightGear instance."""

    def __init__(self, host: str = cfg.FG_HOST, in_port: int = cfg.FG_IN_PORT,
                 out_port: int = cfg.FG_OUT_PORT,
                 timeout_s: float = cfg.FG_RECV_TIMEOUT_S):
        self.sock_in = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock_in.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.sock_in.bind((host, in_port))
        self.sock_in.settimeout(timeout_s)

        self.sock_out = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.out_addr = (host, out_port)

        self.packets = 0
        self.bad_packets = 0

    def poll_sample(self) -> FlightDynamicsSample | None:
        """Wait up to the receive timeout for one FDM packet."""
        try:
            raw = self.sock_in.recv(65535)
        except (socket.timeout, BlockingIOError):
            return None

        try:
            sample = decode_fdm_packet(raw)
        except PacketSizeError as e:
            self.bad_packets += 1
            print(f"[FG] Dropped packet: {e}")
            return None

        self.packets += 1
        return sample

    def send_controls(self, values):
        try:
            self.sock_out.sendto(encode_controls(values), self.out_addr)
        except OSError as e:
            print(f"[FG] Send failed: {e}")

    def close(self):
        self.sock_in.close()
        self.sock_out.close()
