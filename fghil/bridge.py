#!/usr/bin/env python3
"""
FlightGear ⇄ PX4 HIL Bridge
============================
Central hub connecting the FlightGear flight model and a PX4 autopilot
running in HIL mode.

Data-flow summary
-----------------
  FlightGear  ──(generic UDP, FDM state)──▶  Bridge  ──(HIL_SENSOR + HIL_GPS)──▶  PX4
  PX4  ──(HIL_ACTUATOR_CONTROLS)──▶  Bridge  ──(generic UDP, controls)──▶  FlightGear

Usage
-----
  1) Start PX4 with the HIL simulator link on TCP 4560.
  2) python -m fghil.bridge
  3) Start FlightGear with the matching generic protocol, e.g.
       --generic=socket,out,100,127.0.0.1,15200,udp,px4hil_out
       --generic=socket,in,100,127.0.0.1,15300,udp,px4hil_in
"""

import argparse
import time

from . import config as cfg
from .flightgear import FlightGearLink
from .mavlink_io import PX4Link
from .noise import NoiseConfig
from .vehicle import VehicleState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FlightGear ⇄ PX4 HIL Bridge")
    parser.add_argument("--fg-host", type=str, default=cfg.FG_HOST,
                        help="FlightGear host (default: %(default)s)")
    parser.add_argument("--fg-in-port", type=int, default=cfg.FG_IN_PORT,
                        help="UDP port FlightGear sends FDM state to")
    parser.add_argument("--fg-out-port", type=int, default=cfg.FG_OUT_PORT,
                        help="UDP port FlightGear reads controls from")
    parser.add_argument("--px4", type=str, default=cfg.PX4_URI,
                        help="PX4 MAVLink connection URI (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the sensor noise generator")
    parser.add_argument("--no-noise", action="store_true",
                        help="Disable sensor noise")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    print(f"[Bridge] FlightGear in ← :{args.fg_in_port}  out → {args.fg_host}:{args.fg_out_port}")
    print(f"[Bridge] PX4 link {args.px4}")
    if args.no_noise:
        print("[Bridge] Sensor noise disabled")
    elif args.seed is not None:
        print(f"[Bridge] Sensor noise seed = {args.seed}")

    noise_config = NoiseConfig.zero() if args.no_noise else NoiseConfig()
    vehicle = VehicleState.create(seed=args.seed, noise_config=noise_config)

    fg = FlightGearLink(args.fg_host, args.fg_in_port, args.fg_out_port)
    px4 = PX4Link(args.px4)

    # ── Timing state ──
    ticks = 0
    last_heartbeat_t = 0.0
    last_perf_t = time.perf_counter()
    last_rate_hz = None

    try:
        while True:
            # ────────────── 1. FlightGear → PX4 ──────────────────────
            sample = fg.poll_sample()
            if sample is not None:
                result = vehicle.set_fdm_sample(sample)
                px4.send_sensor(result.sensor)
                px4.send_gps(result.position)
                if result.rate_hz is not None:
                    last_rate_hz = result.rate_hz
                ticks += 1

            # ────────────── 2. PX4 → FlightGear ──────────────────────
            command = px4.poll()
            if command is not None:
                fg.send_controls(vehicle.set_actuator_command(command))

            # ────────────── 3. Heartbeat at 1 Hz ─────────────────────
            now = time.perf_counter()
            if now - last_heartbeat_t >= cfg.HEARTBEAT_INTERVAL_S:
                px4.send_heartbeat()
                last_heartbeat_t = now

            # ────────────── 4. Performance logging ───────────────────
            if now - last_perf_t >= cfg.PERF_LOG_INTERVAL_S:
                rate = ticks / (now - last_perf_t)
                fg_rate = f"{last_rate_hz:6.1f} Hz" if last_rate_hz is not None else "   n/a"
                armed = "armed" if (px4.last_command and px4.last_command.armed) else "disarmed"
                px4_str = "ok" if px4.heartbeat_ok else "waiting"
                print(f"[Bridge] ticks={ticks:>6d}  rate={rate:7.1f} Hz  "
                      f"fg_dt_rate={fg_rate}  dropped={fg.bad_packets}  "
                      f"PX4={px4_str} ({armed})")
                ticks = 0
                last_perf_t = now

    except KeyboardInterrupt:
        print("\n[Bridge] Shutting down …")
    finally:
        fg.close()
        px4.close()
        print("[Bridge] Done.")


if __name__ == "__main__":
    main()
