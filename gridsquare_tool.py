#!/usr/bin/env -S uv run
# -*- mode: python; -*-
# vim: set ft=python:
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pyyaml",
# ]
# ///
"""gridsquare_tool.py - Maidenhead grid square calculator

Commands:
  encode LON LAT [-p PRECISION]   coordinate -> grid reference
  decode REF                      grid reference -> center and cell size
  distance REF [REF2]             distance and bearing (from home_grid if one REF)

Config file: ~/.config/gridsquare/config.yaml
  home_grid: DN40bi
  precision: 6
  units: km          # or mi

Usage:
  gridsquare_tool.py encode -111.866785 40.363840        # DN40bi
  gridsquare_tool.py encode -111.866785 40.363840 -p 10  # DN40BI57XH
  gridsquare_tool.py decode FN31pr
  gridsquare_tool.py distance JN18eu                      # from home_grid
  gridsquare_tool.py distance JN18eu JN61fw --all-units
  gridsquare_tool.py --dump-config                        # emit default config to stdout

Dependencies: pyyaml
"""

import argparse
import sys
import yaml
from pathlib import Path

from gridsquare import GridsquareError, decode, distance_between, encode
from gridsquare.config import DEFAULT_CONFIG, load_config, validate_config


def cmd_encode(args, cfg):
    precision = args.precision if args.precision is not None else cfg["precision"]
    result = encode(args.longitude, args.latitude, precision)
    print(f"Grid: {result.grid_reference}")
    print(f"Subsquare: {result.subsquare}")


def cmd_decode(args, cfg):
    result = decode(args.reference)
    print(f"Grid: {args.reference}")
    print(f"Center: {result.latitude:.6f}, {result.longitude:.6f}")
    print(f"Size: {result.width:.6f}° x {result.height:.6f}° (lon x lat)")


def cmd_distance(args, cfg):
    if args.reference2:
        ref1, ref2 = args.reference, args.reference2
    else:
        ref1, ref2 = cfg["home_grid"], args.reference

    result = distance_between(ref1, ref2)
    print(f"From {ref1} to {ref2}")
    if args.all_units or cfg["units"] == "km":
        print(f"Distance: {result.distance_km:.1f} km")
    if args.all_units or cfg["units"] == "mi":
        print(f"Distance: {result.distance_mi:.2f} mi")
    print(f"Bearing: {result.bearing_degrees:.1f}° ({result.direction})")


def build_parser():
    p = argparse.ArgumentParser(description="Maidenhead grid square calculator")
    p.add_argument("--config", type=Path, help="Config file (default: search standard locations)")
    p.add_argument("--dump-config", action="store_true", help="Emit default config to stdout")
    sub = p.add_subparsers(dest="command")

    enc = sub.add_parser("encode", help="Encode longitude/latitude to a grid reference")
    enc.add_argument("longitude", type=float)
    enc.add_argument("latitude", type=float)
    enc.add_argument("-p", "--precision", type=int, help="Reference length, even 6-20")
    enc.set_defaults(func=cmd_encode)

    dec = sub.add_parser("decode", help="Decode a grid reference")
    dec.add_argument("reference")
    dec.set_defaults(func=cmd_decode)

    dist = sub.add_parser("distance", help="Distance and bearing between grid squares")
    dist.add_argument("reference")
    dist.add_argument("reference2", nargs="?")
    dist.add_argument("--all-units", action="store_true", help="Show both km and miles")
    dist.set_defaults(func=cmd_distance)

    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    if args.dump_config:
        print(yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False))
        sys.exit(0)

    if not args.command:
        p.error("a command is required unless --dump-config")

    cfg = load_config(args.config)
    problems = validate_config(cfg)
    if problems:
        sys.exit("Error: invalid config:\n  " + "\n  ".join(problems))

    try:
        args.func(args, cfg)
    except GridsquareError as e:
        sys.exit(f"Error: {e}")


if __name__ == "__main__":
    main()
