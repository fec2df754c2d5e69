#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/region.py

import argparse
import sys

from pixlab.core import config as c
from pixlab.logic.region.engine import detect_color_region
from pixlab.logic.region.renderer import render_region
from pixlab.shared.imageio import load_buffer
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.sanitizer import INPUT_HANDLERS


def handle_region_command(args: argparse.Namespace) -> None:
    buffer = load_buffer(args.input)
    x, y = args.at
    region = detect_color_region(
        buffer,
        x,
        y,
        tolerance=args.tolerance,
        max_pixels=args.max_pixels,
        strict=args.strict,
    )
    render_region(region, args.format, include_pixels=args.pixels)


def get_region_parser() -> argparse.ArgumentParser:
    parser = PixlabArgumentParser(
        prog="pixlab region",
        description="pixlab region: flood-fill the connected color region around a pixel",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("-a", "--at", required=True, type=INPUT_HANDLERS["point"], metavar="X,Y",
                        help="seed pixel coordinates")
    parser.add_argument("-t", "--tolerance", type=INPUT_HANDLERS["delta_e"], default=c.REGION_DEFAULT_TOLERANCE,
                        help=f"maximum CIEDE2000 distance from the seed (default: {c.REGION_DEFAULT_TOLERANCE:g})")
    parser.add_argument("--max-pixels", type=INPUT_HANDLERS["max_pixels"], default=c.REGION_MAX_PIXELS,
                        help=f"stop growing the region after this many pixels (default: {c.REGION_MAX_PIXELS})")
    parser.add_argument("--strict", action="store_true", help="fail instead of returning a truncated region")
    parser.add_argument("--pixels", action="store_true", help="include the pixel list in the output")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="output format")
    return parser


def main() -> None:
    parser = get_region_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_region_command(args)


if __name__ == "__main__":
    main()
