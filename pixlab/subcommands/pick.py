#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/pick.py

import argparse
import sys

from pixlab.logic.knockout.engine import pick_color
from pixlab.logic.knockout.renderer import render_picked
from pixlab.shared.imageio import load_buffer
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.sanitizer import INPUT_HANDLERS


def handle_pick_command(args: argparse.Namespace) -> None:
    buffer = load_buffer(args.input)
    for x, y in args.at:
        color = pick_color(buffer, x, y)
        render_picked(x, y, color, buffer.get_pixel(x, y)[3], args.format)


def get_pick_parser() -> argparse.ArgumentParser:
    parser = PixlabArgumentParser(
        prog="pixlab pick",
        description="pixlab pick: sample pixel colors from an image",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("-a", "--at", action="append", required=True, type=INPUT_HANDLERS["point"], metavar="X,Y",
                        help="pixel coordinates to sample (repeatable)")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="output format")
    return parser


def main() -> None:
    parser = get_pick_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_pick_command(args)


if __name__ == "__main__":
    main()
