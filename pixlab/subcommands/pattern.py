#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/pattern.py

import argparse
import sys

from pixlab.core import config as c
from pixlab.logic.texture.patterns import create_pattern_texture
from pixlab.shared.imageio import save_buffer
from pixlab.shared.logger import log, PixlabArgumentParser
from pixlab.shared.sanitizer import INPUT_HANDLERS


def handle_pattern_command(args: argparse.Namespace) -> None:
    texture = create_pattern_texture(
        args.kind,
        args.width,
        args.height,
        color=args.color,
        spacing=args.spacing,
        seed=args.seed,
    )
    path = save_buffer(texture, args.output)
    log("success", f"{args.kind} pattern {args.width}x{args.height} saved to {path}")


def get_pattern_parser() -> argparse.ArgumentParser:
    parser = PixlabArgumentParser(
        prog="pixlab pattern",
        description="pixlab pattern: generate a procedural texture",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("kind", type=INPUT_HANDLERS["choice"], choices=c.PATTERN_KINDS, help="pattern kind")
    parser.add_argument("-o", "--output", required=True, help="output image (.png or .webp)")
    parser.add_argument("-W", "--width", type=INPUT_HANDLERS["dimension"], default=256, help="width in px")
    parser.add_argument("-H", "--height", type=INPUT_HANDLERS["dimension"], default=256, help="height in px")
    parser.add_argument("--color", type=INPUT_HANDLERS["hex"], default="#000000", help="ink color")
    parser.add_argument("--spacing", type=INPUT_HANDLERS["spacing"], default=10, help="spacing in px")
    parser.add_argument("--seed", type=INPUT_HANDLERS["seed"], default=None, help="noise seed")
    return parser


def main() -> None:
    parser = get_pattern_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_pattern_command(args)


if __name__ == "__main__":
    main()
