#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/main.py

import argparse
import sys

from pixlab import __version__
from pixlab.core.errors import PixlabError
from pixlab.subcommands.command_registry import SUBCOMMANDS
from pixlab.shared.logger import log, PixlabArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser listing the subcommands."""
    parser = PixlabArgumentParser(
        prog="pixlab",
        description="pixlab: pixel-level color tools for raster images",
        epilog="commands: " + ", ".join(SUBCOMMANDS),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"pixlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def run_subcommand(name: str) -> int:
    """Run a registered subcommand, turning engine failures into exit code 1."""
    try:
        SUBCOMMANDS[name].main()
    except PixlabError as e:
        log("error", e.message)
        return 1
    except OSError as e:
        log("error", str(e))
        return 1
    return 0


def main() -> None:
    """Main entry point for pixlab CLI"""
    # Subcommand Routing
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            sys.exit(run_subcommand(cmd))

    parser = get_main_parser()
    args = parser.parse_args()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name.replace('-', '_')}_parser")
            getter().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command: '{args.command}'")
        sys.exit(2)

    parser.print_help()
    sys.exit(0)


if __name__ == "__main__":
    main()
