#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/main.py

import argparse
import sys
from typing import List, Optional

from okadjust import __version__
from okadjust.subcommands.command_registry import SUBCOMMANDS
from okadjust.shared.logger import log, OkadjustArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level okadjust command."""
    parser = OkadjustArgumentParser(
        prog="okadjust",
        description=(
            "okadjust: adjust one perceptual component of sRGB hex colors\n\n"
            "commands:\n"
            "  okhsl   adjust via Okhsl (h, s, l)\n"
            "  oklch   adjust via Oklch (l, c, h)\n\n"
            "example: echo '#336699' | okadjust okhsl l + 0.1"
        ),
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
        version=f"okadjust {__version__}",
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


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for okadjust CLI"""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Subcommand Routing
    if argv:
        cmd = argv[0].lower()
        if cmd in SUBCOMMANDS:
            SUBCOMMANDS[cmd].main(argv[1:], prog=f"okadjust {cmd}")
            return

    parser = get_main_parser()
    args = parser.parse_args(argv)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command: '{args.command}'")
    else:
        log("error", "a command is required: " + ", ".join(SUBCOMMANDS))
    log("info", "use 'okadjust --help' for more information")
    sys.exit(2)


if __name__ == "__main__":
    main()
