#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/subcommands/adjust.py

import argparse
import sys
from typing import List, Optional

from okadjust import __version__
from okadjust.core import config as c
from okadjust.core.models import ColorModel
from okadjust.logic.adjust import engine
from okadjust.shared.logger import OkadjustArgumentParser
from okadjust.shared.sanitizer import INPUT_HANDLERS


def get_adjust_parser(model: ColorModel, prog: str) -> argparse.ArgumentParser:
    """Create argument parser for adjusting one component of a color model."""
    parser = OkadjustArgumentParser(
        prog=prog,
        description=(
            f"{prog}: {model.description}\n"
            "reads hex colors from stdin, one per line, and writes the adjusted colors to stdout"
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

    comp_help = "\n".join(
        f"{comp.key}: {comp.name} "
        + ("(0.0 to 360.0, wraps around)" if comp.cyclic else f"({comp.bounds[0]} to {comp.bounds[1]})")
        for comp in model.components
    )
    parser.add_argument(
        "component",
        type=INPUT_HANDLERS["component"],
        choices=model.choices,
        metavar="{" + ",".join(model.keys) + "}",
        help=f"component to adjust\n{comp_help}",
    )
    parser.add_argument(
        "operation",
        type=INPUT_HANDLERS["operation"],
        metavar="{=,+,-}",
        help="set, increase or decrease the component",
    )
    parser.add_argument(
        "value",
        type=INPUT_HANDLERS["float"],
        help="amount, in degrees for hue",
    )
    parser.add_argument(
        "--no-clamp",
        action="store_true",
        help="fail on out-of-range values instead of clamping them",
    )
    parser.add_argument(
        "--color",
        default="auto",
        type=INPUT_HANDLERS["color_mode"],
        choices=c.COLOR_MODES,
        help="show a color swatch next to each output (default: auto)",
    )

    return parser


def main_for(model: ColorModel, argv: Optional[List[str]] = None, prog: str = None) -> None:
    """Parse arguments, run the line engine and exit with its status."""
    parser = get_adjust_parser(model, prog or model.name)
    args = parser.parse_args(argv)
    sys.exit(engine.run(args, model))
