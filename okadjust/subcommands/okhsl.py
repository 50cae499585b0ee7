#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/subcommands/okhsl.py

import argparse
from typing import List, Optional

from okadjust.core.models import OKHSL
from .adjust import get_adjust_parser, main_for


def get_okhsl_parser(prog: str = "okadjust okhsl") -> argparse.ArgumentParser:
    return get_adjust_parser(OKHSL, prog)


def main(argv: Optional[List[str]] = None, prog: str = "okhsl") -> None:
    """Main entry point for the okhsl command."""
    main_for(OKHSL, argv, prog)
