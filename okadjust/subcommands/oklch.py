#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/subcommands/oklch.py

import argparse
from typing import List, Optional

from okadjust.core.models import OKLCH
from .adjust import get_adjust_parser, main_for


def get_oklch_parser(prog: str = "okadjust oklch") -> argparse.ArgumentParser:
    return get_adjust_parser(OKLCH, prog)


def main(argv: Optional[List[str]] = None, prog: str = "oklch") -> None:
    """Main entry point for the oklch command."""
    main_for(OKLCH, argv, prog)
