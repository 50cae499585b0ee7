#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/shared/logger.py

import sys
import argparse

from okadjust.core import config as c


def log(level: str, message: str) -> None:
    # stdout carries the adjusted colors, so every message goes to stderr
    level = str(level).lower()
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=sys.stderr)


class OkadjustArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits the program with the standard CLI error code 2.
        """
        log('error', message)
        log('info', f"use '{self.prog} --help' for more information")
        sys.exit(2)
