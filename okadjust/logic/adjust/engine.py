#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/logic/adjust/engine.py

import argparse
import sys
from typing import TextIO

from okadjust.core.adjuster import adjust
from okadjust.core.errors import AdjustError
from okadjust.core.models import ColorModel
from okadjust.shared.logger import log
from okadjust.shared.sanitizer import _sanitize_for_log
from .resolver import resolve_adjust_request
from .renderer import render_adjust_line, should_use_color


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def run(args: argparse.Namespace, model: ColorModel,
        stdin: TextIO = None, stdout: TextIO = None) -> int:
    """Adjust every line of stdin, writing one color per line to stdout.

    Returns the process exit status. The first failing line stops the run.
    """
    if stdin is None:
        stdin = sys.stdin
        if hasattr(stdin, "reconfigure"):
            stdin.reconfigure(encoding="utf-8")
    if stdout is None:
        stdout = sys.stdout

    request = resolve_adjust_request(args, model)
    color = should_use_color(args.color, stdout)

    line_no = 0
    try:
        for line_no, line in enumerate(stdin, start=1):
            text = _strip_line_ending(line)
            try:
                output = adjust(request, text)
            except AdjustError as e:
                log("error", f"line {line_no}: '{_sanitize_for_log(text)}': {e}")
                return 1
            stdout.write(render_adjust_line(output, color) + "\n")
            stdout.flush()
    except UnicodeDecodeError:
        log("error", f"line {line_no + 1}: failed to decode input as UTF-8")
        return 1

    return 0
