#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/logic/adjust/renderer.py

from typing import TextIO

from okadjust.core import config as c
from okadjust.core import conversions as conv


def should_use_color(mode: str, stream: TextIO) -> bool:
    """Resolve --color auto/always/never against the output stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def render_adjust_line(hex_text: str, color: bool = False) -> str:
    """Compose one output line; with color, a truecolor swatch follows the hex text."""
    if not color:
        return hex_text
    r, g, b = conv.hex_to_rgb(hex_text)
    return f"{hex_text}  \033[48;2;{r};{g};{b}m        {c.RESET}"
