#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/subcommands/command_registry.py

from . import (
    okhsl,
    oklch,
)

SUBCOMMANDS = {
    'okhsl': okhsl,
    'oklch': oklch,
}
