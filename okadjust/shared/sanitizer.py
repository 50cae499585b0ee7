#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/shared/sanitizer.py

import argparse
import math
import re

from okadjust.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _strip_and_unquote(value: str) -> str:
    """Remove surrounding whitespace and any matching quote pairs."""
    s = str(value).strip()
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up component names or option keywords.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    # Regex [a-z] extracts strictly english alphabet characters
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_float_any(v: str) -> float:
    """Validator for unbounded, finite floating-point CLI arguments."""
    s = _strip_and_unquote(v)
    try:
        val = float(s)
    except ValueError:
        val = None

    if val is None or not math.isfinite(val):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")
    return val


def handle_operation(v: str) -> str:
    """Validator mapping '=', '+', '-' and their word aliases to an operation name."""
    key = _strip_and_unquote(v).lower()
    op = c.OPERATION_ALIASES.get(key)
    if op is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid adjustment: '{raw}' (choose from '=', '+', '-')"
        )
    return op


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., component names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "component": handle_string_clean,
    "operation": handle_operation,
    "color_mode": handle_string_clean,
    "float": handle_float_any,
}
