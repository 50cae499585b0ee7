#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/shared/clamping.py

from typing import Tuple


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def clamp_to(v: float, bounds: Tuple[float, float]) -> float:
    """Force v into the inclusive [lo, hi] range; NaN maps to lo."""
    lo, hi = bounds
    if v != v:
        return lo
    return max(lo, min(hi, v))


def within(v: float, bounds: Tuple[float, float]) -> bool:
    lo, hi = bounds
    return lo <= v <= hi
