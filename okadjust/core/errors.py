#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/core/errors.py

from typing import Tuple


class AdjustError(ValueError):
    """Base class for per-line failures that abort a run."""


class ParseError(AdjustError):
    """Input text is not an sRGB hex color."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"failed to parse input into sRGB color ({reason})")


class OutOfBoundsError(AdjustError):
    """An adjusted component left its canonical range while clamping was disabled."""

    def __init__(self, component: str, value: float, bounds: Tuple[float, float]):
        self.component = component
        self.value = value
        self.bounds = bounds
        lo, hi = bounds
        super().__init__(
            f"value out of bounds: {component} = {value:g} (expected {lo:g} to {hi:g})"
        )
