#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/core/adjuster.py

from typing import NamedTuple

from . import config as c
from . import conversions as conv
from .errors import OutOfBoundsError
from .models import Color3, ColorModel, Component


class AdjustRequest(NamedTuple):
    model: ColorModel
    component: str
    operation: str
    value: float
    clamp: bool = True


def apply_operation(values: Color3, comp: Component, operation: str, amount: float) -> Color3:
    """Set, increase or decrease one component. Hue wraps into [0, 360)."""
    out = list(values)
    current = out[comp.index]
    if operation == "set":
        new = amount
    elif operation == "increase":
        new = current + amount
    elif operation == "decrease":
        new = current - amount
    else:
        raise ValueError(f"unknown operation '{operation}'")
    if comp.cyclic:
        new %= c.HUE_MAX
        # tiny negatives round up to a full turn
        if new >= c.HUE_MAX:
            new = 0.0
    out[comp.index] = new
    return tuple(out)


def adjust(request: AdjustRequest, input_text: str) -> str:
    """Adjust one hex color line according to request.

    Raises ParseError for malformed input and, when clamping is disabled,
    OutOfBoundsError if the adjusted color leaves the model's ranges.
    """
    model = request.model
    comp = model.component(request.component)

    r8, g8, b8 = conv.hex_to_rgb(input_text)
    srgb = (r8 / c.RGB_MAX, g8 / c.RGB_MAX, b8 / c.RGB_MAX)

    values = apply_operation(model.forward(*srgb), comp, request.operation, request.value)

    if request.clamp:
        values = model.clamp(values)
    else:
        bad = model.out_of_bounds(values)
        if bad is not None:
            raise OutOfBoundsError(bad.name, values[bad.index], bad.bounds)

    r, g, b = model.inverse(*values)
    prefix = "#" if input_text.startswith("#") else ""
    return prefix + conv.rgb_to_hex(r * c.RGB_MAX, g * c.RGB_MAX, b * c.RGB_MAX)
