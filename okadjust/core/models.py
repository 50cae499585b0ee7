#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/core/models.py

from typing import Callable, Dict, List, NamedTuple, Tuple

from . import config as c
from . import conversions as conv
from okadjust.shared.clamping import clamp_to, within

Color3 = Tuple[float, float, float]


class Component(NamedTuple):
    key: str
    name: str
    index: int
    bounds: Tuple[float, float]
    cyclic: bool = False


class ColorModel:
    """A cylindrical perceptual model: three named components plus the
    forward and inverse transforms between sRGB (0.0-1.0) and the model.

    Components are stored in the order the transforms produce them.
    """

    def __init__(self, name: str, description: str, components: List[Component],
                 forward: Callable[..., Color3], inverse: Callable[..., Color3]):
        self.name = name
        self.description = description
        self.components = components
        self.forward = forward
        self.inverse = inverse
        self._lookup: Dict[str, Component] = {}
        for comp in components:
            self._lookup[comp.key] = comp
            self._lookup[comp.name] = comp

    def __repr__(self) -> str:
        return f"ColorModel({self.name!r})"

    @property
    def keys(self) -> List[str]:
        return [comp.key for comp in self.components]

    @property
    def choices(self) -> List[str]:
        return list(self._lookup)

    def component(self, key: str) -> Component:
        try:
            return self._lookup[key]
        except KeyError:
            raise KeyError(f"{self.name} has no component '{key}'") from None

    def out_of_bounds(self, values: Color3):
        """Return the first component outside its range, or None."""
        for comp in self.components:
            if comp.cyclic:
                continue
            if not within(values[comp.index], comp.bounds):
                return comp
        return None

    def clamp(self, values: Color3) -> Color3:
        out = list(values)
        for comp in self.components:
            if not comp.cyclic:
                out[comp.index] = clamp_to(out[comp.index], comp.bounds)
        return tuple(out)


OKHSL = ColorModel(
    "okhsl",
    "adjust sRGB colors via Okhsl (hue, saturation, lightness)",
    [
        Component("h", "hue", 0, c.HUE_BOUNDS, cyclic=True),
        Component("s", "saturation", 1, c.SATURATION_BOUNDS),
        Component("l", "lightness", 2, c.LIGHTNESS_BOUNDS),
    ],
    conv.srgb_to_okhsl,
    conv.okhsl_to_srgb,
)

OKLCH = ColorModel(
    "oklch",
    "adjust sRGB colors via Oklch (lightness, chroma, hue)",
    [
        Component("l", "lightness", 0, c.LIGHTNESS_BOUNDS),
        Component("c", "chroma", 1, c.CHROMA_BOUNDS),
        Component("h", "hue", 2, c.HUE_BOUNDS, cyclic=True),
    ],
    conv.srgb_to_oklch,
    conv.oklch_to_srgb,
)

MODELS = {
    OKHSL.name: OKHSL,
    OKLCH.name: OKLCH,
}
