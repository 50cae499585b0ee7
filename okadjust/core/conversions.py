#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from .errors import ParseError
from okadjust.shared.clamping import _clamp255


# ==========================================
# Hex Text <-> 8-bit sRGB
# ==========================================


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Parse '#RRGGBB', '#RGB' or the same without '#' into 8-bit channels."""
    digits = hex_code[1:] if hex_code.startswith("#") else hex_code
    if len(digits) not in c.HEX_LENGTHS:
        raise ParseError(hex_code, f"expected 3 or 6 hex digits, got {len(digits)}")
    if not c.HEX_DIGITS_REGEX.fullmatch(digits):
        raise ParseError(hex_code, "invalid hex digit")
    if len(digits) == 3:
        # e.g., 'abc' becomes 'aabbcc'
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert 0-255 components to lowercase hex, rounding half up and saturating."""
    channels = (int(math.floor(_clamp255(v) + 0.5)) for v in (r, g, b))
    return "".join(f"{v:02x}" for v in channels)


# ==========================================
# sRGB Transfer Function
# ==========================================


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an sRGB component in 0.0-1.0."""
    if color_comp <= c.SRGB_TO_LINEAR_TH:
        return color_comp / c.SRGB_SLOPE
    return ((color_comp + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component. Out-of-gamut values pass through unclamped."""
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


# ==========================================
# OKLab
# ==========================================


def _cbrt(v: float) -> float:
    if v >= 0:
        return v ** c.OKLAB_CUBE_ROOT_EXP
    return -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def _mat3(m, x: float, y: float, z: float) -> Tuple[float, float, float]:
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    l_val, m, s = _mat3(c.M1_OKLAB, r, g, b)
    return _mat3(c.M2_OKLAB, _cbrt(l_val), _cbrt(m), _cbrt(s))


def oklab_to_linear_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    l_, m_, s_ = _mat3(c.M2_OKLAB_INV, L, a, b)
    return _mat3(c.M1_OKLAB_INV, l_ ** 3, m_ ** 3, s_ ** 3)


def srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert sRGB (0.0-1.0) to OKLab."""
    return linear_srgb_to_oklab(_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))


def oklab_to_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to sRGB (nominally 0.0-1.0, unclamped)."""
    r_lin, g_lin, b_lin = oklab_to_linear_srgb(L, a, b)
    return _linear_to_srgb(r_lin), _linear_to_srgb(g_lin), _linear_to_srgb(b_lin)


# ==========================================
# Oklch
# ==========================================


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH. Gray has no hue and reports 0 degrees."""
    chroma = math.hypot(a, b)
    if chroma < c.ACHROMATIC_EPS:
        return L, chroma, 0.0
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return L, chroma, hue


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def srgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct sRGB to OKLCH conversion."""
    return oklab_to_oklch(*srgb_to_oklab(r, g, b))


def oklch_to_srgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Direct OKLCH to sRGB conversion."""
    return oklab_to_srgb(*oklch_to_oklab(L, chroma, hue))


# ==========================================
# Okhsl
# ==========================================


def _toe(x: float) -> float:
    """Map OKLab L to the Okhsl lightness estimate."""
    k1, k2, k3 = c.TOE_K1, c.TOE_K2, c.TOE_K3
    return 0.5 * (k3 * x - k1 + math.sqrt((k3 * x - k1) ** 2 + 4 * k2 * k3 * x))


def _toe_inv(x: float) -> float:
    k1, k2, k3 = c.TOE_K1, c.TOE_K2, c.TOE_K3
    return (x * x + k1 * x) / (k3 * (x + k2))


def _compute_max_saturation(a: float, b: float) -> float:
    """Max S = C / L for the normalized hue (a, b) before an sRGB channel clips.

    A polynomial first guess refined with one step of Halley's method.
    """
    for index, (test, k) in enumerate(c.MAX_SATURATION_FITS):
        if test is None or test[0] * a + test[1] * b > 1:
            break
    wl, wm, ws = c.M1_OKLAB_INV[index]
    k0, k1, k2, k3, k4 = k

    S = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_l = c.M2_OKLAB_INV[0][1] * a + c.M2_OKLAB_INV[0][2] * b
    k_m = c.M2_OKLAB_INV[1][1] * a + c.M2_OKLAB_INV[1][2] * b
    k_s = c.M2_OKLAB_INV[2][1] * a + c.M2_OKLAB_INV[2][2] * b

    l_ = 1.0 + S * k_l
    m_ = 1.0 + S * k_m
    s_ = 1.0 + S * k_s

    l_val, m, s = l_ ** 3, m_ ** 3, s_ ** 3
    l_ds, m_ds, s_ds = 3.0 * k_l * l_ * l_, 3.0 * k_m * m_ * m_, 3.0 * k_s * s_ * s_
    l_ds2, m_ds2, s_ds2 = 6.0 * k_l * k_l * l_, 6.0 * k_m * k_m * m_, 6.0 * k_s * k_s * s_

    f = wl * l_val + wm * m + ws * s
    f1 = wl * l_ds + wm * m_ds + ws * s_ds
    f2 = wl * l_ds2 + wm * m_ds2 + ws * s_ds2

    return S - f * f1 / (f1 * f1 - 0.5 * f * f2)


def _find_cusp(a: float, b: float) -> Tuple[float, float]:
    """(L, C) of the most saturated in-gamut color for the normalized hue (a, b)."""
    s_cusp = _compute_max_saturation(a, b)
    rgb_at_max = oklab_to_linear_srgb(1.0, s_cusp * a, s_cusp * b)
    l_cusp = _cbrt(1.0 / max(rgb_at_max))
    return l_cusp, l_cusp * s_cusp


def _find_gamut_intersection(a: float, b: float, L1: float, C1: float, L0: float,
                             cusp: Tuple[float, float]) -> float:
    """Parameter t where the line from (L0, 0) to (L1, C1) leaves the sRGB gamut."""
    l_cusp, c_cusp = cusp

    if ((L1 - L0) * c_cusp - (l_cusp - L0) * C1) <= 0.0:
        # Lower half: the triangle edge towards black is exact
        return c_cusp * L0 / (C1 * l_cusp + c_cusp * (L0 - L1))

    # Upper half: start on the triangle edge, refine with one Halley step per channel
    t = c_cusp * (L0 - 1.0) / (C1 * (l_cusp - 1.0) + c_cusp * (L0 - L1))

    d_l = L1 - L0
    d_c = C1

    k_l = c.M2_OKLAB_INV[0][1] * a + c.M2_OKLAB_INV[0][2] * b
    k_m = c.M2_OKLAB_INV[1][1] * a + c.M2_OKLAB_INV[1][2] * b
    k_s = c.M2_OKLAB_INV[2][1] * a + c.M2_OKLAB_INV[2][2] * b

    l_dt = d_l + d_c * k_l
    m_dt = d_l + d_c * k_m
    s_dt = d_l + d_c * k_s

    L = L0 * (1.0 - t) + t * L1
    C = t * C1

    l_ = L + C * k_l
    m_ = L + C * k_m
    s_ = L + C * k_s

    lms = (l_ ** 3, m_ ** 3, s_ ** 3)
    lms_dt = (3 * l_dt * l_ * l_, 3 * m_dt * m_ * m_, 3 * s_dt * s_ * s_)
    lms_dt2 = (6 * l_dt * l_dt * l_, 6 * m_dt * m_dt * m_, 6 * s_dt * s_dt * s_)

    steps = []
    for w in c.M1_OKLAB_INV:
        f = w[0] * lms[0] + w[1] * lms[1] + w[2] * lms[2] - 1
        f1 = w[0] * lms_dt[0] + w[1] * lms_dt[1] + w[2] * lms_dt[2]
        f2 = w[0] * lms_dt2[0] + w[1] * lms_dt2[1] + w[2] * lms_dt2[2]
        u = f1 / (f1 * f1 - 0.5 * f * f2)
        steps.append(-f * u if u >= 0.0 else math.inf)

    return t + min(steps)


def _get_st_mid(a_: float, b_: float) -> Tuple[float, float]:
    """Smooth approximation of (S, T) used for the mid chroma estimate."""
    def fit(k):
        return k[0] + 1.0 / (
            k[1] + k[2] * b_
            + a_ * (k[3] + k[4] * b_
                    + a_ * (k[5] + k[6] * b_
                            + a_ * (k[7] + k[8] * b_ + k[9] * a_)))
        )
    return fit(c.ST_MID_S), fit(c.ST_MID_T)


def _get_cs(L: float, a_: float, b_: float) -> Tuple[float, float, float]:
    """Chroma anchors (C_0, C_mid, C_max) for lightness L and normalized hue."""
    cusp = _find_cusp(a_, b_)
    c_max = _find_gamut_intersection(a_, b_, L, 1.0, L, cusp)

    l_cusp, c_cusp = cusp
    s_max, t_max = c_cusp / l_cusp, c_cusp / (1.0 - l_cusp)
    k = c_max / min(L * s_max, (1.0 - L) * t_max)

    s_mid, t_mid = _get_st_mid(a_, b_)
    c_a = L * s_mid
    c_b = (1.0 - L) * t_mid
    c_mid = c.OKHSL_C_MID_SCALE * k * math.sqrt(math.sqrt(
        1.0 / (1.0 / c_a ** 4 + 1.0 / c_b ** 4)
    ))

    c_a = L * c.OKHSL_C0_S
    c_b = (1.0 - L) * c.OKHSL_C0_T
    c_0 = math.sqrt(1.0 / (1.0 / (c_a * c_a) + 1.0 / (c_b * c_b)))

    return c_0, c_mid, c_max


def srgb_to_okhsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert sRGB (0.0-1.0) to Okhsl (hue degrees, saturation, lightness)."""
    L, a, b_val = srgb_to_oklab(r, g, b)
    chroma = math.hypot(a, b_val)
    lightness = _toe(L) if L > 0.0 else 0.0

    if chroma < c.ACHROMATIC_EPS or L <= 0.0 or L >= 1.0:
        return 0.0, 0.0, lightness

    hue = math.degrees(math.atan2(b_val, a)) % c.HUE_MAX
    a_, b_ = a / chroma, b_val / chroma
    c_0, c_mid, c_max = _get_cs(L, a_, b_)

    mid, mid_inv = c.OKHSL_MID, c.OKHSL_MID_INV
    if chroma < c_mid:
        k_1 = mid * c_0
        k_2 = 1.0 - k_1 / c_mid
        t = chroma / (k_1 + k_2 * chroma)
        s = t * mid
    else:
        k_0 = c_mid
        k_1 = (1.0 - mid) * c_mid * c_mid * mid_inv * mid_inv / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        t = (chroma - k_0) / (k_1 + k_2 * (chroma - k_0))
        s = mid + (1.0 - mid) * t

    return hue, s, lightness


def okhsl_to_srgb(h: float, s: float, l_val: float) -> Tuple[float, float, float]:
    """Convert Okhsl (hue degrees, saturation, lightness) to sRGB (unclamped)."""
    if l_val >= 1.0:
        return 1.0, 1.0, 1.0
    if l_val <= 0.0:
        return 0.0, 0.0, 0.0

    a_ = math.cos(math.radians(h))
    b_ = math.sin(math.radians(h))
    L = _toe_inv(l_val)
    # The chroma anchors underflow near the ends of the lightness axis
    if L < c.OKHSL_MIN_L:
        return 0.0, 0.0, 0.0
    if L >= 1.0:
        return 1.0, 1.0, 1.0
    c_0, c_mid, c_max = _get_cs(L, a_, b_)

    mid, mid_inv = c.OKHSL_MID, c.OKHSL_MID_INV
    if s < mid:
        t = mid_inv * s
        k_1 = mid * c_0
        k_2 = 1.0 - k_1 / c_mid
        chroma = t * k_1 / (1.0 - k_2 * t)
    else:
        t = (s - mid) / (1.0 - mid)
        k_0 = c_mid
        k_1 = (1.0 - mid) * c_mid * c_mid * mid_inv * mid_inv / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        chroma = k_0 + t * k_1 / (1.0 - k_2 * t)

    return oklab_to_srgb(L, chroma * a_, chroma * b_)


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
