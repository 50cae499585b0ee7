#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okadjust/core/config.py

import re

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

ACHROMATIC_EPS = 1e-6              # OKLab chroma below which a color is treated as gray

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Linear sRGB to LMS matrix (Source: https://bottosson.github.io/posts/oklab/)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS' to OKLab matrix (Perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab to LMS' matrix (Inverse stage part 1, the L column is all ones)
M2_OKLAB_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS to linear sRGB matrix (Inverse stage part 2)
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# ==========================================
# Okhsl Constants (Source: https://bottosson.github.io/posts/colorpicker/)
# ==========================================

# Lightness estimate "toe" curve
TOE_K1 = 0.206                                 # Shape of the dark end of the toe
TOE_K2 = 0.03                                  # Offset keeping the toe finite near black
TOE_K3 = (UNIT + TOE_K1) / (UNIT + TOE_K2)     # Normalizes toe(1.0) to 1.0

# Polynomial fit for the maximum saturation per hue. Each entry selects the
# sRGB channel that clips first: (half-plane test (ka, kb), fit k0..k4).
MAX_SATURATION_FITS = (
    ((-1.88170328, -0.80936493), (1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245)),   # Red
    ((1.81444104, -1.19445276), (0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204)),   # Green
    (None, (1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167)),                     # Blue
)

# Rational fit of the (S, T) pair at the hue midpoint
ST_MID_S = (0.11516993, 7.44778970, 4.15901240, -2.19557347, 1.75198401,
            -2.13704948, -10.02301043, -4.24894561, 5.38770819, 4.69891013)
ST_MID_T = (0.11239642, 1.61320320, -0.68124379, 0.40370612, 0.90148123,
            -0.27087943, 0.61223990, 0.00299215, -0.45399568, -0.14661872)

OKHSL_C0_S = 0.4                   # Chroma slope at low lightness for the C_0 estimate
OKHSL_C0_T = 0.8                   # Chroma slope at high lightness for the C_0 estimate
OKHSL_C_MID_SCALE = 0.9            # Scale applied to the mid chroma estimate
OKHSL_MID = 0.8                    # Saturation at which chroma reaches C_mid
OKHSL_MID_INV = 1.25               # 1 / OKHSL_MID
OKHSL_MIN_L = 1e-30               # OKLab L below which Okhsl resolves to black

# ==========================================
# Component Bounds (inclusive)
# ==========================================

HUE_BOUNDS = (0.0, HUE_MAX)        # Cyclic, normalized rather than clamped
LIGHTNESS_BOUNDS = (0.0, 1.0)      # Okhsl l and Oklch L
SATURATION_BOUNDS = (0.0, 1.0)     # Okhsl s, 1.0 is the sRGB gamut edge
CHROMA_BOUNDS = (0.0, 0.4)         # Oklch C, covers every sRGB color

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Operation aliases accepted on the command line
OPERATION_ALIASES = {
    "=": "set",
    "set": "set",
    "+": "increase",
    "inc": "increase",
    "increase": "increase",
    "-": "decrease",
    "dec": "decrease",
    "decrease": "decrease",
}

COLOR_MODES = ["auto", "always", "never"]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "info": "\033[1;36m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "info": "\033[0;36m",
}

RESET = "\033[0m"

# Hex digits accepted after the optional '#' marker (3 or 6 of them)
HEX_DIGITS_REGEX = re.compile(r"[0-9A-Fa-f]+")
HEX_LENGTHS = (3, 6)
