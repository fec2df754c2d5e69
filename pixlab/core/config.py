#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/config.py

import math
import os

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 4096

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
PERCENT = 100.0                    # Percentage scale
EXP_2 = 2                          # Square power
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation
DEG_180 = 180.0                    # Half circle degrees
DEG_360 = 360.0                    # Full circle degrees

# Euclidean RGB distance ceiling: sqrt(255^2 * 3)
MAX_RGB_DISTANCE = math.sqrt(3 * 255 ** 2)

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # Factor for scaling normalized XYZ coordinates

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = (29.0 / 6.0) ** 2 / 3.0    # Slope of the linear segment for low luminance values
LAB_OFFSET = 4.0 / 29.0            # Constant offset of the linear segment
LAB_POW = 1.0 / 3.0                # Cube root exponent
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_L_RANGE = (0.0, 100.0)         # Clamp range for L*
LAB_AB_RANGE = (-128.0, 127.0)     # Clamp range for a* and b*

# CIEDE2000 Constants (Source: Sharma, G., Wu, W., & Dalal, E. N. (2005))
POW7_25 = 6103515625.0             # Constant for chroma normalization (25^7)
G_FACTOR = 0.5                     # Axial adjustment factor for neutral gray
T_K1 = 0.17                        # First T-factor coefficient for hue weighting
T_K2 = 0.24                        # Second T-factor coefficient for hue weighting
T_K3 = 0.32                        # Third T-factor coefficient for hue weighting
T_K4 = 0.20                        # Fourth T-factor coefficient for hue weighting
T_OFFSET_1 = 30.0                  # Primary phase offset for hue angle T-factor
T_OFFSET_2 = 6.0                   # Secondary phase offset for hue angle T-factor
T_OFFSET_3 = 63.0                  # Tertiary phase offset for hue angle T-factor
T_MUL_3 = 3.0                      # Multiplier for tertiary hue angle calculation
T_MUL_4 = 4.0                      # Multiplier for quaternary hue angle calculation
L_OFFSET = 50.0                    # Lightness midpoint for S_L weighting function
S_L_K = 0.015                      # Lightness weighting coefficient for S_L
S_C_K = 0.045                      # Chroma weighting coefficient for S_C
S_L_DIV = 20.0                     # Divisor term for S_L weighting calculation
RT_D30 = 30.0                      # Degree factor for rotation term (R_T) calculation
RT_H_OFFSET = 275.0                # Hue offset for blue region in R_T calculation
RT_DIV = 25.0                      # Hue divisor for blue region in R_T calculation
K_FACTORS = (1.0, 1.0, 1.0)        # Parametric weighting factors (k_L, k_C, k_H)

# Luma weights in thousandths (Source: ITU-R BT.601)
LUMA_601_R = 299
LUMA_601_G = 587
LUMA_601_B = 114
LUMA_601_SCALE = 1000 * 255        # Integer denominator so pure white maps to exactly 1.0

# ==========================================
# Color Naming
# ==========================================

NAME_MIN_SATURATION = 10.0         # Below this saturation (%) a color is achromatic
NAME_WHITE_LIGHTNESS = 90.0        # Achromatic colors above this lightness are White
NAME_BLACK_LIGHTNESS = 10.0        # Achromatic colors below this lightness are Black
CATEGORY_LIGHT = 70.0              # Lightness (%) above which a color is 'light'
CATEGORY_DARK = 30.0               # Lightness (%) below which a color is 'dark'

# Upper hue bound (exclusive, degrees) for each chromatic name; Red wraps at 345
HUE_NAMES = [
    (15.0, "Red"),
    (45.0, "Orange"),
    (75.0, "Yellow"),
    (165.0, "Green"),
    (195.0, "Cyan"),
    (255.0, "Blue"),
    (285.0, "Purple"),
    (345.0, "Magenta"),
    (360.0, "Red"),
]

# deltaE2000 upper bounds and the confidence (%) they map to
MATCH_CONFIDENCE_BANDS = [
    (2.0, 100),
    (5.0, 95),
    (10.0, 85),
    (20.0, 70),
    (50.0, 50),
]
MATCH_CONFIDENCE_FLOOR = 30
INDISTINGUISHABLE_DELTA_E = 2.0    # Recolor mappings closer than this are reported

# ==========================================
# Engine Limits & Defaults
# ==========================================

# Palette extraction, keyed by algorithm
PALETTE_SIZES = (9, 36)
PALETTE_ALGORITHMS = ("smart", "detailed")
PALETTE_MAX_DIMENSION = {"smart": 300, "detailed": 500}
PALETTE_SAMPLE_STEP = {"smart": 8, "detailed": 4}
PALETTE_BUCKET_SIZE = {"smart": 16, "detailed": 8}
PALETTE_MIN_ALPHA = 200            # Samples with lower alpha are ignored
PALETTE_WHITE_CUTOFF = 250         # Samples with every channel above this are ignored
PALETTE_BLACK_CUTOFF = 5           # Samples with every channel below this are ignored

# Region detection
REGION_DEFAULT_TOLERANCE = 10.0    # Default deltaE2000 tolerance
REGION_MAX_PIXELS = 1_000_000      # Safety cap on accepted pixels
REGION_MIN_ALPHA = 10              # Pixels with lower alpha are region boundaries

# Color knockout
REPLACE_MODES = ("transparency", "color", "mask")
EDGE_SENTINEL_DISTANCE = 2.0       # Edge distance of a pixel with no unmatched neighbor
MASK_THRESHOLD = 0.5               # alpha modifier above which mask mode paints black

# Recolor
BLEND_MODES = ("replace", "overlay", "multiply")

# Feather
FEATHER_MAX_RADIUS = 20

# Texture cut
SCALE_RANGE = (0.1, 5.0)
PATTERN_KINDS = ("dots", "lines", "grid", "noise")
PATTERN_LINE_WIDTH = {"lines": 2, "grid": 1}

# ==========================================
# Environment
# ==========================================

DEBUG = bool(os.environ.get("PIXLAB_DEBUG"))
NO_COLOR = bool(os.environ.get("NO_COLOR"))

# ==========================================
# CLI UI & Data Structures
# ==========================================

SUPPORTED_OUTPUT_FORMATS = ("png", "webp")

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "debug": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
    "debug": "\033[0;2;37m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
