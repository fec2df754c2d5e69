#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/conversions.py

import functools
import re

from . import config as c
from .errors import InvalidInput
from .types import HSLColor, LABColor, RGBColor
from pixlab.shared.clamping import _clamp, _clamp01, _clamp255, _round_half_up

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def normalize_hex(hex_code: str) -> str:
    """
    Normalize a 3 or 6 digit hex string (with or without '#') to '#RRGGBB'.
    Raises InvalidInput for anything else.
    """
    s = str(hex_code or "").strip()
    match = _HEX_RE.match(s)
    if not match:
        raise InvalidInput(f"malformed hex color: '{hex_code}'")
    digits = match.group(1).upper()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def hex_to_rgb(hex_code: str) -> RGBColor:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    return RGBColor(int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to '#RRGGBB'."""
    r_clamped = _round_half_up(_clamp255(r))
    g_clamped = _round_half_up(_clamp255(g))
    b_clamped = _round_half_up(_clamp255(b))
    return f"#{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def rgb_to_hsl(r: int, g: int, b: int) -> HSLColor:
    """Convert RGB to HSL (hue in degrees, saturation and lightness in percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / c.DIV_2
    h = s = 0.0

    if cmax != cmin:
        delta = cmax - cmin
        s = delta / (c.DIV_2 - cmax - cmin) if L > 0.5 else delta / (cmax + cmin)
        if cmax == r_f:
            h = (g_f - b_f) / delta + (6.0 if g_f < b_f else 0.0)
        elif cmax == g_f:
            h = (b_f - r_f) / delta + 2.0
        else:
            h = (r_f - g_f) / delta + 4.0
        h /= 6.0

    return HSLColor(h * c.HUE_MAX, s * c.PERCENT, L * c.PERCENT)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, L: float) -> RGBColor:
    """Convert HSL (degrees, percent, percent) to integer RGB."""
    h = (h % c.HUE_MAX) / c.HUE_MAX
    s = _clamp01(s / c.PERCENT)
    L = _clamp01(L / c.PERCENT)

    if s == 0:
        r = g = b = L
    else:
        q = L * (1 + s) if L < 0.5 else L + s - L * s
        p = 2 * L - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGBColor(
        _round_half_up(r * c.RGB_MAX),
        _round_half_up(g * c.RGB_MAX),
        _round_half_up(b * c.RGB_MAX),
    )


def _srgb_to_linear(color_comp: int) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def rgb_to_xyz(r: int, g: int, b: int):
    """Convert RGB to CIE XYZ (D65, Y scaled to 100)."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else t * c.LAB_K + c.LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> LABColor:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return LABColor(
        _clamp(L, *c.LAB_L_RANGE),
        _clamp(a, *c.LAB_AB_RANGE),
        _clamp(b, *c.LAB_AB_RANGE),
    )


def rgb_to_lab(r: int, g: int, b: int) -> LABColor:
    """Direct RGB to LAB conversion."""
    x, y, z = rgb_to_xyz(r, g, b)
    return xyz_to_lab(x, y, z)


def quantize_color(rgb, bucket_size: int) -> RGBColor:
    """Snap each channel down to the start of its bucket."""
    if bucket_size < 1:
        raise InvalidInput(f"bucket size must be positive, got {bucket_size}")
    r, g, b = rgb
    return RGBColor(
        (int(r) // bucket_size) * bucket_size,
        (int(g) // bucket_size) * bucket_size,
        (int(b) // bucket_size) * bucket_size,
    )


def get_color_category(lightness: float) -> str:
    """Classify a lightness percentage as light, mid or dark."""
    if lightness > c.CATEGORY_LIGHT:
        return "light"
    if lightness < c.CATEGORY_DARK:
        return "dark"
    return "mid"


def get_color_name(hsl) -> str:
    """Coarse color name from HSL (achromatic names first, then hue bands)."""
    h, s, L = hsl
    if s < c.NAME_MIN_SATURATION:
        if L > c.NAME_WHITE_LIGHTNESS:
            return "White"
        if L < c.NAME_BLACK_LIGHTNESS:
            return "Black"
        return "Gray"

    h = h % c.HUE_MAX
    for upper, name in c.HUE_NAMES:
        if h < upper:
            return name
    return "Unknown"


# Apply LRU caching to the pure per-color conversions in this module
for _name in ("rgb_to_hsl", "rgb_to_xyz", "rgb_to_lab", "hex_to_rgb", "normalize_hex"):
    globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(globals()[_name])
