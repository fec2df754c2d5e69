#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/sanitizer.py

import argparse
import re

from pixlab.core import config as c
from pixlab.core.conversions import normalize_hex
from pixlab.core.errors import InvalidInput


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def _extract_signed_int(value: str) -> int:
    """Parse a signed integer; None when the text is not one."""
    s = str(value).strip() if value is not None else ""
    return int(s) if INT_RE.fullmatch(s) else None


def _extract_signed_float(value: str) -> float:
    """Parse a signed decimal number; None when the text is not one."""
    s = str(value).strip() if value is not None else ""
    return float(s) if FLOAT_RE.fullmatch(s) else None


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    try:
        return normalize_hex(v)
    except InvalidInput:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_sanitize_for_log(v)}'")


def handle_point(v: str):
    """Validator for 'X,Y' pixel coordinates."""
    parts = re.findall(r"-?\d+", str(v))
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"invalid coordinates: '{_sanitize_for_log(v)}' (expected X,Y)")
    return int(parts[0]), int(parts[1])


def handle_mapping(v: str):
    """Validator for 'SLOT=HEX' recolor mappings."""
    slot, sep, hex_part = str(v).partition("=")
    index = _extract_signed_int(slot)
    if not sep or index is None:
        raise argparse.ArgumentTypeError(f"invalid mapping: '{_sanitize_for_log(v)}' (expected SLOT=HEX)")
    return index, handle_hex(hex_part)


def handle_choice(v: str) -> str:
    """Validator for keyword options (modes, algorithms)."""
    cleaned = "".join(re.findall(r"[a-z\-]", str(v).replace(" ", "").lower()))
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid string value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid integer value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid float value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


def handle_float_any(v: str) -> float:
    """Validator for unbounded floating-point CLI arguments."""
    val = _extract_signed_float(v)
    if val is None:
        raise argparse.ArgumentTypeError(f"invalid numeric value: '{_sanitize_for_log(v)}'")
    return val


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "point": handle_point,
    "mapping": handle_mapping,
    "choice": handle_choice,
    "tolerance": handle_float_range(0.0, 100.0),
    "delta_e": handle_float_range(0.0, 100.0),
    "amount": handle_float_range(0.0, 1.0),
    "scale": handle_float_range(*c.SCALE_RANGE),
    "rotation": handle_float_any,
    "feather": handle_int_range(0, c.FEATHER_MAX_RADIUS),
    "palette_size": handle_int_range(min(c.PALETTE_SIZES), max(c.PALETTE_SIZES)),
    "dimension": handle_int_range(1, 16384),
    "spacing": handle_int_range(1, 4096),
    "seed": handle_int_range(0, 2 ** 32 - 1),
    "max_pixels": handle_int_range(1, 100_000_000),
}
