import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def _clamp(v: float, lo: float, hi: float) -> float:
    if v != v:
        return lo
    return max(lo, min(hi, v))


def _round_half_up(v: float) -> int:
    # Halves round toward +inf, unlike Python's banker's rounding
    return int(math.floor(v + 0.5))
