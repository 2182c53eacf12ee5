"""Rounding and formatting helpers shared by the scorers"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round half toward positive infinity.

    Python's round() uses banker's rounding (round(6.5) == 6); scores here
    always round .5 upwards, e.g. round_half_up(6.25, 1) == 6.3.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def snap_to_half(value: float, step: float = 0.5) -> float:
    """Snap to the nearest multiple of step (half-up)."""
    return round_half_up(value / step) * step


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return min(max(value, lo), hi)


def format_score(value: float) -> str:
    """Render a score without a trailing .0 for whole numbers (7 -> '7', 7.5 -> '7.5')."""
    if value == int(value):
        return str(int(value))
    return repr(value)
