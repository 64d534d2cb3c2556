"""
Numeric helpers shared by the sizing calculators
"""

import math
from decimal import Decimal, ROUND_HALF_UP


def clamp(value: float, minimum: float, maximum: float) -> float:
    """
    Clamp value into the inclusive range [minimum, maximum]

    Args:
        value: Value to clamp
        minimum: Lower bound
        maximum: Upper bound

    Returns:
        Clamped value
    """
    return min(maximum, max(minimum, value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 going up

    Python's round() uses banker's rounding (round(22.5) == 22), which makes
    pixel sizes jump unevenly as a scale ramps. Font sizes always round .5 up.

    Args:
        value: Value to round

    Returns:
        Rounded integer
    """
    return int(math.floor(value + 0.5))


def round_to(value: float, digits: int = 2) -> float:
    """
    Round to a fixed number of decimal places, with exact ties going up

    Works on the exact binary value like round_half_up does, so
    round_to(1.125) == 1.13 while round_to(1.005) == 1.0 (1.005 is stored
    slightly below the tie).
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def is_finite_number(value) -> bool:
    """Return True for int/float values that are neither NaN nor infinite"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
