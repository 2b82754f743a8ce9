from __future__ import annotations

from decimal import Decimal
import math


_MAX_DECIMAL_PLACES = 300


def round_half_up(value: float) -> float:
    # Python's round() is banker's rounding; tick snapping needs halves to go up.
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def almost_equals(x: float, y: float, epsilon: float) -> bool:
    return abs(x - y) < epsilon


def almost_whole(x: float, epsilon: float) -> bool:
    rounded = round_half_up(x)
    return (rounded - epsilon) <= x <= (rounded + epsilon)


def log10(value: float) -> float:
    if value > 0:
        return math.log10(value)
    if value == 0:
        return -math.inf
    return math.nan


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def nice_number(value: float) -> float:
    """Round ``value`` up to the nearest 1, 2, 5 or 10 times a power of ten."""
    if not math.isfinite(value):
        return value
    if value <= 0:
        return 0.0
    rounded = round_half_up(value)
    if almost_equals(value, rounded, value / 1000):
        value = rounded
    magnitude = 10.0 ** math.floor(math.log10(value))
    fraction = value / magnitude
    if fraction <= 1:
        nice_fraction = 1.0
    elif fraction <= 2:
        nice_fraction = 2.0
    elif fraction <= 5:
        nice_fraction = 5.0
    else:
        nice_fraction = 10.0
    return nice_fraction * magnitude


def decimal_places(value: float) -> int:
    if not math.isfinite(value):
        return 0
    d = Decimal(repr(float(value))).normalize()
    exp = d.as_tuple().exponent
    if not isinstance(exp, int):
        return 0
    return min(_MAX_DECIMAL_PLACES, max(0, -exp))


def js_number_str(value: float) -> str:
    """String form of a number without a trailing ``.0`` on integral values."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))
