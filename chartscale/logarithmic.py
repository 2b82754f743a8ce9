from __future__ import annotations

import logging
import math

import numpy as np

from chartscale.format import format_number
from chartscale.numeric import almost_whole, log10, round_half_up
from chartscale.options import ScaleOptions
from chartscale.scale import Scale, ScaleKind
from chartscale.ticks import Tick


LOGGER = logging.getLogger(__name__)

# Smallest lower bound a logarithmic scale falls back to when asked to begin at zero.
LOG_FLOOR = 0.1
_MAX_POW10_EXPONENT = 308.25
_SNAP_EPSILON = 1e-9


def _log10_floor(value: float) -> int:
    return math.floor(log10(value))


def is_major(value: float) -> bool:
    """True when ``value`` is an exact power of ten."""
    if not math.isfinite(value) or value <= 0:
        return False
    return value / 10.0 ** _log10_floor(value) == 1


def _steps(vmin: float, vmax: float, range_exp: int) -> int:
    range_step = 10.0**range_exp
    return math.ceil(vmax / range_step) - math.floor(vmin / range_step)


def start_exponent(vmin: float, vmax: float) -> int:
    """Exponent whose decade steps split ``[vmin, vmax]`` into about ten pieces, capped at ``vmin``'s decade."""
    range_exp = _log10_floor(vmax - vmin)
    while _steps(vmin, vmax, range_exp) > 10:
        range_exp += 1
    while _steps(vmin, vmax, range_exp) < 10:
        range_exp -= 1
    return min(range_exp, _log10_floor(vmin))


def _snapped_floor(value: float) -> int:
    """``floor(value)``, treating quotients within float noise of a whole number as that number."""
    if almost_whole(value, _SNAP_EPSILON * max(1.0, abs(value))):
        return int(round_half_up(value))
    return math.floor(value)


def generate_log_ticks(
    vmin: float,
    vmax: float,
    *,
    pinned_min: float | None = None,
    pinned_max: float | None = None,
) -> list[Tick]:
    if pinned_min is not None and math.isfinite(pinned_min):
        vmin = pinned_min
    ticks: list[Tick] = []
    min_exp = _log10_floor(vmin)
    exp = start_exponent(vmin, vmax)
    precision = 10.0 ** abs(exp) if exp < 0 else 1.0
    step_size = 10.0**exp
    base = 10.0**min_exp if min_exp > exp else 0.0
    start = round_half_up((vmin - base) * precision) / precision
    offset = _snapped_floor((vmin - base) / step_size / 10) * step_size * 10
    significand = _snapped_floor((start - offset) / step_size)
    if pinned_min is not None and math.isfinite(pinned_min):
        value = pinned_min
    else:
        value = round_half_up((base + offset + significand * 10.0**exp) * precision) / precision

    while value < vmax:
        # A rounded start can land below a pinned min; such values are skipped.
        if not ticks or value > ticks[-1].value:
            ticks.append(Tick(value=value, major=is_major(value), significand=significand))
        # Within a decade: 1..9, then 10 -> 15 -> 20 before moving to the next decade at 2.
        if significand >= 10:
            significand = 15 if significand < 15 else 20
        else:
            significand += 1
        if significand >= 20:
            exp += 1
            significand = 2
            precision = 1.0 if exp >= 0 else precision
        value = round_half_up((base + offset + significand * 10.0**exp) * precision) / precision

    last = pinned_max if pinned_max is not None and math.isfinite(pinned_max) else value
    ticks.append(Tick(value=last, major=is_major(last), significand=significand))
    return ticks


def determine_log_limits(options: ScaleOptions) -> tuple[float, float]:
    lo = options.user_min if options.user_min is not None else options.data_min
    if options.begin_at_zero:
        lo = LOG_FLOOR
    if options.user_max is not None:
        hi = options.user_max
    else:
        hi = float(math.ceil(options.data_max)) if math.isfinite(options.data_max) else options.data_max
    lo = min(lo, hi)
    hi = max(lo, hi)
    if options.begin_at_zero and not lo > 0:
        # A domain ending at or below zero collapses onto the floor.
        lo = LOG_FLOOR
        hi = max(hi, lo)
    return (lo, hi)


def build_log_ticks(scale: Scale) -> list[Tick]:
    vmin, vmax = scale.min, scale.max
    if not (math.isfinite(vmin) and math.isfinite(vmax)) or vmin <= 0:
        LOGGER.warning("logarithmic scale cannot generate ticks over [%s, %s]", vmin, vmax)
        return []
    if vmax <= vmin:
        return [
            Tick(value=vmin, major=is_major(vmin), significand=1),
            Tick(value=vmax, major=is_major(vmax), significand=1),
        ]
    return generate_log_ticks(vmin, vmax, pinned_min=vmin, pinned_max=vmax)


def log_label(scale: Scale, value: float | None) -> str:
    if value is None:
        return "0"
    if scale.options.formatter is not None:
        return scale.options.formatter(value)
    return format_number(value, scale.options.locale, scale.options.ticks.format)


def _log_span(scale: Scale) -> tuple[float, float]:
    start = log10(scale.min)
    return (start, log10(scale.max) - start)


def log_pixel_for_value(scale: Scale, value: float | None) -> float:
    if value is None or value == 0:
        value = scale.min
    if not math.isfinite(value):
        return math.nan
    start, span = _log_span(scale)
    if span == 0 or not math.isfinite(span):
        return 0.0
    if value == scale.min:
        return scale.get_pixel_for_decimal(0.0)
    return scale.get_pixel_for_decimal((log10(value) - start) / span)


def log_value_for_pixel(scale: Scale, pixel: float) -> float:
    start, span = _log_span(scale)
    if span == 0 or not math.isfinite(span):
        return scale.min
    exponent = start + scale.get_decimal_for_pixel(pixel) * span
    if exponent > _MAX_POW10_EXPONENT:
        return math.inf
    return 10.0**exponent


def log_pixels_for_values(scale: Scale, values: np.ndarray) -> np.ndarray:
    values = np.where(values == 0, scale.min, values)
    finite = np.isfinite(values)
    start, span = _log_span(scale)
    if span == 0 or not math.isfinite(span):
        return np.where(finite, 0.0, np.nan)
    decimals = np.where(values == scale.min, 0.0, (np.log10(values) - start) / span)
    return np.where(finite, scale.get_pixels_for_decimals(decimals), np.nan)


LOGARITHMIC = ScaleKind(
    name="logarithmic",
    determine_data_limits=determine_log_limits,
    build_ticks=build_log_ticks,
    get_label_for_value=log_label,
    get_pixel_for_value=log_pixel_for_value,
    get_value_for_pixel=log_value_for_pixel,
    get_pixels_for_values=log_pixels_for_values,
)
