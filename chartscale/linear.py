from __future__ import annotations

from dataclasses import dataclass
import logging
import math

import numpy as np

from chartscale.format import format_number
from chartscale.numeric import (
    almost_equals,
    almost_whole,
    decimal_places,
    js_number_str,
    nice_number,
    round_half_up,
    to_radians,
)
from chartscale.options import BoundsPolicy, ScaleOptions
from chartscale.scale import Scale, ScaleKind
from chartscale.ticks import Tick


LOGGER = logging.getLogger(__name__)

# Below this spacing floats lose the precision needed to lay out a grid.
MIN_SPACING = 1e-14
DEFAULT_MAX_TICKS = 11
MAX_STEP_TICKS = 1000


@dataclass(frozen=True)
class LinearTickRequest:
    max_ticks: int
    bounds: BoundsPolicy = "data"
    step: float | None = None
    min: float | None = None
    max: float | None = None
    precision: int | None = None
    count: int | None = None
    max_digits: float = 10.0
    include_bounds: bool = True
    orientation: str = "horizontal"
    min_rotation: float = 0.0


def relative_label_size(value: float, min_spacing: float, orientation: str, min_rotation: float) -> float:
    """Tolerance within which a neighbouring tick would collide with the label of ``value``."""
    rad = to_radians(min_rotation)
    ratio = (math.sin(rad) if orientation == "horizontal" else math.cos(rad)) or 0.001
    length = 0.75 * min_spacing * len(js_number_str(value))
    return min(min_spacing / ratio, length)


def generate_linear_ticks(request: LinearTickRequest, data_min: float, data_max: float) -> list[Tick]:
    """Nice-number ticks over ``[data_min, data_max]``.

    Priority of the spacing decision:

    1. ``min``, ``max`` and ``step`` all set and ``(max - min) / step`` is
       (almost) whole: evenly spaced ticks from ``min`` to ``max``.
    2. ``count`` set: ``count - 1`` equal spaces between the (pinned or nice)
       bounds.
    3. Otherwise the nice-number spacing, capped at ``max_ticks``.
    """
    rmin, rmax = data_min, data_max
    if not (math.isfinite(rmin) and math.isfinite(rmax)):
        return []

    pinned_min = request.min
    pinned_max = request.max
    min_defined = pinned_min is not None
    max_defined = pinned_max is not None
    step = request.step
    precision = request.precision
    unit = step or 1.0
    max_spaces = request.max_ticks - 1
    min_spacing = (rmax - rmin) / (request.max_digits + 1)
    spacing = nice_number((rmax - rmin) / max_spaces / unit) * unit

    if spacing <= 0 or (spacing < MIN_SPACING and not min_defined and not max_defined):
        return [Tick(value=rmin), Tick(value=rmax)]

    num_spaces: float = math.ceil(rmax / spacing) - math.floor(rmin / spacing)
    if num_spaces > max_spaces:
        spacing = nice_number(num_spaces * spacing / max_spaces / unit) * unit

    if precision is not None:
        factor = 10.0**precision
        spacing = math.ceil(spacing * factor) / factor

    if request.bounds == "ticks":
        nice_min = math.floor(rmin / spacing) * spacing
        nice_max = math.ceil(rmax / spacing) * spacing
    else:
        nice_min = rmin
        nice_max = rmax

    if (
        pinned_min is not None
        and pinned_max is not None
        and step
        and almost_whole((pinned_max - pinned_min) / step, spacing / 1000)
    ):
        # Round here in case almost_whole absorbed a floating-point error.
        num_spaces = round_half_up(min((pinned_max - pinned_min) / spacing, request.max_ticks))
        spacing = (pinned_max - pinned_min) / num_spaces
        nice_min = pinned_min
        nice_max = pinned_max
    elif request.count is not None:
        nice_min = pinned_min if pinned_min is not None else nice_min
        nice_max = pinned_max if pinned_max is not None else nice_max
        num_spaces = request.count - 1
        spacing = (nice_max - nice_min) / num_spaces
    else:
        num_spaces = (nice_max - nice_min) / spacing
        if almost_equals(num_spaces, round_half_up(num_spaces), spacing / 1000):
            num_spaces = round_half_up(num_spaces)
        else:
            num_spaces = math.ceil(num_spaces)

    # Spacing may have changed above, so the rounding factor is settled only now.
    places = max(decimal_places(spacing), decimal_places(nice_min))
    factor = 10.0 ** (places if precision is None else precision)
    nice_min = round_half_up(nice_min * factor) / factor
    nice_max = round_half_up(nice_max * factor) / factor

    values: list[float] = []
    j = 0
    if pinned_min is not None:
        if request.include_bounds and nice_min != pinned_min:
            values.append(pinned_min)
            if nice_min < pinned_min:
                j += 1
            next_value = round_half_up((nice_min + j * spacing) * factor) / factor
            tolerance = relative_label_size(pinned_min, min_spacing, request.orientation, request.min_rotation)
            if almost_equals(next_value, pinned_min, tolerance):
                j += 1
        elif nice_min < pinned_min:
            j += 1

    while j < num_spaces:
        tick_value = round_half_up((nice_min + j * spacing) * factor) / factor
        if pinned_max is not None and tick_value > pinned_max:
            break
        values.append(tick_value)
        j += 1

    if pinned_max is not None and request.include_bounds and nice_max != pinned_max:
        tolerance = relative_label_size(pinned_max, min_spacing, request.orientation, request.min_rotation)
        if values and almost_equals(values[-1], pinned_max, tolerance):
            values[-1] = pinned_max
        else:
            values.append(pinned_max)
    elif pinned_max is None or nice_max == pinned_max:
        values.append(nice_max)

    return [Tick(value=v) for v in values]


def determine_linear_limits(options: ScaleOptions) -> tuple[float, float]:
    lo = options.user_min if options.user_min is not None else options.data_min
    if options.begin_at_zero and lo > 0:
        lo = 0.0
    if options.user_max is not None:
        hi = options.user_max
    else:
        hi = _ceil(options.data_max)
    lo = min(lo, hi)
    hi = max(lo, hi)
    return (lo, hi)


def linear_max_ticks(scale: Scale) -> int:
    tick_opts = scale.options.ticks
    step = tick_opts.step
    if step and math.isfinite(scale.min) and math.isfinite(scale.max):
        max_ticks = math.ceil(scale.max / step) - math.floor(scale.min / step) + 1
        if max_ticks > MAX_STEP_TICKS:
            LOGGER.warning(
                "ticks.step %s would generate up to %d ticks; limiting to %d",
                step,
                max_ticks,
                MAX_STEP_TICKS,
            )
            max_ticks = MAX_STEP_TICKS
    else:
        max_ticks = tick_opts.max_ticks_limit or DEFAULT_MAX_TICKS
    return max(2, max_ticks)


def build_linear_ticks(scale: Scale) -> list[Tick]:
    tick_opts = scale.options.ticks
    if scale.min == scale.max:
        return [Tick(value=scale.min), Tick(value=scale.max)]
    request = LinearTickRequest(
        max_ticks=linear_max_ticks(scale),
        bounds=scale.options.bounds,
        step=tick_opts.step,
        min=scale.min,
        max=scale.max,
        precision=tick_opts.precision,
        count=tick_opts.count,
        max_digits=scale.max_digits(),
        include_bounds=tick_opts.include_bounds,
        orientation=scale.options.orientation,
        min_rotation=tick_opts.min_rotation,
    )
    return generate_linear_ticks(request, scale.min, scale.max)


def linear_label(scale: Scale, value: float | None) -> str:
    if value is None:
        return ""
    if scale.options.formatter is not None:
        return scale.options.formatter(value)
    return format_number(value, scale.options.locale, scale.options.ticks.format)


def linear_pixel_for_value(scale: Scale, value: float | None) -> float:
    if value is None or not math.isfinite(value):
        return math.nan
    span = scale.max - scale.min
    if span == 0:
        return 0.0
    return scale.get_pixel_for_decimal((value - scale.min) / span)


def linear_value_for_pixel(scale: Scale, pixel: float) -> float:
    span = scale.max - scale.min
    if span == 0:
        return scale.min
    return scale.get_decimal_for_pixel(pixel) * span + scale.min


def linear_pixels_for_values(scale: Scale, values: np.ndarray) -> np.ndarray:
    finite = np.isfinite(values)
    span = scale.max - scale.min
    if span == 0:
        return np.where(finite, 0.0, np.nan)
    pixels = scale.get_pixels_for_decimals((values - scale.min) / span)
    return np.where(finite, pixels, np.nan)


def _ceil(value: float) -> float:
    return float(math.ceil(value)) if math.isfinite(value) else value


LINEAR = ScaleKind(
    name="linear",
    determine_data_limits=determine_linear_limits,
    build_ticks=build_linear_ticks,
    get_label_for_value=linear_label,
    get_pixel_for_value=linear_pixel_for_value,
    get_value_for_pixel=linear_value_for_pixel,
    get_pixels_for_values=linear_pixels_for_values,
)
