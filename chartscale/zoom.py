from __future__ import annotations

from chartscale.logarithmic import LOG_FLOOR


ZOOM_OUT_FACTOR = 1.1
ZOOM_IN_FACTOR = 0.9


def compute_zoom_extent(
    pivot: float,
    vmin: float,
    vmax: float,
    scale_factor: float,
    is_logarithmic: bool = False,
) -> tuple[float, float]:
    """Rescale ``[vmin, vmax]`` by ``scale_factor`` keeping ``pivot`` at the same relative position.

    A factor below 1 zooms in, above 1 zooms out. On logarithmic scales any
    bound that would end up at or below zero is clamped to ``0.1``; the clamp
    is a floor, so near zero the effective zoom ratio differs from
    ``scale_factor``.
    """
    span = vmax - vmin
    if span == 0:
        return (vmin, vmax)
    ratio_left = (pivot - vmin) / span
    ratio_right = 1 - ratio_left
    new_span = span * scale_factor
    new_min = pivot - new_span * ratio_left
    new_max = pivot + new_span * ratio_right
    if is_logarithmic:
        if new_min <= 0:
            new_min = LOG_FLOOR
        if new_max <= 0:
            new_max = LOG_FLOOR
    return (new_min, new_max)


def wheel_scale_factor(wheel_delta: float) -> float:
    return ZOOM_OUT_FACTOR if wheel_delta > 0 else ZOOM_IN_FACTOR
