from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

import numpy as np

from chartscale.layout import AxisBox
from chartscale.numeric import js_number_str
from chartscale.options import ScaleOptions
from chartscale.ticks import Tick


def base_data_limits(options: ScaleOptions) -> tuple[float, float]:
    lo = options.user_min if options.user_min is not None else options.data_min
    hi = options.user_max if options.user_max is not None else options.data_max
    return (lo, hi)


@dataclass(frozen=True)
class ScaleKind:
    """Capability set selected once per scale: limits, ticks, labels and value mapping."""

    name: str
    determine_data_limits: Callable[[ScaleOptions], tuple[float, float]]
    build_ticks: Callable[["Scale"], list[Tick]]
    get_label_for_value: Callable[["Scale", float | None], str]
    get_pixel_for_value: Callable[["Scale", float | None], float]
    get_value_for_pixel: Callable[["Scale", float], float]
    get_pixels_for_values: Callable[["Scale", np.ndarray], np.ndarray]


BASE_KIND = ScaleKind(
    name="base",
    determine_data_limits=base_data_limits,
    build_ticks=lambda scale: [],
    get_label_for_value=lambda scale, value: "" if value is None else js_number_str(value),
    get_pixel_for_value=lambda scale, value: 0.0,
    get_value_for_pixel=lambda scale, pixel: 0.0,
    get_pixels_for_values=lambda scale, values: np.zeros_like(values),
)


class Scale:
    """Domain state of one axis plus the decimal <-> pixel mapping shared by every kind."""

    def __init__(self, kind: ScaleKind, options: ScaleOptions, box: AxisBox) -> None:
        self.kind = kind
        self.options = options
        self.box = box
        self.min, self.max = self.determine_data_limits()

    @property
    def type(self) -> str:
        return self.kind.name

    def determine_data_limits(self, options: ScaleOptions | None = None) -> tuple[float, float]:
        return self.kind.determine_data_limits(options or self.options)

    def get_range(self) -> float:
        return self.max - self.min

    def get_extent(self) -> tuple[float, float]:
        return (self.min, self.max)

    def set_extent(self, vmin: float, vmax: float) -> None:
        self.min = float(vmin)
        self.max = float(vmax)

    def reset(self) -> None:
        self.min, self.max = self.determine_data_limits()

    def is_horizontal(self) -> bool:
        return self.options.orientation == "horizontal"

    def axis_length(self) -> float:
        return self.box.width if self.is_horizontal() else self.box.height

    def max_digits(self) -> float:
        """How many label slots fit along the axis."""
        return max(0.0, self.axis_length() / self.options.label_slot_px)

    def get_pixel_for_decimal(self, decimal: float) -> float:
        box = self.box
        if self.is_horizontal():
            return box.x1 + box.width * decimal
        return box.y2 - box.height * decimal

    def get_decimal_for_pixel(self, pixel: float) -> float:
        box = self.box
        if self.is_horizontal():
            if box.width == 0:
                return 0.0
            return (pixel - box.x1) / box.width
        if box.height == 0:
            return 0.0
        return (box.y2 - pixel) / box.height

    def get_pixel_for_value(self, value: float | None) -> float:
        return self.kind.get_pixel_for_value(self, value)

    def get_value_for_pixel(self, pixel: float) -> float:
        return self.kind.get_value_for_pixel(self, pixel)

    def get_label_for_value(self, value: float | None) -> str:
        return self.kind.get_label_for_value(self, value)

    def build_ticks(self) -> list[Tick]:
        return self.kind.build_ticks(self)

    def get_pixels_for_decimals(self, decimals: np.ndarray) -> np.ndarray:
        box = self.box
        if self.is_horizontal():
            return box.x1 + box.width * decimals
        return box.y2 - box.height * decimals

    def get_pixels_for_values(self, values: Iterable[float] | np.ndarray) -> np.ndarray:
        arr = np.asarray(values, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return self.kind.get_pixels_for_values(self, arr)

    def __repr__(self) -> str:
        return f"Scale(type={self.kind.name!r}, min={self.min!r}, max={self.max!r})"
