from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping

from chartscale.api import create_scale
from chartscale.errors import ScaleConfigError
from chartscale.layout import SUPPORTED_POSITIONS, AxisBox, GridPadding, axis_box
from chartscale.options import (
    DEFAULT_LABEL_SLOT_PX,
    DEFAULT_LOCALE,
    TickOptions,
    resolve_scale_options,
    resolve_tick_options,
)
from chartscale.scale import Scale


AXIS_TYPES: dict[str, str] = {
    "value": "linear",
    "linear": "linear",
    "log": "logarithmic",
    "logarithmic": "logarithmic",
}


@dataclass(frozen=True)
class AxisOptions:
    type: str = "value"
    position: str = "bottom"
    min: float | None = None
    max: float | None = None
    begin_at_zero: bool = True
    data_min: float = 0.0
    data_max: float = 1.0
    bounds: str = "data"
    ticks: TickOptions = field(default_factory=TickOptions)
    formatter: Callable[[float], str] | None = None
    label_slot_px: float = DEFAULT_LABEL_SLOT_PX
    name: str = ""

    @property
    def scale_type(self) -> str:
        return AXIS_TYPES[self.type]


def resolve_axis_options(options: Mapping[str, Any] | None = None, **overrides: Any) -> AxisOptions:
    """Merge defaults, ``options`` and ``overrides`` (in that order) into one record."""
    merged: dict[str, Any] = {}
    if options:
        merged.update(options)
    merged.update(overrides)
    unknown = set(merged) - {f.name for f in fields(AxisOptions)}
    if unknown:
        raise ScaleConfigError(f"unknown axis options: {', '.join(sorted(unknown))}")

    axis_type = merged.get("type", "value")
    if axis_type not in AXIS_TYPES:
        raise ScaleConfigError(f"unsupported scale type: {axis_type!r}")
    position = merged.get("position", "bottom")
    if position not in SUPPORTED_POSITIONS:
        raise ScaleConfigError(f"unsupported axis position: {position!r}")
    if "ticks" in merged:
        merged["ticks"] = resolve_tick_options(merged["ticks"])
    return AxisOptions(**merged)


@dataclass(frozen=True)
class AxisTickMark:
    value: float
    pixel: float
    # None for ticks drawn without a label (minor ticks on logarithmic axes).
    label: str | None
    major: bool = True


@dataclass(frozen=True)
class AxisFrame:
    position: str
    box: AxisBox
    extent: tuple[float, float]
    ticks: tuple[AxisTickMark, ...]

    def labels(self) -> list[str]:
        return [t.label for t in self.ticks if t.label is not None]

    def gridline_pixels(self) -> list[float]:
        # The first tick sits on the axis line itself.
        return [t.pixel for t in self.ticks[1:]]


class Axis:
    """One chart axis: owns its scale and turns a draw pass into tick marks."""

    def __init__(
        self,
        options: AxisOptions,
        *,
        width: float,
        height: float,
        padding: GridPadding,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.options = options
        self.position = options.position
        self.box = axis_box(options.position, width, height, padding)
        scale_options = resolve_scale_options(
            orientation="horizontal" if options.position in ("bottom", "top") else "vertical",
            data_min=options.data_min,
            data_max=options.data_max,
            user_min=options.min,
            user_max=options.max,
            bounds=options.bounds,
            ticks=options.ticks,
            begin_at_zero=options.begin_at_zero,
            locale=locale,
            formatter=options.formatter,
            label_slot_px=options.label_slot_px,
        )
        self.scale: Scale = create_scale(options.scale_type, scale_options, self.box)

    @property
    def is_logarithmic(self) -> bool:
        return self.scale.type == "logarithmic"

    def draw(self) -> AxisFrame:
        scale = self.scale
        marks: list[AxisTickMark] = []
        for tick in scale.build_ticks():
            major = tick.major is not False
            label = scale.get_label_for_value(tick.value) if major else None
            marks.append(
                AxisTickMark(
                    value=tick.value,
                    pixel=scale.get_pixel_for_value(tick.value),
                    label=label,
                    major=major,
                )
            )
        return AxisFrame(position=self.position, box=self.box, extent=scale.get_extent(), ticks=tuple(marks))
