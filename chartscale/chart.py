from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Mapping, Sequence

import numpy as np

from chartscale.adapters.normalize import normalize_points, normalize_xy
from chartscale.axis import Axis, AxisFrame, resolve_axis_options
from chartscale.errors import PlotDataError, ScaleConfigError
from chartscale.layout import AxisBox, GridPadding, plot_area
from chartscale.options import DEFAULT_LOCALE
from chartscale.series import SERIES_TYPES, SeriesSpec
from chartscale.zoom import compute_zoom_extent, wheel_scale_factor


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoomOptions:
    enabled: bool = True
    mode: str = "xy"

    def __post_init__(self) -> None:
        if self.mode not in ("x", "y", "xy"):
            raise ScaleConfigError(f"unsupported zoom mode: {self.mode!r}")


@dataclass(frozen=True)
class SeriesBounds:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class ProjectedSeries:
    name: str | None
    type: str
    px: np.ndarray
    py: np.ndarray


@dataclass(frozen=True)
class ChartFrame:
    plot_area: AxisBox
    x_axis: AxisFrame
    y_axis: AxisFrame
    series: tuple[ProjectedSeries, ...]


class ChartModel:
    """Series, a bottom x axis and a left y axis, plus pointer-centered zoom.

    Produces tick marks and projected pixel arrays; drawing them is up to
    the caller.
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        padding: GridPadding | None = None,
        x_axis: Mapping[str, Any] | None = None,
        y_axis: Mapping[str, Any] | None = None,
        locale: str = DEFAULT_LOCALE,
        zoom: ZoomOptions | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ScaleConfigError("chart width and height must be > 0")
        self.width = float(width)
        self.height = float(height)
        self.padding = padding or GridPadding()
        self.locale = locale
        self.zoom = zoom or ZoomOptions()
        self._x_axis_options = dict(x_axis or {})
        self._y_axis_options = dict(y_axis or {})
        self._series: list[SeriesSpec] = []
        self.x_axis: Axis | None = None
        self.y_axis: Axis | None = None

    @property
    def series(self) -> tuple[SeriesSpec, ...]:
        return tuple(self._series)

    def add_series(
        self,
        y: Any = None,
        *,
        x: Any = None,
        points: Sequence[Any] | None = None,
        type: str = "line",
        name: str | None = None,
        visible: bool = True,
    ) -> "ChartModel":
        if type not in SERIES_TYPES:
            raise PlotDataError(f"series type {type!r} is not supported")
        if points is not None:
            if y is not None or x is not None:
                raise PlotDataError("pass either `points` or `x`/`y`, not both")
            data = normalize_points(points, name=name)
        else:
            data = normalize_xy(y, x=x, name=name)
        self._series.append(SeriesSpec(data=data, type=type, visible=visible))  # type: ignore[arg-type]
        # Axes derive their data limits from the series, so they are rebuilt on next draw.
        self.x_axis = None
        self.y_axis = None
        return self

    def plot_area(self) -> AxisBox:
        return plot_area(self.width, self.height, self.padding)

    def series_bounds(self) -> SeriesBounds:
        xs: list[np.ndarray] = []
        ys: list[np.ndarray] = []
        for spec in self._series:
            fx, fy = spec.data.finite_points()
            xs.append(fx)
            ys.append(fy)
        xmin, xmax = _finite_range(xs)
        ymin, ymax = _finite_range(ys)
        return SeriesBounds(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)

    def build_axes(self) -> tuple[Axis, Axis]:
        bounds = self.series_bounds()
        x_options = resolve_axis_options(
            {"data_min": bounds.xmin, "data_max": bounds.xmax, **self._x_axis_options},
            position="bottom",
        )
        y_options = resolve_axis_options(
            {"data_min": bounds.ymin, "data_max": bounds.ymax, **self._y_axis_options},
            position="left",
        )
        common = {"width": self.width, "height": self.height, "padding": self.padding, "locale": self.locale}
        self.x_axis = Axis(x_options, **common)
        self.y_axis = Axis(y_options, **common)
        return self.x_axis, self.y_axis

    def _axes(self) -> tuple[Axis, Axis]:
        if self.x_axis is None or self.y_axis is None:
            return self.build_axes()
        return self.x_axis, self.y_axis

    def project_series(self) -> tuple[ProjectedSeries, ...]:
        x_axis, y_axis = self._axes()
        out: list[ProjectedSeries] = []
        for spec in self._series:
            if not spec.visible:
                continue
            fx, fy = spec.data.finite_points()
            out.append(
                ProjectedSeries(
                    name=spec.data.name,
                    type=spec.type,
                    px=x_axis.scale.get_pixels_for_values(fx),
                    py=y_axis.scale.get_pixels_for_values(fy),
                )
            )
        return tuple(out)

    def draw(self) -> ChartFrame:
        x_axis, y_axis = self._axes()
        return ChartFrame(
            plot_area=self.plot_area(),
            x_axis=x_axis.draw(),
            y_axis=y_axis.draw(),
            series=self.project_series(),
        )

    def on_wheel(self, offset_x: float, offset_y: float, wheel_delta: float) -> bool:
        """Zoom around the pointer; returns False when the event is ignored."""
        if not self.zoom.enabled:
            return False
        if not self.plot_area().contains(offset_x, offset_y):
            return False
        x_axis, y_axis = self._axes()
        factor = wheel_scale_factor(wheel_delta)
        if "x" in self.zoom.mode:
            _zoom_axis(x_axis, offset_x, factor)
        if "y" in self.zoom.mode:
            _zoom_axis(y_axis, offset_y, factor)
        return True

    def reset_zoom(self) -> None:
        x_axis, y_axis = self._axes()
        x_axis.scale.reset()
        y_axis.scale.reset()
        LOGGER.debug("zoom reset: x=%s y=%s", x_axis.scale.get_extent(), y_axis.scale.get_extent())


def _zoom_axis(axis: Axis, pixel: float, factor: float) -> None:
    scale = axis.scale
    vmin, vmax = scale.get_extent()
    pivot = scale.get_value_for_pixel(pixel)
    new_min, new_max = compute_zoom_extent(pivot, vmin, vmax, factor, axis.is_logarithmic)
    scale.set_extent(new_min, new_max)
    LOGGER.debug("%s axis zoom x%s around %s: [%s, %s] -> [%s, %s]", axis.position, factor, pivot, vmin, vmax, new_min, new_max)


def _finite_range(chunks: list[np.ndarray]) -> tuple[float, float]:
    values = np.concatenate(chunks) if chunks else np.empty(0, dtype=np.float64)
    if values.size == 0:
        return (0.0, 1.0)
    return (float(np.min(values)), float(np.max(values)))
