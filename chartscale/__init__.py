from chartscale.api import SCALE_KINDS, create_scale
from chartscale.axis import Axis, AxisFrame, AxisOptions, AxisTickMark, resolve_axis_options
from chartscale.chart import ChartFrame, ChartModel, ZoomOptions
from chartscale.errors import PlotDataError, ScaleConfigError
from chartscale.layout import AxisBox, GridPadding
from chartscale.linear import LINEAR, LinearTickRequest, generate_linear_ticks, relative_label_size
from chartscale.logarithmic import LOGARITHMIC, generate_log_ticks
from chartscale.options import ScaleOptions, TickOptions, resolve_scale_options
from chartscale.scale import Scale, ScaleKind
from chartscale.ticks import Tick
from chartscale.zoom import compute_zoom_extent

__all__ = [
    "Axis",
    "AxisBox",
    "AxisFrame",
    "AxisOptions",
    "AxisTickMark",
    "ChartFrame",
    "ChartModel",
    "GridPadding",
    "LINEAR",
    "LOGARITHMIC",
    "LinearTickRequest",
    "PlotDataError",
    "SCALE_KINDS",
    "Scale",
    "ScaleConfigError",
    "ScaleKind",
    "ScaleOptions",
    "Tick",
    "TickOptions",
    "ZoomOptions",
    "compute_zoom_extent",
    "create_scale",
    "generate_linear_ticks",
    "generate_log_ticks",
    "relative_label_size",
    "resolve_axis_options",
    "resolve_scale_options",
]
