from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chartscale.errors import ScaleConfigError


AxisPosition = Literal["top", "right", "bottom", "left"]
SUPPORTED_POSITIONS: tuple[AxisPosition, ...] = ("bottom", "left")


@dataclass(frozen=True)
class GridPadding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            raise ScaleConfigError("grid padding must be >= 0")


@dataclass(frozen=True)
class AxisBox:
    """Pixel rectangle with (0, 0) at the upper-left corner of the surface."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    def contains(self, x: float, y: float) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2


def plot_area(width: float, height: float, padding: GridPadding) -> AxisBox:
    return AxisBox(
        x1=padding.left,
        y1=padding.top,
        x2=width - padding.right,
        y2=height - padding.bottom,
    )


def axis_box(position: str, width: float, height: float, padding: GridPadding) -> AxisBox:
    """Strip of the surface an axis occupies, spanning the plot area along its direction."""
    if position == "bottom":
        return AxisBox(x1=padding.left, y1=height - padding.bottom, x2=width - padding.right, y2=height)
    if position == "left":
        return AxisBox(x1=0.0, y1=padding.top, x2=padding.left, y2=height - padding.bottom)
    raise ScaleConfigError(f"unsupported axis position: {position!r}")
