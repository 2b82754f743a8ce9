from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np


SeriesType = Literal["line", "scatter"]
SERIES_TYPES: tuple[SeriesType, ...] = ("line", "scatter")


@dataclass(frozen=True)
class SeriesData:
    x: np.ndarray
    y: np.ndarray
    # True where both coordinates are finite.
    mask: np.ndarray
    name: str | None = None

    def finite_points(self) -> tuple[np.ndarray, np.ndarray]:
        return self.x[self.mask], self.y[self.mask]


@dataclass(frozen=True)
class SeriesSpec:
    data: SeriesData
    type: SeriesType = "line"
    visible: bool = True
