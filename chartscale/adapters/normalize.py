from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from chartscale.errors import PlotDataError
from chartscale.series import SeriesData


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_xy(y: Any, *, x: Any = None, name: str | None = None) -> SeriesData:
    """Coerce paired coordinates into float64 arrays plus a finite-point mask.

    Non-finite points are kept in the arrays and excluded through the mask so
    index positions survive; the mask is what limits and projection use.
    """
    if y is None:
        raise PlotDataError("y input is required")
    y_arr = _coerce_1d_numeric(y, label="y")
    if y_arr.size == 0:
        raise PlotDataError("empty series")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(x, label="x")

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    return SeriesData(x=x_arr, y=y_arr, mask=mask, name=name)


def normalize_points(points: Sequence[Any], *, name: str | None = None) -> SeriesData:
    """Accept ``[{"x": .., "y": ..}, ...]`` or ``[(x, y), ...]`` point lists."""
    if isinstance(points, (str, bytes, bytearray)) or not isinstance(points, Sequence):
        raise PlotDataError(f"unsupported points input type: {type(points)!r}")
    xs: list[Any] = []
    ys: list[Any] = []
    for i, point in enumerate(points):
        if isinstance(point, Mapping):
            if "x" not in point or "y" not in point:
                raise PlotDataError(f"point {i} must have `x` and `y` keys")
            xs.append(point["x"])
            ys.append(point["y"])
        elif isinstance(point, Sequence) and not isinstance(point, (str, bytes, bytearray)) and len(point) == 2:
            xs.append(point[0])
            ys.append(point[1])
        else:
            raise PlotDataError(f"point {i} must be a mapping or an (x, y) pair: {point!r}")
    return normalize_xy(ys, x=xs, name=name)


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
