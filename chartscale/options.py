from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Callable, Literal, Mapping

from chartscale.errors import ScaleConfigError
from chartscale.format import resolve_locale


Orientation = Literal["horizontal", "vertical"]
BoundsPolicy = Literal["ticks", "data"]

DEFAULT_LOCALE = "en-US"
DEFAULT_LABEL_SLOT_PX = 30.0


@dataclass(frozen=True)
class TickOptions:
    step: float | None = None
    count: int | None = None
    precision: int | None = None
    max_ticks_limit: int | None = None
    include_bounds: bool = True
    min_rotation: float = 0.0
    format: str | None = None


@dataclass(frozen=True)
class ScaleOptions:
    orientation: Orientation
    data_min: float
    data_max: float
    user_min: float | None = None
    user_max: float | None = None
    bounds: BoundsPolicy = "data"
    ticks: TickOptions = field(default_factory=TickOptions)
    begin_at_zero: bool = False
    locale: str = DEFAULT_LOCALE
    formatter: Callable[[float], str] | None = None
    label_slot_px: float = DEFAULT_LABEL_SLOT_PX


def resolve_tick_options(ticks: TickOptions | Mapping[str, Any] | None = None) -> TickOptions:
    if ticks is None:
        return TickOptions()
    if isinstance(ticks, TickOptions):
        values = ticks.__dict__.copy()
    else:
        unknown = set(ticks) - set(TickOptions.__dataclass_fields__)
        if unknown:
            raise ScaleConfigError(f"unknown tick options: {', '.join(sorted(unknown))}")
        values = dict(ticks)

    step = _optional_float(values.get("step"), "ticks.step")
    if step is not None and step <= 0:
        raise ScaleConfigError("ticks.step must be > 0")
    count = _optional_int(values.get("count"), "ticks.count")
    if count is not None and count < 2:
        raise ScaleConfigError("ticks.count must be >= 2")
    precision = _optional_int(values.get("precision"), "ticks.precision")
    if precision is not None and precision < 0:
        raise ScaleConfigError("ticks.precision must be >= 0")
    max_ticks_limit = _optional_int(values.get("max_ticks_limit"), "ticks.max_ticks_limit")
    if max_ticks_limit is not None and max_ticks_limit < 2:
        raise ScaleConfigError("ticks.max_ticks_limit must be >= 2")
    fmt = values.get("format")
    if fmt is not None and not isinstance(fmt, str):
        raise ScaleConfigError("ticks.format must be a number pattern string")

    return TickOptions(
        step=step,
        count=count,
        precision=precision,
        max_ticks_limit=max_ticks_limit,
        include_bounds=values.get("include_bounds") is not False,
        min_rotation=float(values.get("min_rotation") or 0.0),
        format=fmt,
    )


def resolve_scale_options(
    *,
    orientation: str,
    data_min: float,
    data_max: float,
    user_min: float | None = None,
    user_max: float | None = None,
    bounds: str | None = None,
    ticks: TickOptions | Mapping[str, Any] | None = None,
    begin_at_zero: bool = False,
    locale: str | None = None,
    formatter: Callable[[float], str] | None = None,
    label_slot_px: float | None = None,
) -> ScaleOptions:
    """Merge caller values over the defaults into one immutable options record."""
    if orientation not in ("horizontal", "vertical"):
        raise ScaleConfigError(f"unsupported orientation: {orientation!r}")
    policy = bounds or "data"
    if policy not in ("ticks", "data"):
        raise ScaleConfigError(f"unsupported bounds policy: {bounds!r}")
    if formatter is not None and not callable(formatter):
        raise ScaleConfigError("formatter must be callable")
    slot = DEFAULT_LABEL_SLOT_PX if label_slot_px is None else float(label_slot_px)
    if not math.isfinite(slot) or slot <= 0:
        raise ScaleConfigError("label_slot_px must be > 0")
    resolved_locale = locale or DEFAULT_LOCALE
    resolve_locale(resolved_locale)

    return ScaleOptions(
        orientation=orientation,  # type: ignore[arg-type]
        data_min=float(data_min),
        data_max=float(data_max),
        user_min=_optional_float(user_min, "user_min"),
        user_max=_optional_float(user_max, "user_max"),
        bounds=policy,  # type: ignore[arg-type]
        ticks=resolve_tick_options(ticks),
        begin_at_zero=bool(begin_at_zero),
        locale=resolved_locale,
        formatter=formatter,
        label_slot_px=slot,
    )


def _optional_float(value: Any, label: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ScaleConfigError(f"{label} must be a number, got {value!r}") from exc


def _optional_int(value: Any, label: str) -> int | None:
    if value is None:
        return None
    number = _optional_float(value, label)
    if isinstance(value, bool) or number is None or not number.is_integer():
        raise ScaleConfigError(f"{label} must be an integer, got {value!r}")
    return int(number)
