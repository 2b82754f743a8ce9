from __future__ import annotations

from chartscale.errors import ScaleConfigError
from chartscale.layout import AxisBox
from chartscale.linear import LINEAR
from chartscale.logarithmic import LOGARITHMIC
from chartscale.options import ScaleOptions
from chartscale.scale import Scale, ScaleKind


SCALE_KINDS: dict[str, ScaleKind] = {
    LINEAR.name: LINEAR,
    LOGARITHMIC.name: LOGARITHMIC,
}


def scale_kind(scale_type: str) -> ScaleKind:
    try:
        return SCALE_KINDS[scale_type]
    except KeyError:
        raise ScaleConfigError(f"unsupported scale type: {scale_type!r}") from None


def create_scale(scale_type: str, options: ScaleOptions, box: AxisBox) -> Scale:
    return Scale(scale_kind(scale_type), options, box)
