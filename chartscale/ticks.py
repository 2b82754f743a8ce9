from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    value: float
    # Populated by logarithmic tick generation only.
    major: bool | None = None
    significand: int | None = None
