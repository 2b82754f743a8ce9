from __future__ import annotations


class ScaleConfigError(ValueError):
    """Raised when a scale, axis or chart configuration cannot be resolved."""


class PlotDataError(ValueError):
    """Raised when series input cannot be normalized into numeric arrays."""
