from __future__ import annotations

from functools import lru_cache
import math

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from chartscale.errors import ScaleConfigError


@lru_cache(maxsize=32)
def resolve_locale(identifier: str) -> Locale:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise ScaleConfigError(f"unsupported locale: {identifier!r}") from exc


def format_number(value: float, locale: str, pattern: str | None = None) -> str:
    """Format ``value`` for display using CLDR rules for ``locale``.

    Without a pattern the locale's default decimal format is used, which
    groups thousands and keeps at most three fraction digits.
    """
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    return format_decimal(value, format=pattern, locale=resolve_locale(locale))
