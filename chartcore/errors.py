from __future__ import annotations

import numbers


class ChartConfigError(ValueError):
    """Raised for programming misuse: non-positive caps, empty palettes, incomplete requests."""


def require_positive(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ChartConfigError(f"{name} must be an integer >= 1, got {value!r}")
    return int(value)
