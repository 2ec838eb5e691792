from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .types import AxisDomain
from .values import as_float_array

__all__ = ["decimals_for_step", "decimal_places", "axis_domain", "format_axis_label"]


def decimals_for_step(step: float, *, max_decimals: int = 4, default_decimals: int = 2) -> int:
    """
    Fewest fractional digits that keep values `step` apart distinguishable,
    clamped to [0, max_decimals]. Non-positive steps get `default_decimals`.
    """
    if not math.isfinite(step) or step <= 0.0:
        return int(default_decimals)
    # epsilon keeps exact powers of ten (0.1, 0.01) from rounding up a digit
    d = math.ceil(-math.log10(step) - 1e-9)
    return int(min(max(d, 0), max_decimals))


def decimal_places(
    lo: float,
    hi: float,
    *,
    tick_count: int = 5,
    max_decimals: int = 4,
    default_decimals: int = 2,
) -> int:
    """Label precision for a [lo, hi] axis split into roughly `tick_count` steps."""
    span = float(hi) - float(lo)
    if not math.isfinite(span) or span <= 0.0:
        return int(default_decimals)
    return decimals_for_step(
        span / max(int(tick_count), 1),
        max_decimals=max_decimals,
        default_decimals=default_decimals,
    )


def axis_domain(
    values: Iterable[float],
    *,
    non_negative: bool = False,
    padding_ratio: float = 0.1,
    zero_span_padding: float = 0.5,
    tick_count: int = 5,
    max_decimals: int = 4,
    default_decimals: int = 2,
) -> AxisDomain:
    """
    Padded display domain for everything plotted on one axis.

    - Empty input -> [0, 1].
    - Padding is `padding_ratio` of the range, or `zero_span_padding` when all values coincide.
    - non_negative=True keeps the lower bound at or above 0, but only for data that never
      goes negative. Negative data keeps its padded minimum instead of being cut off at 0,
      even for scatter axes.
    """
    arr = as_float_array(values)
    if arr.size == 0:
        lo, hi = 0.0, 1.0
    else:
        vmin, vmax = float(np.min(arr)), float(np.max(arr))
        rng = vmax - vmin
        pad = zero_span_padding if rng == 0 else rng * padding_ratio
        lo, hi = vmin - pad, vmax + pad
        if non_negative and vmin >= 0.0:
            lo = max(lo, 0.0)
    dp = decimal_places(
        lo, hi,
        tick_count=tick_count,
        max_decimals=max_decimals,
        default_decimals=default_decimals,
    )
    return AxisDomain(min=lo, max=hi, decimal_places=dp)


def format_axis_label(value: float, decimals: int) -> str:
    if not math.isfinite(value):
        return "N/A"
    return f"{value:.{max(int(decimals), 0)}f}"
