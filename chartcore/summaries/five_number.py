from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from chartcore.errors import ChartConfigError
from .groups import group_order as _group_order
from .types import FiveNumberSummary
from .values import align_with_labels, as_float_array

__all__ = [
    "DEFAULT_IQR_MULTIPLIER",
    "median_sorted",
    "quartiles",
    "five_number_summary",
    "grouped_five_number_summary",
    "pooled_summary_values",
]

DEFAULT_IQR_MULTIPLIER = 1.5


def median_sorted(arr: np.ndarray) -> float:
    """Middle element of an ascending array; mean of the central pair when even."""
    n = arr.size
    mid = n // 2
    if n % 2:
        return float(arr[mid])
    return float((arr[mid - 1] + arr[mid]) / 2.0)


def quartiles(sorted_arr: np.ndarray) -> Tuple[float, float, float]:
    """
    (q1, median, q3) by the median-of-halves method. For odd counts both halves
    include the median element; for even counts the array splits cleanly.
    """
    n = sorted_arr.size
    if n == 0:
        raise ValueError("quartiles of an empty array are undefined")
    half = (n + 1) // 2
    lower = sorted_arr[:half]
    upper = sorted_arr[n - half:]
    return median_sorted(lower), median_sorted(sorted_arr), median_sorted(upper)


def five_number_summary(
    values: Iterable[float],
    *,
    iqr_multiplier: float = DEFAULT_IQR_MULTIPLIER,
) -> Optional[FiveNumberSummary]:
    """
    Tukey box-plot statistics for the finite entries of `values`, or None when
    there are none.

    Outliers (strictly beyond q1 - k*IQR / q3 + k*IQR) keep their input order.
    min/max are the whisker ends: the extreme non-outlier values, falling back
    to the data extremes if everything is an outlier.
    """
    # below 1.0 the whisker ends could fall inside the box
    if iqr_multiplier < 1.0:
        raise ChartConfigError(f"iqr_multiplier must be >= 1, got {iqr_multiplier!r}")
    arr = as_float_array(values)
    if arr.size == 0:
        return None

    srt = np.sort(arr)
    q1, med, q3 = quartiles(srt)
    iqr = q3 - q1
    lo_fence = q1 - iqr_multiplier * iqr
    hi_fence = q3 + iqr_multiplier * iqr

    is_out = (arr < lo_fence) | (arr > hi_fence)
    inliers = arr[~is_out]
    if inliers.size:
        w_min, w_max = float(inliers.min()), float(inliers.max())
    else:
        w_min, w_max = float(srt[0]), float(srt[-1])

    return FiveNumberSummary(
        min=w_min,
        q1=q1,
        median=med,
        q3=q3,
        max=w_max,
        outliers=tuple(float(v) for v in arr[is_out]),
        count=int(arr.size),
        lower_fence=float(lo_fence),
        upper_fence=float(hi_fence),
    )


def grouped_five_number_summary(
    values: Iterable[float],
    groups: Iterable[str],
    *,
    group_order: Optional[Sequence[str]] = None,
    iqr_multiplier: float = DEFAULT_IQR_MULTIPLIER,
) -> Dict[str, FiveNumberSummary]:
    """
    One independent summary per group, keyed in group order. Groups without a
    single valid value are left out rather than reported as empty summaries.
    """
    arr, labels = align_with_labels(values, groups)
    out: Dict[str, FiveNumberSummary] = {}
    if arr.size == 0:
        return out
    for g in _group_order(list(labels), group_order):
        s = five_number_summary(arr[labels == g], iqr_multiplier=iqr_multiplier)
        if s is not None:
            out[g] = s
    return out


def pooled_summary_values(summaries: Mapping[str, FiveNumberSummary] | Iterable[FiveNumberSummary]) -> List[float]:
    """Five numbers plus outliers across every summary, for one shared axis domain."""
    items = summaries.values() if isinstance(summaries, Mapping) else summaries
    pooled: List[float] = []
    for s in items:
        if s is not None:
            pooled.extend(s.values())
    return pooled
