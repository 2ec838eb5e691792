from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from chartcore.errors import require_positive
from .axis import decimals_for_step
from .groups import group_order as _group_order
from .types import Bin
from .values import align_with_labels, as_float_array

__all__ = [
    "DEFAULT_BINS",
    "DEFAULT_LABEL_DECIMALS",
    "bin_edges",
    "bin_label",
    "histogram_bins",
    "grouped_histogram_bins",
]

DEFAULT_BINS = 15
DEFAULT_LABEL_DECIMALS = 4


def bin_edges(lo: float, hi: float, bins: int) -> np.ndarray:
    """
    `bins + 1` equal-width edges over [lo, hi]. A zero-width range becomes a
    single unit bin [lo, lo + 1).
    """
    bins = require_positive("bins", bins)
    if hi == lo:
        return np.array([lo, lo + 1.0])
    width = (hi - lo) / bins
    edges = lo + np.arange(bins + 1, dtype=float) * width
    edges[-1] = hi  # last bin closes exactly on the max
    return edges


def bin_label(lo: float, hi: float, *, max_decimals: int = DEFAULT_LABEL_DECIMALS) -> str:
    """Compact range label, e.g. '12.0 – 18.5'; precision follows the bin width, capped at `max_decimals`."""
    d = max(1, decimals_for_step(hi - lo, max_decimals=max_decimals))
    return f"{lo:.{d}f} – {hi:.{d}f}"


def _assign(arr: np.ndarray, edges: np.ndarray) -> np.ndarray:
    # bins are [edges[i], edges[i+1]); the max lands on index n and is folded into the closed last bin
    n = edges.size - 1
    idx = np.searchsorted(edges, arr, side="right") - 1
    return np.clip(idx, 0, n - 1)


def _edges_for(arr: np.ndarray, bins: int) -> np.ndarray:
    return bin_edges(float(np.min(arr)), float(np.max(arr)), bins)


def histogram_bins(
    values: Iterable[float],
    *,
    bins: int = DEFAULT_BINS,
    max_decimals: int = DEFAULT_LABEL_DECIMALS,
) -> List[Bin]:
    """
    Equal-width frequency bins over the finite entries of `values`.
    Empty input -> []. Counts always sum to the number of finite values.
    """
    require_positive("bins", bins)
    arr = as_float_array(values)
    if arr.size == 0:
        return []
    edges = _edges_for(arr, bins)
    n = edges.size - 1
    counts = np.bincount(_assign(arr, edges), minlength=n)
    return [
        Bin(
            label=bin_label(float(edges[i]), float(edges[i + 1]), max_decimals=max_decimals),
            lower_bound=float(edges[i]),
            upper_bound=float(edges[i + 1]),
            count=int(counts[i]),
        )
        for i in range(n)
    ]


def grouped_histogram_bins(
    values: Iterable[float],
    groups: Iterable[str],
    *,
    bins: int = DEFAULT_BINS,
    group_order: Optional[Sequence[str]] = None,
    max_decimals: int = DEFAULT_LABEL_DECIMALS,
) -> List[Bin]:
    """
    Histogram with one shared set of edges (pooled min/max across groups) and
    per-group counts on every bin, zeros included. No bin is dropped, so each
    series sees the same x-axis.
    """
    require_positive("bins", bins)
    arr, labels = align_with_labels(values, groups)
    if arr.size == 0:
        return []
    edges = _edges_for(arr, bins)
    n = edges.size - 1
    idx = _assign(arr, edges)
    order = _group_order(list(labels), group_order)
    per_group = {g: np.bincount(idx[labels == g], minlength=n) for g in order}
    totals = np.bincount(idx, minlength=n)
    return [
        Bin(
            label=bin_label(float(edges[i]), float(edges[i + 1]), max_decimals=max_decimals),
            lower_bound=float(edges[i]),
            upper_bound=float(edges[i + 1]),
            count=int(totals[i]),
            per_group_counts={g: int(c[i]) for g, c in per_group.items()},
        )
        for i in range(n)
    ]
