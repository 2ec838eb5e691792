from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .groups import group_order as _group_order
from .types import ScatterPoint
from .values import UNKNOWN_LABEL, to_label, to_number

__all__ = ["scatter_points", "points_by_group"]


def scatter_points(
    rows: Sequence[Mapping[str, Any]],
    x: str,
    y: str,
    group: Optional[str] = None,
    *,
    unknown_label: str = UNKNOWN_LABEL,
) -> List[ScatterPoint]:
    """
    Row-wise (x, y[, group]) projection. A row yields a point only when both
    coordinates are finite numbers; row order is kept, nothing is sorted or merged.
    """
    out: List[ScatterPoint] = []
    for row in rows:
        xv = to_number(row.get(x))
        yv = to_number(row.get(y))
        if not (math.isfinite(xv) and math.isfinite(yv)):
            continue
        label = to_label(row.get(group), unknown_label) if group else None
        out.append(ScatterPoint(x=xv, y=yv, group=label))
    return out


def points_by_group(
    points: Sequence[ScatterPoint],
    groups: Optional[Sequence[str]] = None,
) -> Dict[str, List[ScatterPoint]]:
    """One series per group, keyed in `groups` order (groups without points map to [])."""
    order = _group_order([p.group for p in points if p.group is not None], groups)
    series: Dict[str, List[ScatterPoint]] = {g: [] for g in order}
    for p in points:
        if p.group is not None:
            series[p.group].append(p)
    return series
