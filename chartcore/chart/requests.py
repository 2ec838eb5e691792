from __future__ import annotations
from dataclasses import dataclass, field, is_dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from chartcore.config_model.model import RootCfg
from chartcore.errors import ChartConfigError
from chartcore.summaries import (
    AxisDomain,
    axis_domain,
    categorical_values,
    cross_tabulate,
    five_number_summary,
    frequency_table,
    grouped_five_number_summary,
    grouped_histogram_bins,
    histogram_bins,
    numeric_values,
    numeric_with_labels,
    pooled_summary_values,
    resolve_groups,
    scatter_points,
    to_label,
)
from chartcore.summaries.values import column_series
from chartcore.utils.log import logger_from_cfg
from .palette import assign_colors
from .variables import ChartKind

__all__ = ["ChartRequest", "ChartData", "build_chart_data"]

Row = Mapping[str, Any]


class ChartRequest(BaseModel):
    """What to summarise: chart kind, target column(s), optional grouping and cap overrides."""
    model_config = ConfigDict(frozen=True)

    kind: ChartKind
    column: str
    y_column: Optional[str] = None
    group_column: Optional[str] = None
    bins: Optional[int] = None
    max_categories: Optional[int] = None


@dataclass(frozen=True)
class ChartData:
    kind: str
    columns: Tuple[str, ...]
    group_column: Optional[str]
    groups: Tuple[str, ...]
    colors: Dict[str, str]
    series: Any
    x_axis: Optional[AxisDomain] = None
    y_axis: Optional[AxisDomain] = None
    empty: bool = False
    meta: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "columns": list(self.columns),
            "group_column": self.group_column,
            "groups": list(self.groups),
            "colors": dict(self.colors),
            "series": _plain(self.series),
            "x_axis": _plain(self.x_axis),
            "y_axis": _plain(self.y_axis),
            "empty": self.empty,
            "meta": dict(self.meta),
        }


def _plain(obj: Any) -> Any:
    if obj is None:
        return None
    if is_dataclass(obj) and hasattr(obj, "as_dict"):
        return obj.as_dict()
    if isinstance(obj, Mapping):
        return {k: _plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(v) for v in obj]
    return obj


# ---- per-kind builders ------------------------------------------------------

def _axis(values: Sequence[float], cfg: RootCfg, *, non_negative: bool = False) -> AxisDomain:
    return axis_domain(values, non_negative=non_negative, **cfg.axis.model_dump())

def _histogram(rows: Sequence[Row], req: ChartRequest, cfg: RootCfg, groups: List[str]):
    bins = req.bins if req.bins is not None else cfg.summaries.bins
    if req.group_column:
        vals, labels = numeric_with_labels(
            rows, req.column, req.group_column, unknown_label=cfg.summaries.unknown_label
        )
        series = grouped_histogram_bins(
            vals, labels, bins=bins, group_order=groups, max_decimals=cfg.axis.max_decimals
        )
        counts = [c for b in series for c in (b.per_group_counts or {}).values()]
    else:
        vals = numeric_values(rows, req.column)
        series = histogram_bins(vals, bins=bins, max_decimals=cfg.axis.max_decimals)
        counts = [b.count for b in series]
    return series, None, _axis(counts, cfg, non_negative=True), int(vals.size)

def _box(rows: Sequence[Row], req: ChartRequest, cfg: RootCfg, groups: List[str]):
    k = cfg.summaries.iqr_multiplier
    if req.group_column:
        vals, labels = numeric_with_labels(
            rows, req.column, req.group_column, unknown_label=cfg.summaries.unknown_label
        )
        series = grouped_five_number_summary(vals, labels, group_order=groups, iqr_multiplier=k)
        pooled = pooled_summary_values(series)
    else:
        vals = numeric_values(rows, req.column)
        series = five_number_summary(vals, iqr_multiplier=k)
        pooled = series.values() if series is not None else []
    return series, None, _axis(pooled, cfg), int(vals.size)

def _bar(rows: Sequence[Row], req: ChartRequest, cfg: RootCfg, groups: List[str]):
    sc = cfg.summaries
    cap = req.max_categories if req.max_categories is not None else sc.max_categories
    cats = categorical_values(rows, req.column, missing=sc.categorical_missing, unknown_label=sc.unknown_label)
    if req.group_column:
        grp = column_series(rows, req.group_column).loc[cats.index].map(
            lambda v: to_label(v, sc.unknown_label)
        )
        series = cross_tabulate(
            cats, grp, group_order=groups, max_categories=cap, other_label=sc.other_label
        )
        counts = [c for e in series for c in (e.counts_by_group or {}).values()]
    else:
        series = frequency_table(cats, max_categories=cap, other_label=sc.other_label)
        counts = [e.count for e in series]
    return series, None, _axis(counts, cfg, non_negative=True), int(cats.size)

def _scatter(rows: Sequence[Row], req: ChartRequest, cfg: RootCfg, groups: List[str]):
    if not req.y_column:
        raise ChartConfigError("scatter requests need a y_column")
    pts = scatter_points(
        rows, req.column, req.y_column, req.group_column, unknown_label=cfg.summaries.unknown_label
    )
    x_axis = _axis([p.x for p in pts], cfg, non_negative=True)
    y_axis = _axis([p.y for p in pts], cfg, non_negative=True)
    return pts, x_axis, y_axis, len(pts)

_BUILDERS = {
    "histogram": _histogram,
    "box": _box,
    "bar": _bar,
    "scatter": _scatter,
}


def build_chart_data(
    rows: Sequence[Row],
    request: ChartRequest,
    cfg: Optional[RootCfg] = None,
    palette: Optional[Sequence[str]] = None,
) -> ChartData:
    """
    Run the engine for `request.kind` over `rows` and wrap the result with its
    group order, colours and axis domains. Sparse or missing data yields an
    `empty` result, never an exception.
    """
    cfg = cfg or RootCfg()
    log = logger_from_cfg(cfg.logging)

    groups = (
        resolve_groups(rows, request.group_column, unknown_label=cfg.summaries.unknown_label)
        if request.group_column else []
    )
    series, x_axis, y_axis, n_valid = _BUILDERS[request.kind](rows, request, cfg, groups)

    empty = not series
    columns = (request.column,) + ((request.y_column,) if request.kind == "scatter" else ())
    log.debug(
        "chart data built",
        extra={"kind": request.kind, "columns": list(columns), "group_column": request.group_column,
               "rows": len(rows), "valid": n_valid},
    )
    if empty:
        log.info("no valid data for chart", extra={"kind": request.kind, "columns": list(columns)})

    return ChartData(
        kind=request.kind,
        columns=columns,
        group_column=request.group_column,
        groups=tuple(groups),
        colors=assign_colors(groups, palette if palette is not None else cfg.palette.colors),
        series=series,
        x_axis=x_axis,
        y_axis=y_axis,
        empty=empty,
        meta={"rows": len(rows), "valid": n_valid},
    )
