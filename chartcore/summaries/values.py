from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Literal, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd

from chartcore.errors import ChartConfigError
from chartcore.utils.fp import try_or
from .types import ExtractionReport

__all__ = [
    "UNKNOWN_LABEL",
    "to_number",
    "to_label",
    "column_series",
    "numeric_values",
    "categorical_values",
    "numeric_with_labels",
    "extraction_report",
    "as_float_array",
    "align_with_labels",
]

UNKNOWN_LABEL = "Unknown"

Row = Mapping[str, Any]
MissingPolicy = Literal["label", "drop"]

_parse_float = try_or(math.nan)(float)


# ---- scalar coercion --------------------------------------------------------

def _is_missing(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, str):
        return not v.strip()
    return bool(pd.api.types.is_scalar(v) and pd.isna(v))

def to_number(v: Any) -> float:
    """
    Coerce a cell to float; NaN when missing or unparseable.
    Booleans count as 1.0/0.0, strings are stripped before parsing.
    """
    if _is_missing(v):
        return math.nan
    if isinstance(v, (bool, np.bool_)):
        return 1.0 if v else 0.0
    if isinstance(v, numbers.Real):
        # ints beyond float range overflow; treat them as invalid
        return _parse_float(v)
    if isinstance(v, str):
        return _parse_float(v.strip())
    return _parse_float(v)

def to_label(v: Any, unknown_label: str = UNKNOWN_LABEL) -> str:
    """
    String-coerce a cell for categorical use; missing/empty becomes `unknown_label`.
    Booleans keep Python spelling ("True"/"False"), so a boolean column and its
    string form share labels only when written that way.
    """
    if _is_missing(v):
        return unknown_label
    if isinstance(v, str):
        return v
    if isinstance(v, float) and math.isfinite(v) and v.is_integer():
        # 3.0 -> "3"; pandas turns int columns with gaps into floats
        return str(int(v))
    return str(v)


# ---- column extraction ------------------------------------------------------

def column_series(rows: Sequence[Row], column: str) -> pd.Series:
    """
    Raw cells of `column`, one per row (None where the row lacks the column).
    Indexed by row position so downstream filters stay aligned.
    """
    return pd.Series([row.get(column) for row in rows], dtype=object, name=column)

def _finite_mask(s: pd.Series) -> pd.Series:
    return pd.Series(np.isfinite(s.to_numpy(dtype=float)), index=s.index)

def numeric_values(rows: Sequence[Row], column: str) -> pd.Series:
    """
    Valid finite numbers of `column` in row order (float dtype, row-position index).
    An absent column yields an empty Series, never an error.
    """
    nums = column_series(rows, column).map(to_number).astype(float)
    return nums[_finite_mask(nums)]

def categorical_values(
    rows: Sequence[Row],
    column: str,
    *,
    missing: MissingPolicy = "label",
    unknown_label: str = UNKNOWN_LABEL,
) -> pd.Series:
    """
    String labels of `column` in row order. With missing="label" empty cells
    become `unknown_label`; with missing="drop" they are removed.
    An absent column yields an empty Series.
    """
    if not any(column in row for row in rows):
        return pd.Series([], dtype=object, name=column)
    raw = column_series(rows, column)
    if missing == "drop":
        raw = raw[~raw.map(_is_missing).astype(bool)]
    elif missing != "label":
        raise ValueError(f"Unknown missing policy '{missing}'. Use 'label' or 'drop'.")
    return raw.map(lambda v: to_label(v, unknown_label)).astype(object)

def numeric_with_labels(
    rows: Sequence[Row],
    column: str,
    group: str,
    *,
    unknown_label: str = UNKNOWN_LABEL,
) -> Tuple[pd.Series, pd.Series]:
    """
    Valid numbers of `column` plus the row-aligned group label of each.
    Rows with an invalid value are dropped from both; missing groups become `unknown_label`.
    """
    vals = numeric_values(rows, column)
    labels = column_series(rows, group).loc[vals.index].map(lambda v: to_label(v, unknown_label))
    return vals, labels.astype(object)

def extraction_report(
    rows: Sequence[Row],
    column: str,
    *,
    mode: Literal["numeric", "categorical"] = "numeric",
) -> ExtractionReport:
    """Count total rows and entries that survive coercion (categorical: non-empty cells)."""
    total = len(rows)
    if mode == "numeric":
        valid = int(numeric_values(rows, column).size)
    else:
        valid = int(sum(not _is_missing(row.get(column)) for row in rows))
    return ExtractionReport(column=column, total=total, valid=valid)


def as_float_array(values: Iterable[float]) -> np.ndarray:
    """Engine-side view of a value sequence with non-finite entries removed."""
    arr = np.asarray(list(values), dtype=float)
    return arr[np.isfinite(arr)]

def align_with_labels(values: Iterable[float], groups: Iterable[Any]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Pair values with group labels position by position and drop non-finite values
    from both. Mismatched lengths are a caller bug.
    """
    vals = np.asarray(list(values), dtype=float)
    labels = np.asarray([str(g) for g in groups], dtype=object)
    if vals.size != labels.size:
        raise ChartConfigError(
            f"values and group labels must align: {vals.size} values vs {labels.size} labels"
        )
    keep = np.isfinite(vals)
    return vals[keep], labels[keep]
