from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Bin:
    """One equal-width histogram bin, half-open except for the last bin."""
    label: str
    lower_bound: float
    upper_bound: float
    count: int
    per_group_counts: Optional[Dict[str, int]] = None

    @property
    def center(self) -> float:
        return (self.lower_bound + self.upper_bound) / 2.0

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["center"] = self.center
        if self.per_group_counts is None:
            out.pop("per_group_counts")
        return out


@dataclass(frozen=True)
class FiveNumberSummary:
    """
    Box-plot statistics. `min`/`max` are whisker ends (the extreme non-outlier
    observations), not the dataset extremes.
    """
    min: float
    q1: float
    median: float
    q3: float
    max: float
    outliers: Tuple[float, ...] = ()
    count: int = 0
    lower_fence: float = float("nan")
    upper_fence: float = float("nan")

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def values(self) -> List[float]:
        """All plotted values: the five numbers followed by the outliers."""
        return [self.min, self.q1, self.median, self.q3, self.max, *self.outliers]

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["outliers"] = list(self.outliers)
        return out


@dataclass(frozen=True)
class FrequencyEntry:
    category: str
    count: int
    percentage: float = 0.0
    counts_by_group: Optional[Dict[str, int]] = None

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        if self.counts_by_group is None:
            out.pop("counts_by_group")
        return out


@dataclass(frozen=True)
class ScatterPoint:
    x: float
    y: float
    group: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"x": self.x, "y": self.y}
        if self.group is not None:
            out["group"] = self.group
        return out


@dataclass(frozen=True)
class AxisDomain:
    min: float
    max: float
    decimal_places: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ExtractionReport:
    """Row accounting for one column: how many entries survived coercion."""
    column: str
    total: int
    valid: int
    missing: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "missing", self.total - self.valid)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
