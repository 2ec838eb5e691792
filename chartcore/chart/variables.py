from __future__ import annotations
from typing import Iterable, List, Literal

from pydantic import BaseModel, ConfigDict, Field

ChartKind = Literal["histogram", "box", "bar", "scatter"]
VariableKind = Literal["continuous", "categorical", "boolean"]

_KINDS_FOR_CHART = {
    "histogram": ("continuous",),
    "box": ("continuous",),
    "scatter": ("continuous",),
    "bar": ("categorical", "boolean"),
}


class VariableDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    kind: VariableKind
    include_in_analysis: bool = Field(True, alias="includeInAnalysis")


def eligible_variables(descriptors: Iterable[VariableDescriptor], kind: ChartKind) -> List[str]:
    """Names of included variables whose kind suits the chart, in descriptor order."""
    wanted = _KINDS_FOR_CHART[kind]
    return [d.name for d in descriptors if d.include_in_analysis and d.kind in wanted]


def group_candidates(descriptors: Iterable[VariableDescriptor]) -> List[str]:
    return [d.name for d in descriptors if d.include_in_analysis and d.kind in ("categorical", "boolean")]
