from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from chartcore.utils.fp import unique_stable
from .values import UNKNOWN_LABEL, to_label

__all__ = ["resolve_groups", "group_order"]


def resolve_groups(
    rows: Sequence[Mapping[str, Any]],
    group: str,
    *,
    unknown_label: str = UNKNOWN_LABEL,
) -> List[str]:
    """
    Distinct string-coerced values of `group`, in order of first appearance.
    Missing values collapse into `unknown_label`, which is a group like any other.
    """
    return unique_stable(to_label(row.get(group), unknown_label) for row in rows)


def group_order(labels: Sequence[str], preferred: Sequence[str] | None = None) -> List[str]:
    """
    Order for per-group output: `preferred` (usually from resolve_groups) first,
    then any label it does not cover, by first appearance.
    """
    seen = list(preferred or [])
    return unique_stable([*seen, *labels])
