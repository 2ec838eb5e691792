from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from chartcore.errors import ChartConfigError, require_positive
from chartcore.utils.fp import unique_stable
from .groups import group_order as _group_order
from .types import FrequencyEntry

__all__ = [
    "DEFAULT_MAX_CATEGORIES",
    "OTHER_LABEL",
    "rank_categories",
    "frequency_table",
    "cross_tabulate",
]

DEFAULT_MAX_CATEGORIES = 15
OTHER_LABEL = "Other"


def rank_categories(totals: pd.Series, first_seen: Sequence[str]) -> List[str]:
    """Categories by descending total; ties keep first-appearance order."""
    pos = {c: i for i, c in enumerate(first_seen)}
    return sorted(totals.index, key=lambda c: (-int(totals.loc[c]), pos[c]))


def _split_for_cap(ranked: List[str], max_categories: int) -> Tuple[List[str], List[str]]:
    if len(ranked) <= max_categories:
        return ranked, []
    keep = max_categories - 1
    return ranked[:keep], ranked[keep:]


def _pct(count: int, total: int) -> float:
    return (count / total) * 100.0 if total else 0.0


def frequency_table(
    labels: Iterable[str],
    *,
    max_categories: int = DEFAULT_MAX_CATEGORIES,
    other_label: str = OTHER_LABEL,
) -> List[FrequencyEntry]:
    """
    Count categorical labels, most frequent first.

    With more than `max_categories` distinct labels the top `max_categories - 1`
    are kept and the remainder rolled into one `other_label` entry (merged into
    an existing category of that name if it survives the cut).
    Counts always sum to the number of labels given.
    """
    require_positive("max_categories", max_categories)
    s = pd.Series([str(v) for v in labels], dtype=object)
    if s.empty:
        return []
    totals = s.value_counts(sort=False)
    ranked = rank_categories(totals, unique_stable(s.tolist()))
    kept, rolled = _split_for_cap(ranked, max_categories)

    counts: Dict[str, int] = {c: int(totals.loc[c]) for c in kept}
    if rolled:
        rest = int(sum(int(totals.loc[c]) for c in rolled))
        counts[other_label] = counts.get(other_label, 0) + rest

    n = int(s.size)
    return [FrequencyEntry(category=c, count=k, percentage=_pct(k, n)) for c, k in counts.items()]


def cross_tabulate(
    labels: Iterable[str],
    groups: Iterable[str],
    *,
    group_order: Optional[Sequence[str]] = None,
    max_categories: int = DEFAULT_MAX_CATEGORIES,
    other_label: str = OTHER_LABEL,
) -> List[FrequencyEntry]:
    """
    Category x group count table. Every category carries a count for every group
    (0 when absent), columns follow `group_order`, and categories are ranked and
    capped exactly like `frequency_table` using their totals across groups.
    """
    require_positive("max_categories", max_categories)
    cats = [str(v) for v in labels]
    grps = [str(g) for g in groups]
    if len(cats) != len(grps):
        raise ChartConfigError(
            f"labels and group labels must align: {len(cats)} labels vs {len(grps)} groups"
        )
    if not cats:
        return []

    order = _group_order(grps, group_order)
    tab = (
        pd.crosstab(pd.Series(cats, dtype=object), pd.Series(grps, dtype=object))
          .reindex(columns=order, fill_value=0)
    )
    totals = tab.sum(axis=1)
    ranked = rank_categories(totals, unique_stable(cats))
    kept, rolled = _split_for_cap(ranked, max_categories)

    rows: Dict[str, Dict[str, int]] = {
        c: {g: int(tab.at[c, g]) for g in order} for c in kept
    }
    if rolled:
        rest = tab.loc[rolled].sum(axis=0)
        base = rows.get(other_label, {g: 0 for g in order})
        rows[other_label] = {g: base[g] + int(rest[g]) for g in order}

    n = len(cats)
    out: List[FrequencyEntry] = []
    for c, by_group in rows.items():
        k = int(sum(by_group.values()))
        out.append(FrequencyEntry(category=c, count=k, percentage=_pct(k, n), counts_by_group=by_group))
    return out
