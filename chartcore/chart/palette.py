from __future__ import annotations
from typing import Dict, Optional, Sequence

from chartcore.config_model.model import DEFAULT_PALETTE
from chartcore.errors import ChartConfigError

__all__ = ["DEFAULT_PALETTE", "ALL_SERIES", "assign_colors"]

# key used for the single series of an ungrouped chart
ALL_SERIES = "__all__"


def assign_colors(groups: Sequence[str], palette: Optional[Sequence[str]] = None) -> Dict[str, str]:
    """Map each group to palette[i % len(palette)]; an ungrouped chart gets ALL_SERIES."""
    colors = list(DEFAULT_PALETTE if palette is None else palette)
    if not colors:
        raise ChartConfigError("palette must hold at least one colour")
    if not groups:
        return {ALL_SERIES: colors[0]}
    return {g: colors[i % len(colors)] for i, g in enumerate(groups)}
