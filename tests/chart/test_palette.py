from __future__ import annotations

import pytest

from chartcore.chart.palette import ALL_SERIES, DEFAULT_PALETTE, assign_colors
from chartcore.errors import ChartConfigError


def test_colors_cycle_through_palette():
    groups = [f"g{i}" for i in range(12)]
    colors = assign_colors(groups)
    assert colors["g0"] == DEFAULT_PALETTE[0]
    assert colors["g10"] == DEFAULT_PALETTE[0]
    assert colors["g11"] == DEFAULT_PALETTE[1]
    assert list(colors) == groups

def test_caller_palette_wins():
    assert assign_colors(["a", "b", "c"], ["#000", "#fff"]) == {"a": "#000", "b": "#fff", "c": "#000"}

def test_ungrouped_gets_single_series_colour():
    assert assign_colors([], ["#123456"]) == {ALL_SERIES: "#123456"}

def test_empty_palette_is_rejected():
    with pytest.raises(ChartConfigError):
        assign_colors(["a"], [])
