from __future__ import annotations

import pytest

from chartcore.summaries.axis import axis_domain, decimal_places, decimals_for_step, format_axis_label


def test_scenario_identical_values_pad_by_half():
    d = axis_domain([7, 7, 7])
    assert (d.min, d.max) == (6.5, 7.5)
    assert d.decimal_places == 1

def test_empty_input_defaults_to_unit_domain():
    d = axis_domain([])
    assert (d.min, d.max) == (0.0, 1.0)

def test_ten_percent_padding():
    d = axis_domain([0, 50, 100])
    assert d.min == pytest.approx(-10.0)
    assert d.max == pytest.approx(110.0)
    assert d.decimal_places == 0

def test_non_negative_clamps_lower_bound():
    d = axis_domain([1, 100], non_negative=True)
    assert d.min == 0.0
    assert d.max == pytest.approx(109.9)

def test_non_negative_leaves_negative_data_visible():
    d = axis_domain([-5, 5], non_negative=True)
    assert d.min == pytest.approx(-6.0)

def test_small_ranges_get_more_decimals():
    assert axis_domain([0.10, 0.12]).decimal_places == 3
    assert axis_domain([0.0, 1.0]).decimal_places == 1
    assert axis_domain([0.0, 1000.0]).decimal_places == 0

def test_decimals_are_capped():
    assert axis_domain([1.0, 1.0 + 1e-9]).decimal_places == 4
    assert decimal_places(0.0, 1e-9, max_decimals=6) == 6

def test_decimal_places_degenerate_span_default():
    assert decimal_places(3.0, 3.0) == 2
    assert decimal_places(3.0, 3.0, default_decimals=1) == 1

def test_decimals_for_step_exact_powers_of_ten():
    assert decimals_for_step(1.0) == 0
    assert decimals_for_step(0.1) == 1
    assert decimals_for_step(0.01) == 2
    assert decimals_for_step(0.2) == 1

def test_custom_padding_settings():
    d = axis_domain([0, 10], padding_ratio=0.0)
    assert (d.min, d.max) == (0.0, 10.0)
    d = axis_domain([4, 4], zero_span_padding=2.0)
    assert (d.min, d.max) == (2.0, 6.0)

def test_non_finite_values_are_ignored():
    d = axis_domain([float("nan"), 7.0, float("inf")])
    assert (d.min, d.max) == (6.5, 7.5)

def test_format_axis_label():
    assert format_axis_label(3.14159, 2) == "3.14"
    assert format_axis_label(12.0, 0) == "12"
    assert format_axis_label(float("nan"), 2) == "N/A"

def test_axis_as_dict():
    assert axis_domain([7]).as_dict() == {"min": 6.5, "max": 7.5, "decimal_places": 1}
