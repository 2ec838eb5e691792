from __future__ import annotations

from chartcore.summaries.pairs import scatter_points, points_by_group
from chartcore.summaries.types import ScatterPoint


def test_scenario_null_y_row_is_excluded():
    rows = [
        {"x": 1, "y": 2},
        {"x": 2, "y": None},
        {"x": 3, "y": 6},
        {"x": 4, "y": 8},
    ]
    pts = scatter_points(rows, "x", "y")
    assert len(pts) == len(rows) - 1
    assert [(p.x, p.y) for p in pts] == [(1.0, 2.0), (3.0, 6.0), (4.0, 8.0)]
    assert all(p.group is None for p in pts)

def test_pairs_validity_filter_and_row_order(people_rows):
    pts = scatter_points(people_rows, "height", "weight")
    # rows 2 (weight None), 3 (height ""), 7 (height NaN) drop out
    assert [p.x for p in pts] == [171.5, 180.0, 175.0, 168.4, 190.3]
    assert len(pts) <= len(people_rows)

def test_pairs_group_labels_default_to_unknown(people_rows):
    pts = scatter_points(people_rows, "age", "weight", "sex")
    assert [(p.x, p.group) for p in pts] == [(34.0, "F"), (41.0, "M"), (29.0, "Unknown"), (52.0, "F"), (47.0, "X")]

def test_pairs_no_dedup_or_sorting():
    rows = [{"x": 5, "y": 5}, {"x": 1, "y": 1}, {"x": 5, "y": 5}]
    pts = scatter_points(rows, "x", "y")
    assert [(p.x, p.y) for p in pts] == [(5.0, 5.0), (1.0, 1.0), (5.0, 5.0)]

def test_pairs_unknown_column_is_empty(people_rows):
    assert scatter_points(people_rows, "height", "nope") == []

def test_points_by_group_follows_given_order():
    pts = [ScatterPoint(1, 1, "b"), ScatterPoint(2, 2, "a"), ScatterPoint(3, 3, "b")]
    series = points_by_group(pts, ["a", "b", "c"])
    assert list(series) == ["a", "b", "c"]
    assert [p.x for p in series["b"]] == [1, 3]
    assert series["c"] == []

def test_point_as_dict():
    assert ScatterPoint(1.0, 2.0).as_dict() == {"x": 1.0, "y": 2.0}
    assert ScatterPoint(1.0, 2.0, "g").as_dict() == {"x": 1.0, "y": 2.0, "group": "g"}

def test_pairs_drop_ints_too_large_for_float():
    rows = [{"x": 1, "y": 1}, {"x": 10**400, "y": 2}, {"x": 3, "y": 10**400}, {"x": 4, "y": 4}]
    pts = scatter_points(rows, "x", "y")
    assert [(p.x, p.y) for p in pts] == [(1.0, 1.0), (4.0, 4.0)]
