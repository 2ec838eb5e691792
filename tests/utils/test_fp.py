from chartcore.utils.fp import try_or, unique_stable

def test_try_or_returns_default_on_failure():
    parse = try_or(-1.0)(float)
    assert parse("2.5") == 2.5
    assert parse("abc") == -1.0
    assert parse(None) == -1.0

def test_unique_stable_keeps_first_seen_order():
    assert unique_stable(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert unique_stable([]) == []
