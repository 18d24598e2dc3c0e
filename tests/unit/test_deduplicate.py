from __future__ import annotations

from dataprep.pipeline.deduplicate import (
    composite_key,
    deduplicate_by_keys,
    deduplicate_exact,
    row_identity,
)


def test_exact_dedup_first_occurrence_wins_and_order_kept():
    table = [
        {"id": 1, "v": "a"},
        {"id": 2, "v": "b"},
        {"v": "a", "id": 1},  # same row, other field order
        {"id": 3, "v": "c"},
        {"id": 2, "v": "b"},
    ]
    assert deduplicate_exact(table) == [
        {"id": 1, "v": "a"},
        {"id": 2, "v": "b"},
        {"id": 3, "v": "c"},
    ]


def test_exact_dedup_distinguishes_bool_from_number():
    table = [{"x": 1}, {"x": True}, {"x": 1.0}, {"x": "1"}]
    assert deduplicate_exact(table) == [{"x": 1}, {"x": True}, {"x": "1"}]


def test_exact_dedup_handles_nested_and_unhashable_values():
    table = [
        {"tags": ["a", "b"], "meta": {"k": 1}},
        {"tags": ["a", "b"], "meta": {"k": 1}},
        {"tags": ["b", "a"], "meta": {"k": 1}},
        {"tags": None, "meta": {"k": float("nan")}},
        {"tags": None, "meta": {"k": float("nan")}},
    ]
    result = deduplicate_exact(table)
    assert len(result) == 3
    assert result[0] == table[0]
    assert result[1] == table[2]


def test_exact_dedup_result_has_no_equal_rows():
    table = [{"a": i % 3, "b": "x"} for i in range(10)]
    result = deduplicate_exact(table)
    identities = [row_identity(r) for r in result]
    assert len(identities) == len(set(identities))
    # survivors keep first-occurrence order
    assert [r["a"] for r in result] == [0, 1, 2]


def test_rows_with_different_field_sets_are_distinct():
    assert len(deduplicate_exact([{"a": 1}, {"a": 1, "b": None}])) == 2


def test_dedup_by_keys():
    table = [
        {"user": "ann", "joined": "2024-01-01", "n": 1},
        {"user": "ann", "joined": "2024-01-01", "n": 2},
        {"user": "ann", "joined": "2024-02-01", "n": 3},
        {"user": "bob", "joined": "2024-01-01", "n": 4},
    ]
    result = deduplicate_by_keys(table, ["user", "joined"])
    assert [r["n"] for r in result] == [1, 3, 4]


def test_dedup_by_keys_absent_and_none_are_equal():
    table = [{"k": None, "n": 1}, {"n": 2}, {"k": "", "n": 3}]
    assert [r["n"] for r in deduplicate_by_keys(table, ["k"])] == [1]


def test_composite_key_is_total():
    row = {"a": True, "b": 1.5, "c": None, "d": ["x"]}
    assert composite_key(row, ["a", "b", "c", "d", "missing"]) == "true|1.5||['x']|"


def test_dedup_empty_table():
    assert deduplicate_exact([]) == []
    assert deduplicate_by_keys([], ["a"]) == []
