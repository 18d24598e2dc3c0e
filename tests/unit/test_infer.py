from __future__ import annotations

from datetime import date

import pytest

from dataprep.models.field_types import FieldType
from dataprep.pipeline.infer import infer_type, infer_types


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", FieldType.STRING),
        ("   ", FieldType.STRING),
        (None, FieldType.STRING),
        ("true", FieldType.BOOLEAN),
        ("No", FieldType.BOOLEAN),
        ("1", FieldType.BOOLEAN),
        ("0", FieldType.BOOLEAN),
        (True, FieldType.BOOLEAN),
        ("42", FieldType.NUMBER),
        ("1,200", FieldType.NUMBER),
        ("-3.5", FieldType.NUMBER),
        ("1e3", FieldType.NUMBER),
        (99, FieldType.NUMBER),
        ("2024-01-05", FieldType.DATE),
        ("2024/01/05", FieldType.DATE),
        ("2024.01.05", FieldType.DATE),
        ("05-01-2024", FieldType.DATE),
        ("5 Jan 2024", FieldType.DATE),
        ("01/05/2024", FieldType.DATE),
        (date(2024, 1, 5), FieldType.DATE),
        ("hello", FieldType.STRING),
    ],
)
def test_infer_type_precedence(value, expected):
    assert infer_type(value) is expected


def test_non_finite_and_fuzzy_values_are_strings():
    assert infer_type("Infinity") is FieldType.STRING
    assert infer_type("nan") is FieldType.STRING
    assert infer_type("1_000") is FieldType.STRING
    # not zero padded -> not a strict date
    assert infer_type("2024-1-5") is FieldType.STRING
    # impossible calendar date
    assert infer_type("2023-02-30") is FieldType.STRING
    assert infer_type("January 5th, 2024") is FieldType.STRING


def test_infer_types_covers_sample_row_keys_only():
    row = {"name": "Alice", "amount": "1,200", "joined": "2023-01-15", "active": "yes"}
    types = infer_types(row)
    assert list(types) == ["name", "amount", "joined", "active"]
    assert types == {
        "name": FieldType.STRING,
        "amount": FieldType.NUMBER,
        "joined": FieldType.DATE,
        "active": FieldType.BOOLEAN,
    }
    assert "other" not in types


def test_infer_types_is_deterministic():
    row = {"a": "1", "b": "x", "c": "", "d": "2024-01-01"}
    assert infer_types(row) == infer_types(row)


def test_infer_types_does_not_mutate_row():
    row = {"a": " 7 "}
    infer_types(row)
    assert row == {"a": " 7 "}


def test_digit_strings_beyond_float_range_are_strings():
    assert infer_types({"v": "9" * 5000, "w": "9" * 400}) == {"v": FieldType.STRING, "w": FieldType.STRING}
    assert infer_type("0" * 5000 + "1") is FieldType.STRING
