from __future__ import annotations

import pytest
from pydantic import BaseModel

from jsontables.errors import ParseError
from jsontables.records import normalize_value, to_record


class Expense(BaseModel):
    name: str
    cost: int
    tags: list[str] = []


def test_mapping_is_copied():
    src = {"name": "rent", "nested": {"a": [1, 2]}}
    rec = to_record(src)

    src["nested"]["a"].append(3)
    assert rec == {"name": "rent", "nested": {"a": [1, 2]}}


def test_pydantic_model_uses_declared_fields():
    assert to_record(Expense(name="rent", cost=100)) == {"name": "rent", "cost": 100, "tags": []}


def test_values_are_normalized_to_json_types():
    assert to_record({"pair": (1, 2)}) == {"pair": [1, 2]}
    assert normalize_value((1, "a")) == [1, "a"]


@pytest.mark.parametrize(
    "value",
    [
        {1: "int key"},
        {"when": object()},
        {"ratio": float("nan")},
        {"name": "\ud800"},
        {"\udfff": 1},
        ["not", "a", "mapping"],
        "text",
    ],
)
def test_rejects_values_that_cannot_be_records(value):
    with pytest.raises(ParseError):
        to_record(value)
