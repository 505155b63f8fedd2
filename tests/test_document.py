from __future__ import annotations

import pytest

from jsontables.document import Document, Empty, Loaded, load_state
from jsontables.errors import ParseError


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '"just a string"',
        '{"default": 1}',
        '{"default": []}',
        '{"default": {}, "default": {}}',
        '{"default": {"1": NaN}}',
        "   ",
    ],
)
def test_rejects_content_that_is_not_an_object_of_objects(text):
    with pytest.raises(ParseError):
        Document.from_text(text)


def test_preserves_table_order():
    doc = Document.from_text('{"zeta": {}, "alpha": {"1": {"k": null}}}')
    assert list(doc.root) == ["zeta", "alpha"]
    assert doc.root["alpha"]["1"] == {"k": None}


def test_to_text_compact_and_indented():
    doc = Document.from_text('{ "default": {} }')
    assert doc.to_text() == '{"default":{}}'
    assert doc.to_text(indent=2) == '{\n  "default": {}\n}'


def test_load_state():
    assert load_state(None) == Empty()

    state = load_state('{"default": {}}')
    assert isinstance(state, Loaded)
    assert state.document.root == {"default": {}}
