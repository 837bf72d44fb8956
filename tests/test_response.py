import pytest

from remote_export.models.schema import FieldDefinition
from remote_export.services.response import (
    ObjectValue,
    ScalarValue,
    Unparseable,
    decode_response_body,
    extract_identifiers,
)


def _ids(*names):
    return {name: FieldDefinition(name=name) for name in names}


@pytest.mark.parametrize("raw, expected", [
    (b'"42"', ScalarValue("42")),
    (b"42", ScalarValue(42)),
    (b"1.5", ScalarValue(1.5)),
    (b"true", ScalarValue(True)),
    (b'{"id": 1}', ObjectValue({"id": 1})),
])
def test_decode_usable_bodies(raw, expected):
    assert decode_response_body(raw) == expected


@pytest.mark.parametrize("raw", [None, b"", b"{oops", b"[1]", b"null", b"false"])
def test_decode_unusable_bodies(raw):
    assert isinstance(decode_response_body(raw), Unparseable)


def test_scalar_fills_single_identifier():
    assert extract_identifiers(ScalarValue("42"), _ids("id")) == {"id": "42"}


def test_scalar_cannot_fill_multiple_identifiers():
    assert extract_identifiers(ScalarValue("42"), _ids("a", "b")) == {}


def test_object_keys_follow_declared_order():
    body = ObjectValue({"b": 2, "a": 1, "c": 3})

    result = extract_identifiers(body, _ids("a", "b"))

    assert list(result.items()) == [("a", 1), ("b", 2)]


def test_object_without_overlap_is_empty():
    assert extract_identifiers(ObjectValue({"x": 1}), _ids("id")) == {}


def test_unparseable_is_empty():
    assert extract_identifiers(Unparseable("bad"), _ids("id")) == {}
