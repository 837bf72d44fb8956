from remote_export.models.record import Row
from remote_export.services.nested import (
    flatten_form_fields,
    get_value,
    has_value,
    set_value,
    unset_value,
)


def test_get_value_by_path():
    data = {"a": {"b": {"c": 1}}, "items": [{"id": "x"}]}

    assert get_value(data, "a/b/c") == 1
    assert get_value(data, "items/0/id") == "x"
    assert get_value(data, "a/missing") is None
    assert get_value(data, "a/b/c/d", default="none") == "none"


def test_has_value_counts_none():
    data = {"a": None}

    assert has_value(data, "a")
    assert not has_value(data, "b")


def test_set_value_creates_parents():
    data = {}
    set_value(data, "a/b", 1)

    assert data == {"a": {"b": 1}}


def test_unset_removes_only_the_leaf():
    data = {"a": {"b": 1, "c": 2}}

    assert unset_value(data, "a/b")
    assert data == {"a": {"c": 2}}


def test_unset_prunes_emptied_ancestors():
    data = {"a": {"b": {"c": 1}}, "keep": True}

    unset_value(data, "a/b/c")

    assert data == {"keep": True}


def test_unset_stops_pruning_at_non_empty_parent():
    data = {"a": {"b": {"c": 1}, "d": 2}}

    unset_value(data, "a/b/c")

    assert data == {"a": {"d": 2}}


def test_unset_without_prune_keeps_empty_parent():
    data = {"a": {"b": 1}}

    unset_value(data, "a/b", prune=False)

    assert data == {"a": {}}


def test_unset_missing_path_is_a_no_op():
    data = {"a": {"b": 1}}

    assert not unset_value(data, "a/x")
    assert not unset_value(data, "x/y")
    assert data == {"a": {"b": 1}}


def test_flatten_form_fields():
    fields = flatten_form_fields({
        "name": "Ada",
        "address": {"city": "London", "lines": ["1 Road", "Flat 2"]},
        "active": True,
        "deleted": False,
        "note": None,
    })

    assert fields == [
        ("name", "Ada"),
        ("address[city]", "London"),
        ("address[lines][0]", "1 Road"),
        ("address[lines][1]", "Flat 2"),
        ("active", "1"),
        ("deleted", "0"),
    ]


def test_row_destination_copy_is_independent():
    row = Row(destination={"a": {"b": 1}})

    values = row.get_destination()
    unset_value(values, "a/b")

    assert row.destination == {"a": {"b": 1}}


def test_row_from_dict_plain_mapping_is_destination():
    row = Row.from_dict({"id": 7, "url": "https://x.test", "name": "n"})

    assert row.source_id == "7"
    assert row.get_destination_property("url") == "https://x.test"


def test_row_from_dict_with_source_and_destination():
    row = Row.from_dict({"id": "r1", "source": {"legacy": 1}, "destination": {"url": "u"}})

    assert row.source == {"legacy": 1}
    assert row.destination == {"url": "u"}
    assert row.to_dict()["id"] == "r1"


def test_unset_removes_list_element():
    data = {"endpoints": ["https://x.test/a", "https://x.test/b"], "name": "n"}

    assert unset_value(data, "endpoints/0")
    assert data == {"endpoints": ["https://x.test/b"], "name": "n"}


def test_unset_prunes_emptied_list():
    data = {"endpoints": ["https://x.test/a"], "name": "n"}

    unset_value(data, "endpoints/0")

    assert data == {"name": "n"}


def test_unset_walks_through_lists():
    data = {"links": [{"url": "https://x.test/a", "rel": "self"}]}

    unset_value(data, "links/0/url")

    assert data == {"links": [{"rel": "self"}]}


def test_unset_list_index_out_of_range_is_a_no_op():
    data = {"endpoints": ["https://x.test/a"]}

    assert not unset_value(data, "endpoints/3")
    assert not unset_value(data, "endpoints/first")
    assert data == {"endpoints": ["https://x.test/a"]}
