from types import MappingProxyType

import pytest

from propfilter.config.filter_set import FilterSet


class Foo:
    pass


class Bar:
    pass


def test_absent_configuration_is_empty():
    filters = FilterSet.from_configuration(None)

    assert filters.is_empty()
    assert not filters.has_property_name(Foo(), "anything")


def test_defaults_seed_global_names():
    filters = FilterSet.from_configuration(None, "class", "metaClass")

    assert not filters.is_empty()
    assert filters.global_names == frozenset({"class", "metaClass"})
    assert filters.has_property_name(None, "metaClass")


def test_only_type_scoped_names_is_not_empty():
    filters = FilterSet.from_configuration({"Foo": "value1"})

    assert not filters.global_names
    assert not filters.is_empty()


def test_none_property_name_never_matches():
    filters = FilterSet.from_configuration("value1", "class")

    assert not filters.has_property_name(Foo(), None)
    assert not filters.has_type_property_name("Foo", None)


def test_global_name_matches_without_owner():
    filters = FilterSet.from_configuration("a, b")

    assert filters.has_property_name(None, "a")
    assert filters.has_property_name(None, "b")
    assert not filters.has_property_name(None, "c")


def test_type_scoped_names_need_an_owner():
    filters = FilterSet.from_configuration({"Foo": "value1"})

    assert not filters.has_property_name(None, "value1")
    assert filters.has_property_name(Foo(), "value1")
    assert not filters.has_property_name(Bar(), "value1")


def test_owner_type_resolved_by_simple_name():
    filters = FilterSet.from_configuration({"dict": "items", "str": "upper"})

    assert filters.has_property_name({}, "items")
    assert filters.has_property_name("text", "upper")
    assert not filters.has_property_name([], "items")


def test_same_simple_name_is_indistinguishable():
    other_foo = type("Foo", (), {})
    filters = FilterSet.from_configuration({Foo: "value1"})

    assert filters.has_property_name(other_foo(), "value1")


def test_has_type_property_name():
    filters = FilterSet.from_configuration({"Foo": ["value1"]}, "class")

    assert filters.has_type_property_name("Foo", "value1")
    assert filters.has_type_property_name(Foo, "value1")
    assert filters.has_type_property_name("Bar", "class")
    assert filters.has_type_property_name(None, "class")
    assert not filters.has_type_property_name("Bar", "value1")
    assert not filters.has_type_property_name(None, "value1")


def test_tuple_and_set_values_are_copied():
    filters = FilterSet.from_configuration(
        {"Foo": ("value1", "value2"), "Bar": {"value3"}}
    )

    assert filters.names_for_type("Foo") == ("value1", "value2")
    assert filters.names_for_type("Bar") == ("value3",)


def test_list_values_are_not_split_or_trimmed():
    filters = FilterSet.from_configuration({"Foo": [" value1 ", "a,b"]})

    assert filters.names_for_type("Foo") == (" value1 ", "a,b")
    assert not filters.has_property_name(Foo(), "value1")


def test_duplicates_are_kept():
    filters = FilterSet.from_configuration({"Foo": "value1, value1"})

    assert filters.names_for_type("Foo") == ("value1", "value1")


def test_later_entry_for_same_identifier_wins():
    filters = FilterSet.from_configuration({"Foo": "value1", Foo: "value2"})

    assert filters.names_for_type("Foo") == ("value2",)


@pytest.mark.parametrize("raw", [42, 3.5, True, ["value1"], b"value1", object()])
def test_unsupported_configuration_is_ignored(raw):
    filters = FilterSet.from_configuration(raw)

    assert filters.is_empty()


def test_unsupported_entries_are_skipped(caplog):
    with caplog.at_level("DEBUG", logger="propfilter.config.filter_set"):
        filters = FilterSet.from_configuration(
            {None: "value1", 1: "value2", "Foo": 3, "Bar": {"nested": "x"}, "Baz": "ok"}
        )

    assert dict(filters.names_by_type) == {"Baz": ("ok",)}
    assert "Skipping filter entry" in caplog.text


def test_structures_are_immutable():
    source = {"Foo": ["value1"]}
    filters = FilterSet.from_configuration(source)

    assert isinstance(filters.global_names, frozenset)
    assert isinstance(filters.names_by_type, MappingProxyType)
    with pytest.raises(TypeError):
        filters.names_by_type["Bar"] = ("value2",)  # type: ignore[index]
    with pytest.raises(AttributeError):
        filters.global_names = frozenset({"value1"})  # type: ignore[misc]

    source["Foo"].append("value2")
    assert filters.names_for_type("Foo") == ("value1",)


def test_direct_construction_normalises_arguments():
    filters = FilterSet(global_names={"a"}, names_by_type={"Foo": ["b"]})

    assert filters.global_names == frozenset({"a"})
    assert filters.names_by_type["Foo"] == ("b",)
    assert FilterSet().is_empty()


def test_to_dict_snapshot():
    filters = FilterSet.from_configuration({"Foo": "b, a"}, "z", "y")

    assert filters.to_dict() == {"global": ["y", "z"], "types": {"Foo": ["b", "a"]}}


def test_filter_sets_are_hashable():
    first = FilterSet.from_configuration({"Foo": ["value1"]}, "class")
    second = FilterSet.from_configuration({"Foo": "value1"}, "class")

    assert first == second
    assert hash(first) == hash(second)
    assert {first: "cached"}[second] == "cached"
