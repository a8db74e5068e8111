import pytest

from schematree import *
from schematree import values

WEATHER = (
    '{"type":"object","properties":{"city":{"type":"string"},"tempC":{"type":"number"}},'
    '"required":["city","tempC"],"additionalProperties":false}'
)


def test_weather_round_trip(arena):
    root = object_(arena)
    prop(arena, root, "city", string(arena))
    prop(arena, root, "tempC", number(arena))
    required(arena, root, ["city", "tempC"])
    additional_properties(arena, root, False)
    assert stringify(arena, root) == WEATHER


def test_weather_with_prop_required(arena):
    root = object_(arena)
    prop_required(arena, root, "city", string(arena))
    prop_required(arena, root, "tempC", number(arena))
    additional_properties(arena, root, False)
    assert stringify(arena, root) == WEATHER


def test_prop_replaces(arena):
    root = object_(arena)
    prop(arena, root, "x", string(arena))
    prop(arena, root, "y", null(arena))
    prop(arena, root, "x", integer(arena))
    text = stringify(arena, root)
    assert text.count('"x"') == 1
    assert text == (
        '{"type":"object","properties":{"x":{"type":"integer"},"y":{"type":"null"}}}'
    )


def test_prop_required_appends(arena):
    root = object_(arena)
    prop_required(arena, root, "id", integer(arena))
    prop_required(arena, root, "id", integer(arena))
    assert values.ravel(root)["required"] == ["id", "id"]
    assert list(values.ravel(root)["properties"]) == ["id"]


def test_required_overwrites(arena):
    root = object_(arena)
    prop_required(arena, root, "a", string(arena))
    required(arena, root, ["b", "", None, "c"])
    assert values.ravel(root)["required"] == ["b", "c"]
    required(arena, root, "d")
    assert values.ravel(root)["required"] == ["d"]
    required(arena, root, None)
    assert values.ravel(root)["required"] == []


def test_additional_properties_idempotent(arena):
    once, twice = object_(arena), object_(arena)
    additional_properties(arena, once, False)
    additional_properties(arena, twice, False)
    additional_properties(arena, twice, False)
    assert stringify(arena, once) == stringify(arena, twice)
    additional_properties(arena, twice, True)
    assert values.ravel(twice)["additionalProperties"] is True


@pytest.mark.parametrize("name", ["", None, 1])
def test_prop_needs_a_name(arena, name):
    root = object_(arena)
    prop(arena, root, name, string(arena))
    prop_required(arena, root, name, string(arena))
    assert list(root) == ["type"]


def test_prop_needs_a_schema(arena):
    root = object_(arena)
    prop(arena, root, "x", None)
    prop_required(arena, root, "x", None)
    assert list(root) == ["type"]


def test_prop_refuses_cycles(arena):
    root, child = object_(arena), object_(arena)
    prop(arena, root, "child", child)
    prop(arena, child, "parent", root)
    prop(arena, root, "self", root)
    assert "parent" not in values.ravel(child).get("properties", {})
    assert list(values.ravel(root)["properties"]) == ["child"]
    assert values.is_acyclic(root)


def test_buffer_names_are_copied(arena):
    root, name = object_(arena), bytearray(b"city")
    prop_required(arena, root, name, string(arena))
    name[:] = b"xxxx"
    assert stringify(arena, root) == (
        '{"type":"object","properties":{"city":{"type":"string"}},"required":["city"]}'
    )


def test_no_arena_or_target(arena):
    root = object_(arena)
    prop(None, root, "x", string(arena))
    required(None, root, ["x"])
    additional_properties(arena, None, False)
    additional_properties(arena, arena.array(), False)
    assert list(root) == ["type"]


def test_strict(strict):
    root = object_(strict)
    with pytest.raises(exceptions.InvalidArgument):
        prop(strict, root, "", string(strict))
    with pytest.raises(exceptions.InvalidArgument):
        prop_required(strict, root, "x", None)
    with pytest.raises(ValueError):
        prop(strict, root, "self", root)
    assert list(root) == ["type"]


def test_nested_buildings(arena):
    item = object_(arena)
    prop(arena, item, "name", string(arena))
    prop(arena, item, "height_m", integer(arena))
    required(arena, item, ["name", "height_m"])
    additional_properties(arena, item, False)

    buildings = array(arena, item)
    array_min_items(arena, buildings, 5)
    array_max_items(arena, buildings, 5)

    root = object_(arena)
    prop(arena, root, "buildings", buildings)
    required(arena, root, ["buildings"])
    additional_properties(arena, root, False)

    text = stringify(arena, root)
    assert '"buildings":{"type":"array","items":{"type":"object"' in text
    assert '"height_m":{"type":"integer"}' in text
    assert '"minItems":5,"maxItems":5' in text
    assert text.endswith('"required":["buildings"],"additionalProperties":false}')
    check(root)


def test_prop_refuses_cycles_through_properties(arena):
    root = object_(arena)
    prop(arena, root, "x", string(arena))
    prop(arena, root, "y", any_of(arena, [root["properties"]]))
    prop_required(arena, root, "z", all_of(arena, [root["properties"]]))
    assert list(root["properties"]) == ["x"]
    assert "required" not in root
    assert values.is_acyclic(root)
    stringify(arena, root)


@pytest.mark.parametrize("name", [b"\xff", bytearray(b"\xc3"), memoryview(b"a\x80")])
def test_names_must_be_utf8(arena, name):
    root = object_(arena)
    prop(arena, root, name, string(arena))
    prop_required(arena, root, name, string(arena))
    assert list(root) == ["type"]
    required(arena, root, [name, "ok"])
    assert values.ravel(root)["required"] == ["ok"]


@pytest.mark.parametrize("names", [5, 1.5, True])
def test_required_needs_a_list(arena, names):
    root = object_(arena)
    required(arena, root, ["a"])
    required(arena, root, names)
    assert values.ravel(root)["required"] == ["a"]


def test_required_needs_a_list_strict(strict):
    root = object_(strict)
    with pytest.raises(exceptions.InvalidArgument):
        required(strict, root, 5)
    prop(strict, root, "x", string(strict))
    with pytest.raises(exceptions.InvalidArgument):
        prop(strict, root, "y", any_of(strict, [root["properties"]]))
    assert "required" not in root
    assert list(root["properties"]) == ["x"]
