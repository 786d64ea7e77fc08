"""Tests for the JSON value model and ValueKind StrEnum.

Verifies:
- ValueKind has exactly 5 members with lowercase string values (StrEnum property)
- Each variant reports its kind
- Values are immutable (frozen dataclasses, read-only object members)
- Structural equality and tolerance-aware values_equal()
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_diff.tree.nodes import (
    JsonArray,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    ValueKind,
    values_equal,
)


class TestValueKind:
    """Tests for the ValueKind StrEnum."""

    def test_has_exactly_five_members(self) -> None:
        assert len(ValueKind) == 5

    def test_values_are_lowercased(self) -> None:
        assert ValueKind.NUMBER == "number"
        assert ValueKind.STRING == "string"
        assert ValueKind.ARRAY == "array"
        assert ValueKind.OBJECT == "object"
        assert ValueKind.NULL == "null"

    def test_members_are_str_instances(self) -> None:
        for member in ValueKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"


class TestVariantKinds:
    """Each variant exposes the matching tag."""

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (JsonNumber(1), ValueKind.NUMBER),
            (JsonString("x"), ValueKind.STRING),
            (JsonArray(()), ValueKind.ARRAY),
            (JsonObject({}), ValueKind.OBJECT),
            (JsonNull(), ValueKind.NULL),
        ],
    )
    def test_kind(self, value: object, kind: ValueKind) -> None:
        assert value.kind == kind  # type: ignore[attr-defined]


class TestJsonNumber:
    def test_int_is_not_float(self) -> None:
        assert JsonNumber(3).is_float is False

    def test_float_is_float(self) -> None:
        assert JsonNumber(3.0).is_float is True

    def test_frozen(self) -> None:
        number = JsonNumber(1)
        with pytest.raises(FrozenInstanceError):
            number.value = 2  # type: ignore[misc]


class TestJsonArray:
    def test_sequence_protocol(self) -> None:
        arr = JsonArray((JsonNumber(1), JsonString("a")))
        assert len(arr) == 2
        assert arr[1] == JsonString("a")
        assert list(arr) == [JsonNumber(1), JsonString("a")]

    def test_default_is_empty(self) -> None:
        assert len(JsonArray()) == 0


class TestJsonObject:
    def test_members_are_read_only(self) -> None:
        obj = JsonObject({"a": JsonNumber(1)})
        with pytest.raises(TypeError):
            obj.members["b"] = JsonNumber(2)  # type: ignore[index]

    def test_source_dict_is_copied(self) -> None:
        source = {"a": JsonNumber(1)}
        obj = JsonObject(source)
        source["b"] = JsonNumber(2)
        assert "b" not in obj
        assert len(obj) == 1

    def test_equality_ignores_key_order(self) -> None:
        left = JsonObject({"a": JsonNumber(1), "b": JsonNull()})
        right = JsonObject({"b": JsonNull(), "a": JsonNumber(1)})
        assert left == right

    def test_inequality_with_other_types(self) -> None:
        assert JsonObject({}) != JsonArray(())

    def test_repr_shows_members(self) -> None:
        obj = JsonObject({"a": JsonNumber(1)})
        assert repr(obj) == "JsonObject({'a': JsonNumber(value=1)})"

    def test_mapping_access(self) -> None:
        obj = JsonObject({"k": JsonString("v")})
        assert "k" in obj
        assert obj["k"] == JsonString("v")
        assert list(obj) == ["k"]

    def test_hashable_when_nested(self) -> None:
        tree = JsonArray((JsonObject({}), JsonObject({"a": JsonArray((JsonNull(),))})))
        assert isinstance(hash(tree), int)

    def test_equal_objects_hash_equal(self) -> None:
        left = JsonObject({"a": JsonNumber(1), "b": JsonString("x")})
        right = JsonObject({"b": JsonString("x"), "a": JsonNumber(1)})
        assert hash(left) == hash(right)
        assert len({left, right}) == 1


class TestEquality:
    def test_strings_are_case_exact(self) -> None:
        assert JsonString("abc") != JsonString("ABC")

    def test_null_equals_null(self) -> None:
        assert JsonNull() == JsonNull()

    def test_nested_structures(self) -> None:
        left = JsonArray((JsonObject({"x": JsonArray((JsonNull(),))}),))
        right = JsonArray((JsonObject({"x": JsonArray((JsonNull(),))}),))
        assert left == right


class TestValuesEqual:
    def test_integers_compare_exactly(self) -> None:
        assert values_equal(JsonNumber(1), JsonNumber(1), tolerance=10.0)
        assert not values_equal(JsonNumber(1), JsonNumber(2), tolerance=10.0)

    def test_float_within_tolerance(self) -> None:
        assert values_equal(JsonNumber(1), JsonNumber(1.0000001), tolerance=1e-5)

    def test_float_outside_tolerance(self) -> None:
        assert not values_equal(JsonNumber(1), JsonNumber(1.0000001), tolerance=1e-9)

    def test_zero_tolerance_still_matches_equal_floats(self) -> None:
        assert values_equal(JsonNumber(2.5), JsonNumber(2.5))

    def test_different_variants(self) -> None:
        assert not values_equal(JsonNumber(1), JsonString("1"))

    def test_arrays_of_different_length(self) -> None:
        short = JsonArray((JsonNumber(1),))
        long = JsonArray((JsonNumber(1), JsonNumber(2)))
        assert not values_equal(short, long)

    def test_objects_recurse_with_tolerance(self) -> None:
        left = JsonObject({"a": JsonArray((JsonNumber(0.1),))})
        right = JsonObject({"a": JsonArray((JsonNumber(0.1000001),))})
        assert values_equal(left, right, tolerance=1e-5)

    def test_objects_with_different_keys(self) -> None:
        assert not values_equal(
            JsonObject({"a": JsonNull()}), JsonObject({"b": JsonNull()})
        )
