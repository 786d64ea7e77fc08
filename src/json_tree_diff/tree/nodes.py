"""JSON value model: a closed tagged union of five immutable node classes.

The parser is the normal producer of these values; they are plain frozen
dataclasses so that the serializer and tests can construct them directly.

- JsonNumber -> exact ``int`` or ``float``, distinction kept from the source
- JsonString -> escape-resolved text
- JsonArray  -> ordered tuple of children
- JsonObject -> read-only mapping of key to child (last duplicate key wins)
- JsonNull   -> the ``null`` literal
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType

__all__ = [
    "JsonArray",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "ValueKind",
    "numbers_equal",
    "values_equal",
]


class ValueKind(StrEnum):
    """Tag identifying which variant a ``JsonValue`` is.

    StrEnum values are the lowercased member names:
    - NUMBER -> "number"
    - STRING -> "string"
    - ARRAY  -> "array"
    - OBJECT -> "object"
    - NULL   -> "null"
    """

    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()
    NULL = auto()


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A numeric leaf.

    Attributes:
        value: ``int`` when the literal had no decimal point, else ``float``.
    """

    value: int | float

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NUMBER

    @property
    def is_float(self) -> bool:
        """True when the number was written with a decimal point."""
        return isinstance(self.value, float)


@dataclass(frozen=True, slots=True)
class JsonString:
    """A string leaf with escapes already resolved."""

    value: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.STRING


@dataclass(frozen=True, slots=True)
class JsonArray:
    """An ordered, immutable sequence of child values."""

    items: tuple[JsonValue, ...] = ()

    @property
    def kind(self) -> ValueKind:
        return ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]


@dataclass(frozen=True, slots=True)
class JsonObject:
    """A read-only mapping from key to child value.

    ``members`` is wrapped in a ``MappingProxyType`` on construction, so the
    caller's dict may be reused without affecting the object.  Iteration
    follows insertion order, but consumers must not depend on it.
    """

    members: Mapping[str, JsonValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy then freeze; object.__setattr__ because the dataclass is frozen.
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.OBJECT

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> JsonValue:
        return self.members[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return dict(self.members) == dict(other.members)

    def __hash__(self) -> int:
        # The generated hash would hash the mappingproxy, which is unhashable.
        return hash(frozenset(self.members.items()))

    def __repr__(self) -> str:
        return f"JsonObject({dict(self.members)!r})"


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The ``null`` literal."""

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NULL


JsonValue = JsonNumber | JsonString | JsonArray | JsonObject | JsonNull


def numbers_equal(a: JsonNumber, b: JsonNumber, tolerance: float) -> bool:
    """Compare two numbers: exact for int/int, within ``tolerance`` otherwise."""
    if not a.is_float and not b.is_float:
        return a.value == b.value
    return abs(a.value - b.value) <= tolerance


def values_equal(a: JsonValue, b: JsonValue, tolerance: float = 0.0) -> bool:
    """Structural equality with tolerance-aware numeric comparison.

    Strings compare case-exact, integers exactly, and any pair of numbers
    where at least one side is a float compares within ``tolerance``.

    Args:
        a:         First value.
        b:         Second value.
        tolerance: Maximum absolute difference for float comparisons.

    Returns:
        True when the two trees are equal under the rules above.
    """
    if isinstance(a, JsonNumber) and isinstance(b, JsonNumber):
        return numbers_equal(a, b, tolerance)
    if isinstance(a, JsonArray) and isinstance(b, JsonArray):
        return len(a) == len(b) and all(
            values_equal(x, y, tolerance) for x, y in zip(a, b, strict=True)
        )
    if isinstance(a, JsonObject) and isinstance(b, JsonObject):
        return a.members.keys() == b.members.keys() and all(
            values_equal(a[key], b[key], tolerance) for key in a
        )
    return a == b
