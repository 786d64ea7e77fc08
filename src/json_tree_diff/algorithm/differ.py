"""Structural differ: walks two value trees in lockstep and reports divergences.

Comparison rules, by pair of variants:

- different variants -> one MODIFIED with ``repr`` renderings of both values
- number / number    -> MODIFIED unless equal (tolerance applies if either is a float)
- string / string    -> MODIFIED with the raw strings unless identical
- null / null        -> never a record
- array / array      -> positional pairs at the *same* path, then the longer
                        side's tail as ADDED (compared longer) or DELETED
                        (base longer)
- object / object    -> shared keys recurse at ``path::key``; base-only keys are
                        DELETED, then compared-only keys are ADDED

The differ is a pure function of the two trees and the settings.
"""

from __future__ import annotations

from json_tree_diff.algorithm.config import DiffSettings
from json_tree_diff.result import DiffKind, DiffRecord
from json_tree_diff.tree.nodes import (
    JsonArray,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    numbers_equal,
)
from json_tree_diff.tree.serializer import format_number, render

__all__ = ["PATH_SEPARATOR", "StructuralDiffer", "element_diff"]

PATH_SEPARATOR = "::"


def element_diff(
    base: JsonValue,
    compared: JsonValue,
    path: str,
    settings: DiffSettings,
) -> list[DiffRecord]:
    """Compare two values located at ``path`` and return their divergences.

    Args:
        base:     Value from the base document.
        compared: Value from the compared document.
        path:     ``::``-joined key path of both values ("" for the root).
        settings: Numeric tolerance and parser limits.

    Returns:
        Records in emission order (empty when the values are equal).
    """
    records: list[DiffRecord] = []
    _diff_into(base, compared, path, settings, records)
    return records


def _diff_into(
    base: JsonValue,
    compared: JsonValue,
    path: str,
    settings: DiffSettings,
    out: list[DiffRecord],
) -> None:
    if isinstance(base, JsonNumber) and isinstance(compared, JsonNumber):
        if not numbers_equal(base, compared, settings.float_tolerance):
            out.append(
                DiffRecord(
                    DiffKind.MODIFIED,
                    path,
                    format_number(base),
                    format_number(compared),
                )
            )
    elif isinstance(base, JsonString) and isinstance(compared, JsonString):
        if base.value != compared.value:
            out.append(DiffRecord(DiffKind.MODIFIED, path, base.value, compared.value))
    elif isinstance(base, JsonArray) and isinstance(compared, JsonArray):
        _diff_arrays(base, compared, path, settings, out)
    elif isinstance(base, JsonObject) and isinstance(compared, JsonObject):
        _diff_objects(base, compared, path, settings, out)
    elif isinstance(base, JsonNull) and isinstance(compared, JsonNull):
        return
    else:
        # Variant mismatch: report the whole values in debug form.
        out.append(DiffRecord(DiffKind.MODIFIED, path, repr(base), repr(compared)))


def _diff_arrays(
    base: JsonArray,
    compared: JsonArray,
    path: str,
    settings: DiffSettings,
    out: list[DiffRecord],
) -> None:
    """Positional comparison; indices never extend the path."""
    shared = min(len(base), len(compared))
    for i in range(shared):
        _diff_into(base[i], compared[i], path, settings, out)

    # At most one of these loops runs.
    for extra in compared.items[shared:]:
        out.append(DiffRecord(DiffKind.ADDED, path, to=render(extra)))
    for missing in base.items[shared:]:
        out.append(DiffRecord(DiffKind.DELETED, path, from_=render(missing)))


def _diff_objects(
    base: JsonObject,
    compared: JsonObject,
    path: str,
    settings: DiffSettings,
    out: list[DiffRecord],
) -> None:
    for key, base_value in base.members.items():
        key_path = f"{path}{PATH_SEPARATOR}{key}"
        if key in compared:
            _diff_into(base_value, compared[key], key_path, settings, out)
        else:
            out.append(DiffRecord(DiffKind.DELETED, key_path, from_=render(base_value)))

    for key, compared_value in compared.members.items():
        if key not in base:
            out.append(
                DiffRecord(
                    DiffKind.ADDED,
                    f"{path}{PATH_SEPARATOR}{key}",
                    to=render(compared_value),
                )
            )


class StructuralDiffer:
    """Tree-level differ bound to one ``DiffSettings``.

    Example::

        from json_tree_diff.algorithm import StructuralDiffer
        from json_tree_diff.tree import parse

        differ = StructuralDiffer()
        records = differ.compute(parse('{"a": 1}'), parse('{"a": 2}'))
        print(records[0])   # *** 1 -> 2 in ::a
    """

    def __init__(self, settings: DiffSettings | None = None) -> None:
        self._settings = settings if settings is not None else DiffSettings()

    @property
    def settings(self) -> DiffSettings:
        return self._settings

    def compute(self, base: JsonValue, compared: JsonValue) -> list[DiffRecord]:
        """Diff two already-parsed trees starting at the root path."""
        return element_diff(base, compared, "", self._settings)
