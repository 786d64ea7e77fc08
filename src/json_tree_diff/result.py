"""Diff output types: DiffKind, DiffRecord and the DiffReport summary.

A ``DiffRecord`` describes one point of divergence.  Its string form is the
one-line human rendering::

    +++ ? -> 3 in ::items
    --- 1 -> ? in ::a
    *** 1 -> x in ::a
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DiffKind", "DiffRecord", "DiffReport"]

_MISSING = "?"


class DiffKind(StrEnum):
    """Kind of divergence reported by a ``DiffRecord``.

    - ADDED    -> "added"    : present only in the compared document
    - DELETED  -> "deleted"  : present only in the base document
    - MODIFIED -> "modified" : present in both with different values
    """

    ADDED = auto()
    DELETED = auto()
    MODIFIED = auto()

    @property
    def symbol(self) -> str:
        """Three-character marker used in the human rendering."""
        return _SYMBOLS[self]


_SYMBOLS = {
    DiffKind.ADDED: "+++",
    DiffKind.DELETED: "---",
    DiffKind.MODIFIED: "***",
}


@dataclass(frozen=True, slots=True)
class DiffRecord:
    """One point of divergence between two documents.

    Attributes:
        kind:  ADDED, DELETED or MODIFIED.
        path:  ``::``-joined object keys locating the divergence.  Array
               indices never contribute; the root is the empty string.
        from_: Rendering of the base-side value; None for ADDED.
        to:    Rendering of the compared-side value; None for DELETED.
    """

    kind: DiffKind
    path: str
    from_: str | None = None
    to: str | None = None

    def __str__(self) -> str:
        from_ = _MISSING if self.from_ is None else self.from_
        to = _MISSING if self.to is None else self.to
        return f"{self.kind.symbol} {from_} -> {to} in {self.path}"


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Result of a ``JsonDiffer.compare()`` call.

    Attributes:
        records: Every divergence found, in emission order.
        computation_time_ms: Wall-clock duration of parse + diff in milliseconds.
    """

    records: tuple[DiffRecord, ...]
    computation_time_ms: float

    @property
    def is_identical(self) -> bool:
        return not self.records

    @property
    def added(self) -> tuple[DiffRecord, ...]:
        return self._of_kind(DiffKind.ADDED)

    @property
    def deleted(self) -> tuple[DiffRecord, ...]:
        return self._of_kind(DiffKind.DELETED)

    @property
    def modified(self) -> tuple[DiffRecord, ...]:
        return self._of_kind(DiffKind.MODIFIED)

    def _of_kind(self, kind: DiffKind) -> tuple[DiffRecord, ...]:
        return tuple(r for r in self.records if r.kind == kind)

    def render(self) -> str:
        """One rendered record per line; empty string when identical."""
        return "\n".join(str(r) for r in self.records)
