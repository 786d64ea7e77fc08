"""algorithm subpackage: public API for the structural diff algorithm.

Provides the tree differ and its configuration.  Import from this module
(not from sub-modules directly) to stay on the stable public interface.

Example::

    from json_tree_diff.algorithm import DiffSettings, StructuralDiffer
    from json_tree_diff.tree import parse

    differ = StructuralDiffer(DiffSettings(float_tolerance=1e-9))
    records = differ.compute(parse('{"x": 1}'), parse('{"x": 1.0000001}'))
    # one MODIFIED record at "::x"
"""

from __future__ import annotations

from json_tree_diff.algorithm.config import DEFAULT_FLOAT_TOLERANCE, DiffSettings
from json_tree_diff.algorithm.differ import PATH_SEPARATOR, StructuralDiffer, element_diff

__all__ = [
    "DEFAULT_FLOAT_TOLERANCE",
    "PATH_SEPARATOR",
    "DiffSettings",
    "StructuralDiffer",
    "element_diff",
]
