"""Integrations subpackage for json-tree-diff.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via the pytest11 entry point)

The plugin module is loaded by pytest itself and is not re-exported here.
"""

from __future__ import annotations

__all__: list[str] = []
