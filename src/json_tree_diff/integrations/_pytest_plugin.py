"""pytest plugin for json-tree-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_diff import DiffSettings, diff


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh JsonDiffer per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged('{"a": 1.0}', '{"a": 1.000001}')

        def test_new_key(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"\\+\\+\\+"):
                assert_json_unchanged('{"a": 1, "b": 2}', '{"a": 1}')

    Returns:
        A callable ``_assert(actual, expected, settings=None) -> None`` that
        raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: str,
        expected: str,
        settings: DiffSettings | None = None,
    ) -> None:
        """Assert that two JSON texts have no structural differences.

        Args:
            actual:   JSON text produced by the code under test.
            expected: The expected/reference JSON text.
            settings: Optional DiffSettings (e.g. a looser float tolerance).

        Raises:
            AssertionError: When the documents differ, listing one rendered
                record per line.  A ParseError from either text propagates
                unchanged.
        """
        records = diff(expected, actual, settings=settings)
        if records:
            lines = "\n".join(f"  {record}" for record in records)
            raise AssertionError(
                f"JSON documents differ: {len(records)} difference(s)\n{lines}"
            )

    return _assert
