"""pytest plugin for json-flex-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_flex_diff import DiffConfig, diff, summary_message
from json_flex_diff.algorithm.fields import deep_equal
from json_flex_diff.result import ArrayDiffResult, ChangeType, DiffResult


def _describe(result: DiffResult) -> str:
    """List the changed elements or fields of a result, one per line."""
    lines: list[str] = []
    if isinstance(result, ArrayDiffResult):
        for entry in result.changes:
            if entry.type == ChangeType.UNCHANGED:
                continue
            lines.append(
                f"  {entry.type}: left[{entry.left_index}] -> right[{entry.right_index}]"
            )
            if entry.field_diff is not None:
                lines.extend(
                    f"    {key}: {change.left!r} -> {change.right!r}"
                    for key, change in entry.field_diff.modified.items()
                )
        return "\n".join(lines)

    fd = result.field_diff
    lines.extend(f"  added {key}: {value!r}" for key, value in fd.added.items())
    lines.extend(f"  removed {key}: {value!r}" for key, value in fd.removed.items())
    lines.extend(
        f"  modified {key}: {change.left!r} -> {change.right!r}"
        for key, change in fd.modified.items()
    )
    return "\n".join(lines)


@pytest.fixture(scope="session")
def assert_json_no_diff() -> Any:
    """Fixture that returns a callable asserting two JSON documents do not differ.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh SemanticDiffEngine per call).

    Usage in tests::

        def test_reordered_records(assert_json_no_diff):
            assert_json_no_diff(
                [{"id": 1}, {"id": 2}],
                [{"id": 2}, {"id": 1}],
            )

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when any element or field was added,
        removed or modified.  Shapes the semantic diff does not handle fall
        back to deep equality.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are semantically identical.

        Raises:
            AssertionError: With the summary line and the list of changes.
        """
        result = diff(expected, actual, config=config)
        if result is None:
            if not deep_equal(actual, expected):
                raise AssertionError(
                    "JSON documents differ (no semantic diff available)\n"
                    f"  actual:   {actual!r}\n"
                    f"  expected: {expected!r}"
                )
            return

        if result.summary.has_changes:
            raise AssertionError(
                f"JSON documents differ: {summary_message(result)}\n{_describe(result)}"
            )

    return _assert
