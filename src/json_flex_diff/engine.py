"""SemanticDiffEngine: orchestrator that wires similarity, matching, field diff and layout.

This is the central wiring layer between the raw algorithms and the public
API.  It classifies the shape of both inputs and returns one of:

- ``ArrayDiffResult`` when both sides are non-empty arrays of objects.
  Elements are paired by object similarity (no identifier field required),
  then every element is classified as unchanged, modified, added or removed.
- ``ObjectDiffResult`` when both sides are plain objects.  Fields are
  partitioned into added, removed, modified and unchanged.
- ``None`` for anything else (unparseable text, arrays of scalars,
  mismatched shapes, scalars).  ``None`` is a normal outcome meaning "use a
  line-based text diff instead", not an error.

Each call builds its own similarity matrix, match sets and layouts; nothing
is shared between calls, so one engine can serve several callers.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from json_flex_diff.algorithm.config import DiffConfig, MatchStrategy
from json_flex_diff.algorithm.fields import compute_field_diff
from json_flex_diff.algorithm.matcher import Match, greedy_match, optimal_match
from json_flex_diff.algorithm.similarity import similarity_matrix
from json_flex_diff.layout import Layout, render
from json_flex_diff.result import (
    ArrayDiffResult,
    ChangeEntry,
    ChangeType,
    DiffResult,
    DiffSummary,
    FieldDiff,
    LineChange,
    LineRange,
    ObjectDiffResult,
)

__all__ = ["SemanticDiffEngine", "is_array_of_objects"]

logger = logging.getLogger(__name__)

# Sentinel for "input text was not valid JSON" (None is a valid JSON value)
_UNPARSEABLE = object()


def is_array_of_objects(value: Any) -> bool:
    """True for a non-empty list whose elements are all objects."""
    return isinstance(value, list) and bool(value) and all(isinstance(v, dict) for v in value)


class SemanticDiffEngine:
    """Structure-aware diff of two JSON documents.

    Example::

        engine = SemanticDiffEngine()
        result = engine.diff(
            [{"id": 1, "name": "A"}],
            [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}],
        )
        result.summary   # DiffSummary(added=1, removed=0, modified=0, unchanged=1)
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, left: Any, right: Any) -> DiffResult | None:
        """Diff two JSON documents.

        Args:
            left:  Raw JSON text (``str``/``bytes``, parsed strictly) or an
                already-parsed JSON value.
            right: Same, for the new side.

        Returns:
            An ``ArrayDiffResult`` or ``ObjectDiffResult``, or ``None`` when the
            inputs are not both parseable and of a supported shape.
        """
        left_data = self._load(left)
        right_data = self._load(right)
        if left_data is _UNPARSEABLE or right_data is _UNPARSEABLE:
            logger.debug("semantic diff unavailable: input is not valid JSON")
            return None

        if is_array_of_objects(left_data) and is_array_of_objects(right_data):
            return self.diff_arrays(left_data, right_data)

        if isinstance(left_data, dict) and isinstance(right_data, dict):
            return self.diff_objects(left_data, right_data)

        logger.debug(
            "semantic diff unavailable: unsupported shapes %s / %s",
            type(left_data).__name__,
            type(right_data).__name__,
        )
        return None

    def diff_arrays(
        self,
        left: list[dict[str, Any]],
        right: list[dict[str, Any]],
    ) -> ArrayDiffResult:
        """Match and classify the elements of two arrays of objects."""
        left_layout = render(left, indent=self._config.indent)
        right_layout = render(right, indent=self._config.indent)

        matches = self._match(left, right)
        logger.debug(
            "matched %d of %d left / %d right elements", len(matches), len(left), len(right)
        )

        changes: list[ChangeEntry] = []
        counts = {change_type: 0 for change_type in ChangeType}
        left_line_changes: dict[int, LineChange] = {}
        right_line_changes: dict[int, LineChange] = {}

        for match in matches:
            field_diff = compute_field_diff(left[match.left_index], right[match.right_index])
            modified = field_diff.has_changes
            change_type = ChangeType.MODIFIED if modified else ChangeType.UNCHANGED
            counts[change_type] += 1

            left_lines = left_layout.item_lines(match.left_index)
            right_lines = right_layout.item_lines(match.right_index)
            changes.append(
                ChangeEntry(
                    type=change_type,
                    left_index=match.left_index,
                    right_index=match.right_index,
                    similarity=match.similarity,
                    field_diff=field_diff if modified else None,
                    left_lines=left_lines,
                    right_lines=right_lines,
                )
            )

            if modified:
                line_change = LineChange(type=ChangeType.MODIFIED, field_diff=field_diff)
                _mark(left_line_changes, left_lines, line_change)
                _mark(right_line_changes, right_lines, line_change)

        matched_left = {m.left_index for m in matches}
        matched_right = {m.right_index for m in matches}

        for i in range(len(left)):
            if i in matched_left:
                continue
            counts[ChangeType.REMOVED] += 1
            left_lines = left_layout.item_lines(i)
            changes.append(
                ChangeEntry(
                    type=ChangeType.REMOVED,
                    left_index=i,
                    right_index=None,
                    left_lines=left_lines,
                )
            )
            _mark(left_line_changes, left_lines, LineChange(type=ChangeType.REMOVED))

        for j in range(len(right)):
            if j in matched_right:
                continue
            counts[ChangeType.ADDED] += 1
            right_lines = right_layout.item_lines(j)
            changes.append(
                ChangeEntry(
                    type=ChangeType.ADDED,
                    left_index=None,
                    right_index=j,
                    right_lines=right_lines,
                )
            )
            _mark(right_line_changes, right_lines, LineChange(type=ChangeType.ADDED))

        # Stable: equal positions keep match/removed/added insertion order
        changes.sort(key=lambda entry: entry.position)

        summary = DiffSummary(
            added=counts[ChangeType.ADDED],
            removed=counts[ChangeType.REMOVED],
            modified=counts[ChangeType.MODIFIED],
            unchanged=counts[ChangeType.UNCHANGED],
        )
        logger.debug("array diff summary: %s", summary)

        return ArrayDiffResult(
            changes=changes,
            summary=summary,
            left_line_changes=left_line_changes,
            right_line_changes=right_line_changes,
            left_text=left_layout.text,
            right_text=right_layout.text,
        )

    def diff_objects(self, left: dict[str, Any], right: dict[str, Any]) -> ObjectDiffResult:
        """Field-level diff of two plain objects."""
        left_layout = render(left, indent=self._config.indent)
        right_layout = render(right, indent=self._config.indent)

        field_diff = compute_field_diff(left, right)
        left_line_changes, right_line_changes = self._object_line_changes(
            field_diff, left_layout, right_layout
        )

        summary = DiffSummary(
            added=len(field_diff.added),
            removed=len(field_diff.removed),
            modified=len(field_diff.modified),
            unchanged=len(field_diff.unchanged),
        )
        logger.debug("object diff summary: %s", summary)

        return ObjectDiffResult(
            field_diff=field_diff,
            summary=summary,
            left_line_changes=left_line_changes,
            right_line_changes=right_line_changes,
            left_text=left_layout.text,
            right_text=right_layout.text,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load(self, value: Any) -> Any:
        """Strictly parse raw text; pass parsed values through."""
        if not isinstance(value, (str, bytes, bytearray)):
            return value
        try:
            return json.loads(value)
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError both subclass ValueError
            logger.debug("strict JSON parse failed: %s", exc)
            return _UNPARSEABLE

    def _match(self, left: list[dict[str, Any]], right: list[dict[str, Any]]) -> list[Match]:
        similarities = similarity_matrix(left, right)
        threshold = self._config.match_threshold
        if self._config.match_strategy == MatchStrategy.OPTIMAL:
            return optimal_match(similarities, threshold)
        return greedy_match(similarities, threshold)

    @staticmethod
    def _object_line_changes(
        field_diff: FieldDiff,
        left_layout: Layout,
        right_layout: Layout,
    ) -> tuple[dict[int, LineChange], dict[int, LineChange]]:
        left_changes: dict[int, LineChange] = {}
        right_changes: dict[int, LineChange] = {}

        for key in field_diff.removed:
            _mark(left_changes, left_layout.key_lines(key), LineChange(ChangeType.REMOVED, key=key))

        for key in field_diff.added:
            _mark(right_changes, right_layout.key_lines(key), LineChange(ChangeType.ADDED, key=key))

        for key in field_diff.modified:
            change = LineChange(ChangeType.MODIFIED, key=key)
            _mark(left_changes, left_layout.key_lines(key), change)
            _mark(right_changes, right_layout.key_lines(key), change)

        return left_changes, right_changes


def _mark(target: dict[int, LineChange], lines: LineRange | None, change: LineChange) -> None:
    if lines is None:
        return
    for line in lines.lines():
        target[line] = change
