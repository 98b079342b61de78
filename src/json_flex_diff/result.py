"""Result dataclasses for semantic diff output.

Every type here is a frozen dataclass built fresh by one ``diff()`` call and
never mutated afterwards.  ``DiffResult`` is the union of the two shapes the
engine can return; ``None`` (not a result type) means "fall back to a text
diff".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "ArrayDiffResult",
    "ChangeEntry",
    "ChangeType",
    "DiffKind",
    "DiffResult",
    "DiffSummary",
    "FieldDiff",
    "JsonValue",
    "LineChange",
    "LineRange",
    "ModifiedValue",
    "ObjectDiffResult",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ChangeType(StrEnum):
    """Element-level verdict for one array element or object field."""

    UNCHANGED = auto()
    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()


class DiffKind(StrEnum):
    """Which of the two result shapes a ``DiffResult`` is."""

    ARRAY_OF_OBJECTS = "array-of-objects"
    OBJECT = "object"


@dataclass(frozen=True, slots=True)
class LineRange:
    """Inclusive, 0-based line span in a pretty-printed rendering."""

    start: int
    end: int

    def lines(self) -> range:
        """All line numbers covered by the span."""
        return range(self.start, self.end + 1)


@dataclass(frozen=True, slots=True)
class ModifiedValue:
    """The two sides of a field present on both objects with different values."""

    left: Any
    right: Any


@dataclass(frozen=True, slots=True)
class FieldDiff:
    """Per-field classification of two objects.

    The four mappings partition the union of both objects' keys: every key
    appears in exactly one of them.

    Attributes:
        added:     Right-only keys mapped to their right value.
        removed:   Left-only keys mapped to their left value.
        modified:  Shared keys whose values differ, mapped to both values.
        unchanged: Shared keys with deep-equal values, mapped to that value.
    """

    added: dict[str, Any] = field(default_factory=dict)
    removed: dict[str, Any] = field(default_factory=dict)
    modified: dict[str, ModifiedValue] = field(default_factory=dict)
    unchanged: dict[str, Any] = field(default_factory=dict)

    @property
    def has_changes(self) -> bool:
        """True when any key was added, removed or modified."""
        return bool(self.added or self.removed or self.modified)

    @property
    def keys(self) -> set[str]:
        """The key union covered by this diff."""
        return (
            set(self.added) | set(self.removed) | set(self.modified) | set(self.unchanged)
        )


@dataclass(frozen=True, slots=True)
class ChangeEntry:
    """Verdict for one array element.

    ``left_index`` is None for ADDED and ``right_index`` is None for REMOVED;
    both are set for MODIFIED and UNCHANGED.  ``similarity`` is only set for
    matched pairs and ``field_diff`` only for MODIFIED.
    """

    type: ChangeType
    left_index: int | None
    right_index: int | None
    similarity: float | None = None
    field_diff: FieldDiff | None = None
    left_lines: LineRange | None = None
    right_lines: LineRange | None = None

    @property
    def position(self) -> int:
        """Sort position: right index, falling back to left index."""
        if self.right_index is not None:
            return self.right_index
        if self.left_index is not None:
            return self.left_index
        return 0


@dataclass(frozen=True, slots=True)
class DiffSummary:
    """Counts per ``ChangeType``."""

    added: int = 0
    removed: int = 0
    modified: int = 0
    unchanged: int = 0

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)

    @property
    def total(self) -> int:
        return self.added + self.removed + self.modified + self.unchanged


@dataclass(frozen=True, slots=True)
class LineChange:
    """Highlight instruction for one rendered line.

    ``key`` is set for object diffs (the top-level field the line belongs to);
    ``field_diff`` is set for lines of a modified array element.
    """

    type: ChangeType
    key: str | None = None
    field_diff: FieldDiff | None = None


@dataclass(frozen=True, slots=True)
class ArrayDiffResult:
    """Diff of two arrays of objects.

    Attributes:
        changes:  One entry per element, ordered by right index (left index for
            removals).
        summary:  Counts per change type.
        left_line_changes:  Line number -> highlight for the left rendering.
        right_line_changes: Line number -> highlight for the right rendering.
        left_text:  Pretty-printed left document the line numbers refer to.
        right_text: Pretty-printed right document the line numbers refer to.
    """

    changes: list[ChangeEntry]
    summary: DiffSummary
    left_line_changes: dict[int, LineChange]
    right_line_changes: dict[int, LineChange]
    left_text: str
    right_text: str
    kind: DiffKind = DiffKind.ARRAY_OF_OBJECTS


@dataclass(frozen=True, slots=True)
class ObjectDiffResult:
    """Diff of two plain objects."""

    field_diff: FieldDiff
    summary: DiffSummary
    left_line_changes: dict[int, LineChange]
    right_line_changes: dict[int, LineChange]
    left_text: str
    right_text: str
    kind: DiffKind = DiffKind.OBJECT


DiffResult = ArrayDiffResult | ObjectDiffResult
