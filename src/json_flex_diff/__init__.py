"""JSON flex diff - tolerant parsing and structure-aware diffing for JSON documents."""

from __future__ import annotations

from json_flex_diff.algorithm.config import MATCH_THRESHOLD, DiffConfig, MatchStrategy
from json_flex_diff.api import (
    diff,
    is_match,
    parse_and_format,
    parse_flexible,
    similarity_score,
    summary_message,
)
from json_flex_diff.canonical import canonicalize
from json_flex_diff.engine import SemanticDiffEngine
from json_flex_diff.errors import ParseError
from json_flex_diff.parser import FlexibleParser
from json_flex_diff.result import (
    ArrayDiffResult,
    ChangeEntry,
    ChangeType,
    DiffKind,
    DiffResult,
    DiffSummary,
    FieldDiff,
    LineChange,
    LineRange,
    ModifiedValue,
    ObjectDiffResult,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "MATCH_THRESHOLD",
    "ArrayDiffResult",
    "ChangeEntry",
    "ChangeType",
    "DiffConfig",
    "DiffKind",
    "DiffResult",
    "DiffSummary",
    "FieldDiff",
    "FlexibleParser",
    "LineChange",
    "LineRange",
    "MatchStrategy",
    "ModifiedValue",
    "ObjectDiffResult",
    "ParseError",
    "SemanticDiffEngine",
    "canonicalize",
    "diff",
    "is_match",
    "parse_and_format",
    "parse_flexible",
    "similarity_score",
    "summary_message",
]
