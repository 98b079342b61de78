"""Public API functions for json-flex-diff.

This module provides the user-facing functions: parse_flexible,
parse_and_format, diff, summary_message, similarity_score and is_match.
Each call creates a fresh SemanticDiffEngine (or FlexibleParser) to
guarantee zero global state between calls.
"""

from __future__ import annotations

import json
from typing import Any

from json_flex_diff.algorithm.config import MATCH_THRESHOLD, DiffConfig
from json_flex_diff.algorithm.similarity import value_similarity
from json_flex_diff.engine import SemanticDiffEngine
from json_flex_diff.parser import FlexibleParser
from json_flex_diff.result import DiffResult

__all__ = [
    "diff",
    "is_match",
    "parse_and_format",
    "parse_flexible",
    "similarity_score",
    "summary_message",
]


def parse_flexible(text: str) -> Any:
    """Parse JSON text, or a Python literal repr, into a JSON value.

    Args:
        text: Strict JSON, or text such as ``repr()`` output of a dict
            (single quotes, ``True``/``None``, tuples, sets, datetimes, ...).

    Returns:
        The parsed value (dict, list, str, int, float, bool or None).

    Raises:
        ParseError: If no strict or relaxed interpretation succeeds.  Failure
            is never reported as a ``None`` return, which would be
            indistinguishable from a parsed JSON ``null``.
    """
    return FlexibleParser().parse(text)


def parse_and_format(text: str, indent: int = 2) -> str:
    """Parse ``text`` flexibly and re-serialise it as indented strict JSON.

    Raises:
        ParseError: If ``text`` cannot be parsed.
    """
    return json.dumps(parse_flexible(text), indent=indent, ensure_ascii=False)


def diff(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> DiffResult | None:
    """Compute a structural diff of two JSON documents.

    Creates a fresh ``SemanticDiffEngine`` per call.

    Args:
        left:   Raw JSON text (parsed strictly) or a parsed JSON value.
        right:  Raw JSON text (parsed strictly) or a parsed JSON value.
        config: Engine parameters.  Defaults to ``DiffConfig()`` when None.

    Returns:
        An ``ArrayDiffResult`` for two arrays of objects, an
        ``ObjectDiffResult`` for two objects, otherwise ``None``, meaning
        the caller should fall back to a text diff.
    """
    return SemanticDiffEngine(config=config).diff(left, right)


def summary_message(result: DiffResult | None) -> str:
    """One-line, human-readable summary of a diff result.

    Returns:
        ``"Unable to compute semantic diff"`` for ``None``,
        ``"No differences found"`` when nothing changed, otherwise e.g.
        ``"Found: 1 added, 2 modified"``.
    """
    if result is None:
        return "Unable to compute semantic diff"

    summary = result.summary
    parts = [
        f"{count} {label}"
        for count, label in (
            (summary.added, "added"),
            (summary.removed, "removed"),
            (summary.modified, "modified"),
        )
        if count > 0
    ]

    if not parts:
        return "No differences found"
    return "Found: " + ", ".join(parts)


def similarity_score(left: Any, right: Any) -> float:
    """Return the similarity of two JSON values in [0.0, 1.0].

    Objects are scored with identity-like keys weighted double; this is the
    score used to pair array elements in ``diff()``.
    """
    return value_similarity(left, right)


def is_match(left: Any, right: Any, threshold: float = MATCH_THRESHOLD) -> bool:
    """Return True if ``diff()`` would consider the two values a candidate pair.

    Args:
        left:      First JSON value.
        right:     Second JSON value.
        threshold: Minimum similarity.  Defaults to the engine's 0.4.
    """
    return similarity_score(left, right) >= threshold
