"""algorithm subpackage: similarity scoring, field diff and element matching.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_flex_diff.algorithm import object_similarity, compute_field_diff

    object_similarity({"id": 1, "city": "Rome"}, {"id": 1, "city": "Roma"})
    # 0.9166...  (id weighs 2, city scores 0.75)
"""

from __future__ import annotations

from json_flex_diff.algorithm.config import (
    DEFAULT_INDENT,
    MATCH_THRESHOLD,
    DiffConfig,
    MatchStrategy,
)
from json_flex_diff.algorithm.fields import compute_field_diff, deep_equal
from json_flex_diff.algorithm.matcher import Match, greedy_match, optimal_match
from json_flex_diff.algorithm.similarity import (
    is_identity_key,
    object_similarity,
    similarity_matrix,
    string_similarity,
    value_similarity,
)

__all__ = [
    "DEFAULT_INDENT",
    "MATCH_THRESHOLD",
    "DiffConfig",
    "Match",
    "MatchStrategy",
    "compute_field_diff",
    "deep_equal",
    "greedy_match",
    "is_identity_key",
    "object_similarity",
    "optimal_match",
    "similarity_matrix",
    "string_similarity",
    "value_similarity",
]
