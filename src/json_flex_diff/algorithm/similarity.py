"""Similarity scoring for JSON values.

All scores are floats in [0, 1]:

- strings:  normalized Levenshtein similarity ``1 - distance / max(len)``.
- numbers and booleans: exact equality (1.0 or 0.0).
- arrays:   positional comparison over the overlap, divided by the longer
            length, so trailing extra elements count as 0.
- objects:  weighted average over the key union.  Identity-like keys
            (``id``, ``uuid``, ``name``, ...) weigh 2, all others 1.  A key
            present on one side only adds its weight to the denominator and
            nothing to the numerator.

Cost of a full ``similarity_matrix`` is O(L x R x K) where K is the per-pair
object comparison cost, itself up to O(n^2) per string field.
"""

from __future__ import annotations

import re
from typing import Any

import numpy as np

__all__ = [
    "array_similarity",
    "is_identity_key",
    "json_type",
    "levenshtein_distance",
    "object_similarity",
    "similarity_matrix",
    "string_similarity",
    "value_similarity",
]

# Case-insensitive identity names and the ``*_id`` suffix
_IDENTITY_KEY = re.compile(
    r"^(?:id|_id|uuid|guid|key|name|email|username|slug|code)$|_id$",
    re.IGNORECASE,
)

# camelCase ``*Id`` suffix (case-sensitive: "paid" is not an identity key)
_CAMEL_ID_SUFFIX = re.compile(r"Id$")

IDENTITY_WEIGHT = 2.0
DEFAULT_WEIGHT = 1.0


def json_type(value: Any) -> str:
    """Return the JSON type name of a Python value.

    bool MUST be checked before int: bool subclasses int in Python, but
    ``true`` and ``1`` are different JSON types.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    Uses a space-optimized rolling-row dynamic-programming implementation.
    The shorter string is always placed on the inner loop to minimise
    the allocation size.
    """
    if a == b:
        return 0

    if len(a) < len(b):
        a, b = b, a

    if len(b) == 0:
        return len(a)

    prev_row = list(range(len(b) + 1))

    for i, ch_a in enumerate(a):
        curr_row = [i + 1] + [0] * len(b)
        for j, ch_b in enumerate(b):
            insert_cost = curr_row[j] + 1
            delete_cost = prev_row[j + 1] + 1
            replace_cost = prev_row[j] + (0 if ch_a == ch_b else 1)
            curr_row[j + 1] = min(insert_cost, delete_cost, replace_cost)
        prev_row = curr_row

    return prev_row[len(b)]


def string_similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity.

    Identical strings score 1.0.  If exactly one string is empty the score is
    0.0 (two empty strings are identical and score 1.0).
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein_distance(a, b) / max(len(a), len(b))


def is_identity_key(key: str) -> bool:
    """Return True if ``key`` looks like an identifier field."""
    return bool(_IDENTITY_KEY.search(key) or _CAMEL_ID_SUFFIX.search(key))


def value_similarity(a: Any, b: Any) -> float:
    """Similarity of two arbitrary JSON values."""
    if a is b:
        return 1.0

    type_a = json_type(a)
    type_b = json_type(b)

    if type_a == "null" or type_b == "null":
        return 1.0 if type_a == type_b else 0.0

    if type_a != type_b:
        return 0.0

    if type_a == "string":
        return string_similarity(a, b)

    if type_a in ("number", "boolean"):
        return 1.0 if a == b else 0.0

    if type_a == "array":
        return array_similarity(a, b)

    return object_similarity(a, b)


def array_similarity(a: list[Any], b: list[Any]) -> float:
    """Positional similarity of two arrays.

    Elements are compared pairwise in order over the shorter length; the sum
    is divided by the longer length.
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    overlap = min(len(a), len(b))
    score = sum(value_similarity(a[i], b[i]) for i in range(overlap))
    return score / max(len(a), len(b))


def object_similarity(a: dict[str, Any], b: dict[str, Any]) -> float:
    """Weighted field similarity of two objects.

    Two empty objects are identical (1.0).
    """
    all_keys = list(a)
    all_keys.extend(k for k in b if k not in a)

    if not all_keys:
        return 1.0

    score = 0.0
    weight_total = 0.0

    for key in all_keys:
        weight = IDENTITY_WEIGHT if is_identity_key(key) else DEFAULT_WEIGHT
        weight_total += weight
        if key in a and key in b:
            score += weight * value_similarity(a[key], b[key])

    return score / weight_total


def similarity_matrix(left: list[dict[str, Any]], right: list[dict[str, Any]]) -> np.ndarray:
    """Build the ``(len(left), len(right))`` object similarity matrix.

    Cell ``[i, j]`` is ``object_similarity(left[i], right[j])``.
    """
    matrix = np.zeros((len(left), len(right)), dtype=float)
    for i, obj_a in enumerate(left):
        for j, obj_b in enumerate(right):
            matrix[i, j] = object_similarity(obj_a, obj_b)
    return matrix
