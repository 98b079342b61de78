"""Field-level diff of two JSON objects."""

from __future__ import annotations

from typing import Any

from json_flex_diff.algorithm.similarity import json_type
from json_flex_diff.result import FieldDiff, ModifiedValue

__all__ = ["compute_field_diff", "deep_equal"]


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality of two JSON values.

    Arrays compare element-wise in order, objects by equal key sets and
    recursively equal values, scalars by value.  JSON typing applies, so
    ``True`` never equals ``1`` while ``1`` equals ``1.0``.
    """
    if a is b:
        return True

    type_a = json_type(a)
    if type_a != json_type(b):
        return False

    if type_a == "array":
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b, strict=True))

    if type_a == "object":
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)

    return bool(a == b)


def compute_field_diff(left: dict[str, Any], right: dict[str, Any]) -> FieldDiff:
    """Partition the key union of two objects into added/removed/modified/unchanged.

    Keys are visited in left order, then right-only keys in right order.
    """
    added: dict[str, Any] = {}
    removed: dict[str, Any] = {}
    modified: dict[str, ModifiedValue] = {}
    unchanged: dict[str, Any] = {}

    for key, left_val in left.items():
        if key not in right:
            removed[key] = left_val
            continue
        right_val = right[key]
        if deep_equal(left_val, right_val):
            unchanged[key] = left_val
        else:
            modified[key] = ModifiedValue(left=left_val, right=right_val)

    for key, right_val in right.items():
        if key not in left:
            added[key] = right_val

    return FieldDiff(added=added, removed=removed, modified=modified, unchanged=unchanged)
