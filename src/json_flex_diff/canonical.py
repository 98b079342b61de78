"""Canonical ordering of JSON values.

``canonicalize`` returns a copy of a value with object keys sorted
recursively.  Arrays made up only of objects are also sorted, by the compact
JSON text of each element's canonical form, so two documents that differ
only in key or record order render identically.  Arrays with any non-object
element keep their order.
"""

from __future__ import annotations

import json
from typing import Any

__all__ = ["canonicalize"]


def canonicalize(value: Any) -> Any:
    """Return ``value`` with keys (and object-only arrays) in canonical order."""
    if isinstance(value, dict):
        return {key: canonicalize(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return _canonical_array(value)
    return value


def _canonical_array(arr: list[Any]) -> list[Any]:
    items = [canonicalize(item) for item in arr]
    if items and all(isinstance(item, dict) for item in items):
        items.sort(key=_sort_key)
    return items


def _sort_key(obj: dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
