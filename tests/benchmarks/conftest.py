"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10, 100 and 300 records per array.
Each tier provides a "similar" pair (a few edits, a shuffle, one insertion)
and a "dissimilar" pair (no element reaches the match threshold).

The similarity matrix is L x R object comparisons, so the largest tier does
~90k comparisons.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_records(count: int, prefix: str = "user") -> list[dict[str, Any]]:
    """Generate ``count`` flat records with deterministic values."""
    return [
        {
            "id": i,
            "name": f"{prefix}_{i}",
            "email": f"{prefix}{i}@example.com",
            "active": i % 2 == 0,
            "score": i * 7 % 100,
            "tags": [f"t{i % 3}", f"t{i % 5}"],
        }
        for i in range(count)
    ]


def _make_similar(count: int) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Edit every 10th record, rotate the order and append one record."""
    left = generate_records(count)
    right = [dict(r) for r in left]
    for record in right[::10]:
        record["score"] = -1
    right = right[count // 3 :] + right[: count // 3]
    right.append(generate_records(count + 1)[-1])
    return left, right


def _make_dissimilar(count: int) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Records from unrelated domains: no key overlap at all."""
    left = generate_records(count)
    right = [{"sku": f"P-{i}", "price": i, "stock": i % 4} for i in range(count)]
    return left, right


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10_similar() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """10-record similar pair."""
    return _make_similar(10)


@pytest.fixture
def pair_10_dissimilar() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """10-record dissimilar pair."""
    return _make_dissimilar(10)


@pytest.fixture
def pair_100_similar() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """100-record similar pair."""
    return _make_similar(100)


@pytest.fixture
def pair_100_dissimilar() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """100-record dissimilar pair."""
    return _make_dissimilar(100)


@pytest.fixture
def pair_300_similar() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """300-record similar pair."""
    return _make_similar(300)


@pytest.fixture
def repr_text_100() -> str:
    """Python repr of 100 records, as printed by a debugger or log line."""
    return repr(generate_records(100))
