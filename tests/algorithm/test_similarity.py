"""Test suite for similarity scoring.

Covers:
- json_type (bool before int, unsupported types)
- levenshtein_distance / string_similarity (edit distance, empty strings)
- is_identity_key (exact names, *_id / *Id suffixes, near misses)
- value_similarity per JSON type (strings, numbers, booleans, null, arrays)
- object_similarity weighting (identity keys weigh 2, one-sided keys score 0)
- similarity_matrix shape and cell values
"""

from __future__ import annotations

import numpy as np
import pytest

from json_flex_diff.algorithm.similarity import (
    array_similarity,
    is_identity_key,
    json_type,
    levenshtein_distance,
    object_similarity,
    similarity_matrix,
    string_similarity,
    value_similarity,
)

# ---------------------------------------------------------------------------
# json_type
# ---------------------------------------------------------------------------


class TestJsonType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            (True, "boolean"),
            (False, "boolean"),
            (0, "number"),
            (1.5, "number"),
            ("x", "string"),
            ([1], "array"),
            ({"a": 1}, "object"),
        ],
    )
    def test_type_names(self, value: object, expected: str) -> None:
        assert json_type(value) == expected

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            json_type(object())


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


class TestLevenshtein:
    def test_identical_is_zero(self) -> None:
        assert levenshtein_distance("same", "same") == 0

    def test_classic_kitten_sitting(self) -> None:
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_symmetric(self) -> None:
        assert levenshtein_distance("abc", "abxcd") == levenshtein_distance("abxcd", "abc")

    def test_empty_side_is_other_length(self) -> None:
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abcd", "") == 4


class TestStringSimilarity:
    def test_identical_strings(self) -> None:
        assert string_similarity("Alice", "Alice") == 1.0

    def test_both_empty_is_identical(self) -> None:
        assert string_similarity("", "") == 1.0

    def test_one_empty_scores_zero(self) -> None:
        assert string_similarity("", "abc") == 0.0
        assert string_similarity("abc", "") == 0.0

    def test_normalized_by_longer_length(self) -> None:
        assert string_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_single_substitution(self) -> None:
        assert string_similarity("Rome", "Roma") == pytest.approx(0.75)


# ---------------------------------------------------------------------------
# Identity keys
# ---------------------------------------------------------------------------


class TestIdentityKey:
    @pytest.mark.parametrize(
        "key",
        ["id", "ID", "_id", "uuid", "guid", "key", "name", "Name", "email",
         "username", "slug", "code", "user_id", "ORDER_ID", "userId", "productId"],
    )
    def test_identity_keys(self, key: str) -> None:
        assert is_identity_key(key)

    @pytest.mark.parametrize(
        "key",
        ["paid", "keyboard", "description", "identity", "nickname", "age", "hid"],
    )
    def test_non_identity_keys(self, key: str) -> None:
        assert not is_identity_key(key)


# ---------------------------------------------------------------------------
# value_similarity
# ---------------------------------------------------------------------------


class TestValueSimilarity:
    def test_equal_numbers(self) -> None:
        assert value_similarity(3, 3) == 1.0

    def test_int_equals_float(self) -> None:
        assert value_similarity(1, 1.0) == 1.0

    def test_different_numbers_score_zero(self) -> None:
        # No numeric closeness: 100 vs 101 is simply different
        assert value_similarity(100, 101) == 0.0

    def test_booleans(self) -> None:
        assert value_similarity(True, True) == 1.0
        assert value_similarity(True, False) == 0.0

    def test_bool_vs_number_is_type_mismatch(self) -> None:
        assert value_similarity(True, 1) == 0.0
        assert value_similarity(0, False) == 0.0

    def test_null_handling(self) -> None:
        assert value_similarity(None, None) == 1.0
        assert value_similarity(None, 0) == 0.0
        assert value_similarity("", None) == 0.0

    def test_type_mismatch_scores_zero(self) -> None:
        assert value_similarity("1", 1) == 0.0
        assert value_similarity([1], {"a": 1}) == 0.0

    def test_nested_objects_recurse(self) -> None:
        assert value_similarity({"a": {"b": 1}}, {"a": {"b": 1}}) == 1.0


class TestArraySimilarity:
    def test_both_empty(self) -> None:
        assert array_similarity([], []) == 1.0

    def test_one_empty(self) -> None:
        assert array_similarity([], [1]) == 0.0

    def test_extra_elements_count_as_zero(self) -> None:
        assert array_similarity([1, 2, 3], [1, 2]) == pytest.approx(2 / 3)

    def test_positional_not_set_based(self) -> None:
        assert array_similarity([1, 2], [2, 1]) == 0.0


class TestObjectSimilarity:
    def test_empty_objects_identical(self) -> None:
        assert object_similarity({}, {}) == 1.0

    def test_identical_objects(self) -> None:
        obj = {"id": 1, "name": "A", "tags": ["x"]}
        assert object_similarity(obj, dict(obj)) == 1.0

    def test_identity_key_weighs_double(self) -> None:
        # id: 2 * 1.0, city: 1 * 0.75 -> 2.75 / 3
        score = object_similarity({"id": 1, "city": "Rome"}, {"id": 1, "city": "Roma"})
        assert score == pytest.approx(2.75 / 3)

    def test_identity_mismatch_dominates(self) -> None:
        # id: 2 * 0, a: 1, b: 1 -> 2 / 4
        score = object_similarity({"id": 1, "a": 1, "b": 2}, {"id": 2, "a": 1, "b": 2})
        assert score == pytest.approx(0.5)

    def test_one_sided_keys_count_in_denominator(self) -> None:
        assert object_similarity({"a": 1}, {"a": 1, "b": 2}) == pytest.approx(0.5)

    def test_disjoint_keys_score_zero(self) -> None:
        assert object_similarity({"a": 1}, {"b": 1}) == 0.0

    def test_key_order_irrelevant(self) -> None:
        left = {"a": 1, "b": "x", "id": 3}
        right = {"id": 3, "b": "x", "a": 1}
        assert object_similarity(left, right) == 1.0


# ---------------------------------------------------------------------------
# similarity_matrix
# ---------------------------------------------------------------------------


class TestSimilarityMatrix:
    def test_shape(self) -> None:
        matrix = similarity_matrix([{"a": 1}] * 2, [{"a": 1}] * 3)
        assert matrix.shape == (2, 3)

    def test_cells_are_object_similarity(self) -> None:
        left = [{"id": 1}, {"id": 2}]
        right = [{"id": 2}, {"id": 1}]
        matrix = similarity_matrix(left, right)
        np.testing.assert_array_equal(matrix, np.array([[0.0, 1.0], [1.0, 0.0]]))

    def test_values_in_unit_interval(self) -> None:
        left = [{"id": 1, "name": "Alice"}, {"x": [1, 2]}]
        right = [{"id": 1, "name": "Alicia"}, {"x": [1]}, {}]
        matrix = similarity_matrix(left, right)
        assert ((matrix >= 0.0) & (matrix <= 1.0)).all()
