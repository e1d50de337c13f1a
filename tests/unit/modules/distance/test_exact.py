"""Tests for the exact Levenshtein distance."""

from __future__ import annotations

import pytest

from levdist.modules.distance import levenshtein_distance


class TestLevenshteinDistance:
    """Tests for levenshtein_distance function."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("Cats", "Hats", 1),
            ("Band", "Hands", 2),
            ("Cats", "Kansas", 4),
            ("International", "Internship", 6),
        ],
    )
    def test_sample_pairs(self, a: str, b: str, expected: int) -> None:
        """Sample pairs should match their known distances."""
        assert levenshtein_distance(a, b) == expected

    def test_identical_strings_return_zero(self) -> None:
        """Identical strings should have distance 0."""
        assert levenshtein_distance("hello", "hello") == 0

    def test_same_object_returns_zero(self) -> None:
        """Passing the same object twice should return 0."""
        word = "reference"
        assert levenshtein_distance(word, word) == 0

    def test_equal_but_distinct_lists_return_zero(self) -> None:
        """Equal content in distinct instances should also return 0."""
        assert levenshtein_distance(["a", "b"], ["a", "b"]) == 0

    def test_empty_strings_return_zero(self) -> None:
        """Two empty strings should have distance 0."""
        assert levenshtein_distance("", "") == 0

    def test_one_empty_string(self) -> None:
        """Distance to empty string is length of other string."""
        assert levenshtein_distance("hello", "") == 5
        assert levenshtein_distance("", "world") == 5

    def test_single_element_sequences(self) -> None:
        """Boundary at row and column 1 should be handled."""
        assert levenshtein_distance("a", "a") == 0
        assert levenshtein_distance("a", "b") == 1
        assert levenshtein_distance("a", "") == 1
        assert levenshtein_distance("", "b") == 1

    def test_single_insertion(self) -> None:
        """Single insertion should be distance 1."""
        assert levenshtein_distance("cat", "cats") == 1

    def test_single_deletion(self) -> None:
        """Single deletion should be distance 1."""
        assert levenshtein_distance("cats", "cat") == 1

    def test_single_substitution(self) -> None:
        """Single substitution should be distance 1."""
        assert levenshtein_distance("cat", "bat") == 1

    def test_edit_at_first_position(self) -> None:
        """Edits touching index 0 should cost exactly one."""
        assert levenshtein_distance("xabc", "abc") == 1
        assert levenshtein_distance("abc", "xbc") == 1

    def test_edit_at_last_position(self) -> None:
        """Edits touching the final index should cost exactly one."""
        assert levenshtein_distance("abcx", "abc") == 1
        assert levenshtein_distance("abc", "abx") == 1

    def test_multiple_operations(self) -> None:
        """Multiple operations should sum correctly."""
        # k->s, e->i, +g
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_completely_different_strings(self) -> None:
        """Completely different strings of same length."""
        assert levenshtein_distance("abc", "xyz") == 3

    def test_bounded_by_longer_length(self) -> None:
        """Distance never exceeds the longer length."""
        assert levenshtein_distance("ab", "wxyz") == 4

    def test_case_sensitive(self) -> None:
        """Distance should be case-sensitive."""
        assert levenshtein_distance("Hello", "hello") == 1

    def test_compares_code_points(self) -> None:
        """Non-ASCII characters count as single elements."""
        assert levenshtein_distance("café", "cafe") == 1
        assert levenshtein_distance("naïve", "naïve") == 0

    def test_token_sequences(self) -> None:
        """Lists of tokens are compared element by element."""
        a = ["the", "quick", "brown", "fox"]
        b = ["the", "slow", "brown", "dog", "barks"]
        assert levenshtein_distance(a, b) == 3

    def test_tuples_and_strings_mix(self) -> None:
        """A tuple of characters compares against a string per element."""
        assert levenshtein_distance(("c", "a", "t"), "cut") == 1
