"""Unit tests for the string similarity heuristic

Tests cover:
- Rule priority (exact, containment, subsequence, character overlap)
- Case insensitivity
- Empty and non-string inputs
"""

import pytest

from matching.similarity import similarity, is_subsequence


class TestSubsequence:
    """Test in-order subsequence detection"""

    def test_contiguous_subsequence(self):
        assert is_subsequence("dump", "dump truck") is True

    def test_scattered_subsequence(self):
        assert is_subsequence("dtk", "Dump Truck") is True

    def test_order_matters(self):
        assert is_subsequence("kd", "dump truck") is False

    def test_empty_pattern_always_matches(self):
        assert is_subsequence("", "anything") is True
        assert is_subsequence("", "") is True

    def test_pattern_longer_than_text(self):
        assert is_subsequence("trucks", "truck") is False


class TestSimilarityRules:
    """Test rule order: first matching rule wins"""

    @pytest.mark.parametrize("s", ["", "a", "Dump Truck", "6x4", "  spaced  "])
    def test_identical_strings_score_one(self, s):
        assert similarity(s, s) == 1.0

    def test_case_insensitive_equality(self):
        assert similarity("TIPPER", "tipper") == 1.0

    @pytest.mark.parametrize("s", ["a", "dump", "Euro 6", "x"])
    def test_appended_character_hits_containment(self, s):
        """s is contained in s + "x", so containment beats subsequence"""
        assert similarity(s, s + "x") == 0.8

    def test_containment_either_direction(self):
        assert similarity("dump", "Dump Truck") == 0.8
        assert similarity("Dump Truck", "dump") == 0.8

    def test_empty_against_non_empty_is_containment(self):
        assert similarity("", "truck") == 0.8

    def test_subsequence_score(self):
        assert similarity("dtk", "dump truck") == 0.6

    def test_character_overlap_ratio(self):
        """'a' and 'b' of "abx" occur in "bay", 'x' doesn't: 2/3"""
        assert similarity("abx", "bay") == pytest.approx(2 / 3)

    def test_overlap_counts_repeated_characters(self):
        """Both 'a's of the shorter string count; divided by len("qqqa")"""
        assert similarity("aaz", "qqqa") == pytest.approx(0.5)

    def test_no_overlap_scores_zero(self):
        assert similarity("xyz", "abc") == 0.0

    def test_score_bounded(self):
        assert 0.0 <= similarity("zzzzzzz", "z") <= 1.0

    def test_non_string_inputs_are_coerced(self):
        assert similarity(None, None) == 1.0
        assert similarity(None, "abc") == 0.8
        assert similarity(64, "64") == 1.0
