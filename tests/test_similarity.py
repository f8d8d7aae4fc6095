"""Unit tests for edit-distance matching."""

import pytest

from socialprobe.core.similarity import distance, find_close_matches


PAIRS = [
    ("kitten", "sitting", 3),
    ("adel", "adele", 1),
    ("justinbeiber", "justinbieber", 2),
    ("", "abc", 3),
    ("flaw", "lawn", 2),
    ("drake", "drake", 0),
]


class TestDistance:
    """Test Levenshtein distance."""

    @pytest.mark.parametrize("a,b,expected", PAIRS)
    def test_known_distances(self, a: str, b: str, expected: int):
        assert distance(a, b) == expected

    @pytest.mark.parametrize("a,b,expected", PAIRS)
    def test_symmetric(self, a: str, b: str, expected: int):
        assert distance(a, b) == distance(b, a)

    @pytest.mark.parametrize("value", ["", "a", "weeknd", "spotifycharts"])
    def test_identity_is_zero(self, value: str):
        assert distance(value, value) == 0

    def test_zero_only_for_equal_strings(self):
        assert distance("bts", "btS") > 0
        assert distance("abc", "abcd") > 0

    def test_both_empty(self):
        assert distance("", "") == 0


class TestFindCloseMatches:
    """Test candidate filtering."""

    def test_keeps_candidate_order(self):
        candidates = ["adele", "adel", "drake", "adeles"]
        assert find_close_matches("adel", candidates, 1) == ["adele", "adel"]
        assert find_close_matches("adel", candidates, 2) == ["adele", "adel", "adeles"]

    def test_first_match_not_best_match(self):
        # "abcz" is 1 edit away but listed after a 2-edit candidate
        matches = find_close_matches("abcd", ["abxy", "abcz"], 2)
        assert matches[0] == "abxy"

    def test_no_matches(self):
        assert find_close_matches("12", ["drake", "adele", "bts"], 2) == []

    def test_accepts_iterators(self):
        assert find_close_matches("bts", iter(["bts", "bta"]), 0) == ["bts"]
