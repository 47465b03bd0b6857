"""Tests for hit counting and pair selection."""

import itertools

import pytest

from sedwords.aggregator import aggregate_hits, mask_first, select_matches, unmask
from sedwords.extractor import extract_candidates
from sedwords.types.candidate import Candidate


def run_passes(words, sentinel="!"):
    candidates = extract_candidates(words)
    aggregate_hits(words, candidates, sentinel)
    return [m.as_tuple() for m in select_matches(candidates, sentinel)]


class TestMasking:
    """Test first-occurrence masking."""

    def test_mask_first_occurrence_only(self):
        assert mask_first("banana", "an") == "b!ana"
        assert mask_first("cat", "a") == "c!t"
        assert mask_first("cement", "emen") == "c!t"

    def test_mask_no_occurrence(self):
        assert mask_first("cement", "a") is None
        assert mask_first("", "a") is None

    def test_mask_custom_sentinel(self):
        assert mask_first("cat", "a", "#") == "c#t"

    def test_unmask_first_sentinel_only(self):
        assert unmask("c!t", "a") == "cat"
        assert unmask("c!t", "emen") == "cement"
        assert unmask("a!b!", "x") == "axb!"


class TestAggregateHits:
    """Test the second pass."""

    def test_statement_hit_counts(self):
        words = ["bat", "cat", "cement", "statement"]
        candidates = extract_candidates(words)
        aggregate_hits(words, candidates)

        assert candidates["statement"].hit_counts == {
            "b!t": 1,
            "c!t": 2,
            "st!tement": 1,
            "stat!t": 1,
        }

    def test_line_counts_for_both_fragments(self):
        candidates = {"sxaxbx": Candidate("sxaxbx", "a", "b")}
        aggregate_hits(["ab"], candidates)
        assert candidates["sxaxbx"].hit_counts == {"!b": 1, "a!": 1}

    def test_duplicate_lines_count_independently(self):
        words = ["cat", "cat", "statement"]
        candidates = extract_candidates(words)
        aggregate_hits(words, candidates)
        assert candidates["statement"].hit_counts["c!t"] == 2

    def test_candidates_without_hits(self):
        candidates = {"sxaxbx": Candidate("sxaxbx", "a", "b")}
        aggregate_hits(["zzz", "qqq"], candidates)
        assert candidates["sxaxbx"].hit_counts == {}


class TestSelectMatches:
    """Test exact-count selection and word reconstruction."""

    def test_only_count_two_is_reported(self):
        candidate = Candidate(
            "statement", "a", "emen",
            hit_counts={"b!t": 1, "c!t": 2, "m!t": 3, "r!t": 0},
        )
        matches = list(select_matches({"statement": candidate}))
        assert [m.as_tuple() for m in matches] == [("statement", "cat", "cement")]

    def test_sorted_by_pattern_word_then_hit_key(self):
        candidates = {
            "sxaxox": Candidate("sxaxox", "a", "o", hit_counts={"b!t": 2, "!rm": 2}),
            "statement": Candidate("statement", "a", "emen", hit_counts={"c!t": 2}),
        }
        matches = [m.as_tuple() for m in select_matches(candidates)]
        assert matches == [
            ("statement", "cat", "cement"),
            ("sxaxox", "arm", "orm"),
            ("sxaxox", "bat", "bot"),
        ]


class TestEndToEnd:
    """Test both passes together on word lists."""

    def test_cat_into_cement(self):
        assert run_passes(["bat", "cat", "cement", "statement"]) == [
            ("statement", "cat", "cement"),
        ]

    def test_no_pattern_words_no_output(self):
        assert run_passes(["bat", "cat", "cement", "stat", "apple"]) == []

    def test_single_hit_not_reported(self):
        assert run_passes(["cat", "statement"]) == []

    def test_three_hits_not_reported(self):
        assert run_passes(["cat", "cat", "cement", "statement"]) == []

    def test_equal_fragment_word_contributes_nothing(self):
        assert run_passes(["nan", "sununu"]) == []

    def test_several_patterns(self):
        words = ["statement", "cat", "cement", "mat", "mement", "sxaxox", "bat", "bot"]
        assert run_passes(words) == [
            ("statement", "cat", "cement"),
            ("statement", "mat", "mement"),
            ("sxaxox", "bat", "bot"),
        ]

    def test_deterministic(self):
        words = ["statement", "cat", "cement", "mat", "mement", "sxaxox", "bat", "bot"]
        assert run_passes(words) == run_passes(list(words))

    @pytest.mark.parametrize("order", list(itertools.permutations(
        ["bat", "cat", "cement", "statement", "bot", "sxaxox"]
    ))[::37])
    def test_line_order_does_not_change_result(self, order):
        assert run_passes(list(order)) == [
            ("statement", "cat", "cement"),
            ("sxaxox", "bat", "bot"),
        ]
