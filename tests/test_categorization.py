"""
Tests for categorization and segmentation
"""

import pytest
import numpy as np

from fractal_perception.categorization import categorize, candidates
from fractal_perception.concept import Concept
from fractal_perception.constants import START_LABEL
from fractal_perception.markov import UnigramModel
from fractal_perception.segmentation import segment


def make_counts(**counts):
    unigram = UnigramModel()
    for label, n in counts.items():
        for _ in range(n):
            unigram.increment(label)
    return unigram


class TestCategorize:
    def test_empty_map_mints_new_label(self):
        first = categorize(np.array([1.0, 2.0]), {}, UnigramModel())
        second = categorize(np.array([1.0, 2.0]), {}, UnigramModel())

        assert first != second

    def test_matching_category_returned(self):
        concept = Concept.new("a", [0.0, 0.0], 2.0)
        label = categorize(np.array([0.5, 0.5]), {"a": concept}, make_counts(a=1))
        assert label == "a"

    def test_observation_outside_every_region(self):
        categories = {"a": Concept.new("a", [0.0, 0.0], 1.0)}
        label = categorize(np.array([10.0, 0.0]), categories, make_counts(a=1))

        assert label not in categories

    def test_rarest_candidate_wins(self):
        categories = {
            "common": Concept.new("common", [0.0, 0.0], 5.0),
            "rare": Concept.new("rare", [1.0, 0.0], 5.0),
        }
        counts = make_counts(common=10, rare=2)

        assert categorize(np.array([0.5, 0.0]), categories, counts) == "rare"

    def test_tie_goes_to_oldest_category(self):
        categories = {
            "first": Concept.new("first", [0.0], 5.0),
            "second": Concept.new("second", [1.0], 5.0),
        }
        counts = make_counts(first=3, second=3)

        for _ in range(5):
            assert categorize(np.array([0.5]), categories, counts) == "first"

    def test_candidates_in_insertion_order(self):
        categories = {
            "b": Concept.new("b", [0.0], 2.0),
            "far": Concept.new("far", [50.0], 2.0),
            "a": Concept.new("a", [1.0], 2.0),
        }
        assert candidates(np.array([0.5]), categories) == ["b", "a"]

    def test_dimension_mismatch_rejected(self):
        categories = {"a": Concept.new("a", [0.0], 1.0)}
        with pytest.raises(ValueError):
            categorize(np.array([0.0, 0.0, 0.0]), categories, make_counts(a=1))


class TestSegment:
    def test_boundary_into_rarer_category(self):
        counts = make_counts(a=3, b=1)

        assert segment(counts, "a", "b") is True
        assert segment(counts, "b", "a") is False

    def test_same_label_never_segments(self):
        counts = make_counts(a=3)
        assert segment(counts, "a", "a") is False

    def test_equal_counts_do_not_segment(self):
        counts = make_counts(a=2, b=2)
        assert segment(counts, "a", "b") is False

    def test_start_sentinel_never_segments(self):
        counts = make_counts(a=1)
        assert segment(counts, START_LABEL, "a") is False

    def test_agrees_with_information_content(self):
        counts = make_counts(a=4, b=2, c=1)
        for previous in "abc":
            for current in "abc":
                expected = counts.information_content(current) > counts.information_content(previous)
                assert segment(counts, previous, current) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
