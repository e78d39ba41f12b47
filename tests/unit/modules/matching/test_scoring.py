"""Tests for scoring and threshold evaluation."""

from __future__ import annotations

import math

import pytest

from closematch.modules.matching.options import ThresholdType
from closematch.modules.matching.scoring import (
    initial_margin,
    is_better,
    passes,
    score,
)


class TestScore:
    """Tests for score function."""

    def test_edit_distance_mode(self) -> None:
        """Edit distance mode returns the raw distance."""
        assert score("aple", "apple", ThresholdType.EDIT_DISTANCE) == 1

    def test_similarity_mode(self) -> None:
        """Similarity mode returns the normalized score."""
        assert score("aple", "apple", ThresholdType.SIMILARITY) == pytest.approx(0.8)

    def test_injected_distance(self) -> None:
        """The distance primitive can be replaced."""
        assert score("a", "b", ThresholdType.EDIT_DISTANCE, lambda _a, _b: 7) == 7


class TestPasses:
    """Tests for passes predicate."""

    def test_edit_distance_inclusive_upper_bound(self) -> None:
        """Distances pass at or below the threshold."""
        assert passes(1, ThresholdType.EDIT_DISTANCE, 1)
        assert passes(0, ThresholdType.EDIT_DISTANCE, 1)
        assert not passes(2, ThresholdType.EDIT_DISTANCE, 1)

    def test_similarity_inclusive_lower_bound(self) -> None:
        """Similarities pass at or above the threshold."""
        assert passes(0.8, ThresholdType.SIMILARITY, 0.8)
        assert passes(1.0, ThresholdType.SIMILARITY, 0.8)
        assert not passes(0.79, ThresholdType.SIMILARITY, 0.8)


class TestMargin:
    """Tests for margin helpers."""

    def test_initial_margin(self) -> None:
        """Distance starts at +inf and similarity at 0."""
        assert math.isinf(initial_margin(ThresholdType.EDIT_DISTANCE))
        assert initial_margin(ThresholdType.SIMILARITY) == 0.0

    def test_is_better(self) -> None:
        """Lower distances and higher similarities improve the margin."""
        assert is_better(1, 2, ThresholdType.EDIT_DISTANCE)
        assert not is_better(2, 2, ThresholdType.EDIT_DISTANCE)
        assert is_better(0.9, 0.5, ThresholdType.SIMILARITY)
        assert not is_better(0.5, 0.5, ThresholdType.SIMILARITY)
