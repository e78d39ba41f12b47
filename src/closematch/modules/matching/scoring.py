"""Candidate scoring and threshold evaluation."""

from __future__ import annotations

from closematch.infrastructure.similarity import (
    DistanceFunc,
    edit_distance,
    similarity,
)
from closematch.modules.matching.options import ThresholdType

__all__ = [
    "initial_margin",
    "is_better",
    "passes",
    "score",
]


def score(
    normalized_input: str,
    normalized_candidate: str,
    threshold_type: ThresholdType,
    distance: DistanceFunc = edit_distance,
) -> float | int:
    """Score a normalized candidate against the normalized input.

    Args:
        normalized_input: Normalized input string.
        normalized_candidate: Normalized candidate key.
        threshold_type: Metric to compute.
        distance: Edit distance primitive.

    Returns:
        Edit distance (0 means identical) or similarity (1 means identical).
    """
    match threshold_type:
        case ThresholdType.EDIT_DISTANCE:
            return distance(normalized_input, normalized_candidate)
        case ThresholdType.SIMILARITY:
            return similarity(normalized_input, normalized_candidate, distance)


def passes(
    value: float | int, threshold_type: ThresholdType, threshold: float | int
) -> bool:
    """Check whether a score satisfies the threshold.

    Distances pass at or below the threshold, similarities at or above it.
    """
    match threshold_type:
        case ThresholdType.EDIT_DISTANCE:
            return value <= threshold
        case ThresholdType.SIMILARITY:
            return value >= threshold


def initial_margin(threshold_type: ThresholdType) -> float:
    """Starting value for the best-score search over a candidate list."""
    match threshold_type:
        case ThresholdType.EDIT_DISTANCE:
            return float("inf")
        case ThresholdType.SIMILARITY:
            return 0.0


def is_better(
    value: float | int, margin: float | int, threshold_type: ThresholdType
) -> bool:
    """Check whether a score strictly improves on the current margin."""
    match threshold_type:
        case ThresholdType.EDIT_DISTANCE:
            return value < margin
        case ThresholdType.SIMILARITY:
            return value > margin
