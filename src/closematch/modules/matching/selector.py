"""Candidate selection strategies.

The selector works on normalized comparison keys and returns indexes into
the candidate list. Mapping indexes back to items is done by
``closematch.modules.matching.results``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from closematch.infrastructure.similarity import DistanceFunc, edit_distance
from closematch.modules.matching.options import ReturnType, ThresholdType
from closematch.modules.matching.scoring import (
    initial_margin,
    is_better,
    passes,
    score,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from closematch.modules.matching.options import MatchOptions

__all__ = ["select_indexes"]


def select_indexes(
    normalized_input: str,
    keys: Iterable[str],
    options: MatchOptions,
    distance: DistanceFunc = edit_distance,
) -> list[int]:
    """Select matching candidate indexes according to ``options.return_type``.

    Args:
        normalized_input: Normalized input string.
        keys: Normalized comparison keys, in candidate order. May be a lazy
            iterable; FIRST_MATCH stops consuming it at the first match.
        options: Validated matching options.
        distance: Edit distance primitive.

    Returns:
        Selected indexes. Single-result strategies yield at most one index.
    """
    threshold_type = options.threshold_type
    threshold = options.threshold

    def scored() -> Iterable[tuple[int, float | int]]:
        for i, key in enumerate(keys):
            yield i, score(normalized_input, key, threshold_type, distance)

    match options.return_type:
        case ReturnType.FIRST_MATCH:
            # Stop at the first passing candidate
            for i, value in scored():
                if passes(value, threshold_type, threshold):
                    return [i]
            return []

        case ReturnType.ALL_MATCHES:
            return [
                i for i, value in scored() if passes(value, threshold_type, threshold)
            ]

        case ReturnType.ALL_SORTED_MATCHES:
            matched = [
                (i, value)
                for i, value in scored()
                if passes(value, threshold_type, threshold)
            ]
            # sort() is stable: equal scores keep candidate order
            matched.sort(
                key=lambda pair: pair[1],
                reverse=threshold_type is ThresholdType.SIMILARITY,
            )
            return [i for i, _ in matched]

        case ReturnType.FIRST_CLOSEST_MATCH | ReturnType.ALL_CLOSEST_MATCHES:
            closest = _closest_indexes(list(scored()), options)
            if options.return_type is ReturnType.FIRST_CLOSEST_MATCH:
                return closest[:1]
            return closest


def _closest_indexes(
    scores: list[tuple[int, float | int]], options: MatchOptions
) -> list[int]:
    """Indexes tied at the best score of the whole list, if it passes."""
    threshold_type = options.threshold_type

    margin = initial_margin(threshold_type)
    for _, value in scores:
        if is_better(value, margin, threshold_type):
            margin = value

    return [
        i
        for i, value in scores
        if value == margin and passes(value, threshold_type, options.threshold)
    ]
