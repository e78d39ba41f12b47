"""String distance and similarity scoring."""

from __future__ import annotations

from collections.abc import Callable

from rapidfuzz.distance import Levenshtein

__all__ = [
    "DistanceFunc",
    "edit_distance",
    "similarity",
]

# Edit distance primitive: (a, b) -> non-negative int
DistanceFunc = Callable[[str, str], int]


def edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform s1 into s2.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The edit distance between the strings.
    """
    return Levenshtein.distance(s1, s2)


def similarity(
    s1: str,
    s2: str,
    distance: DistanceFunc = edit_distance,
) -> float:
    """Calculate length-normalized similarity between two strings.

    Computed as ``1 - distance / max(len(s1), len(s2), 1)`` and clamped
    to [0, 1]. Identical strings (including two empty strings) score 1.

    Args:
        s1: First string.
        s2: Second string.
        distance: Edit distance function.

    Returns:
        Similarity in the range [0, 1].
    """
    longest = max(len(s1), len(s2), 1)
    value = 1 - distance(s1, s2) / longest
    return min(max(value, 0.0), 1.0)
