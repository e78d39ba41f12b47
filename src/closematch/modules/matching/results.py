"""Shaping selected indexes into the caller-facing result."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from closematch.modules.matching.options import ReturnType

__all__ = ["materialize"]

T = TypeVar("T")


def materialize(
    candidates: Sequence[T], indexes: list[int], return_type: ReturnType
) -> T | list[T] | None:
    """Map selected indexes back to the original candidate items.

    Args:
        candidates: Candidate list the indexes refer to.
        indexes: Selected indexes, in result order.
        return_type: Strategy the indexes were selected with.

    Returns:
        For single-result strategies the first selected item or None,
        otherwise a new list of the selected items (possibly empty).
    """
    if return_type.is_single:
        return candidates[indexes[0]] if indexes else None
    return [candidates[i] for i in indexes]
