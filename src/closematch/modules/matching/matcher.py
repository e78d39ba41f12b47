"""Fuzzy matching service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import structlog

from closematch.infrastructure.keys import extract_key
from closematch.infrastructure.normalize import normalize_string
from closematch.infrastructure.similarity import DistanceFunc, edit_distance
from closematch.modules.matching.options import ConfigurationError, MatchOptions
from closematch.modules.matching.results import materialize
from closematch.modules.matching.selector import select_indexes

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

__all__ = [
    "Matcher",
    "did_you_mean",
]

logger = structlog.get_logger()

T = TypeVar("T")


class Matcher:
    """Matches input strings against candidate lists.

    Holds validated options and the edit distance primitive. Each call to
    ``match`` is independent; no scores are cached between calls, so a
    single instance can be shared across threads.
    """

    def __init__(
        self,
        options: MatchOptions | Mapping[str, Any] | None = None,
        *,
        distance: DistanceFunc | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            options: Matching options, or a mapping of option fields.
            distance: Edit distance primitive (defaults to Levenshtein).

        Raises:
            ConfigurationError: If the options are invalid.
        """
        self.options = _resolve_options(options)
        self._distance = distance or edit_distance

    def match(self, value: str, candidates: Sequence[T]) -> T | list[T] | None:
        """Find the candidates that best match a string.

        Args:
            value: Input string.
            candidates: Candidate strings or structured items.

        Returns:
            A single item or None for FIRST_MATCH and FIRST_CLOSEST_MATCH,
            otherwise a list of items in result order.

        Raises:
            ConfigurationError: If a structured candidate has no string at
                the configured match path.
            TypeError: If value is not a string.
        """
        if not isinstance(value, str):
            msg = f"Input must be a string, got {type(value).__name__}"
            raise TypeError(msg)

        options = self.options
        normalized_input = normalize_string(value, options)
        indexes = select_indexes(
            normalized_input,
            self._keys(candidates),
            options,
            self._distance,
        )
        result = materialize(candidates, indexes, options.return_type)

        logger.debug(
            "match_completed",
            return_type=str(options.return_type),
            threshold_type=str(options.threshold_type),
            candidates=len(candidates),
            matched=len(indexes),
        )
        return result

    def _keys(self, candidates: Sequence[Any]) -> Iterator[str]:
        """Yield normalized comparison keys in candidate order."""
        for item in candidates:
            yield normalize_string(extract_key(item, self.options), self.options)


def did_you_mean(
    value: str,
    candidates: Sequence[T],
    options: MatchOptions | Mapping[str, Any] | None = None,
    *,
    distance: DistanceFunc | None = None,
    **overrides: Any,
) -> T | list[T] | None:
    """Find the candidates that best match a string.

    Args:
        value: Input string that may be misspelled.
        candidates: Candidate strings or structured items.
        options: Matching options, or a mapping of option fields.
        distance: Edit distance primitive (defaults to Levenshtein).
        **overrides: Option fields applied on top of ``options``.

    Returns:
        A single item or None for FIRST_MATCH and FIRST_CLOSEST_MATCH,
        otherwise a list of items.

    Raises:
        ConfigurationError: If options are invalid or a candidate key
            cannot be extracted.

    Example:
        >>> did_you_mean("aple", ["apple", "orange", "grape"])
        'apple'
    """
    resolved = _resolve_options(options).with_overrides(**overrides)
    return Matcher(resolved, distance=distance).match(value, candidates)


def _resolve_options(options: MatchOptions | Mapping[str, Any] | None) -> MatchOptions:
    if options is None:
        return MatchOptions()
    if isinstance(options, MatchOptions):
        return options
    if isinstance(options, Mapping):
        return MatchOptions.from_mapping(dict(options))
    raise ConfigurationError(
        f"Options must be MatchOptions or a mapping, got {type(options).__name__}"
    )
