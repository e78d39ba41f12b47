"""Matching options and their validation.

Options are immutable once constructed. All validation happens in
``MatchOptions.__post_init__`` so an invalid configuration is rejected
before any candidate is scored.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any

__all__ = [
    "DEFAULT_EDIT_DISTANCE_THRESHOLD",
    "DEFAULT_SIMILARITY_THRESHOLD",
    "ClosematchError",
    "ConfigurationError",
    "MatchOptions",
    "ReturnType",
    "ThresholdType",
]

DEFAULT_SIMILARITY_THRESHOLD = 0.4
DEFAULT_EDIT_DISTANCE_THRESHOLD = 20


class ClosematchError(Exception):
    """Base exception for closematch."""


class ConfigurationError(ClosematchError, ValueError):
    """Raised when options or key extraction are misconfigured."""


class ThresholdType(StrEnum):
    """Metric used to score candidates and interpret the threshold."""

    EDIT_DISTANCE = "edit-distance"
    SIMILARITY = "similarity"


class ReturnType(StrEnum):
    """Result selection strategy."""

    FIRST_MATCH = "first-match"
    FIRST_CLOSEST_MATCH = "first-closest-match"
    ALL_MATCHES = "all-matches"
    ALL_CLOSEST_MATCHES = "all-closest-matches"
    ALL_SORTED_MATCHES = "all-sorted-matches"

    @property
    def is_single(self) -> bool:
        """True for strategies that return one item or None."""
        return self in (ReturnType.FIRST_MATCH, ReturnType.FIRST_CLOSEST_MATCH)


@dataclass(frozen=True)
class MatchOptions:
    """Immutable, validated matching options.

    Attributes:
        threshold_type: Scoring metric.
        threshold: Cutoff for the metric. None selects the metric default
            (0.4 similarity, 20 edits).
        return_type: Result selection strategy.
        case_sensitive: Compare without case folding.
        deburr: Strip diacritics before comparing.
        trim_spaces: Strip surrounding whitespace and collapse inner runs.
        match_path: Keys/indexes leading to the comparison string of a
            structured candidate. A dotted string is split on ".".
    """

    threshold_type: ThresholdType = ThresholdType.SIMILARITY
    threshold: float | int | None = None
    return_type: ReturnType = ReturnType.FIRST_CLOSEST_MATCH
    case_sensitive: bool = False
    deburr: bool = True
    trim_spaces: bool = True
    match_path: tuple[str | int, ...] = ()

    def __post_init__(self) -> None:
        # Frozen dataclass: coerced values are written with object.__setattr__
        threshold_type = _coerce_enum(
            ThresholdType, self.threshold_type, "threshold_type"
        )
        object.__setattr__(self, "threshold_type", threshold_type)
        object.__setattr__(
            self,
            "return_type",
            _coerce_enum(ReturnType, self.return_type, "return_type"),
        )
        object.__setattr__(
            self, "threshold", _validate_threshold(threshold_type, self.threshold)
        )
        object.__setattr__(self, "match_path", _coerce_match_path(self.match_path))

        for name in ("case_sensitive", "deburr", "trim_spaces"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> MatchOptions:
        """Build options from a mapping of field names to values.

        Raises:
            ConfigurationError: If a key is not an option field or a value
                is invalid.
        """
        _check_field_names(data)
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> MatchOptions:
        """Return a validated copy with the given fields replaced.

        Switching ``threshold_type`` without giving a ``threshold`` resets the
        threshold to the new metric's default.
        """
        if not overrides:
            return self
        _check_field_names(overrides)
        if (
            "threshold" not in overrides
            and overrides.get("threshold_type", self.threshold_type)
            != self.threshold_type
        ):
            overrides["threshold"] = None
        return replace(self, **overrides)


def _check_field_names(data: dict[str, Any]) -> None:
    known = {f.name for f in fields(MatchOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")


def _coerce_enum(enum_cls: type[StrEnum], value: Any, name: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"Unknown {name} {value!r} (expected one of: {allowed})"
        ) from None


def _validate_threshold(
    threshold_type: ThresholdType, threshold: Any
) -> float | int:
    match threshold_type:
        case ThresholdType.EDIT_DISTANCE:
            if threshold is None:
                return DEFAULT_EDIT_DISTANCE_THRESHOLD
            if isinstance(threshold, bool) or not isinstance(threshold, int | float):
                raise ConfigurationError(
                    f"Edit distance threshold must be an integer, got {threshold!r}"
                )
            if isinstance(threshold, float):
                if not threshold.is_integer():
                    raise ConfigurationError(
                        f"Edit distance threshold must be an integer, got {threshold!r}"
                    )
                threshold = int(threshold)
            if threshold < 0:
                raise ConfigurationError(
                    f"Edit distance threshold must be non-negative, got {threshold}"
                )
            return threshold
        case ThresholdType.SIMILARITY:
            if threshold is None:
                return DEFAULT_SIMILARITY_THRESHOLD
            if isinstance(threshold, bool) or not isinstance(threshold, int | float):
                raise ConfigurationError(
                    f"Similarity threshold must be a number, got {threshold!r}"
                )
            if math.isnan(threshold) or not 0 <= threshold <= 1:
                raise ConfigurationError(
                    f"Similarity threshold must be within [0, 1], got {threshold}"
                )
            return threshold


def _coerce_match_path(match_path: Any) -> tuple[str | int, ...]:
    if isinstance(match_path, str):
        return tuple(part for part in match_path.split(".") if part)
    if not isinstance(match_path, Sequence):
        raise ConfigurationError(
            "match_path must be a string or a sequence, "
            f"got {type(match_path).__name__}"
        )
    for part in match_path:
        if isinstance(part, bool) or not isinstance(part, str | int):
            raise ConfigurationError(
                f"match_path elements must be strings or integers, got {part!r}"
            )
    return tuple(match_path)
