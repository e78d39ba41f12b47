"""Fuzzy matching module."""

from closematch.modules.matching.matcher import Matcher, did_you_mean
from closematch.modules.matching.options import (
    ClosematchError,
    ConfigurationError,
    MatchOptions,
    ReturnType,
    ThresholdType,
)

__all__ = [
    "ClosematchError",
    "ConfigurationError",
    "MatchOptions",
    "Matcher",
    "ReturnType",
    "ThresholdType",
    "did_you_mean",
]
