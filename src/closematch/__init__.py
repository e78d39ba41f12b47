"""closematch: "did you mean?" suggestions by edit distance or similarity."""

from closematch.modules.matching import (
    ClosematchError,
    ConfigurationError,
    MatchOptions,
    Matcher,
    ReturnType,
    ThresholdType,
    did_you_mean,
)

__version__ = "0.1.0"

__all__ = [
    "ClosematchError",
    "ConfigurationError",
    "MatchOptions",
    "Matcher",
    "ReturnType",
    "ThresholdType",
    "__version__",
    "did_you_mean",
]
