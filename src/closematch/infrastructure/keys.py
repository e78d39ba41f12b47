"""Comparison key extraction from candidate items."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from closematch.modules.matching.options import ConfigurationError

if TYPE_CHECKING:
    from closematch.modules.matching.options import MatchOptions

__all__ = ["extract_key"]


def extract_key(item: Any, options: MatchOptions) -> str:
    """Get the string a candidate is compared by.

    Plain strings are returned unchanged. Structured items are walked
    along ``options.match_path``: mappings by key, sequences by index and
    other objects by attribute.

    Args:
        item: Candidate item.
        options: Matching options holding the match path.

    Returns:
        The comparison string (not yet normalized).

    Raises:
        ConfigurationError: If the path is empty, cannot be followed, or
            does not end at a string.
    """
    if isinstance(item, str):
        return item

    if not options.match_path:
        raise ConfigurationError(
            f"Candidate of type {type(item).__name__} needs a match_path"
        )

    value = item
    for part in options.match_path:
        value = _step(value, part, options.match_path)

    if not isinstance(value, str):
        raise ConfigurationError(
            f"Value at match_path {_format_path(options.match_path)} is "
            f"{type(value).__name__}, not a string"
        )
    return value


def _step(value: Any, part: str | int, path: tuple[str | int, ...]) -> Any:
    """Follow one element of the match path."""
    if isinstance(value, Mapping):
        if part in value:
            return value[part]
        # Integer keys reached through a dotted path ("0")
        index = _as_index(part)
        if index is not None and index in value:
            return value[index]
    else:
        if isinstance(value, Sequence) and not isinstance(value, str | bytes):
            index = _as_index(part)
            if index is not None and -len(value) <= index < len(value):
                return value[index]
        # Named fields of sequences such as NamedTuple, or plain attributes
        if isinstance(part, str) and hasattr(value, part):
            return getattr(value, part)

    raise ConfigurationError(
        f"Candidate has no field {part!r} along match_path {_format_path(path)}"
    )


def _as_index(part: str | int) -> int | None:
    if isinstance(part, int):
        return part
    # Dotted paths produce string parts ("items.0.name")
    try:
        return int(part)
    except ValueError:
        return None


def _format_path(path: tuple[str | int, ...]) -> str:
    return ".".join(str(part) for part in path)
