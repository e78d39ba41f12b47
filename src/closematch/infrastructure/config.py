"""Matching options persisted in a JSON or YAML file.

The file holds a mapping of option field names to values, e.g.::

    version: "1"
    threshold_type: edit-distance
    threshold: 2
    return_type: all-sorted-matches
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
import yaml

from closematch.modules.matching.options import ConfigurationError, MatchOptions

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "MAX_CONFIG_SIZE",
    "SCHEMA_VERSION",
    "load_options",
    "options_to_dict",
]

logger = structlog.get_logger()

# v1: Initial schema
SCHEMA_VERSION = "1"

# Maximum options file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024


def load_options(path: Path) -> MatchOptions:
    """Load matching options from a JSON or YAML file.

    A missing file yields default options. Anything else that is wrong
    with the file is a configuration error.

    Args:
        path: Path to the options file.

    Returns:
        Validated MatchOptions.

    Raises:
        ConfigurationError: If the file cannot be read, is too large, is
            not a mapping, or holds unknown or invalid options.
    """
    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return MatchOptions()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise ConfigurationError(
                f"Options file {path} is too large ({file_size} bytes)"
            )
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Failed to read options file {path}: {e}") from e

    # JSON is a subset of YAML, so one parser covers both formats
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid options file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Options file must contain a mapping, got {type(data).__name__}"
        )

    version = data.pop("version", None)
    if version is not None and str(version) != SCHEMA_VERSION:
        logger.warning(
            "config_version_mismatch",
            path=str(path),
            expected=SCHEMA_VERSION,
            found=version,
        )

    options = MatchOptions.from_mapping(data)
    logger.debug("options_loaded", path=str(path), fields=sorted(data))
    return options


def options_to_dict(options: MatchOptions) -> dict[str, Any]:
    """Convert options to a JSON-serializable dict with a version field."""
    return {
        "version": SCHEMA_VERSION,
        "threshold_type": options.threshold_type.value,
        "threshold": options.threshold,
        "return_type": options.return_type.value,
        "case_sensitive": options.case_sensitive,
        "deburr": options.deburr,
        "trim_spaces": options.trim_spaces,
        "match_path": list(options.match_path),
    }
