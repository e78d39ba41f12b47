"""Loading candidate lists from files.

Structured files (.json, .yaml, .yml) must hold a list of strings or
records. Any other file is read as plain text, one candidate per
non-blank line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
import yaml

from closematch.modules.matching.options import ClosematchError

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "CandidatesError",
    "load_candidates",
    "parse_candidates",
]

logger = structlog.get_logger()

STRUCTURED_SUFFIXES = frozenset({".json", ".yaml", ".yml"})


class CandidatesError(ClosematchError):
    """Raised when a candidate file cannot be loaded."""


def parse_candidates(content: str, *, structured: bool) -> list[Any]:
    """Parse candidate file content.

    Args:
        content: File content.
        structured: Parse as a JSON/YAML list instead of plain lines.

    Returns:
        List of candidates in file order.

    Raises:
        CandidatesError: If structured content is invalid or not a list.
    """
    if not structured:
        return [line.strip() for line in content.splitlines() if line.strip()]

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise CandidatesError(f"Invalid candidate list: {e}") from e

    # Empty document
    if data is None:
        return []

    if not isinstance(data, list):
        raise CandidatesError(
            f"Candidate file must contain a list, got {type(data).__name__}"
        )
    return data


def load_candidates(path: Path) -> list[Any]:
    """Load candidates from a file.

    Args:
        path: Candidate file.

    Returns:
        List of candidates in file order.

    Raises:
        CandidatesError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CandidatesError(f"Failed to read candidates from {path}: {e}") from e

    candidates = parse_candidates(
        content, structured=path.suffix.lower() in STRUCTURED_SUFFIXES
    )
    logger.debug("candidates_loaded", path=str(path), count=len(candidates))
    return candidates
