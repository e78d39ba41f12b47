"""String normalization applied before comparing strings."""

from __future__ import annotations

import re
import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from closematch.modules.matching.options import MatchOptions

__all__ = [
    "deburr",
    "normalize_string",
]

_WHITESPACE_RUN = re.compile(r"\s+")

# Latin letters with no Unicode decomposition to a base letter
_TRANSLITERATIONS = str.maketrans(
    {
        "Æ": "Ae",
        "æ": "ae",
        "Ð": "D",
        "ð": "d",
        "Ø": "O",
        "ø": "o",
        "Þ": "Th",
        "þ": "th",
        "ß": "ss",
        "Đ": "D",
        "đ": "d",
        "Ħ": "H",
        "ħ": "h",
        "ı": "i",
        "Ĳ": "IJ",
        "ĳ": "ij",
        "ĸ": "k",
        "Ŀ": "L",
        "ŀ": "l",
        "Ł": "L",
        "ł": "l",
        "ŉ": "'n",
        "Ŋ": "N",
        "ŋ": "n",
        "Œ": "Oe",
        "œ": "oe",
        "ſ": "s",
        "Ŧ": "T",
        "ŧ": "t",
    }
)


def deburr(value: str) -> str:
    """Strip diacritics from a string.

    Decomposes characters (NFD), drops combining marks and transliterates
    the Latin letters that have no decomposition (e.g. "ß" -> "ss").

    Example:
        >>> deburr("Crème brûlée")
        'Creme brulee'
    """
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.translate(_TRANSLITERATIONS)


def normalize_string(value: str, options: MatchOptions) -> str:
    """Convert a string to the canonical form used for comparison.

    Steps, each controlled by an option: case folding (unless
    ``case_sensitive``), whitespace trimming (``trim_spaces``), and
    diacritic stripping (``deburr``).

    Args:
        value: String to normalize.
        options: Matching options.

    Returns:
        Normalized string.
    """
    if not options.case_sensitive:
        value = value.casefold()

    if options.trim_spaces:
        value = _WHITESPACE_RUN.sub(" ", value.strip())

    if options.deburr:
        value = deburr(value)

    return value
