"""Tests for string normalization."""

from __future__ import annotations

from closematch.infrastructure.normalize import deburr, normalize_string
from closematch.modules.matching.options import MatchOptions


class TestDeburr:
    """Tests for deburr function."""

    def test_strips_combining_marks(self) -> None:
        """Accented letters lose their accents."""
        assert deburr("Crème brûlée") == "Creme brulee"
        assert deburr("naïve façade") == "naive facade"

    def test_transliterates_letters_without_decomposition(self) -> None:
        """Letters like ß and ø map to ASCII equivalents."""
        assert deburr("Straße") == "Strasse"
        assert deburr("Søren Łukasz") == "Soren Lukasz"
        assert deburr("Æsir") == "Aesir"

    def test_plain_ascii_unchanged(self) -> None:
        """ASCII input should pass through."""
        assert deburr("hello world") == "hello world"


class TestNormalizeString:
    """Tests for normalize_string function."""

    def test_defaults_fold_case_trim_and_deburr(self) -> None:
        """Default options apply every normalization step."""
        assert normalize_string("  Crème   Brûlée ", MatchOptions()) == "creme brulee"

    def test_case_sensitive_keeps_case(self) -> None:
        """case_sensitive disables case folding."""
        options = MatchOptions(case_sensitive=True)
        assert normalize_string("Apple", options) == "Apple"

    def test_case_folding_is_full_casefold(self) -> None:
        """Case folding handles more than ASCII lowercasing."""
        options = MatchOptions(deburr=False)
        assert normalize_string("STRASSE", options) == normalize_string("straße", options)

    def test_trim_spaces_disabled(self) -> None:
        """Whitespace is preserved when trim_spaces is off."""
        options = MatchOptions(trim_spaces=False)
        assert normalize_string(" a  b ", options) == " a  b "

    def test_collapses_mixed_whitespace(self) -> None:
        """Tabs and newlines collapse to a single space."""
        assert normalize_string("a\t\n b", MatchOptions()) == "a b"

    def test_deburr_disabled(self) -> None:
        """Diacritics are preserved when deburr is off."""
        options = MatchOptions(deburr=False)
        assert normalize_string("Café", options) == "café"

    def test_deterministic(self) -> None:
        """Same input and options always give the same output."""
        options = MatchOptions()
        assert normalize_string("Émile", options) == normalize_string("Émile", options)
