"""Tests for comparison key extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import pytest

from closematch.infrastructure.keys import extract_key
from closematch.modules.matching.options import ConfigurationError, MatchOptions


@dataclass
class Command:
    name: str
    aliases: list[str]


class User(NamedTuple):
    name: str
    email: str


class TestExtractKey:
    """Tests for extract_key function."""

    def test_string_returned_unchanged(self) -> None:
        """Plain strings are their own key, even with a match path."""
        assert extract_key("  Apple ", MatchOptions()) == "  Apple "
        assert extract_key("apple", MatchOptions(match_path="name")) == "apple"

    def test_mapping_field(self) -> None:
        """A single-key path projects a mapping field."""
        options = MatchOptions(match_path="name")
        assert extract_key({"name": "apple"}, options) == "apple"

    def test_nested_dotted_path(self, users: list[dict[str, object]]) -> None:
        """Dotted paths walk nested mappings."""
        options = MatchOptions(match_path="profile.name")
        assert extract_key(users[1], options) == "Grace Hopper"

    def test_sequence_index_from_dotted_path(self) -> None:
        """Numeric path parts index into sequences."""
        options = MatchOptions(match_path="tags.1")
        assert extract_key({"tags": ["a", "b"]}, options) == "b"

    def test_sequence_path_with_int(self) -> None:
        """Integer path elements index into sequences."""
        options = MatchOptions(match_path=("tags", -1))
        assert extract_key({"tags": ["a", "b", "c"]}, options) == "c"

    def test_object_attribute(self) -> None:
        """Non-mapping objects are read by attribute."""
        options = MatchOptions(match_path="aliases.0")
        assert extract_key(Command("checkout", ["co"]), options) == "co"

    def test_named_tuple_field(self) -> None:
        """NamedTuple fields are read by name, not treated as missing."""
        options = MatchOptions(match_path="name")
        assert extract_key(User("bob", "b@example.com"), options) == "bob"

    def test_named_tuple_index(self) -> None:
        """NamedTuples still accept numeric path parts."""
        options = MatchOptions(match_path="1")
        assert extract_key(User("bob", "b@example.com"), options) == "b@example.com"

    def test_named_tuple_missing_field_raises(self) -> None:
        """An absent NamedTuple field is a configuration error."""
        options = MatchOptions(match_path="phone")
        with pytest.raises(ConfigurationError, match="no field 'phone'"):
            extract_key(User("bob", "b@example.com"), options)

    def test_int_keyed_mapping_from_dotted_path(self) -> None:
        """Dotted numeric parts also look up integer mapping keys."""
        options = MatchOptions(match_path="0")
        assert extract_key({0: "grape"}, options) == "grape"

    def test_string_key_preferred_over_int_key(self) -> None:
        """A literal string key wins over its integer reading."""
        options = MatchOptions(match_path="0")
        assert extract_key({"0": "apple", 0: "grape"}, options) == "apple"

    def test_missing_field_raises(self) -> None:
        """A missing key is a configuration error."""
        options = MatchOptions(match_path="title")
        with pytest.raises(ConfigurationError, match="no field 'title'"):
            extract_key({"name": "apple"}, options)

    def test_index_out_of_range_raises(self) -> None:
        """An index past the end is a configuration error."""
        options = MatchOptions(match_path="tags.5")
        with pytest.raises(ConfigurationError):
            extract_key({"tags": ["a"]}, options)

    def test_non_string_value_raises(self) -> None:
        """The path must end at a string."""
        options = MatchOptions(match_path="id")
        with pytest.raises(ConfigurationError, match="not a string"):
            extract_key({"id": 3}, options)

    def test_structured_item_without_path_raises(self) -> None:
        """Structured candidates need a match path."""
        with pytest.raises(ConfigurationError, match="needs a match_path"):
            extract_key({"name": "apple"}, MatchOptions())
