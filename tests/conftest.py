"""Shared test fixtures for closematch tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from closematch.cli.context import CLIContext

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def fruits() -> list[str]:
    """Candidate list with a duplicate entry."""
    return ["apple", "orange", "apple", "grape"]


@pytest.fixture
def users() -> list[dict[str, object]]:
    """Structured candidates keyed by nested name."""
    return [
        {"id": 1, "profile": {"name": "Ada Lovelace"}},
        {"id": 2, "profile": {"name": "Grace Hopper"}},
        {"id": 3, "profile": {"name": "Alan Turing"}},
    ]


@pytest.fixture(autouse=True)
def reset_cli_context() -> Generator[None]:
    """Reset the CLI singleton around every test."""
    CLIContext.reset()
    yield
    CLIContext.reset()
