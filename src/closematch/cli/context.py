"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path  # noqa: TC003 - used at runtime in dataclass
from typing import ClassVar

from closematch.modules.matching.options import MatchOptions

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity and the options file.

    Uses singleton pattern to share state across all CLI commands.

    Note: Mutable dataclass to allow setting flags at runtime.
    Assumes single-threaded CLI environment.
    """

    verbose: bool = False
    quiet: bool = False
    config_path: Path | None = None
    options: MatchOptions | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_options(self) -> MatchOptions:
        """Get base matching options, loading the options file on first access.

        Returns:
            Options from ``config_path``, or defaults when no file is set.

        Raises:
            ConfigurationError: If the options file is invalid.
        """
        if self.options is None:
            if self.config_path is None:
                self.options = MatchOptions()
            else:
                from closematch.infrastructure.config import load_options

                self.options = load_options(self.config_path)
        return self.options

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None
