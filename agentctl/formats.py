"""Output formats understood by the command line."""

from __future__ import annotations

from enum import Enum


class OutputFormat(Enum):
    """A serialisation format a command may be asked to produce."""

    JSON = "json"
    TOML = "toml"
    YAML = "yaml"
    CSV = "csv"

    @property
    def label(self) -> str:
        """The capitalised name shown in human-readable messages."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.value


def parse_output_format(text: str) -> OutputFormat:
    """Parse a format name case-insensitively.

    Raises ValueError for a name that is not a known format.
    """
    try:
        return OutputFormat(text.lower())
    except ValueError:
        raise ValueError(f"Unknown format: {text}") from None