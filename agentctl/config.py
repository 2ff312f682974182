"""Persistent configuration stored as TOML in the user's home directory."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import tomli_w


class ConfigCommand(Enum):
    """Subcommands that manage configuration profiles."""

    ADD = "add"
    SHOW = "show"


@dataclass
class Config:
    """The stored configuration."""

    output_format: str | None = None

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.output_format is not None:
            data["output_format"] = self.output_format
        return data


def config_path() -> Path:
    """Return the location of the configuration file.

    It lives under $HOME, or under the current directory when HOME is unset.
    """
    home = os.environ.get("HOME")
    base = Path(home) if home is not None else Path(".")
    return base / ".agentctl" / "config.toml"


def load_config(path: Path | None = None) -> Config:
    """Load the configuration, falling back to defaults when it is missing or invalid."""
    target = config_path() if path is None else Path(path)
    try:
        contents = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return Config()
    try:
        data = tomllib.loads(contents)
    except tomllib.TOMLDecodeError:
        return Config()
    output_format = data.get("output_format")
    if output_format is not None and not isinstance(output_format, str):
        return Config()
    return Config(output_format=output_format)


def save_config(config: Config, path: Path | None = None) -> None:
    """Write the configuration, creating its directory; write failures are ignored."""
    target = config_path() if path is None else Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    data = tomli_w.dumps(config.to_dict())
    try:
        target.write_text(data, encoding="utf-8")
    except OSError:
        pass