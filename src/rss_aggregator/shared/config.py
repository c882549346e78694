"""Configuration classes for the RSS aggregator.

This module provides configuration objects for the renderers and the
command-line tool, with validation on construction and JSON loading.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class MatchPolicy(Enum):
    """Which child wins when several share the looked-up tag."""

    LAST = "last"      # Scan the whole child list, keep the last match
    FIRST = "first"    # Stop at the first match


class ConfigError(Exception):
    """Exception raised when a configuration file cannot be used."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


DEFAULT_INDEX_TITLE = "Top Stories"


@dataclass(frozen=True)
class RenderConfig:
    """Configuration shared by the feed and index renderers."""

    match_policy: MatchPolicy = MatchPolicy.LAST
    terminate_incomplete_rows: bool = False
    index_title: str = DEFAULT_INDEX_TITLE
    table_border: int = 1

    def __post_init__(self) -> None:
        """Validate render configuration."""
        if not isinstance(self.match_policy, MatchPolicy):
            raise ValueError("match_policy must be a MatchPolicy")
        if not isinstance(self.terminate_incomplete_rows, bool):
            raise ValueError("terminate_incomplete_rows must be a boolean")
        if not isinstance(self.index_title, str):
            raise ValueError("index_title must be a string")
        # bool is an int subclass
        if isinstance(self.table_border, bool) or not isinstance(self.table_border, int):
            raise ValueError("table_border must be an integer")
        if not self.index_title:
            raise ValueError("index_title cannot be empty")
        if self.table_border < 0:
            raise ValueError("table_border must be >= 0")

    @classmethod
    def faithful(cls) -> "RenderConfig":
        """Last-match lookup with rows left open when an item has no content."""
        return cls()

    @classmethod
    def corrected(cls) -> "RenderConfig":
        """First-match lookup and every row closed."""
        return cls(match_policy=MatchPolicy.FIRST, terminate_incomplete_rows=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """Build a configuration from a plain mapping, e.g. parsed JSON.

        A ``preset`` key ("faithful" or "corrected") selects the base
        configuration; the remaining keys override individual fields.
        """
        preset = data.get("preset", "faithful")
        if preset == "faithful":
            config = cls.faithful()
        elif preset == "corrected":
            config = cls.corrected()
        else:
            raise ValueError(f"Unknown preset: {preset}")

        overrides: Dict[str, Any] = {}
        if "match_policy" in data:
            try:
                overrides["match_policy"] = MatchPolicy(data["match_policy"])
            except ValueError:
                raise ValueError(
                    f"match_policy must be one of {[p.value for p in MatchPolicy]}"
                ) from None
        for key in ("terminate_incomplete_rows", "index_title", "table_border"):
            if key in data:
                overrides[key] = data[key]

        return replace(config, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-serializable dictionary."""
        return {
            "match_policy": self.match_policy.value,
            "terminate_incomplete_rows": self.terminate_incomplete_rows,
            "index_title": self.index_title,
            "table_border": self.table_border,
        }


@dataclass
class CLIConfig:
    """Configuration management for CLI operations."""

    render: RenderConfig = field(default_factory=RenderConfig)
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        Raises:
            ConfigError: If the file is missing, is not valid JSON, or holds
                invalid render settings or non-boolean flags.
        """
        try:
            with config_path.open() as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not load config file: {e}", config_path) from e

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a JSON object", config_path)

        try:
            render = RenderConfig.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid render settings: {e}", config_path) from e

        flags: Dict[str, bool] = {}
        for key in ("verbose", "quiet"):
            value = data.get(key, False)
            if not isinstance(value, bool):
                raise ConfigError(f"{key} must be a boolean", config_path)
            flags[key] = value

        return cls(render=render, **flags)
