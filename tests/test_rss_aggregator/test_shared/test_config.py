"""Tests for render and CLI configuration."""

import json
from pathlib import Path

import pytest

from rss_aggregator.shared.config import (
    DEFAULT_INDEX_TITLE,
    CLIConfig,
    ConfigError,
    MatchPolicy,
    RenderConfig,
)


class TestRenderConfig:
    """Test RenderConfig defaults, presets and validation."""

    def test_default_values(self) -> None:
        """Test default configuration uses last match and open rows."""
        config = RenderConfig()
        assert config.match_policy is MatchPolicy.LAST
        assert config.terminate_incomplete_rows is False
        assert config.index_title == DEFAULT_INDEX_TITLE
        assert config.table_border == 1

    def test_faithful_preset_matches_defaults(self) -> None:
        """Test faithful preset equals the default configuration."""
        assert RenderConfig.faithful() == RenderConfig()

    def test_corrected_preset(self) -> None:
        """Test corrected preset switches to first match and closed rows."""
        config = RenderConfig.corrected()
        assert config.match_policy is MatchPolicy.FIRST
        assert config.terminate_incomplete_rows is True

    def test_empty_index_title_raises_error(self) -> None:
        """Test that an empty index title is rejected."""
        with pytest.raises(ValueError, match="index_title cannot be empty"):
            RenderConfig(index_title="")

    def test_negative_border_raises_error(self) -> None:
        """Test that a negative table border is rejected."""
        with pytest.raises(ValueError, match="table_border must be >= 0"):
            RenderConfig(table_border=-1)

    def test_config_is_immutable(self) -> None:
        """Test that render configuration cannot be modified in place."""
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.index_title = "Other"  # type: ignore[misc]

    def test_from_dict_with_overrides(self) -> None:
        """Test building configuration from a mapping."""
        config = RenderConfig.from_dict({
            "preset": "corrected",
            "match_policy": "last",
            "index_title": "Headlines",
        })
        assert config.match_policy is MatchPolicy.LAST
        assert config.terminate_incomplete_rows is True
        assert config.index_title == "Headlines"

    def test_from_dict_unknown_preset(self) -> None:
        """Test that unknown presets are rejected."""
        with pytest.raises(ValueError, match="Unknown preset"):
            RenderConfig.from_dict({"preset": "fastest"})

    def test_from_dict_unknown_policy(self) -> None:
        """Test that unknown match policies are rejected."""
        with pytest.raises(ValueError, match="match_policy must be one of"):
            RenderConfig.from_dict({"match_policy": "middle"})

    def test_to_dict_round_trip(self) -> None:
        """Test that to_dict output is accepted by from_dict."""
        config = RenderConfig(match_policy=MatchPolicy.FIRST, table_border=0)
        assert RenderConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("overrides, message", [
        ({"terminate_incomplete_rows": "no"}, "terminate_incomplete_rows must be a boolean"),
        ({"index_title": 42}, "index_title must be a string"),
        ({"table_border": "1"}, "table_border must be an integer"),
        ({"table_border": True}, "table_border must be an integer"),
    ])
    def test_wrong_field_types_raise_error(self, overrides, message) -> None:
        """Test that values of the wrong type are rejected, not coerced."""
        with pytest.raises(ValueError, match=message):
            RenderConfig.from_dict(overrides)


class TestCLIConfig:
    """Test CLI configuration management."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = CLIConfig()
        assert config.render == RenderConfig()
        assert config.verbose is False
        assert config.quiet is False

    def test_config_from_file(self, tmp_path: Path) -> None:
        """Test loading configuration from file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({
            "preset": "corrected",
            "index_title": "Morning News",
            "verbose": True,
        }))

        config = CLIConfig.from_file(config_path)
        assert config.render.match_policy is MatchPolicy.FIRST
        assert config.render.index_title == "Morning News"
        assert config.verbose is True

    def test_config_from_nonexistent_file(self, tmp_path: Path) -> None:
        """Test that a missing config file raises ConfigError."""
        missing = tmp_path / "nonexistent.json"
        with pytest.raises(ConfigError) as exc_info:
            CLIConfig.from_file(missing)
        assert exc_info.value.path == missing

    def test_config_from_invalid_json(self, tmp_path: Path) -> None:
        """Test that malformed JSON raises ConfigError."""
        config_path = tmp_path / "broken.json"
        config_path.write_text("{not json")
        with pytest.raises(ConfigError, match="Could not load config file"):
            CLIConfig.from_file(config_path)

    def test_config_from_non_object(self, tmp_path: Path) -> None:
        """Test that a JSON array is rejected."""
        config_path = tmp_path / "list.json"
        config_path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            CLIConfig.from_file(config_path)

    def test_config_with_invalid_render_settings(self, tmp_path: Path) -> None:
        """Test that invalid render values surface as ConfigError."""
        config_path = tmp_path / "bad.json"
        config_path.write_text(json.dumps({"table_border": -3}))
        with pytest.raises(ConfigError, match="Invalid render settings"):
            CLIConfig.from_file(config_path)

    @pytest.mark.parametrize("key", ["verbose", "quiet"])
    def test_non_boolean_flag_raises_error(self, tmp_path: Path, key: str) -> None:
        """Test that a string flag such as "false" is not read as true."""
        config_path = tmp_path / "flags.json"
        config_path.write_text(json.dumps({key: "false"}))
        with pytest.raises(ConfigError, match=f"{key} must be a boolean"):
            CLIConfig.from_file(config_path)

    def test_string_row_setting_raises_error(self, tmp_path: Path) -> None:
        """Test that a string terminate_incomplete_rows is rejected."""
        config_path = tmp_path / "rows.json"
        config_path.write_text(json.dumps({"terminate_incomplete_rows": "no"}))
        with pytest.raises(ConfigError, match="terminate_incomplete_rows must be a boolean"):
            CLIConfig.from_file(config_path)
