"""
Tests for Pydantic-based configuration system.

This module tests the pydantic_config module including:
- GeneratorConfig, OutputConfig and LoggingConfig validation
- ConfigurationManager loading from TOML/JSON files and the environment
- CLI overrides and sample config creation
- The Configuration facade
"""

import json
from pathlib import Path

import pytest
import toml
from pydantic import ValidationError

from yt_bookmarks.config.configuration import Configuration, create_configuration
from yt_bookmarks.config.pydantic_config import (
    ENV_LOG_LEVEL,
    ENV_SEED,
    ConfigurationManager,
    GeneratorConfig,
    LoggingConfig,
    OutputConfig,
    YouTubeBookmarksConfig,
    format_config_error,
)
from yt_bookmarks.utils.error_handler import ConfigurationError


# ============================================================================
# Model Tests
# ============================================================================


class TestGeneratorConfig:
    """Tests for GeneratorConfig model."""

    def test_default_values(self):
        """Test default configuration values."""
        config = GeneratorConfig()

        assert config.count == 1
        assert config.seed is None
        assert config.max_tags == 5

    def test_count_boundaries(self):
        """Test count boundary validation."""
        assert GeneratorConfig(count=1).count == 1
        assert GeneratorConfig(count=1000).count == 1000

        with pytest.raises(ValidationError):
            GeneratorConfig(count=0)

        with pytest.raises(ValidationError):
            GeneratorConfig(count=1001)

    def test_max_tags_out_of_range(self):
        """Test max_tags range validation."""
        with pytest.raises(ValidationError):
            GeneratorConfig(max_tags=0)

        with pytest.raises(ValidationError):
            GeneratorConfig(max_tags=21)


class TestOutputConfig:
    """Tests for OutputConfig model."""

    def test_default_format(self):
        assert OutputConfig().format == "text"

    def test_invalid_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValidationError):
            OutputConfig(format="xml")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_default_values(self):
        """Test default configuration values."""
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.log_file is None
        assert config.log_dir == Path("logs")
        assert config.console_output is True

    def test_level_case_insensitive(self):
        """Test that levels are normalized to upper case."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_log_dir_string_converted(self):
        """Test that log_dir strings become Path objects."""
        assert LoggingConfig(log_dir="var/log").log_dir == Path("var/log")


class TestYouTubeBookmarksConfig:
    """Tests for the main configuration model."""

    def test_defaults(self):
        config = YouTubeBookmarksConfig()

        assert config.generator == GeneratorConfig()
        assert config.output == OutputConfig()
        assert config.logging == LoggingConfig()

    def test_nested_dict(self):
        """Test building from nested dictionaries."""
        config = YouTubeBookmarksConfig(
            generator={"count": 10, "seed": 1}, output={"format": "json"}
        )

        assert config.generator.count == 10
        assert config.generator.seed == 1
        assert config.output.format == "json"


# ============================================================================
# ConfigurationManager Tests
# ============================================================================


class TestConfigurationManager:
    """Tests for ConfigurationManager."""

    def test_defaults_without_file(self):
        """Test loading defaults when no config file exists."""
        manager = ConfigurationManager()

        assert manager.config == YouTubeBookmarksConfig()

    def test_load_toml(self, tmp_path):
        """Test loading a TOML file."""
        path = tmp_path / "custom.toml"
        path.write_text(toml.dumps({"generator": {"count": 7, "seed": 3}}))

        manager = ConfigurationManager(path)

        assert manager.config.generator.count == 7
        assert manager.config.generator.seed == 3

    def test_load_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"output": {"format": "json"}}))

        manager = ConfigurationManager(path)

        assert manager.config.output.format == "json"

    def test_default_path_in_working_directory(self, tmp_path):
        """Test that yt_bookmarks_config.toml in the cwd is picked up."""
        (tmp_path / "yt_bookmarks_config.toml").write_text(
            toml.dumps({"generator": {"count": 4}})
        )

        assert ConfigurationManager().config.generator.count == 4

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager(tmp_path / "missing.toml")

    def test_unsupported_format(self, tmp_path):
        """Test that unknown extensions are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("generator: {}")

        with pytest.raises(ConfigurationError, match="Unsupported"):
            ConfigurationManager(path)

    def test_invalid_toml_syntax(self, tmp_path):
        """Test that unparseable files raise ConfigurationError."""
        path = tmp_path / "broken.toml"
        path.write_text("[generator\ncount = ")

        with pytest.raises(ConfigurationError, match="Failed to load"):
            ConfigurationManager(path)

    def test_invalid_values(self, tmp_path):
        """Test that out-of-range values produce a formatted error."""
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"generator": {"count": 0}}))

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(path)

        assert "generator.count" in str(exc_info.value)

    def test_environment_overrides(self, monkeypatch):
        """Test environment variable overrides."""
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
        monkeypatch.setenv(ENV_SEED, "42")

        config = ConfigurationManager().config

        assert config.logging.level == "DEBUG"
        assert config.generator.seed == 42

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        """Test that the environment wins over file values."""
        path = tmp_path / "custom.toml"
        path.write_text(toml.dumps({"generator": {"seed": 1}}))
        monkeypatch.setenv(ENV_SEED, "2")

        assert ConfigurationManager(path).config.generator.seed == 2

    def test_update_from_cli_args(self):
        """Test CLI overrides."""
        manager = ConfigurationManager()
        manager.update_from_cli_args(
            {"count": 9, "seed": 5, "output_format": "json", "verbose": True}
        )

        assert manager.config.generator.count == 9
        assert manager.config.generator.seed == 5
        assert manager.config.output.format == "json"
        assert manager.config.logging.level == "DEBUG"

    def test_update_from_cli_args_ignores_unset(self):
        """Test that None values keep the loaded configuration."""
        manager = ConfigurationManager()
        manager.update_from_cli_args({"count": None, "seed": None})

        assert manager.config == YouTubeBookmarksConfig()

    def test_update_from_cli_args_invalid(self):
        """Test that invalid overrides raise ConfigurationError."""
        manager = ConfigurationManager()

        with pytest.raises(ConfigurationError):
            manager.update_from_cli_args({"count": 5000})

    @pytest.mark.parametrize("suffix", ["toml", "json"])
    def test_create_sample_config_loads(self, tmp_path, suffix):
        """Test that sample configs load back."""
        path = tmp_path / f"sample.{suffix}"
        ConfigurationManager.create_sample_config(path, suffix)

        config = ConfigurationManager(path).config

        assert config.generator.count == 3

    def test_create_sample_config_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            ConfigurationManager.create_sample_config(tmp_path / "x.ini", "ini")


class TestFormatConfigError:
    """Tests for format_config_error."""

    def test_lists_each_field(self):
        """Test that every invalid field is reported."""
        with pytest.raises(ValidationError) as exc_info:
            YouTubeBookmarksConfig(generator={"count": 0, "max_tags": 99})

        message = format_config_error(exc_info.value)

        assert message.startswith("Configuration validation failed:")
        assert "generator.count" in message
        assert "generator.max_tags" in message


# ============================================================================
# Configuration Facade Tests
# ============================================================================


class TestConfiguration:
    """Tests for the Configuration facade."""

    def test_accessors(self):
        """Test accessor defaults."""
        config = create_configuration()

        assert isinstance(config, Configuration)
        assert config.get_seed() is None
        assert config.get_count() == 1
        assert config.get_max_tags() == 5
        assert config.get_output_format() == "text"

    def test_update_from_args(self):
        """Test that updates are visible through the facade."""
        config = Configuration()
        config.update_from_args({"seed": 11, "output_format": "json"})

        assert config.get_seed() == 11
        assert config.get_output_format() == "json"
        assert config.config.generator.seed == 11
