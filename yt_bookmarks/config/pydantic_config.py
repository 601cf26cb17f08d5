"""
Pydantic-based configuration system for YouTube Bookmarks.

Configuration is read from a TOML or JSON file, overridden by environment
variables and command-line arguments, and validated by Pydantic models.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from yt_bookmarks.utils.error_handler import ConfigurationError

ENV_LOG_LEVEL = "YT_BOOKMARKS_LOG_LEVEL"
ENV_SEED = "YT_BOOKMARKS_SEED"


class GeneratorConfig(BaseModel):
    """Synthetic bookmark generation settings."""

    count: int = Field(
        default=1,
        ge=1,
        le=1000,
        description="Number of fake bookmarks to generate",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducible output",
    )
    max_tags: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Maximum tags per generated bookmark",
    )


class OutputConfig(BaseModel):
    """Output format settings."""

    format: Literal["text", "json"] = Field(
        default="text",
        description="Output format",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file name; a timestamped file is written to log_dir",
    )
    log_dir: Path = Field(
        default=Path("logs"),
        description="Directory for log files",
    )
    console_output: bool = Field(
        default=True,
        description="Log to stderr",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_dir", mode="before")
    @classmethod
    def validate_log_dir(cls, v):
        """Ensure log directory is a Path object."""
        if isinstance(v, str):
            return Path(v)
        return v


class YouTubeBookmarksConfig(BaseModel):
    """Main configuration model."""

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    DEFAULT_CONFIG_NAMES = ["yt_bookmarks_config.toml", "yt_bookmarks_config.json"]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)

        Raises:
            ConfigurationError: If the file cannot be read or fails validation
        """
        self._config: Optional[YouTubeBookmarksConfig] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> List[Path]:
        """Get list of default configuration file paths to try."""
        return [Path.cwd() / name for name in self.DEFAULT_CONFIG_NAMES]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    break

        self._load_overrides_from_env(config_data)

        try:
            self._config = YouTubeBookmarksConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                return toml.load(config_path)
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

    def _load_overrides_from_env(self, config_data: Dict) -> None:
        """Apply environment variable overrides."""
        log_level = os.getenv(ENV_LOG_LEVEL)
        seed = os.getenv(ENV_SEED)

        if log_level:
            config_data.setdefault("logging", {})["level"] = log_level

        if seed:
            config_data.setdefault("generator", {})["seed"] = seed

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("count") is not None:
            config_dict["generator"]["count"] = args["count"]

        if args.get("seed") is not None:
            config_dict["generator"]["seed"] = args["seed"]

        if args.get("output_format"):
            config_dict["output"]["format"] = args["output_format"]

        if args.get("verbose"):
            config_dict["logging"]["level"] = "DEBUG"

        try:
            self._config = YouTubeBookmarksConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    @property
    def config(self) -> YouTubeBookmarksConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "generator": {"count": 3, "max_tags": 5},
            "output": {"format": "text"},
            "logging": {"level": "WARNING", "log_dir": "logs", "console_output": True},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


def _format_error_location(location: tuple) -> str:
    """Format the error location path."""
    if not location:
        return "Configuration"

    return ".".join(str(part) for part in location)


def format_config_error(error: ValidationError) -> str:
    """
    Convert a Pydantic ValidationError into a readable message.

    Args:
        error: Pydantic ValidationError instance

    Returns:
        One line per invalid field, prefixed with a header
    """
    lines = ["Configuration validation failed:"]
    for detail in error.errors():
        location = _format_error_location(detail["loc"])
        input_value = detail.get("input", "N/A")
        lines.append(f"  {location}: {detail['msg']} (got: {input_value!r})")
    return "\n".join(lines)
