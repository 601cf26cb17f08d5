"""
Configuration facade for the YouTube Bookmarks CLI.

Wraps the Pydantic-based ConfigurationManager behind a small interface the
command-line layer works with.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from .pydantic_config import ConfigurationManager, YouTubeBookmarksConfig


class Configuration:
    """Configuration manager that wraps the Pydantic-based system."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)
        """
        self._manager = ConfigurationManager(config_path)
        self._config = self._manager.config

    @property
    def config(self) -> YouTubeBookmarksConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of validated arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config

    def get_seed(self) -> Optional[int]:
        return self._config.generator.seed

    def get_count(self) -> int:
        return self._config.generator.count

    def get_max_tags(self) -> int:
        return self._config.generator.max_tags

    def get_output_format(self) -> str:
        return self._config.output.format


def create_configuration(config_path: Optional[Path] = None) -> Configuration:
    """
    Create a new Configuration instance.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Configuration instance
    """
    return Configuration(config_path)
