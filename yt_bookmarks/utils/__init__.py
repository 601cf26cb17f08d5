"""
Utility modules for YouTube bookmarks.

This package contains the exception hierarchy and logging setup.
"""

from .error_handler import (
    ConfigurationError,
    FakeDataGenerationError,
    MalformedURLError,
    NotAYouTubeURLError,
    URLValidationError,
    ValidationError,
    YouTubeBookmarksError,
)
from .logging_setup import setup_logging

__all__ = [
    "YouTubeBookmarksError",
    "ValidationError",
    "URLValidationError",
    "MalformedURLError",
    "NotAYouTubeURLError",
    "ConfigurationError",
    "FakeDataGenerationError",
    "setup_logging",
]
