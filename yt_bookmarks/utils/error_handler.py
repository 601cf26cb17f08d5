"""
Exception Hierarchy for YouTube Bookmarks

All custom exceptions for the yt_bookmarks package are defined here.
Fallible operations raise these to their immediate caller; nothing in the
core retries or logs, only the CLI turns them into exit codes.
"""

from typing import Optional


class YouTubeBookmarksError(Exception):
    """Base exception for all yt_bookmarks errors."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(YouTubeBookmarksError):
    """General validation errors."""

    pass


class URLValidationError(ValidationError):
    """URL-specific validation errors."""

    pass


class MalformedURLError(URLValidationError):
    """
    The input is not syntactically a URL.

    Wraps the underlying parser diagnostic unchanged: ``str(error)`` is the
    diagnostic's message and ``error.original`` is the diagnostic itself.
    """

    def __init__(self, original: ValueError):
        self.original = original
        super().__init__(str(original))


class NotAYouTubeURLError(URLValidationError):
    """
    The input is a URL but not a YouTube watch URL.

    Raised for a missing host, a host other than ``www.youtube.com`` and a
    missing ``v`` query parameter alike.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Invalid youtube url.")


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(YouTubeBookmarksError):
    """Configuration-related errors."""

    pass


# ============================================================================
# Generation Errors
# ============================================================================


class FakeDataGenerationError(YouTubeBookmarksError):
    """Synthetic data generation produced an invalid value."""

    pass


__all__ = [
    "YouTubeBookmarksError",
    "ValidationError",
    "URLValidationError",
    "MalformedURLError",
    "NotAYouTubeURLError",
    "ConfigurationError",
    "FakeDataGenerationError",
]
