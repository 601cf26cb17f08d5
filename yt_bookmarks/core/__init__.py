"""
Core YouTube bookmark modules.

This package contains the URL validator, the bookmark data models and the
synthetic data generator used by tests and the demo CLI.
"""

from .data_models import VideoReference, YouTubeBookmark, add_tag, parse_video_reference
from .fake_data import BookmarkFaker, fake_bookmark, fake_video_reference
from .url_validator import extract_video_id, format_watch_url, is_youtube_watch_url

__all__ = [
    'VideoReference',
    'YouTubeBookmark',
    'add_tag',
    'parse_video_reference',
    'BookmarkFaker',
    'fake_bookmark',
    'fake_video_reference',
    'extract_video_id',
    'format_watch_url',
    'is_youtube_watch_url',
]
