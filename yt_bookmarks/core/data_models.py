"""
Data models for YouTube Bookmarks.

This module defines the validated video reference value and the bookmark
record built on top of it, plus the bulk tagging operation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, MutableSequence

from .url_validator import extract_video_id, format_watch_url


@dataclass(frozen=True)
class VideoReference:
    """
    A validated YouTube watch URL, reduced to its video id.

    Build instances with ``VideoReference.parse``; the value is immutable
    and renders back to the canonical watch URL via ``str()``.
    """

    video_id: str

    @classmethod
    def parse(cls, url_str: str) -> "VideoReference":
        """
        Parse a raw URL string into a video reference.

        Args:
            url_str: Raw URL string

        Returns:
            VideoReference for the URL's ``v`` parameter

        Raises:
            MalformedURLError: If the string is not a valid URL
            NotAYouTubeURLError: If it is not a www.youtube.com watch URL
        """
        return cls(video_id=extract_video_id(url_str))

    @property
    def url(self) -> str:
        """Canonical watch URL for this video."""
        return format_watch_url(self.video_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"video_id": self.video_id, "url": self.url}

    def __str__(self) -> str:
        return self.url


def parse_video_reference(url_str: str) -> VideoReference:
    """Parse a raw URL string into a VideoReference."""
    return VideoReference.parse(url_str)


@dataclass
class YouTubeBookmark:
    """
    A saved YouTube video together with its user-assigned tags.

    Tags keep insertion order and may contain duplicates.
    """

    url: VideoReference
    tags: List[str] = field(default_factory=list)

    @classmethod
    def create(cls, url_str: str, tags: List[str]) -> "YouTubeBookmark":
        """
        Create a bookmark from a raw URL string and initial tags.

        Args:
            url_str: Raw URL string, validated as a YouTube watch URL
            tags: Initial tags, stored as given

        Returns:
            YouTubeBookmark object

        Raises:
            MalformedURLError: If the string is not a valid URL
            NotAYouTubeURLError: If it is not a www.youtube.com watch URL
        """
        return cls(url=VideoReference.parse(url_str), tags=list(tags))

    @property
    def video_id(self) -> str:
        return self.url.video_id

    def copy(self) -> "YouTubeBookmark":
        """Create a copy with its own tag list."""
        return YouTubeBookmark(url=self.url, tags=self.tags.copy())

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert bookmark to dictionary.

        Returns:
            Dictionary representation of the bookmark
        """
        return {
            "url": str(self.url),
            "video_id": self.url.video_id,
            "tags": list(self.tags),
        }


def add_tag(bookmarks: MutableSequence[YouTubeBookmark], tag: str) -> None:
    """
    Append a tag to every bookmark in the sequence.

    Tags already present are appended again. The sequence itself is left
    untouched; only each bookmark's tag list changes.

    Args:
        bookmarks: Bookmarks to tag in place
        tag: Tag to append
    """
    for bookmark in bookmarks:
        bookmark.tags.append(tag)


__all__ = [
    "VideoReference",
    "YouTubeBookmark",
    "parse_video_reference",
    "add_tag",
]
