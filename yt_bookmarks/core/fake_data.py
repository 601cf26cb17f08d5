"""
Generate synthetic YouTube bookmarks for tests and demo output.

Every generator takes a pluggable ``random.Random`` so callers can seed it
and get reproducible data.
"""

import logging
import random
from typing import List, Optional

from yt_bookmarks.utils.error_handler import FakeDataGenerationError, URLValidationError

from .data_models import VideoReference, YouTubeBookmark
from .url_validator import CANONICAL_WATCH_URL

logger = logging.getLogger(__name__)

VIDEO_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
VIDEO_ID_LENGTH = 11


class BookmarkFaker:
    """Generates random but valid video references and bookmarks."""

    TAGS = [
        "Rust", "Python", "Math", "Computer", "music", "live", "tutorial",
        "lecture", "talk", "conference", "gaming", "speedrun", "cooking",
        "travel", "news", "documentary", "science", "history", "podcast",
        "asmr", "review", "unboxing", "workout", "language-learning",
    ]

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_tags: int = 5,
    ):
        """
        Initialize the generator.

        Args:
            seed: Seed for a fresh random source (ignored if rng is given)
            rng: Random source to draw from
            max_tags: Upper bound on tags per generated bookmark
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_tags = max_tags

    def video_id(self) -> str:
        """Random 11 character id over the 64 symbol alphabet."""
        return "".join(self.rng.choices(VIDEO_ID_ALPHABET, k=VIDEO_ID_LENGTH))

    def video_reference(self) -> VideoReference:
        """
        Generate a VideoReference through the URL validator.

        Raises:
            FakeDataGenerationError: If the generated URL fails validation
        """
        url_str = CANONICAL_WATCH_URL.format(video_id=self.video_id())
        try:
            return VideoReference.parse(url_str)
        except URLValidationError as e:
            raise FakeDataGenerationError(f"Generate Fake Error: {url_str}") from e

    def tags(self) -> List[str]:
        count = self.rng.randint(1, self.max_tags)
        return [self.rng.choice(self.TAGS) for _ in range(count)]

    def bookmark(self) -> YouTubeBookmark:
        return YouTubeBookmark(url=self.video_reference(), tags=self.tags())

    def bookmarks(self, count: int) -> List[YouTubeBookmark]:
        """
        Generate independent bookmarks.

        Args:
            count: Number of bookmarks to generate

        Returns:
            List of bookmarks, each with its own tag list
        """
        logger.debug(f"Generating {count} fake bookmarks")
        return [self.bookmark() for _ in range(count)]


def fake_video_reference(rng: Optional[random.Random] = None) -> VideoReference:
    """Generate one random VideoReference from the given random source."""
    return BookmarkFaker(rng=rng).video_reference()


def fake_bookmark(rng: Optional[random.Random] = None) -> YouTubeBookmark:
    """Generate one random YouTubeBookmark from the given random source."""
    return BookmarkFaker(rng=rng).bookmark()


__all__ = [
    "VIDEO_ID_ALPHABET",
    "VIDEO_ID_LENGTH",
    "BookmarkFaker",
    "fake_video_reference",
    "fake_bookmark",
]
