"""
Pytest configuration and shared fixtures for YouTube bookmark tests.

This module provides common fixtures shared across multiple test modules.
"""

import random
from pathlib import Path
from typing import List

import pytest

from yt_bookmarks.config.pydantic_config import ENV_LOG_LEVEL, ENV_SEED
from yt_bookmarks.core.data_models import VideoReference, YouTubeBookmark
from yt_bookmarks.core.fake_data import BookmarkFaker
from tests.fixtures.test_data import VALID_WATCH_URLS, create_sample_bookmarks

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path: Path):
    """Isolate tests from user configuration files and environment overrides."""
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_SEED, raising=False)
    monkeypatch.chdir(tmp_path)


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def seeded_rng() -> random.Random:
    """Random source with a fixed seed."""
    return random.Random(1234)


@pytest.fixture
def faker(seeded_rng: random.Random) -> BookmarkFaker:
    """Bookmark generator drawing from the seeded random source."""
    return BookmarkFaker(rng=seeded_rng)


@pytest.fixture
def sample_reference() -> VideoReference:
    """A parsed reference for the first sample watch URL."""
    return VideoReference.parse(VALID_WATCH_URLS[0])


@pytest.fixture
def sample_bookmarks() -> List[YouTubeBookmark]:
    """Two bookmarks tagged 'Rust' and 'Math'."""
    return create_sample_bookmarks()


@pytest.fixture
def many_fake_bookmarks(faker: BookmarkFaker) -> List[YouTubeBookmark]:
    """One hundred independent fake bookmarks."""
    return faker.bookmarks(100)
