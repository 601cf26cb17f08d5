"""Configuration management for YouTube Bookmarks."""
