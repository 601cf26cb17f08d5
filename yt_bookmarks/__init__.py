"""
YouTube Bookmarks.

Validates YouTube watch URLs into video references and keeps tagged
bookmarks of them.
"""

__version__ = "1.0.0"
