#!/usr/bin/env python3
"""
Main entry point for YouTube Bookmarks.
"""

import sys
from yt_bookmarks.cli import main


if __name__ == "__main__":
    sys.exit(main())
