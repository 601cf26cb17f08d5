"""
Logging configuration for YouTube Bookmarks.

This module sets up logging based on configuration settings.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(config=None, log_file: Optional[str] = None) -> Optional[Path]:
    """
    Set up logging configuration.

    Args:
        config: YouTubeBookmarksConfig (defaults used when None)
        log_file: Optional log file name override

    Returns:
        Path of the log file, or None when logging to console only
    """
    log_level = "WARNING"
    console_output = True
    log_dir = Path("logs")

    if config is not None:
        log_level = config.logging.level
        console_output = config.logging.console_output
        log_dir = config.logging.log_dir
        if log_file is None:
            log_file = config.logging.log_file

    # Configure logging format
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Configure handlers
    handlers = []
    log_path = None

    # File handler
    if log_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = log_dir / f"{Path(log_file).stem}_{timestamp}.log"

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    # Console handler
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, log_level.upper()), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    logger.info(f"YouTube Bookmarks starting - Log file: {log_path}")
    logger.info(f"Log level: {log_level}")

    return log_path
