"""
Command-line interface for YouTube Bookmarks.

Demonstrates the core: validates YouTube watch URLs into bookmarks (or
generates fake ones), optionally tags every bookmark, and prints the result
as text or JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from yt_bookmarks import __version__
from yt_bookmarks.config.configuration import Configuration
from yt_bookmarks.config.pydantic_config import ConfigurationManager
from yt_bookmarks.core.data_models import YouTubeBookmark, add_tag
from yt_bookmarks.core.fake_data import BookmarkFaker
from yt_bookmarks.utils.error_handler import (
    ConfigurationError,
    URLValidationError,
    ValidationError,
)
from yt_bookmarks.utils.logging_setup import setup_logging


class CLIInterface:
    """Command line interface for the YouTube bookmarks demo."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="yt-bookmarks",
            description="YouTube Bookmarks - validate watch URLs and tag bookmarks",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  yt-bookmarks
  yt-bookmarks --count 5 --seed 42 --format json
  yt-bookmarks --url "https://www.youtube.com/watch?v=5gGha71avA5" --tag Rust
  yt-bookmarks --count 3 --add-tag Computer
  yt-bookmarks --create-config yt_bookmarks_config.toml

Without --url, fake bookmarks are generated. Configuration is read from
--config or from yt_bookmarks_config.toml/json in the current directory.
Environment variables: YT_BOOKMARKS_LOG_LEVEL, YT_BOOKMARKS_SEED
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--create-config",
            metavar="PATH",
            help="Write a sample configuration file (.toml or .json) and exit",
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--url",
            "-u",
            action="append",
            default=[],
            help="YouTube watch URL to bookmark (repeatable)",
        )
        parser.add_argument(
            "--tag",
            "-t",
            action="append",
            default=[],
            help="Initial tag for every --url bookmark (repeatable)",
        )
        parser.add_argument(
            "--add-tag",
            help="Tag appended to every bookmark after creation",
        )
        parser.add_argument(
            "--count",
            "-n",
            type=int,
            help="Number of fake bookmarks to generate when no --url is given",
        )
        parser.add_argument(
            "--seed",
            type=int,
            help="Random seed for reproducible fake bookmarks",
        )
        parser.add_argument(
            "--format",
            "-f",
            dest="output_format",
            choices=["text", "json"],
            help="Output format (default: text)",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable debug logging",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate arguments and return processed values.

        Raises:
            ValidationError: If arguments are inconsistent
        """
        if args.tag and not args.url:
            raise ValidationError("--tag requires at least one --url")

        if args.url and args.count is not None:
            raise ValidationError("--count cannot be combined with --url")

        if args.url and args.seed is not None:
            raise ValidationError("--seed cannot be combined with --url")

        config_path = Path(args.config) if args.config else None
        if config_path is not None and not config_path.exists():
            raise ValidationError(f"Configuration file not found: {config_path}")

        return {
            "config_path": config_path,
            "urls": args.url,
            "tags": args.tag,
            "add_tag": args.add_tag,
            "count": args.count,
            "seed": args.seed,
            "output_format": args.output_format,
            "verbose": args.verbose,
        }

    def build_bookmarks(
        self, validated_args: dict, config: Configuration
    ) -> List[YouTubeBookmark]:
        """
        Create bookmarks from --url arguments or the fake data generator.

        Raises:
            URLValidationError: If a --url is not a YouTube watch URL
        """
        if validated_args["urls"]:
            return [
                YouTubeBookmark.create(url, validated_args["tags"])
                for url in validated_args["urls"]
            ]

        faker = BookmarkFaker(seed=config.get_seed(), max_tags=config.get_max_tags())
        return faker.bookmarks(config.get_count())

    def render(self, bookmarks: List[YouTubeBookmark], output_format: str) -> str:
        if output_format == "json":
            return json.dumps(
                [bookmark.to_dict() for bookmark in bookmarks],
                indent=2,
                ensure_ascii=False,
            )

        lines = []
        for bookmark in bookmarks:
            lines.append(f"youtube_url: {bookmark.url}")
            lines.append(f"bookmark: {bookmark!r}")
        return "\n".join(lines)

    def _handle_create_config(self, path_str: str) -> int:
        """Handle creation of a sample configuration file."""
        output_path = Path(path_str)
        config_format = output_path.suffix.lower().lstrip(".")

        if config_format not in ("toml", "json"):
            print(
                f"Unsupported configuration file format: {output_path.suffix}",
                file=sys.stderr,
            )
            return 1

        if output_path.exists():
            print(
                f"Configuration file '{output_path}' already exists", file=sys.stderr
            )
            return 1

        ConfigurationManager.create_sample_config(output_path, config_format)
        print(f"Created configuration file: {output_path}")
        return 0

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            validated_args = self.validate_args(parsed_args)

            config = Configuration(validated_args["config_path"])
            config.update_from_args(validated_args)
            setup_logging(config.config)

            logger = logging.getLogger(__name__)
            logger.info("YouTube Bookmarks CLI starting")
            logger.debug(f"URLs: {validated_args['urls']}")
            logger.debug(f"Seed: {config.get_seed()}")

            bookmarks = self.build_bookmarks(validated_args, config)

            if validated_args["add_tag"] is not None:
                add_tag(bookmarks, validated_args["add_tag"])
                logger.info(
                    f"Added tag {validated_args['add_tag']!r} to {len(bookmarks)} bookmarks"
                )

            print(self.render(bookmarks, config.get_output_format()))
            return 0

        except URLValidationError as e:
            print(f"Invalid URL: {e}", file=sys.stderr)
            return 1
        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except ConfigurationError as e:
            print(f"Configuration Error: {e}", file=sys.stderr)
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
