"""Main CLI entry point for the rss-aggregator command-line tool.

Provides two commands: ``index`` renders a directory of named feeds as a
page of links, and ``feed`` renders a local RSS 2.0 file as a news table.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from rss_aggregator import __version__
from rss_aggregator.render import find_child_tag, render_feed_page, render_index_page
from rss_aggregator.shared import (
    AggregatorError,
    CLIConfig,
    ConfigError,
    MatchPolicy,
    PreconditionViolation,
    get_logger,
)
from rss_aggregator.tree import load_tree

HTML_SUFFIXES = {".html", ".htm"}

logger = get_logger(__name__, None, "cli")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="rss-aggregator",
        description="Convert RSS 2.0 feeds and feed directories into HTML pages"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Index command
    index_parser = subparsers.add_parser(
        "index", help="Render a directory of feeds as a page of links"
    )
    index_parser.add_argument(
        "source",
        type=Path,
        help="XML file listing <feed url=... name=...> entries"
    )
    index_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output HTML file (default: stdout)"
    )

    # Feed command
    feed_parser = subparsers.add_parser(
        "feed", help="Render an RSS 2.0 file as a news table"
    )
    feed_parser.add_argument(
        "source",
        type=Path,
        help="RSS 2.0 XML file"
    )
    feed_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output HTML file (default: stdout)"
    )

    # Global options
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON configuration file"
    )
    parser.add_argument(
        "--first-match",
        action="store_true",
        help="Use the first child when a tag repeats (default: last)"
    )
    parser.add_argument(
        "--close-rows",
        action="store_true",
        help="Close rows of items that have neither description nor title"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def load_config(args: argparse.Namespace) -> CLIConfig:
    """Build the CLI configuration from an optional file and flag overrides."""
    config = CLIConfig.from_file(args.config) if args.config else CLIConfig()

    if args.first_match:
        config.render = replace(config.render, match_policy=MatchPolicy.FIRST)
    if args.close_rows:
        config.render = replace(config.render, terminate_incomplete_rows=True)
    config.verbose = config.verbose or args.verbose
    config.quiet = config.quiet or args.quiet
    return config


def output_path(path: Path) -> Path:
    """Append ``.html`` to ``path`` unless it already names an HTML file."""
    if path.suffix.lower() in HTML_SUFFIXES:
        return path
    return path.with_name(path.name + ".html")


def write_page(html: str, output: Optional[Path]) -> None:
    """Write a rendered page to ``output``, or to stdout when it is None."""
    if output is None:
        sys.stdout.write(html)
        return

    target = output_path(output)
    target.write_text(html, encoding="utf-8")
    logger.info("Page written", extra={"output": str(target)})
    print(f"Page written to {target}", file=sys.stderr)


def cmd_index(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle index command."""
    root = load_tree(args.source)
    write_page(render_index_page(root, config.render), args.output)
    return 0


def cmd_feed(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle feed command."""
    root = load_tree(args.source)
    channel_index = find_child_tag(root, "channel", config.render.match_policy)
    if channel_index is None:
        raise PreconditionViolation(f"{args.source}: root has no <channel> child")

    channel = root.child(channel_index)
    write_page(render_feed_page(channel, config=config.render), args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Set up logging verbosity
    if config.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif config.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        if args.command == "index":
            return cmd_index(args, config)
        elif args.command == "feed":
            return cmd_feed(args, config)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

    except (AggregatorError, OSError) as e:
        logger.error("Command failed", extra={"command": args.command})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
