#!/usr/bin/env python3
"""
Quick Start Guide for the RSS aggregator.

Renders the sample directory and feed under ``examples/data`` and shows how
the match policy and row termination settings change the output.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rss_aggregator import (
    RenderConfig,
    find_child_tag,
    load_tree,
    render_feed_page,
    render_index_page,
)

DATA_DIR = Path(__file__).parent / "data"


def index_example():
    """Render the feed directory as a page of links."""
    print("Step 1: Index page")
    print("-" * 30)

    directory = load_tree(DATA_DIR / "feeds.xml")
    print(render_index_page(directory))


def feed_example():
    """Render one feed with the faithful and corrected settings."""
    root = load_tree(DATA_DIR / "news.xml")
    channel = root.child(find_child_tag(root, "channel"))

    print("Step 2: Feed page (faithful)")
    print("-" * 30)
    print(render_feed_page(channel))

    # The last item has neither description nor title
    print("Step 3: Feed page (corrected)")
    print("-" * 30)
    print(render_feed_page(channel, config=RenderConfig.corrected()))


def main():
    """Main function."""
    index_example()
    feed_example()
    return 0


if __name__ == "__main__":
    sys.exit(main())
