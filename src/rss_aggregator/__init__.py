"""RSS Aggregator.

Converts parsed RSS 2.0 feeds into an HTML news table, and a small directory
file of named feeds into an HTML index page.

Entry points:
- render_feed_page(): one channel as a table of news items
- render_index_page(): a directory of feeds as a list of links
- load_tree(): build the tree both renderers consume from an XML file
"""

__version__ = "0.1.0"
__author__ = "RSS Aggregator Team"

from .render import (
    find_child_tag,
    render_feed_page,
    render_index_page,
    render_item_row,
)
from .shared import MatchPolicy, PreconditionViolation, RenderConfig
from .tree import TreeNode, load_tree, load_tree_from_string

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Renderers
    "find_child_tag",
    "render_item_row",
    "render_feed_page",
    "render_index_page",

    # Tree model
    "TreeNode",
    "load_tree",
    "load_tree_from_string",

    # Configuration and errors
    "MatchPolicy",
    "RenderConfig",
    "PreconditionViolation",
]
