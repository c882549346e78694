"""Tree-to-HTML renderers.

Key Components:
    find_child_tag: Locate a child by tag label
    render_item_row: One news item as a table row
    render_feed_page: A channel as a complete news table page
    render_index_page: A directory of feeds as a list of links
"""

from .document import render_feed_page, render_footer, render_header
from .fields import render_item_row
from .index import render_index_page
from .lookup import find_child_tag

__all__ = [
    "find_child_tag",
    "render_item_row",
    "render_header",
    "render_footer",
    "render_feed_page",
    "render_index_page",
]
