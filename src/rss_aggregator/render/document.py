"""Rendering of a whole RSS channel as an HTML page.

The page is a fixed skeleton: a header naming the channel and opening a
three-column news table, one row per item in document order, and a footer
closing the table and page.
"""

from typing import List, Optional, Sequence

from rss_aggregator.render.fields import render_item_row
from rss_aggregator.render.lookup import find_child_tag, require_tag
from rss_aggregator.shared import PreconditionViolation, RenderConfig, get_logger
from rss_aggregator.tree import TreeNode

TABLE_COLUMNS = ("Date", "Source", "News")
FOOTER = "</table>\n</body>\n</html>\n"

logger = get_logger(__name__, component="document")


def _required_child(channel: TreeNode, tag: str, config: RenderConfig) -> TreeNode:
    index = find_child_tag(channel, tag, config.match_policy)
    if index is None:
        raise PreconditionViolation(f"Violation of: channel has a <{tag}> child")
    return channel.child(index)


def render_header(channel: TreeNode, config: Optional[RenderConfig] = None) -> str:
    """Render the opening tags of a feed page.

    Emits the page title, an ``<h1>`` heading (linked to the channel's
    ``<link>`` when it has a non-empty one), the channel description and the
    table header row.

    Raises:
        PreconditionViolation: If ``channel`` is not a ``<channel>`` tag or
            lacks a ``title`` or ``description`` child
    """
    config = config or RenderConfig()
    require_tag(channel, "channel")

    title = _required_child(channel, "title", config).render_text()
    description = _required_child(channel, "description", config).render_text()

    heading = title
    link_index = find_child_tag(channel, "link", config.match_policy)
    if link_index is not None:
        link = channel.child(link_index).render_text()
        if link:
            heading = f'<a href="{link}">{title}</a>'

    header_cells = "".join(f"<th>{column}</th>\n" for column in TABLE_COLUMNS)
    return (
        f"<html><head><title>{title}</title></head><body>\n"
        f"<h1>{heading}</h1>\n"
        f"<p>{description}</p>\n"
        f'<table border="{config.table_border}">\n'
        f"<tr>\n{header_cells}</tr>\n"
    )


def render_footer() -> str:
    """Render the closing tags of a feed page."""
    return FOOTER


def render_feed_page(
    channel: TreeNode,
    items: Optional[Sequence[TreeNode]] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render a complete feed page.

    Args:
        channel: Tag node labeled ``channel``
        items: Items to tabulate; defaults to the channel's ``<item>``
            children in tree order
        config: Render settings; defaults to ``RenderConfig()``

    Returns:
        The HTML document

    Raises:
        PreconditionViolation: If the channel or any item breaks its contract;
            raised before any part of the page is rendered
    """
    config = config or RenderConfig()

    require_tag(channel, "channel")
    if items is None:
        items = [child for child in channel if child.is_tag and child.label == "item"]
    for item in items:
        require_tag(item, "item")

    parts: List[str] = [render_header(channel, config)]
    parts.extend(render_item_row(item, config) for item in items)
    parts.append(render_footer())

    logger.debug("Rendered feed page", extra={"item_count": len(items)})
    return "".join(parts)
