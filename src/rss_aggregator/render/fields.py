"""Rendering of a single feed item as an HTML table row.

Each row holds three cells in a fixed order: publication date, source and
content. Missing ``pubDate`` or ``source`` children produce empty cells. The
content cell shows the item's ``description``, falling back to its
``title``; an item with neither leaves the row open unless
``RenderConfig.terminate_incomplete_rows`` is set.
"""

from typing import List, Optional

from rss_aggregator.render.lookup import find_child_tag, require_tag
from rss_aggregator.shared import RenderConfig, get_logger
from rss_aggregator.tree import TreeNode

ROW_OPEN = "<tr>\n"
ROW_CLOSE = "</tr>\n"
EMPTY_CELL = "<td></td>\n"

# Content cell candidates, in order of preference
CONTENT_TAGS = ("description", "title")

logger = get_logger(__name__, component="fields")


def _cell(text: str) -> str:
    return f"<td>{text}</td>\n"


def _lookup_cell(item: TreeNode, tag: str, config: RenderConfig) -> Optional[str]:
    """Cell for the ``tag`` child of ``item``, or None if it is absent."""
    index = find_child_tag(item, tag, config.match_policy)
    if index is None:
        return None
    return _cell(item.child(index).render_text())


def render_item_row(item: TreeNode, config: Optional[RenderConfig] = None) -> str:
    """Render one ``<item>`` as a table row.

    Args:
        item: Tag node labeled ``item``
        config: Render settings; defaults to ``RenderConfig()``

    Returns:
        The row's HTML; unterminated when the item has neither a
        ``description`` nor a ``title`` and rows are not forced closed

    Raises:
        PreconditionViolation: If ``item`` is not an ``<item>`` tag
    """
    config = config or RenderConfig()
    require_tag(item, "item")

    parts: List[str] = [ROW_OPEN]
    parts.append(_lookup_cell(item, "pubDate", config) or EMPTY_CELL)
    parts.append(_lookup_cell(item, "source", config) or EMPTY_CELL)

    for tag in CONTENT_TAGS:
        content = _lookup_cell(item, tag, config)
        if content is not None:
            parts.append(content)
            parts.append(ROW_CLOSE)
            break
    else:
        if config.terminate_incomplete_rows:
            parts.append(EMPTY_CELL)
            parts.append(ROW_CLOSE)
        else:
            logger.warning("Item has neither description nor title; row left open")

    return "".join(parts)
