"""Rendering of the feed index page."""

from typing import List, Optional

from rss_aggregator.render.lookup import require_tag
from rss_aggregator.shared import RenderConfig, get_logger
from rss_aggregator.tree import TreeNode

logger = get_logger(__name__, component="index")


def render_index_page(
    directory_root: TreeNode, config: Optional[RenderConfig] = None
) -> str:
    """Render a list of links, one per feed descriptor under ``directory_root``.

    Each direct child contributes ``<li><a href="{url}">{name}</a></li>`` in
    tree order. Missing ``url`` or ``name`` attributes render as empty
    strings. A ``title`` attribute on the root replaces the configured page
    title.

    Raises:
        PreconditionViolation: If ``directory_root`` is not a tag node
    """
    config = config or RenderConfig()
    require_tag(directory_root)

    title = directory_root.attribute_value("title") or config.index_title

    parts: List[str] = [
        f"<html>\n<head><title>{title}</title></head>\n"
        f"<body>\n<h1>{title}</h1>\n<ul>\n"
    ]
    for descriptor in directory_root:
        parts.append(
            f'<li><a href="{descriptor.attribute_value("url")}">'
            f'{descriptor.attribute_value("name")}</a></li>\n'
        )
    parts.append("</ul>\n</body>\n</html>\n")

    logger.debug(
        "Rendered index page",
        extra={"entry_count": directory_root.number_of_children}
    )
    return "".join(parts)
