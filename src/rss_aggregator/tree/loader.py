"""Build :class:`TreeNode` trees from XML sources.

Parsing is delegated to ``xml.etree.ElementTree``; this module only converts
the resulting elements into the immutable tree the renderers consume.
Whitespace-only text (indentation between elements) is dropped; any other
text is kept verbatim, surrounding whitespace included.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Union

from rss_aggregator.shared import FeedLoadError, get_logger
from rss_aggregator.tree.node import TreeNode

PathLike = Union[str, Path]


def _text_nodes(text: Optional[str]) -> List[TreeNode]:
    if not text or not text.strip():
        return []
    return [TreeNode.text_node(text)]


def _convert(element: ET.Element) -> TreeNode:
    """Convert an ElementTree element, keeping text and tails in document order."""
    children = _text_nodes(element.text)
    for sub in element:
        children.append(_convert(sub))
        children.extend(_text_nodes(sub.tail))
    return TreeNode.tag_node(element.tag, children, dict(element.attrib))


def load_tree_from_string(xml_string: Union[str, bytes]) -> TreeNode:
    """Parse XML content and return its root node.

    Raises:
        FeedLoadError: If the content is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml_string)
    except ET.ParseError as e:
        raise FeedLoadError(f"Malformed XML: {e}") from e
    return _convert(root)


def load_tree(path: PathLike) -> TreeNode:
    """Parse the XML file at ``path`` and return its root node.

    Raises:
        FeedLoadError: If the file cannot be read or is not well-formed XML.
    """
    source = str(path)
    logger = get_logger(__name__, source, "loader")

    try:
        document = ET.parse(source)
    except OSError as e:
        raise FeedLoadError(f"Cannot read {source}: {e}", source) from e
    except ET.ParseError as e:
        raise FeedLoadError(f"Malformed XML in {source}: {e}", source) from e

    root = _convert(document.getroot())
    logger.debug(
        "Loaded tree",
        extra={"root_label": root.label, "child_count": root.number_of_children}
    )
    return root
