"""Child lookup by tag label."""

from typing import Optional

from rss_aggregator.shared import MatchPolicy, PreconditionViolation
from rss_aggregator.tree import TreeNode


def require_tag(node: TreeNode, label: Optional[str] = None) -> None:
    """Raise PreconditionViolation unless ``node`` is a tag (with ``label``)."""
    if not isinstance(node, TreeNode) or not node.is_tag:
        raise PreconditionViolation("Violation of: node is a tag")
    if label is not None and node.label != label:
        raise PreconditionViolation(
            f"Violation of: the label of the root is a <{label}> tag "
            f"(got <{node.label}>)"
        )


def find_child_tag(
    node: TreeNode,
    tag_name: str,
    policy: MatchPolicy = MatchPolicy.LAST,
) -> Optional[int]:
    """Find the index of a child of ``node`` labeled ``tag_name``.

    Under ``MatchPolicy.LAST`` the whole child list is scanned and the last
    matching index is returned; under ``MatchPolicy.FIRST`` the scan stops at
    the first match. Only tag children are compared: a text child whose
    content happens to equal ``tag_name`` is skipped.

    Args:
        node: Tag node whose direct children are searched
        tag_name: Non-empty label to look for
        policy: Which match wins when several children share the label

    Returns:
        The child index, or None when no child carries the label

    Raises:
        PreconditionViolation: If ``node`` is not a tag or ``tag_name`` is empty
    """
    require_tag(node)
    if not tag_name:
        raise PreconditionViolation("Violation of: tag is not empty")

    found: Optional[int] = None
    for index, child in enumerate(node.children):
        if child.is_tag and child.label == tag_name:
            found = index
            if policy is MatchPolicy.FIRST:
                break
    return found
