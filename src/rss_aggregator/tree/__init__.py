"""Markup tree model and loader.

Key Components:
    TreeNode: Immutable tag or text node with ordered children and attributes
    load_tree: Build a tree from an XML file
    load_tree_from_string: Build a tree from XML content
"""

from .loader import load_tree, load_tree_from_string
from .node import TreeNode

__all__ = [
    "TreeNode",
    "load_tree",
    "load_tree_from_string",
]
