"""Read-only markup tree consumed by the renderers.

A tree is made of two kinds of node: tag nodes, which carry a label, an
ordered tuple of children and an attribute mapping, and text nodes, whose
label is the literal text they hold. Trees are built once by the loader and
never mutated afterwards.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple


@dataclass(frozen=True)
class TreeNode:
    """Single node of a parsed markup document."""

    label: str
    children: Tuple["TreeNode", ...] = ()
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    is_tag: bool = True

    def __post_init__(self) -> None:
        """Validate the node and freeze its children and attributes."""
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

        if self.is_tag:
            if not self.label:
                raise ValueError("Tag label cannot be empty")
            for child in self.children:
                if not isinstance(child, TreeNode):
                    raise TypeError("Child must be a TreeNode instance")
        elif self.children or self.attributes:
            raise ValueError("Text nodes cannot have children or attributes")

    @classmethod
    def tag_node(
        cls,
        label: str,
        children: Iterable["TreeNode"] = (),
        attributes: Optional[Dict[str, str]] = None,
    ) -> "TreeNode":
        """Create a tag node."""
        return cls(label, tuple(children), attributes or {}, True)

    @classmethod
    def text_node(cls, text: str) -> "TreeNode":
        """Create a text node holding ``text``."""
        return cls(text, (), {}, False)

    @classmethod
    def element(cls, label: str, text: str, **attributes: str) -> "TreeNode":
        """Create a tag node wrapping a single text child.

        Shorthand for the common ``<title>Some text</title>`` shape.
        """
        return cls.tag_node(label, [cls.text_node(text)], attributes)

    @property
    def number_of_children(self) -> int:
        """Number of direct children."""
        return len(self.children)

    def child(self, index: int) -> "TreeNode":
        """Return the child at ``index``."""
        if not (0 <= index < len(self.children)):
            raise IndexError("Child index out of range")
        return self.children[index]

    def __iter__(self) -> Iterator["TreeNode"]:
        return iter(self.children)

    def has_attribute(self, name: str) -> bool:
        """Check if node has specific attribute."""
        return name in self.attributes

    def attribute_value(self, name: str) -> str:
        """Get attribute value, or an empty string when it is absent."""
        return self.attributes.get(name, "")

    def render_text(self) -> str:
        """Text placed in an HTML cell for this node.

        A tag wrapping exactly one text child yields that text, a childless
        tag yields an empty string, and anything else falls back to the
        node's markup string form.
        """
        if not self.is_tag:
            return self.label
        if not self.children:
            return ""
        if len(self.children) == 1 and not self.children[0].is_tag:
            return self.children[0].label
        return str(self)

    def __str__(self) -> str:
        if not self.is_tag:
            return self.label

        attrs = "".join(
            f' {name}="{value}"' for name, value in self.attributes.items()
        )
        if not self.children:
            return f"<{self.label}{attrs} />"

        inner = "".join(str(child) for child in self.children)
        return f"<{self.label}{attrs}>{inner}</{self.label}>"
