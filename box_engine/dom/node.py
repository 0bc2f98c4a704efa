"""
Node implementation for the document tree.

A document is a strict tree: every node owns its children and every child
has exactly one parent. Trees are built once by the markup parser and are
read-only afterwards.
"""

from enum import IntEnum
from typing import Iterator, List, Optional, Sequence


class NodeType(IntEnum):
    """Node types, numbered as in the DOM."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8


class Node:
    """
    Base class of the Text, Element and Comment variants.

    Attributes:
        node_type: The variant tag
        children: Owned child nodes in document order
        parent_node: The owning node, or None for a root
    """

    node_type: NodeType

    def __init__(self, children: Optional[Sequence['Node']] = None):
        """
        Initialize a node and take ownership of ``children``.

        Args:
            children: Child nodes; none of them may already have a parent

        Raises:
            ValueError: If a child already belongs to another node
        """
        self.parent_node: Optional['Node'] = None
        self.children: List['Node'] = []

        for child in children or ():
            if child.parent_node is not None or child is self:
                raise ValueError("Node already has a parent; trees may not share nodes")
            child.parent_node = self
            self.children.append(child)

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    @property
    def is_comment(self) -> bool:
        return self.node_type == NodeType.COMMENT_NODE

    def has_child_nodes(self) -> bool:
        return len(self.children) > 0

    def walk(self) -> Iterator['Node']:
        """Yield this node and all of its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def text_content(self) -> str:
        """Concatenated data of all descendant text nodes, comments excluded."""
        return "".join(node.data for node in self.walk() if node.is_text)

    def to_markup(self) -> str:
        """Serialise this subtree back to markup."""
        raise NotImplementedError

    def is_equal_node(self, other: 'Node') -> bool:
        """
        Check structural equality with another node.

        Args:
            other: The node to compare with

        Returns:
            True if both subtrees have the same variants, data and shape
        """
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if not isinstance(b, Node) or a.node_type != b.node_type:
                return False
            if not a._same_data(b) or len(a.children) != len(b.children):
                return False
            stack.extend(zip(a.children, b.children))
        return True

    def _same_data(self, other: 'Node') -> bool:
        raise NotImplementedError
