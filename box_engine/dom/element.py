"""
Element implementation for the document tree.
"""

from typing import Dict, Optional, Sequence, Set

from box_engine.utils.config import CLASS_SPLIT_LITERAL, CLASS_SPLIT_WHITESPACE
from .node import Node, NodeType


class Element(Node):
    """
    A tagged container with a unique-key attribute map.

    Tag names are kept exactly as written; matching against selectors is
    case sensitive.
    """

    node_type = NodeType.ELEMENT_NODE

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Dict[str, str]] = None,
                 children: Optional[Sequence[Node]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Attribute name to value mapping
            children: Child nodes in document order
        """
        super().__init__(children)
        self.tag_name = tag_name
        self.attributes: Dict[str, str] = dict(attributes or {})

    @property
    def node_name(self) -> str:
        return self.tag_name

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def id(self) -> Optional[str]:
        """The ``id`` attribute, or None when absent."""
        return self.attributes.get("id")

    def classes(self, mode: str = CLASS_SPLIT_LITERAL) -> Set[str]:
        """
        The set of class names from the ``class`` attribute.

        Args:
            mode: ``"literal"`` splits on the single space character,
                ``"whitespace"`` splits on any run of whitespace. Empty
                tokens left by consecutive separators are dropped.

        Returns:
            The class names, empty when the attribute is absent
        """
        class_attr = self.attributes.get("class")
        if class_attr is None:
            return set()

        if mode == CLASS_SPLIT_LITERAL:
            tokens = class_attr.split(" ")
        elif mode == CLASS_SPLIT_WHITESPACE:
            tokens = class_attr.split()
        else:
            raise ValueError(f"Unknown class split mode: {mode!r}")

        return {token for token in tokens if token}

    def to_markup(self) -> str:
        inner = "".join(child.to_markup() for child in self.children)
        return f"<{self.tag_name}{self._format_attributes()}>{inner}</{self.tag_name}>"

    def _format_attributes(self) -> str:
        parts = []
        for name, value in self.attributes.items():
            if '"' in value and "'" in value:
                raise ValueError(f"Attribute {name!r} cannot be serialised: value contains both quote characters")
            quote = "'" if '"' in value else '"'
            parts.append(f" {name}={quote}{value}{quote}")
        return "".join(parts)

    def _same_data(self, other: 'Element') -> bool:
        return self.tag_name == other.tag_name and self.attributes == other.attributes

    def __repr__(self):
        return f"Element({self.tag_name!r}, {self.attributes!r}, {len(self.children)} children)"
