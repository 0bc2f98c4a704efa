"""
Text node implementation.
"""

from .node import Node, NodeType


class Text(Node):
    """Literal character data. Text nodes never have children."""

    node_type = NodeType.TEXT_NODE

    def __init__(self, data: str):
        super().__init__()
        self.data = data if data is not None else ""

    @property
    def node_name(self) -> str:
        return "#text"

    def to_markup(self) -> str:
        """
        Raises:
            ValueError: If the text contains ``<``, which the grammar has no
                escape for
        """
        if "<" in self.data:
            raise ValueError(f"Text cannot be serialised: {self.data!r} contains '<'")
        return self.data

    def _same_data(self, other: 'Text') -> bool:
        return self.data == other.data

    def __repr__(self):
        return f"Text({self.data!r})"
