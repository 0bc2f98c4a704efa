"""
Comment node implementation.

Comments are kept in the tree as their own variant so that later stages can
tell them apart from text. They carry no style and generate no layout box.
"""

from .node import Node, NodeType


class Comment(Node):
    """The body of a ``<!-- ... -->`` comment."""

    node_type = NodeType.COMMENT_NODE

    def __init__(self, data: str):
        super().__init__()
        self.data = data if data is not None else ""

    @property
    def node_name(self) -> str:
        return "#comment"

    def to_markup(self) -> str:
        if "-->" in self.data:
            raise ValueError(f"Comment cannot be serialised: {self.data!r} contains '-->'")
        return f"<!--{self.data}-->"

    def _same_data(self, other: 'Comment') -> bool:
        return self.data == other.data

    def __repr__(self):
        return f"Comment({self.data!r})"
