"""
Styled tree nodes.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence

from box_engine.css import Keyword, Value
from box_engine.dom import Node

PropertyMap = Dict[str, Value]


class Display(Enum):
    """Box generation classes for the ``display`` property."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """
    A document node paired with its specified property values.

    The styled node refers to its document node but never owns or mutates
    it; ``children`` mirror ``node.children`` one to one.
    """

    def __init__(self, node: Node, specified_values: PropertyMap,
                 children: Optional[Sequence['StyledNode']] = None):
        self.node = node
        self.specified_values: PropertyMap = specified_values
        self.children: List['StyledNode'] = list(children or [])

    def value(self, name: str) -> Optional[Value]:
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Return ``name``, else ``fallback_name``, else ``default``.

        Useful for shorthand-style lookups such as ``margin-left`` falling
        back to ``margin``.
        """
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        return default if value is None else value

    def display(self) -> Display:
        """
        Classify this node for box generation.

        ``block`` and ``none`` map to their own classes; any other keyword,
        a non-keyword value or no value at all means inline. Comments
        always generate nothing.
        """
        if self.node.is_comment:
            return Display.NONE

        value = self.value("display")
        if isinstance(value, Keyword):
            if value.keyword == "block":
                return Display.BLOCK
            if value.keyword == "none":
                return Display.NONE
        return Display.INLINE

    def walk(self):
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self):
        return f"StyledNode({self.node!r}, {self.specified_values!r})"
