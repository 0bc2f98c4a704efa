"""
Document tree for the box engine.
This package provides the Node model and the markup parser that builds it.
"""

from typing import Dict, Optional, Sequence

from .node import Node, NodeType
from .element import Element
from .text import Text
from .comment import Comment
from .parser import MarkupParser, parse


def text(data: str) -> Text:
    return Text(data)


def elem(tag_name: str, attrs: Optional[Dict[str, str]] = None,
         children: Optional[Sequence[Node]] = None) -> Element:
    return Element(tag_name, attrs, children)


def comment(data: str) -> Comment:
    return Comment(data)


__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'Comment', 'MarkupParser', 'parse',
    'text', 'elem', 'comment'
]
