"""
Layout tree construction.

Walks a styled tree and produces one box per displayed node. A block box
cannot hold inline boxes directly, so runs of consecutive inline children
are wrapped in a shared anonymous block box. A block child ends the run;
the next inline child starts a fresh anonymous box.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional

from box_engine.errors import LayoutContractError
from box_engine.style import Display, StyledNode
from .box_metrics import Dimensions

logger = logging.getLogger(__name__)


class BoxType(Enum):
    """Kinds of layout box."""
    BLOCK_NODE = "block"
    INLINE_NODE = "inline"
    ANONYMOUS_BLOCK = "anonymous"


class LayoutBox:
    """
    A box in the layout tree.

    Block and inline boxes refer to the styled node they were generated
    for; anonymous blocks have none.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box with zeroed dimensions.

        Args:
            box_type: The kind of box
            style_node: The generating styled node, None for anonymous boxes

        Raises:
            ValueError: If the style node does not agree with the box type
        """
        if (box_type == BoxType.ANONYMOUS_BLOCK) != (style_node is None):
            raise ValueError("Anonymous boxes have no styled node; all other boxes need one")

        self.box_type = box_type
        self.style_node = style_node
        self.dimensions = Dimensions()
        self.children: List['LayoutBox'] = []

    @property
    def is_anonymous(self) -> bool:
        return self.box_type == BoxType.ANONYMOUS_BLOCK

    def styled_node(self) -> Optional[StyledNode]:
        return self.style_node

    def get_inline_container(self) -> 'LayoutBox':
        """
        Return the box that inline children of this box are appended to.

        Inline and anonymous boxes contain inline children themselves. A
        block box uses its trailing anonymous child, creating one when the
        last child is not anonymous.
        """
        if self.box_type in (BoxType.INLINE_NODE, BoxType.ANONYMOUS_BLOCK):
            return self
        if self.box_type == BoxType.BLOCK_NODE:
            if not self.children or not self.children[-1].is_anonymous:
                self.children.append(LayoutBox(BoxType.ANONYMOUS_BLOCK))
            return self.children[-1]
        raise TypeError(f"Unsupported box type: {self.box_type!r}")

    def walk(self) -> Iterator['LayoutBox']:
        """Yield this box and its descendants in pre-order."""
        stack = [self]
        while stack:
            box = stack.pop()
            yield box
            stack.extend(reversed(box.children))

    def label(self) -> str:
        if self.is_anonymous:
            return "anonymous"
        node = self.style_node.node
        name = getattr(node, "tag_name", None) or node.node_name
        return f"{self.box_type.value} <{name}>"

    def dump(self, indent: str = "  ") -> str:
        """Indented outline of the box tree, one box per line."""
        lines = []
        stack = [(self, 0)]
        while stack:
            box, depth = stack.pop()
            lines.append(f"{indent * depth}{box.label()}")
            stack.extend((child, depth + 1) for child in reversed(box.children))
        return "\n".join(lines)

    def __repr__(self):
        return f"LayoutBox({self.label()}, {len(self.children)} children)"


def _box_type_for(display: Display) -> BoxType:
    if display == Display.BLOCK:
        return BoxType.BLOCK_NODE
    if display == Display.INLINE:
        return BoxType.INLINE_NODE
    raise TypeError(f"No box type for display {display!r}")


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """
    Build the layout tree for a styled tree.

    Args:
        style_node: The styled root

    Returns:
        The root layout box

    Raises:
        LayoutContractError: If the root's display is ``none``
    """
    if style_node.display() == Display.NONE:
        raise LayoutContractError("root node has no displayable box")
    return _build_box(style_node)


def _build_box(style_node: StyledNode) -> LayoutBox:
    root = LayoutBox(_box_type_for(style_node.display()), style_node)
    stack = [(style_node, root)]

    while stack:
        styled, box = stack.pop()
        for child in styled.children:
            display = child.display()
            if display == Display.NONE:
                continue
            child_box = LayoutBox(_box_type_for(display), child)
            if display == Display.BLOCK:
                box.children.append(child_box)
            else:
                box.get_inline_container().children.append(child_box)
            stack.append((child, child_box))

    return root
