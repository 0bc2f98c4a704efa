"""
Selector matching and the cascade.

For each element every rule contributes at most one match: its most specific
matching selector. Matches are applied lowest specificity first, so more
specific declarations overwrite less specific ones and, for equal
specificity, later rules overwrite earlier ones. Values are never inherited.
"""

import logging
from typing import List, Tuple

from box_engine.css import Rule, Specificity, Stylesheet
from box_engine.dom import Element, Node
from box_engine.utils.config import CLASS_SPLIT_LITERAL
from .styled_node import PropertyMap, StyledNode

logger = logging.getLogger(__name__)

MatchedRule = Tuple[Specificity, Rule]


def matching_rules(element: Element, stylesheet: Stylesheet,
                   class_split: str = CLASS_SPLIT_LITERAL) -> List[MatchedRule]:
    """All rules matching ``element``, in stylesheet order."""
    matches = []
    for rule in stylesheet.rules:
        match = rule.match(element, class_split)
        if match is not None:
            matches.append(match)
    return matches


def specified_values(element: Element, stylesheet: Stylesheet,
                     class_split: str = CLASS_SPLIT_LITERAL) -> PropertyMap:
    """
    Resolve the property values for one element.

    Args:
        element: The element to style
        stylesheet: The rules to match against
        class_split: How the element's class attribute is tokenised

    Returns:
        Property name to value mapping
    """
    values: PropertyMap = {}
    rules = matching_rules(element, stylesheet, class_split)

    # list.sort is stable: equal specificities stay in stylesheet order
    rules.sort(key=lambda match: match[0])

    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value
    return values


def style_tree(root: Node, stylesheet: Stylesheet,
               class_split: str = CLASS_SPLIT_LITERAL) -> StyledNode:
    """
    Build the styled tree mirroring ``root``.

    Text and comment nodes get an empty property map.

    Args:
        root: Root of the document tree
        stylesheet: The rules to apply
        class_split: How class attributes are tokenised

    Returns:
        The styled root
    """
    styled_root = StyledNode(root, _values_for(root, stylesheet, class_split))
    stack = [(root, styled_root)]
    while stack:
        node, styled = stack.pop()
        for child in node.children:
            styled_child = StyledNode(child, _values_for(child, stylesheet, class_split))
            styled.children.append(styled_child)
            stack.append((child, styled_child))
    return styled_root


def _values_for(node: Node, stylesheet: Stylesheet, class_split: str) -> PropertyMap:
    if node.is_element:
        return specified_values(node, stylesheet, class_split)
    if node.is_text or node.is_comment:
        return {}
    raise TypeError(f"Unsupported node type: {node.node_type!r}")
