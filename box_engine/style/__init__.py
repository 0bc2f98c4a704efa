"""
Style resolution: selector matching, the cascade and the styled tree.
"""

from .styled_node import Display, PropertyMap, StyledNode
from .cascade import MatchedRule, matching_rules, specified_values, style_tree

__all__ = [
    'Display', 'PropertyMap', 'StyledNode',
    'MatchedRule', 'matching_rules', 'specified_values', 'style_tree'
]
