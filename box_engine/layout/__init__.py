"""
Layout tree for the box engine.
"""

from .box_metrics import Rect, EdgeSizes, Dimensions
from .layout import BoxType, LayoutBox, build_layout_tree

__all__ = ['Rect', 'EdgeSizes', 'Dimensions', 'BoxType', 'LayoutBox', 'build_layout_tree']
