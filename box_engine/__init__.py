"""
Box Engine - turns markup and a stylesheet into a tree of layout boxes.
"""

import logging

from box_engine.errors import (
    BoxEngineError, ParseError, MarkupSyntaxError, NestingDepthError, StyleSyntaxError,
    LayoutContractError, MarkupParseError, StyleParseError, LayoutError
)
from box_engine.core import (
    BoxEngine, parse_markup, parse_stylesheet, resolve_styles, build_layout_tree
)

__version__ = "0.1.0"
__description__ = "Markup and stylesheet to layout box tree pipeline"

logger = logging.getLogger(__name__)

__all__ = [
    'BoxEngine', 'parse_markup', 'parse_stylesheet', 'resolve_styles', 'build_layout_tree',
    'BoxEngineError', 'ParseError', 'MarkupSyntaxError', 'NestingDepthError',
    'StyleSyntaxError', 'LayoutContractError', 'MarkupParseError', 'StyleParseError',
    'LayoutError'
]
