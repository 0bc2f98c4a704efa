"""
Core box engine pipeline.

This module provides the BoxEngine class that runs the markup parser, the CSS
parser, the style resolver and the layout tree builder in sequence, and the
module-level functions that make up the programmatic interface.
"""

import logging
from typing import Optional

from box_engine.css import Stylesheet
from box_engine.css.parser import parse_css
from box_engine.dom import Node
from box_engine.dom.parser import parse
from box_engine.errors import BoxEngineError
from box_engine.layout import LayoutBox
from box_engine.layout import build_layout_tree as _build_layout_tree
from box_engine.style import StyledNode, style_tree
from box_engine.utils.config import CLASS_SPLIT_LITERAL, DEFAULT_MAX_DEPTH, Config
from box_engine.utils.logging import PerformanceLogger, log_exception, setup_logging

logger = logging.getLogger(__name__)


def parse_markup(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """
    Parse markup into a Node tree.

    Raises:
        MarkupSyntaxError: On malformed input
    """
    return parse(source, max_depth=max_depth)


def parse_stylesheet(source: str) -> Stylesheet:
    """
    Parse CSS into a Stylesheet.

    Raises:
        StyleSyntaxError: On malformed input
    """
    return parse_css(source)


def resolve_styles(root: Node, sheet: Stylesheet, class_split: str = CLASS_SPLIT_LITERAL) -> StyledNode:
    """Build the styled tree for ``root``. Never fails on well-formed trees."""
    return style_tree(root, sheet, class_split)


def build_layout_tree(styled_root: StyledNode) -> LayoutBox:
    """
    Build the layout tree for a styled tree.

    Raises:
        LayoutContractError: If the root's display is ``none``
    """
    return _build_layout_tree(styled_root)


class BoxEngine:
    """
    Runs the whole pipeline with settings taken from a Config.

    Each call is independent; the engine keeps no document state between
    calls and may be shared between threads.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the engine.

        Args:
            config: Settings; defaults are used when omitted
        """
        self.config = config or Config()

        log_file = self.config.get("logging.file")
        if log_file:
            setup_logging(log_file=log_file,
                          console_level=self.config.get("logging.console_level", "WARNING"))

        self.max_depth = self.config.max_depth
        self.class_split = self.config.class_split
        self.perf = PerformanceLogger(logger, "BoxEngine")

        logger.debug(f"Box engine initialized (max_depth={self.max_depth}, class_split={self.class_split})")

    def parse_markup(self, source: str) -> Node:
        return parse_markup(source, max_depth=self.max_depth)

    def parse_stylesheet(self, source: str) -> Stylesheet:
        return parse_stylesheet(source)

    def resolve_styles(self, root: Node, sheet: Stylesheet) -> StyledNode:
        return resolve_styles(root, sheet, class_split=self.class_split)

    def build_layout_tree(self, styled_root: StyledNode) -> LayoutBox:
        return build_layout_tree(styled_root)

    def render(self, markup: str, css: str) -> LayoutBox:
        """
        Run every stage and return the layout tree.

        Args:
            markup: Markup source
            css: Stylesheet source

        Returns:
            The root layout box

        Raises:
            BoxEngineError: The first error raised by any stage
        """
        try:
            self.perf.start("parse_markup")
            root = self.parse_markup(markup)
            self.perf.end("parse_markup")

            self.perf.start("parse_stylesheet")
            sheet = self.parse_stylesheet(css)
            self.perf.end("parse_stylesheet")

            self.perf.start("resolve_styles")
            styled = self.resolve_styles(root, sheet)
            self.perf.end("resolve_styles")

            self.perf.start("build_layout_tree")
            layout_root = self.build_layout_tree(styled)
            self.perf.end("build_layout_tree")
        except BoxEngineError as e:
            self.perf.clear()
            log_exception(logger, e, "Rendering failed")
            raise

        return layout_root
