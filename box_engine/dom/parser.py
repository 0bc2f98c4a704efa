"""
Markup parser.

A recursive-descent parser for a small tag/attribute/text grammar:

    nodes      := (ws? node)*
    node       := comment | element | text
    element    := '<' name attribute* ws? '>' nodes '</' name '>'
    attribute  := ws name '=' quoted
    quoted     := '"' [^"]* '"' | "'" [^']* "'"
    comment    := '<!--' .* '-->'
    text       := [^<]+

There is no error recovery: the first problem raises MarkupSyntaxError.
"""

import logging
from typing import Dict, List, Tuple

from box_engine.errors import MarkupSyntaxError, NestingDepthError
from box_engine.utils.config import DEFAULT_MAX_DEPTH, check_max_depth
from box_engine.utils.scanner import Scanner
from .comment import Comment
from .element import Element
from .node import Node
from .text import Text

logger = logging.getLogger(__name__)

COMMENT_START = "<!--"
COMMENT_END = "-->"
ROOT_TAG = "html"


def is_name_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


class MarkupParser(Scanner):
    """Parser producing a Node tree from markup source."""

    def __init__(self, source: str, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the parser.

        Args:
            source: Markup text
            max_depth: Maximum element nesting depth

        Raises:
            ValueError: If max_depth is outside 1..max_safe_depth()
        """
        super().__init__(source)
        self.max_depth = check_max_depth(max_depth)

    def fail(self, detail: str, offset: int = None) -> MarkupSyntaxError:
        return MarkupSyntaxError(self.pos if offset is None else offset, detail)

    def end_of_input(self) -> MarkupSyntaxError:
        return MarkupSyntaxError(self.pos, "more input",
                                 message=f"Unexpected end of input at offset {self.pos}")

    def parse(self) -> Node:
        """
        Parse the whole source.

        Returns:
            The single top-level node, or a synthetic ``html`` element
            wrapping every top-level node when there is not exactly one
        """
        nodes = self.parse_nodes(depth=0)
        if not self.eof():
            # parse_nodes only stops early on a closing tag
            raise self.fail("end of input")

        if len(nodes) == 1:
            root = nodes[0]
        else:
            root = Element(ROOT_TAG, {}, nodes)

        logger.debug(f"Parsed markup ({len(self.input)} chars) into <{getattr(root, 'tag_name', '#text')}> root")
        return root

    def parse_nodes(self, depth: int) -> List[Node]:
        """Parse sibling nodes until end of input or a closing tag."""
        nodes = []
        while True:
            self.consume_whitespace()
            if self.eof() or self.starts_with("</"):
                break
            nodes.append(self.parse_node(depth))
        return nodes

    def parse_node(self, depth: int) -> Node:
        if self.starts_with(COMMENT_START):
            return self.parse_comment()
        if self.starts_with("<"):
            return self.parse_element(depth)
        return self.parse_text()

    def parse_text(self) -> Text:
        return Text(self.consume_while(lambda c: c != "<"))

    def parse_comment(self) -> Comment:
        self.expect(COMMENT_START)
        end = self.input.find(COMMENT_END, self.pos)
        if end < 0:
            raise self.fail(COMMENT_END, len(self.input))
        data = self.input[self.pos:end]
        self.pos = end + len(COMMENT_END)
        return Comment(data)

    def parse_name(self, what: str) -> str:
        name = self.consume_while(is_name_char)
        if not name:
            raise self.fail(what)
        return name

    def parse_element(self, depth: int) -> Element:
        start = self.pos
        if depth >= self.max_depth:
            raise NestingDepthError(start, self.max_depth)

        self.expect("<")
        tag_name = self.parse_name("tag name")
        attributes = self.parse_attributes()
        self.expect(">")

        children = self.parse_nodes(depth + 1)

        closing = f"</{tag_name}>"
        if not self.starts_with("</"):
            raise self.fail(closing)
        self.pos += 2
        name_start = self.pos
        closing_name = self.consume_while(is_name_char)
        if closing_name != tag_name:
            raise MarkupSyntaxError(
                name_start, tag_name,
                message=(f"Mismatched closing tag at offset {name_start}: "
                         f"expected {closing!r}, found '</{closing_name}'"))
        self.expect(">")

        return Element(tag_name, attributes, children)

    def parse_attributes(self) -> Dict[str, str]:
        """Parse attributes up to (not including) the closing ``>``."""
        attributes = {}
        while True:
            separated = self.consume_whitespace()
            if self.eof():
                raise self.fail(">")
            if self.next_char() == ">":
                break
            if not separated:
                raise self.fail("whitespace")
            name, value = self.parse_attr()
            attributes[name] = value
        return attributes

    def parse_attr(self) -> Tuple[str, str]:
        name = self.parse_name("attribute name")
        self.expect("=")
        value = self.parse_attr_value()
        return name, value

    def parse_attr_value(self) -> str:
        if self.eof():
            raise self.fail("quoted attribute value")
        open_quote = self.next_char()
        if open_quote not in ('"', "'"):
            raise self.fail("quoted attribute value")
        self.pos += 1

        value = self.consume_while(lambda c: c != open_quote)
        if self.eof():
            raise self.fail(open_quote)
        self.pos += 1
        return value


def parse(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """
    Parse markup into a Node tree.

    Args:
        source: Markup text
        max_depth: Maximum element nesting depth

    Returns:
        The document root

    Raises:
        MarkupSyntaxError: On malformed input
    """
    return MarkupParser(source, max_depth=max_depth).parse()
