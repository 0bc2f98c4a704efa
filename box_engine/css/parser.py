"""
CSS parser.

Grammar (whitespace allowed between tokens):

    stylesheet   := rule*
    rule         := selector (',' selector)* '{' declaration* '}'
    selector     := ( '*' | tag | '#' ident | '.' ident )*
    declaration  := ident ':' value ';'
    value        := length | color | ident
    length       := [0-9.]+ 'px'
    color        := '#' hex hex hex hex hex hex

At-rules, comments and combinators are rejected rather than skipped. The
first error aborts the whole stylesheet.
"""

import logging
import string
from typing import List

from box_engine.errors import StyleSyntaxError
from box_engine.utils.scanner import Scanner
from .selector import Selector, SimpleSelector, valid_identifier_char
from .stylesheet import Declaration, Rule, Stylesheet
from .values import Color, ColorValue, Keyword, Length, Unit, Value

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)


class CSSParser(Scanner):
    """Parser producing a Stylesheet from CSS source."""

    def fail(self, detail: str, offset: int = None) -> StyleSyntaxError:
        return StyleSyntaxError(self.pos if offset is None else offset, detail)

    def expected(self, literal: str, offset: int = None) -> StyleSyntaxError:
        return self.fail(f"Expected {literal!r}", offset)

    def end_of_input(self) -> StyleSyntaxError:
        return self.fail("Unexpected end of input")

    def parse(self) -> Stylesheet:
        stylesheet = Stylesheet(self.parse_rules())
        logger.debug(f"Parsed stylesheet ({len(self.input)} chars) into {len(stylesheet.rules)} rules")
        return stylesheet

    def parse_rules(self) -> List[Rule]:
        rules = []
        while True:
            self.consume_whitespace()
            if self.eof():
                break
            if self.starts_with("@"):
                raise self.fail("At-rules are not supported")
            if self.starts_with("/*"):
                raise self.fail("Comments are not supported")
            rules.append(self.parse_rule())
        return rules

    def parse_rule(self) -> Rule:
        selectors = self.parse_selectors()
        declarations = self.parse_declarations()
        return Rule(selectors, declarations)

    def parse_selectors(self) -> List[Selector]:
        """
        Parse a comma separated selector list up to (not including) ``{``.

        Returns:
            The selectors, highest specificity first; selectors with equal
            specificity keep their source order
        """
        selectors: List[Selector] = []
        while True:
            start = self.pos
            selector = self.parse_simple_selector()
            if self.pos == start:
                raise self.fail("Expected selector")
            selectors.append(selector)
            self.consume_whitespace()
            if self.eof():
                raise self.fail("Unexpected end of input in selector list")

            c = self.next_char()
            if c == ",":
                self.consume_char()
                self.consume_whitespace()
            elif c == "{":
                break
            else:
                raise self.fail(f"Unexpected character {c!r} in selector list")

        selectors.sort(key=lambda selector: selector.specificity(), reverse=True)
        return selectors

    def parse_simple_selector(self) -> SimpleSelector:
        selector = SimpleSelector()
        while not self.eof():
            c = self.next_char()
            if c == "#":
                if selector.id is not None:
                    raise self.fail("Selector has more than one id")
                self.consume_char()
                selector.id = self.parse_identifier("id")
            elif c == ".":
                self.consume_char()
                selector.classes.append(self.parse_identifier("class name"))
            elif c == "*":
                # universal selector
                self.consume_char()
            elif valid_identifier_char(c):
                if selector.tag_name is not None:
                    raise self.fail("Selector has more than one tag name")
                selector.tag_name = self.parse_identifier("tag name")
            else:
                break
        return selector

    def parse_identifier(self, what: str = "identifier") -> str:
        identifier = self.consume_while(valid_identifier_char)
        if not identifier:
            raise self.fail(f"Expected {what}")
        return identifier

    def parse_declarations(self) -> List[Declaration]:
        self.expect("{")
        declarations = []
        while True:
            self.consume_whitespace()
            if self.eof():
                raise self.expected("}")
            if self.next_char() == "}":
                self.consume_char()
                break
            declarations.append(self.parse_declaration())
        return declarations

    def parse_declaration(self) -> Declaration:
        name = self.parse_identifier("property name")
        self.consume_whitespace()
        self.expect(":")
        self.consume_whitespace()
        value = self.parse_value()
        self.consume_whitespace()
        self.expect(";")
        return Declaration(name, value)

    def parse_value(self) -> Value:
        c = self.next_char()
        if c in string.digits:
            return self.parse_length()
        if c == "#":
            return self.parse_color()
        return Keyword(self.parse_identifier("value"))

    def parse_length(self) -> Length:
        return Length(self.parse_float(), self.parse_unit())

    def parse_float(self) -> float:
        start = self.pos
        text = self.consume_while(lambda c: c in string.digits or c == ".")
        try:
            return float(text)
        except ValueError:
            raise self.fail(f"Invalid number {text!r}", start) from None

    def parse_unit(self) -> Unit:
        start = self.pos
        unit = self.parse_identifier("unit")
        if unit.lower() == "px":
            return Unit.PX
        raise self.fail(f"Unrecognized unit {unit!r}", start)

    def parse_hex_pair(self) -> int:
        pair = self.input[self.pos:self.pos + 2]
        if len(pair) < 2 or not all(c in HEX_DIGITS for c in pair):
            raise self.fail(f"Malformed hex color component {pair!r}")
        self.pos += 2
        return int(pair, 16)

    def parse_color(self) -> ColorValue:
        self.expect("#")
        return ColorValue(Color(
            r=self.parse_hex_pair(),
            g=self.parse_hex_pair(),
            b=self.parse_hex_pair(),
            a=255
        ))


def parse_css(source: str) -> Stylesheet:
    """
    Parse CSS source into a Stylesheet.

    Args:
        source: CSS text

    Returns:
        The rules in source order

    Raises:
        StyleSyntaxError: On malformed input
    """
    return CSSParser(source).parse()
