"""
Stylesheet model: declarations, rules and the stylesheet itself.
"""

from typing import List, Optional, Sequence, Tuple

from box_engine.dom import Element
from box_engine.utils.config import CLASS_SPLIT_LITERAL
from .selector import Selector, Specificity, serialize_identifier
from .values import Value


class Declaration:
    """A ``name: value`` pair."""

    def __init__(self, name: str, value: Value):
        self.name = name
        self.value = value

    def to_css(self) -> str:
        return f"{serialize_identifier(self.name)}: {self.value.to_css()};"

    def __eq__(self, other):
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self):
        return hash((self.name, self.value))

    def __repr__(self):
        return f"Declaration({self.name!r}, {self.value!r})"


class Rule:
    """
    Selectors sharing one block of declarations.

    The selectors are kept highest specificity first, so the first one that
    matches an element is also the most specific one that does.
    """

    def __init__(self, selectors: Sequence[Selector], declarations: Sequence[Declaration]):
        self.selectors: List[Selector] = list(selectors)
        self.declarations: List[Declaration] = list(declarations)

    def match(self, element: Element,
              class_split: str = CLASS_SPLIT_LITERAL) -> Optional[Tuple[Specificity, 'Rule']]:
        """
        Find the first selector of this rule that matches ``element``.

        Args:
            element: The element to test
            class_split: How the element's class attribute is tokenised

        Returns:
            ``(specificity, rule)`` for the matching selector, or None
        """
        for selector in self.selectors:
            if selector.matches(element, class_split):
                return selector.specificity(), self
        return None

    def to_css(self) -> str:
        selectors = ", ".join(selector.to_css() for selector in self.selectors)
        declarations = " ".join(declaration.to_css() for declaration in self.declarations)
        if declarations:
            return f"{selectors} {{ {declarations} }}"
        return f"{selectors} {{}}"

    def __repr__(self):
        return f"Rule({self.selectors!r}, {self.declarations!r})"


class Stylesheet:
    """Rules in document order. Order breaks ties between equal specificities."""

    def __init__(self, rules: Optional[Sequence[Rule]] = None):
        self.rules: List[Rule] = list(rules or [])

    def to_css(self) -> str:
        return "\n".join(rule.to_css() for rule in self.rules)

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __repr__(self):
        return f"Stylesheet({len(self.rules)} rules)"
