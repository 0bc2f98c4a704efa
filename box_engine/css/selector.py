"""
CSS selectors and specificity.

Only simple selectors are supported: an optional tag name, an optional id
and any number of classes, e.g. ``div#main.note.wide``. Combinators are not
part of the grammar.
"""

from typing import List, Optional, Tuple

from box_engine.dom import Element
from box_engine.utils.config import CLASS_SPLIT_LITERAL

# (id count, class count, tag count), compared lexicographically
Specificity = Tuple[int, int, int]


def valid_identifier_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in "-_"


def serialize_identifier(name: str) -> str:
    """
    Write an identifier back out exactly as the parser reads it.

    The grammar has no escapes, so a name the parser could not have produced
    cannot be written either.

    Raises:
        ValueError: If the name is empty or contains a character outside
            ``[A-Za-z0-9_-]``
    """
    if not name or not all(valid_identifier_char(c) for c in name):
        raise ValueError(f"Cannot serialize identifier {name!r}")
    return name


class Selector:
    """Base class of the selector variants."""

    def specificity(self) -> Specificity:
        raise NotImplementedError

    def matches(self, element: Element, class_split: str = CLASS_SPLIT_LITERAL) -> bool:
        raise NotImplementedError

    def to_css(self) -> str:
        raise NotImplementedError


class SimpleSelector(Selector):
    """
    A compound of optional tag, optional id and a list of classes.

    Any condition that is absent holds vacuously, so ``*`` (all absent)
    matches every element.
    """

    def __init__(self,
                 tag_name: Optional[str] = None,
                 id: Optional[str] = None,
                 classes: Optional[List[str]] = None):
        self.tag_name = tag_name
        self.id = id
        self.classes: List[str] = list(classes or [])

    def specificity(self) -> Specificity:
        a = 1 if self.id is not None else 0
        b = len(self.classes)
        c = 1 if self.tag_name is not None else 0
        return (a, b, c)

    def matches(self, element: Element, class_split: str = CLASS_SPLIT_LITERAL) -> bool:
        """
        Check whether every condition of this selector holds for ``element``.

        Args:
            element: The element to test
            class_split: How the element's class attribute is tokenised

        Returns:
            True if the tag, id and all classes match
        """
        if self.tag_name is not None and element.tag_name != self.tag_name:
            return False

        if self.id is not None and element.id() != self.id:
            return False

        if self.classes:
            element_classes = element.classes(class_split)
            if any(cls not in element_classes for cls in self.classes):
                return False

        return True

    def to_css(self) -> str:
        text = serialize_identifier(self.tag_name) if self.tag_name is not None else ""
        if self.id is not None:
            text += "#" + serialize_identifier(self.id)
        text += "".join("." + serialize_identifier(cls) for cls in self.classes)
        return text or "*"

    def __eq__(self, other):
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return (self.tag_name, self.id, self.classes) == (other.tag_name, other.id, other.classes)

    def __hash__(self):
        return hash((self.tag_name, self.id, tuple(self.classes)))

    def __repr__(self):
        return f"SimpleSelector(tag_name={self.tag_name!r}, id={self.id!r}, classes={self.classes!r})"
