"""
CSS support for the box engine.
This package provides the value and selector types, the stylesheet model and
the CSS parser.
"""

from .values import Unit, Color, Value, Keyword, Length, ColorValue
from .selector import Selector, SimpleSelector, Specificity
from .stylesheet import Declaration, Rule, Stylesheet
from .parser import CSSParser, parse_css

__all__ = [
    'Unit', 'Color', 'Value', 'Keyword', 'Length', 'ColorValue',
    'Selector', 'SimpleSelector', 'Specificity',
    'Declaration', 'Rule', 'Stylesheet',
    'CSSParser', 'parse_css'
]
