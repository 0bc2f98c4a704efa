"""
CSS value types.

A declaration's value is one of three variants: a keyword, a length with a
unit, or an RGBA color.
"""

from enum import Enum


class Unit(Enum):
    """Length units. Only pixels are supported."""
    PX = "px"


class Color:
    """An RGBA color with 8-bit channels."""

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def to_hex(self) -> str:
        """``#rrggbb``, with an ``aa`` suffix only when not opaque."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            text += f"{self.a:02x}"
        return text

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)

    def __hash__(self):
        return hash((self.r, self.g, self.b, self.a))

    def __repr__(self):
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Value:
    """Base class of the value variants."""

    def to_px(self) -> float:
        """The size in pixels for lengths, 0.0 for anything else."""
        return 0.0

    def to_css(self) -> str:
        raise NotImplementedError

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))


class Keyword(Value):
    """An identifier value such as ``block`` or ``auto``."""

    def __init__(self, keyword: str):
        self.keyword = keyword

    def to_css(self) -> str:
        return self.keyword

    def _key(self):
        return self.keyword

    def __repr__(self):
        return f"Keyword({self.keyword!r})"


class Length(Value):
    """A number with a unit."""

    def __init__(self, value: float, unit: Unit = Unit.PX):
        self.value = float(value)
        self.unit = unit

    def to_px(self) -> float:
        if self.unit == Unit.PX:
            return self.value
        return 0.0

    def to_css(self) -> str:
        number = str(int(self.value)) if self.value.is_integer() else repr(self.value)
        return f"{number}{self.unit.value}"

    def _key(self):
        return (self.value, self.unit)

    def __repr__(self):
        return f"Length({self.value!r}, {self.unit})"


class ColorValue(Value):
    """A color value."""

    def __init__(self, color: Color):
        self.color = color

    def to_css(self) -> str:
        return self.color.to_hex()

    def _key(self):
        return self.color

    def __repr__(self):
        return f"ColorValue({self.color!r})"
