"""
Box model geometry.

Everything starts at zero; the layout tree builder never computes sizes.
Consumers that perform layout fill these in.
"""


class Rect:
    """A content rectangle."""

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def expanded_by(self, edge: 'EdgeSizes') -> 'Rect':
        """Return a new rectangle grown outward by ``edge`` on each side."""
        return Rect(
            self.x - edge.left,
            self.y - edge.top,
            self.width + edge.left + edge.right,
            self.height + edge.top + edge.bottom
        )

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)

    def __repr__(self):
        return f"Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class EdgeSizes:
    """Widths of the four edges of a padding, border or margin area."""

    def __init__(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def __eq__(self, other):
        if not isinstance(other, EdgeSizes):
            return NotImplemented
        return (self.left, self.right, self.top, self.bottom) == \
            (other.left, other.right, other.top, other.bottom)

    def __repr__(self):
        return f"EdgeSizes(left={self.left}, right={self.right}, top={self.top}, bottom={self.bottom})"


class Dimensions:
    """
    Geometry of a layout box.

    Attributes:
        content: The content rectangle
        padding: Padding widths
        border: Border widths
        margin: Margin widths
    """

    def __init__(self):
        self.content = Rect()
        self.padding = EdgeSizes()
        self.border = EdgeSizes()
        self.margin = EdgeSizes()

    def padding_box(self) -> Rect:
        """The area covered by the content plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        return self.border_box().expanded_by(self.margin)

    def __repr__(self):
        return (f"Dimensions(content={self.content!r}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
