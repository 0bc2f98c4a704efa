"""
Error types for the box engine.

Every stage reports malformed input through one of these exceptions. The
first error detected aborts the whole call; there is no partial result.
"""

from typing import Optional


class BoxEngineError(Exception):
    """Base class for all box engine errors."""


class ParseError(BoxEngineError):
    """
    A positional parse failure.

    Attributes:
        offset: Index into the source text at which the problem was detected
    """

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(message)


class MarkupSyntaxError(ParseError):
    """Raised when markup source cannot be parsed."""

    def __init__(self, offset: int, expected: str, message: Optional[str] = None):
        """
        Initialize a markup syntax error.

        Args:
            offset: Offset at which the error was detected
            expected: The token or literal the parser was expecting
            message: Optional message overriding the default one
        """
        self.expected = expected
        if message is None:
            message = f"Expected {expected!r} at offset {offset}"
        super().__init__(message, offset)


class NestingDepthError(MarkupSyntaxError):
    """Raised when element nesting goes deeper than the configured limit."""

    def __init__(self, offset: int, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            offset, "</",
            message=f"Element nesting exceeds maximum depth of {max_depth} at offset {offset}")


class StyleSyntaxError(ParseError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(self, offset: int, reason: str):
        """
        Initialize a stylesheet syntax error.

        Args:
            offset: Offset at which the error was detected
            reason: Human readable description of the problem
        """
        self.reason = reason
        super().__init__(f"{reason} at offset {offset}", offset)


class LayoutContractError(BoxEngineError):
    """Raised when a layout tree is requested for a root that produces no box."""


# Names used by the public programmatic interface
MarkupParseError = MarkupSyntaxError
StyleParseError = StyleSyntaxError
LayoutError = LayoutContractError
