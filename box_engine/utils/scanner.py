"""
Character scanner shared by the markup and stylesheet parsers.
"""

from typing import Callable

from box_engine.errors import ParseError


class Scanner:
    """
    Cursor over a source string.

    Subclasses decide which exception type a failure produces by
    implementing ``fail``.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner.

        Args:
            source: The text to scan
        """
        self.input = source
        self.pos = 0

    def fail(self, detail: str, offset: int = None) -> ParseError:
        """Build the error to raise for ``detail`` at ``offset`` (default: the cursor)."""
        raise NotImplementedError

    def expected(self, literal: str, offset: int = None) -> ParseError:
        """Build the error raised when ``literal`` was required but not found."""
        return self.fail(literal, offset)

    def end_of_input(self) -> ParseError:
        """Build the error raised when input ends in the middle of a construct."""
        return self.fail("end of input")

    def eof(self) -> bool:
        return self.pos >= len(self.input)

    def next_char(self) -> str:
        """Return the current character without consuming it."""
        if self.eof():
            raise self.end_of_input()
        return self.input[self.pos]

    def starts_with(self, s: str) -> bool:
        return self.input.startswith(s, self.pos)

    def expect(self, s: str) -> None:
        """Consume ``s`` exactly or raise."""
        if not self.starts_with(s):
            raise self.expected(s)
        self.pos += len(s)

    def consume_char(self) -> str:
        c = self.next_char()
        self.pos += 1
        return c

    def consume_while(self, test: Callable[[str], bool]) -> str:
        """Consume characters while ``test`` holds and return them."""
        start = self.pos
        while not self.eof() and test(self.input[self.pos]):
            self.pos += 1
        return self.input[start:self.pos]

    def consume_whitespace(self) -> str:
        return self.consume_while(str.isspace)
