"""
Character cursor used by the Ember lexer.

Wraps the in-memory source text with lookahead (peek) and consumption
(advance), and keeps the line/column bookkeeping the lexer needs for
source locations.
"""

from typing import Optional

from .tokens import SourceLocation, LINE_TERMINATORS


class CharCursor:
    """Position in a source string, moved forward one character at a time."""

    def __init__(self, source: str):
        self.source = source
        self.offset = 0
        self.line = 1
        self.column = 1

    @property
    def is_at_end(self) -> bool:
        return self.offset >= len(self.source)

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end."""
        if self.offset < len(self.source):
            return self.source[self.offset]
        return None

    def peek_next(self) -> Optional[str]:
        """Return the character after the next one, or None if there is none."""
        if self.offset + 1 < len(self.source):
            return self.source[self.offset + 1]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return the next character. At end of input returns None."""
        if self.offset >= len(self.source):
            return None

        char = self.source[self.offset]
        self.offset += 1
        # "\r\n" counts once, on the "\n"
        if char in LINE_TERMINATORS and not (char == "\r" and self.peek() == "\n"):
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def location(self, filename: str) -> SourceLocation:
        return SourceLocation(filename, self.line, self.column, self.offset)

    def slice_from(self, start_offset: int) -> str:
        """Raw text consumed since start_offset."""
        return self.source[start_offset:self.offset]
