"""
Token definitions for the Ember lexer.

This module defines every token type Ember knows about:
- Keywords (a small, closed set)
- Single-character operators and brackets, plus the `->` arrow
- Literals (32-bit integers, strings)
- Names and comments

The lookup tables at the bottom are built once at import time and are
read-only; the lexer only ever reads from them.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Ember.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Operators and Brackets
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    SLASH = auto()                  # /
    DOT = auto()                    # .
    COMMA = auto()                  # ,
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    ASSIGN = auto()                 # =
    GREATER = auto()                # >
    EXCLAMATION_MARK = auto()       # !
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    ARROW = auto()                  # ->

    # ========================================================================
    # Keywords
    # ========================================================================
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return
    FUNCTION = auto()               # fn
    LOOP = auto()                   # loop
    FOR = auto()                    # for
    IN = auto()                     # in
    LET = auto()                    # let
    CONST = auto()                  # const

    # ========================================================================
    # Literals, Names and Comments
    # ========================================================================
    STRING_LITERAL = auto()         # "hello", 'hello'
    INTEGER = auto()                # 42, -7
    COMMENT = auto()                # # text up to end of line
    NAME = auto()                   # variable_name, println


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Ember language.

    Equality only looks at the token type and its payload, so the same
    token lexed at two different positions compares equal.
    """
    type: TokenType
    value: Any = None                                   # Payload (int, str) or None
    lexeme: str = field(default="", compare=False)      # Raw text from source
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.value!r}, "
                f"{self.lexeme!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_name(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.NAME


# Range of the INTEGER payload (32-bit signed)
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

# Lookup tables for token recognition.
# Wrapped in MappingProxyType so nothing can mutate them after import.

KEYWORDS = MappingProxyType({
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "fn": TokenType.FUNCTION,
    "loop": TokenType.LOOP,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "let": TokenType.LET,
    "const": TokenType.CONST,
})

PUNCTUATION = MappingProxyType({
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.SLASH,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "=": TokenType.ASSIGN,
    ">": TokenType.GREATER,
    "!": TokenType.EXCLAMATION_MARK,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
})

# Character following a backslash -> substituted character.
# Anything not listed here stands for itself.
ESCAPE_SEQUENCES = MappingProxyType({
    '"': '"',
    "'": "'",
    "\\": "\\",
    "n": "\n",
    "t": "\t",
})

STRING_DELIMITERS = frozenset({'"', "'"})
COMMENT_START = "#"
# Same set str.splitlines() breaks on
LINE_TERMINATORS = frozenset({
    "\n", "\r", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029",
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())
LITERAL_TYPES = frozenset({TokenType.INTEGER, TokenType.STRING_LITERAL})
