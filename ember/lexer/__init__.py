"""
Ember Lexer Package

Implements the lexical analyzer (tokenizer) for the Ember scripting language.

Key Features:
- Lazy, pull-based token production (one token per request)
- Maximal-munch identifier/keyword recognition
- Overflow-checked 32-bit integer literals with glued negative sign
- Single- or double-quoted strings with escape decoding
- Per-token errors from a closed set of error kinds

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, PUNCTUATION, INT32_MIN, INT32_MAX
from .cursor import CharCursor
from .lexer import Lexer, LexResult, tokenize_string, tokenize_file
from .errors import LexerError, LexErrorKind, Diagnostic

__all__ = [
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "CharCursor",
    "KEYWORDS",
    "PUNCTUATION",
    "INT32_MIN",
    "INT32_MAX",
    "LexerError",
    "LexErrorKind",
    "Diagnostic",
    "tokenize_string",
    "tokenize_file",
]
