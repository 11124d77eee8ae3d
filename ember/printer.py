"""
Token stream printer.

Pulls tokens from a lexer and writes one per line. The first lexical
error ends the listing; the error diagnostic is written in its place.
"""

import sys
from typing import Optional, TextIO

from .lexer.lexer import Lexer
from .lexer.errors import LexerError
from .lexer.tokens import Token


def format_token(token: Token) -> str:
    """Render a token as `line:column  TYPE(value)`."""
    if token.location is None:
        return str(token)
    return f"{token.location.line}:{token.location.column}\t{token}"


def print_tokens(lexer: Lexer, stream: Optional[TextIO] = None) -> bool:
    """
    Print every token the lexer produces.

    Returns:
        True if the whole input was tokenized, False if it stopped at an error
    """
    stream = stream if stream is not None else sys.stdout

    for result in lexer.results():
        if isinstance(result, LexerError):
            stream.write(str(result))
            return False
        stream.write(format_token(result) + "\n")

    return True
