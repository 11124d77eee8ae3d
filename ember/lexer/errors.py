"""
Error handling for the Ember lexer.

Every lexical error belongs to a closed set of kinds (LexErrorKind) so
callers can branch on the kind instead of parsing messages. Each error
also carries a Diagnostic with source location and help text for
reporting to the user.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, INT32_MIN, INT32_MAX


class LexErrorKind(Enum):
    """The complete set of lexical error kinds."""
    UNTERMINATED_STRING_LITERAL = "L002"
    INTEGER_OVERFLOW = "L007"
    UNRECOGNIZED_CHARACTER = "L001"

    @property
    def code(self) -> str:
        return self.value


@dataclass
class Diagnostic:
    """A reportable problem (error, warning, info) with its location."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot produce a token.

    The error covers exactly one element of the token stream; the lexer
    that raised it can still be asked for the following tokens.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        message: str,
        location: SourceLocation,
        lexeme: str = "",
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.location = location
        self.lexeme = lexeme
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=kind.code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerError({self.kind.name}, {self.lexeme!r}, {self.location!r})"


# Helper functions for creating the errors the lexer raises

def create_unrecognized_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Ember source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        LexErrorKind.UNRECOGNIZED_CHARACTER,
        message=f"Unrecognized character: {char!r}",
        location=location,
        lexeme=char,
        help_text=help_text
    )


def create_unterminated_string_error(quote_type: str, lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs into the end of input."""
    return LexerError(
        LexErrorKind.UNTERMINATED_STRING_LITERAL,
        message="Unterminated string literal",
        location=location,
        lexeme=lexeme,
        help_text=f"String literals must be closed with a matching {quote_type} quote.",
        suggestions=[f"Add a closing {quote_type} quote", "Check for unescaped quotes in the string"]
    )


def create_integer_overflow_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for an integer literal outside the 32-bit signed range."""
    return LexerError(
        LexErrorKind.INTEGER_OVERFLOW,
        message=f"Integer literal out of range: '{lexeme}'",
        location=location,
        lexeme=lexeme,
        help_text=f"Integer literals must lie between {INT32_MIN} and {INT32_MAX}."
    )
