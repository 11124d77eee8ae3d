"""
Ember Lexer - turns source text into tokens, one at a time.

Tokens are produced lazily: each call to next_token() skips whitespace,
looks at the next character and runs exactly one scanner. Nothing is
scanned ahead of what the caller asks for, so a consumer that stops at
the first error never pays for the rest of the file.

An error only spoils the token being produced. The offending text is
consumed, and the next call picks up right after it.

xwest
"""

import logging
from typing import Iterator, List, Optional, Union

from .cursor import CharCursor
from .tokens import (
    Token, TokenType, KEYWORDS, PUNCTUATION, ESCAPE_SEQUENCES,
    STRING_DELIMITERS, COMMENT_START, LINE_TERMINATORS, INT32_MIN, INT32_MAX
)
from .errors import (
    LexerError, create_unrecognized_character_error,
    create_unterminated_string_error, create_integer_overflow_error
)

logger = logging.getLogger(__name__)

LexResult = Union[Token, LexerError]


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and '0' <= char <= '9'


def _is_identifier_start(char: Optional[str]) -> bool:
    return char is not None and char.isascii() and (char.isalpha() or char == '_')


def _is_identifier_continue(char: Optional[str]) -> bool:
    return char is not None and char.isascii() and (char.isalnum() or char == '_')


class Lexer:
    """
    Ember lexical analyzer.

    Can be driven three ways:
    - next_token(): one token per call, None at end, raises LexerError
    - iteration: `for token in lexer`, raising LexerError for bad elements
      (calling next() again after an error continues with the next token)
    - results(): yields tokens and LexerError values without raising
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.cursor = CharCursor(source)
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        """
        Produce the next token.

        Returns:
            The next token, or None once the input is exhausted

        Raises:
            LexerError: If the next lexeme is not a valid token
        """
        self._skip_whitespace()

        char = self.cursor.peek()
        if char is None:
            return None

        start_offset = self.cursor.offset
        start_location = self.cursor.location(self.filename)

        try:
            if _is_digit(char):
                return self._tokenize_integer(start_offset, start_location, negative=False)

            if char == '-':
                following = self.cursor.peek_next()
                if _is_digit(following):
                    self.cursor.advance()  # Sign is part of the literal
                    return self._tokenize_integer(start_offset, start_location, negative=True)
                if following == '>':
                    self.cursor.advance()
                    self.cursor.advance()
                    return Token(TokenType.ARROW, None, "->", start_location)
                self.cursor.advance()
                return Token(TokenType.MINUS, None, "-", start_location)

            if _is_identifier_start(char):
                return self._tokenize_identifier_or_keyword(start_offset, start_location)

            if char in STRING_DELIMITERS:
                return self._tokenize_string(start_offset, start_location)

            if char == COMMENT_START:
                return self._tokenize_comment(start_offset, start_location)

            token_type = PUNCTUATION.get(char)
            if token_type is not None:
                self.cursor.advance()
                return Token(token_type, None, char, start_location)

            # Consume it anyway so the next call makes progress
            self.cursor.advance()
            raise create_unrecognized_character_error(char, start_location)

        except LexerError as e:
            logger.debug("Lexical error at %s: %s (%r)", e.location, e.kind.name, e.lexeme)
            raise

    def results(self) -> Iterator[LexResult]:
        """Yield every remaining element as either a Token or a LexerError."""
        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                yield e
                continue
            if token is None:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the input.

        Errors don't stop tokenization; they are collected in self.errors.

        Returns:
            List of tokens (no end marker)
        """
        for result in self.results():
            if isinstance(result, LexerError):
                self.errors.append(result)
            else:
                self.tokens.append(result)
        return self.tokens

    def has_errors(self) -> bool:
        """Check if tokenize() encountered any errors."""
        return len(self.errors) > 0

    def _skip_whitespace(self):
        while True:
            char = self.cursor.peek()
            if char is None or not char.isspace():
                break
            self.cursor.advance()

    def _tokenize_integer(self, start_offset, start_location, negative: bool) -> Token:
        """Tokenize a decimal integer literal; the sign, if any, is already consumed."""
        value = 0
        overflowed = False
        while _is_digit(self.cursor.peek()):
            digit = ord(self.cursor.advance()) - ord('0')
            if overflowed:
                continue  # Keep consuming the literal, the value no longer matters
            value = value * 10 + digit
            if value > INT32_MAX + 1:
                overflowed = True

        if negative:
            value = -value

        lexeme = self.cursor.slice_from(start_offset)
        if overflowed or value < INT32_MIN or value > INT32_MAX:
            raise create_integer_overflow_error(lexeme, start_location)

        return Token(TokenType.INTEGER, value, lexeme, start_location)

    def _tokenize_identifier_or_keyword(self, start_offset, start_location) -> Token:
        """Tokenize the longest run of identifier characters, then classify it."""
        self.cursor.advance()
        while _is_identifier_continue(self.cursor.peek()):
            self.cursor.advance()

        lexeme = self.cursor.slice_from(start_offset)
        token_type = KEYWORDS.get(lexeme)
        if token_type is not None:
            return Token(token_type, None, lexeme, start_location)
        return Token(TokenType.NAME, lexeme, lexeme, start_location)

    def _tokenize_string(self, start_offset, start_location) -> Token:
        """Tokenize a string literal closed by the same quote that opened it."""
        quote = self.cursor.advance()
        value_parts = []

        while True:
            char = self.cursor.advance()
            if char is None:
                raise create_unterminated_string_error(
                    quote, self.cursor.slice_from(start_offset), start_location
                )
            if char == quote:
                break
            if char == '\\':
                escaped = self.cursor.advance()
                if escaped is None:
                    raise create_unterminated_string_error(
                        quote, self.cursor.slice_from(start_offset), start_location
                    )
                value_parts.append(ESCAPE_SEQUENCES.get(escaped, escaped))
            else:
                value_parts.append(char)

        lexeme = self.cursor.slice_from(start_offset)
        return Token(TokenType.STRING_LITERAL, ''.join(value_parts), lexeme, start_location)

    def _tokenize_comment(self, start_offset, start_location) -> Token:
        """Tokenize a comment; the line terminator is left for the whitespace skip."""
        self.cursor.advance()  # Skip '#'
        text_start = self.cursor.offset
        while True:
            char = self.cursor.peek()
            if char is None or char in LINE_TERMINATORS:
                break
            self.cursor.advance()

        text = self.cursor.slice_from(text_start)
        return Token(TokenType.COMMENT, text, self.cursor.slice_from(start_offset), start_location)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: The first lexical error in the source
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
