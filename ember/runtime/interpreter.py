"""
Ember statement executor.

Runs a token list directly, without building a syntax tree. Only two
statement shapes are understood:

    let <name> = <integer | string> [;]
    println(<integer | string>) [;]

Comments between statements are ignored; anything else is an error.

Author: xwest
"""

import logging
import sys
from typing import Dict, Iterable, List, Optional, TextIO, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.lexer import tokenize_string
from .errors import ExecutionError

logger = logging.getLogger(__name__)

Value = Union[int, str]

PRINTLN_BUILTIN = "println"


class Interpreter:
    """
    Executes `let` and `println` statements from a token stream.

    Variables live in self.variables for the lifetime of the interpreter,
    so several run() calls share one environment.
    """

    def __init__(self, output: Optional[TextIO] = None):
        self.output = output if output is not None else sys.stdout
        self.variables: Dict[str, Value] = {}
        self.tokens: List[Token] = []
        self.current = 0

    def run(self, tokens: Iterable[Token]):
        """
        Execute every statement in tokens.

        Raises:
            ExecutionError: If the tokens don't form a supported statement
        """
        self.tokens = list(tokens)
        self.current = 0

        while not self._is_at_end():
            token = self._advance()

            if token.type == TokenType.COMMENT:
                continue
            if token.type == TokenType.LET:
                self._execute_let()
            elif token.type == TokenType.NAME and token.value == PRINTLN_BUILTIN:
                self._execute_println()
            else:
                raise ExecutionError(
                    f"Unexpected token at start of statement: {token}",
                    token,
                    help_text="Only 'let' declarations and 'println(...)' calls are supported."
                )

    def _execute_let(self):
        name_token = self._consume(TokenType.NAME, "Variable name expected after 'let'")
        self._consume(TokenType.ASSIGN, "'=' expected after variable name")
        value = self._consume_value("Only simple assignments of an integer or string are supported")
        self._match(TokenType.SEMICOLON)

        self.variables[name_token.value] = value
        logger.debug("Bound %s = %r", name_token.value, value)

    def _execute_println(self):
        self._consume(TokenType.LEFT_PAREN, "'(' expected after 'println'")
        value = self._consume_value("Integer or string literal expected in 'println'")
        self._consume(TokenType.RIGHT_PAREN, "')' expected after 'println' argument")
        self._match(TokenType.SEMICOLON)

        self.output.write(f"{value}\n")

    # Utility methods

    def _consume_value(self, message: str) -> Value:
        if self._check(TokenType.INTEGER) or self._check(TokenType.STRING_LITERAL):
            return self._advance().value
        raise self._error(message)

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()
        raise self._error(message)

    def _error(self, message: str) -> ExecutionError:
        if self._is_at_end():
            previous = self.tokens[self.current - 1] if self.current > 0 else None
            return ExecutionError(f"{message}, found end of input", previous)
        token = self._peek()
        return ExecutionError(f"{message}, found {token}", token)

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self.tokens[self.current]
        self.current += 1
        return token

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens)

    def _peek(self) -> Token:
        return self.tokens[self.current]


def run_source(source: str, filename: str = "<string>",
               interpreter: Optional[Interpreter] = None) -> Interpreter:
    """
    Tokenize and execute source code.

    Returns:
        The interpreter, so callers can inspect the variables it bound

    Raises:
        LexerError: The first lexical error in the source
        ExecutionError: If a statement is malformed
    """
    interpreter = interpreter if interpreter is not None else Interpreter()
    interpreter.run(tokenize_string(source, filename))
    return interpreter
