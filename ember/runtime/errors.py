"""
Error handling for the Ember statement executor.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token
from ..lexer.errors import Diagnostic


class ExecutionError(Exception):
    """
    Exception raised when the token stream doesn't form a known statement.

    Carries the offending token, or None if the tokens ran out mid-statement.
    """

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location if token is not None else None,
            severity="error",
            code="R001",
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)
