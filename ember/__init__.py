"""
Ember Scripting Language

A small scripting language whose toolchain is built around a lazy,
pull-based lexer.

Architecture:
    ember/
    ├── lexer/           # Tokenization and lexical analysis
    ├── runtime/         # Minimal statement executor (let, println)
    ├── printer.py       # Token stream printer
    └── cli.py           # Command-line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, LexErrorKind
from .runtime import Interpreter, ExecutionError, run_source

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Interpreter",

    # Errors
    "LexerError",
    "LexErrorKind",
    "ExecutionError",

    # Helpers
    "run_source",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
