"""
Ember Runtime Package

A minimal statement executor that runs directly on the token stream.
Supports variable declarations (`let x = 10;`) and the `println` builtin.

Author: xwest
"""

from .interpreter import Interpreter, Value, run_source
from .errors import ExecutionError

__all__ = [
    "Interpreter",
    "Value",
    "run_source",
    "ExecutionError",
]
