"""
Command-line front end for Ember.

    ember tokens program.em       # list the tokens of a file
    ember run program.em          # execute let/println statements
    ember run -e 'println("hi")'  # execute inline source
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer.lexer import Lexer, tokenize_string
from .lexer.errors import LexerError
from .printer import print_tokens
from .runtime.interpreter import Interpreter
from .runtime.errors import ExecutionError

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ember",
        description="Ember scripting language tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    ember tokens hello.em
    ember run hello.em
    ember run -e 'let x = 10; println("hi")'
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (("tokens", "Print the token stream of a source file"),
                            ("run", "Execute a source file")):
        sub = subparsers.add_parser(name, help=help_text)
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument("file", nargs="?", help="Ember source file")
        source.add_argument("-e", "--eval", dest="source", help="Source code to use instead of a file")

    return parser


def _load_source(args: argparse.Namespace):
    if args.source is not None:
        return args.source, "<eval>"
    with open(args.file, "r", encoding="utf-8") as f:
        return f.read(), args.file


def _cmd_tokens(source: str, filename: str) -> int:
    lexer = Lexer(source, filename)
    if print_tokens(lexer, sys.stdout):
        return EXIT_OK
    return EXIT_ERROR


def _cmd_run(source: str, filename: str) -> int:
    interpreter = Interpreter(output=sys.stdout)
    try:
        interpreter.run(tokenize_string(source, filename))
    except (LexerError, ExecutionError) as e:
        sys.stderr.write(str(e))
        return EXIT_ERROR
    LOG.debug("Finished with %d variable(s) bound", len(interpreter.variables))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        source, filename = _load_source(args)
    except OSError as e:
        LOG.error("Cannot read %s: %s", args.file, e)
        return EXIT_USAGE

    LOG.debug("Loaded %d characters from %s", len(source), filename)

    if args.command == "tokens":
        return _cmd_tokens(source, filename)
    return _cmd_run(source, filename)


if __name__ == "__main__":
    sys.exit(main())
