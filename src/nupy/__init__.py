"""
nuPython front end: scanner, token queue and recursive-descent parser.

    from nupy import parse
    tokens = parse(open("prog.py"))
    if tokens is not None:
        ...  # hand the token stream to the execution stage
"""

__version__ = "0.1.0"

from .config import config, NupyConfig
from .error_reporter import (
    ContractViolation,
    ErrorReporter,
    LexicalWarning,
    NupyError,
    NupyInternalError,
    NupySyntaxError,
    get_error_reporter,
    reset_error_reporter,
)
from .nupy_token import Token, TokenKind, NO_TOKEN
from .scanner import Cursor, Scanner, scanner_init, tokenize
from .token_queue import TokenQueue
from .parser import Parser, parse

__all__ = [
    "config",
    "NupyConfig",
    "ContractViolation",
    "ErrorReporter",
    "LexicalWarning",
    "NupyError",
    "NupyInternalError",
    "NupySyntaxError",
    "get_error_reporter",
    "reset_error_reporter",
    "Token",
    "TokenKind",
    "NO_TOKEN",
    "Cursor",
    "Scanner",
    "scanner_init",
    "tokenize",
    "TokenQueue",
    "Parser",
    "parse",
]
