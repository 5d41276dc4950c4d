## src/nupy/parser/parser.py
"""
Recursive-descent syntax checker for nuPython.

The whole input is scanned into a TokenQueue, the queue is duplicated, and
the grammar runs against the original. On success the untouched duplicate
is handed to the caller for execution; on failure exactly one diagnostic
has been emitted and nothing is returned.

    <program>       ::= <stmts> EOS
    <stmts>         ::= <stmt> [<stmts>]
    <stmt>          ::= <assignment> | <if_then_else> | <while_loop>
                      | <call_stmt> | <pass_stmt> | <empty_stmt>
    <assignment>    ::= ['*'] IDENT '=' <value> EOLN
    <call_stmt>     ::= <function_call> EOLN
    <function_call> ::= IDENT '(' [<element>] ')'
    <if_then_else>  ::= if <expr> ':' EOLN <body> [<else>]
    <else>          ::= elif <expr> ':' EOLN <body> [<else>]
                      | else ':' EOLN <body>
    <while_loop>    ::= while <expr> ':' EOLN <body>
    <body>          ::= '{' EOLN <stmts> '}' EOLN
    <pass_stmt>     ::= pass EOLN
    <empty_stmt>    ::= EOLN
    <value>         ::= <function_call> | <expr>
    <expr>          ::= <unary_expr> [<op> <unary_expr>]
    <unary_expr>    ::= '*' IDENT | '&' IDENT | ('+'|'-') (IDENT|INT|REAL)
                      | <element>
    <element>       ::= IDENT | INT | REAL | STR | True | False | None
"""

import logging
from enum import Enum
from typing import Optional

from ..config import config as nupy_config
from ..error_reporter import (
    NupyInternalError,
    NupySyntaxError,
    get_error_reporter,
    panic,
)
from ..nupy_token import TokenKind, display_text
from ..scanner import Scanner
from ..token_queue import TokenQueue

logger = logging.getLogger("nupy.parser")

ELEMENT_KINDS = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.INT_LITERAL,
    TokenKind.REAL_LITERAL,
    TokenKind.STR_LITERAL,
    TokenKind.KEYW_TRUE,
    TokenKind.KEYW_FALSE,
    TokenKind.KEYW_NONE,
})

SIGNED_OPERAND_KINDS = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.INT_LITERAL,
    TokenKind.REAL_LITERAL,
})

BINARY_OPERATORS = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.ASTERISK,
    TokenKind.POWER,
    TokenKind.MOD,
    TokenKind.DIV,
    TokenKind.EQUALEQUAL,
    TokenKind.NOTEQUAL,
    TokenKind.LT,
    TokenKind.LTE,
    TokenKind.GT,
    TokenKind.GTE,
    TokenKind.KEYW_IS,
    TokenKind.KEYW_IN,
})


class StmtKind(Enum):
    ASSIGNMENT = "assignment"
    IF_THEN_ELSE = "if_then_else"
    WHILE_LOOP = "while_loop"
    CALL = "call_stmt"
    PASS = "pass_stmt"
    EMPTY = "empty_stmt"


def classify_statement(tokens: TokenQueue) -> Optional[StmtKind]:
    """Which statement starts at the head of the queue, or None."""
    first = tokens.peek_first()[0].kind
    second = tokens.peek_second()[0].kind

    if first == TokenKind.IDENTIFIER:
        if second == TokenKind.LEFT_PAREN:
            return StmtKind.CALL
        return StmtKind.ASSIGNMENT
    if first == TokenKind.ASTERISK and second == TokenKind.IDENTIFIER:
        return StmtKind.ASSIGNMENT
    if first == TokenKind.KEYW_IF:
        return StmtKind.IF_THEN_ELSE
    if first == TokenKind.KEYW_WHILE:
        return StmtKind.WHILE_LOOP
    if first == TokenKind.KEYW_PASS:
        return StmtKind.PASS
    if first == TokenKind.EOLN:
        return StmtKind.EMPTY
    return None


class Parser:
    def __init__(self, tokens: TokenQueue, filename="<stdin>", reporter=None, config=None):
        if tokens is None:
            panic("token queue is None (Parser)")
        self.tokens = tokens
        self.filename = filename
        self.reporter = reporter or get_error_reporter()
        self.config = config or nupy_config
        self.errors = []
        self.stmt_handlers = {
            StmtKind.ASSIGNMENT: self.parse_assignment,
            StmtKind.IF_THEN_ELSE: self.parse_if_then_else,
            StmtKind.WHILE_LOOP: self.parse_while_loop,
            StmtKind.CALL: self.parse_call_stmt,
            StmtKind.PASS: self.parse_pass_stmt,
            StmtKind.EMPTY: self.parse_empty_stmt,
        }

    def _log(self, rule):
        if self.config.should_log("debug"):
            token, text = self.tokens.peek_first()
            logger.debug("<%s> at %s %r", rule, token, text)

    # -- diagnostics -----------------------------------------------------

    def error(self, expecting):
        token, text = self.tokens.peek_first()
        error = self.reporter.report_error(
            NupySyntaxError,
            f"expecting {expecting}, found '{display_text(token.kind, text)}'",
            line=token.line,
            column=token.col,
            filename=self.filename,
        )
        self.errors.append(error)
        return False

    def internal_error(self, where):
        token = self.tokens.peek_token()
        error = self.reporter.report_error(
            NupyInternalError,
            f"unknown stmt ({where})",
            line=token.line,
            column=token.col,
            filename=self.filename,
        )
        self.errors.append(error)
        return False

    def match(self, expected_kind, expected_label):
        """Consume the head token if it has the expected kind."""
        if self.tokens.peek_token().kind != expected_kind:
            return self.error(expected_label)
        self.tokens.dequeue()
        return True

    def head_kind(self):
        return self.tokens.peek_token().kind

    # -- expressions -----------------------------------------------------

    def parse_element(self):
        if self.head_kind() not in ELEMENT_KINDS:
            return self.error("identifier or literal")
        self.tokens.dequeue()
        return True

    def parse_unary_expr(self):
        kind = self.head_kind()

        if kind in (TokenKind.ASTERISK, TokenKind.AMPERSAND):
            self.tokens.dequeue()
            return self.match(TokenKind.IDENTIFIER, "identifier")

        if kind in (TokenKind.PLUS, TokenKind.MINUS):
            self.tokens.dequeue()
            if self.head_kind() not in SIGNED_OPERAND_KINDS:
                return self.error("identifier or numeric literal")
            self.tokens.dequeue()
            return True

        return self.parse_element()

    def parse_expr(self):
        self._log("expr")
        if not self.parse_unary_expr():
            return False

        if self.head_kind() in BINARY_OPERATORS:
            self.tokens.dequeue()
            return self.parse_unary_expr()

        return True

    def parse_function_call(self):
        self._log("function_call")
        if not self.match(TokenKind.IDENTIFIER, "identifier"):
            return False
        if not self.match(TokenKind.LEFT_PAREN, "("):
            return False

        # optional argument
        if self.head_kind() in ELEMENT_KINDS:
            self.tokens.dequeue()

        return self.match(TokenKind.RIGHT_PAREN, ")")

    def parse_value(self):
        token, _ = self.tokens.peek_first()
        second, _ = self.tokens.peek_second()
        if token.kind == TokenKind.IDENTIFIER and second.kind == TokenKind.LEFT_PAREN:
            return self.parse_function_call()
        return self.parse_expr()

    # -- statements ------------------------------------------------------

    def parse_body(self):
        self._log("body")
        if not self.match(TokenKind.LEFT_BRACE, "{"):
            return False
        if not self.match(TokenKind.EOLN, "EOLN"):
            return False
        if not self.parse_stmts():
            return False
        if not self.match(TokenKind.RIGHT_BRACE, "}"):
            return False
        return self.match(TokenKind.EOLN, "EOLN")

    def parse_else(self):
        self._log("else")
        if self.head_kind() == TokenKind.KEYW_ELIF:
            self.tokens.dequeue()
            if not self.parse_expr():
                return False
            if not self.match(TokenKind.COLON, ":"):
                return False
            if not self.match(TokenKind.EOLN, "EOLN"):
                return False
            if not self.parse_body():
                return False
            if self.head_kind() in (TokenKind.KEYW_ELIF, TokenKind.KEYW_ELSE):
                return self.parse_else()
            return True

        if not self.match(TokenKind.KEYW_ELSE, "else"):
            return False
        if not self.match(TokenKind.COLON, ":"):
            return False
        if not self.match(TokenKind.EOLN, "EOLN"):
            return False
        return self.parse_body()

    def parse_if_then_else(self):
        self._log("if_then_else")
        if not self.match(TokenKind.KEYW_IF, "if"):
            return False
        if not self.parse_expr():
            return False
        if not self.match(TokenKind.COLON, ":"):
            return False
        if not self.match(TokenKind.EOLN, "EOLN"):
            return False
        if not self.parse_body():
            return False

        # <else> is optional
        if self.head_kind() in (TokenKind.KEYW_ELIF, TokenKind.KEYW_ELSE):
            return self.parse_else()
        return True

    def parse_while_loop(self):
        self._log("while_loop")
        if not self.match(TokenKind.KEYW_WHILE, "while"):
            return False
        if not self.parse_expr():
            return False
        if not self.match(TokenKind.COLON, ":"):
            return False
        if not self.match(TokenKind.EOLN, "EOLN"):
            return False
        return self.parse_body()

    def parse_assignment(self):
        self._log("assignment")
        if self.head_kind() == TokenKind.ASTERISK:
            self.tokens.dequeue()
        if not self.match(TokenKind.IDENTIFIER, "identifier"):
            return False
        if not self.match(TokenKind.EQUAL, "="):
            return False
        if not self.parse_value():
            return False
        return self.match(TokenKind.EOLN, "EOLN")

    def parse_call_stmt(self):
        self._log("call_stmt")
        if not self.parse_function_call():
            return False
        return self.match(TokenKind.EOLN, "EOLN")

    def parse_pass_stmt(self):
        if not self.match(TokenKind.KEYW_PASS, "pass"):
            return False
        return self.match(TokenKind.EOLN, "EOLN")

    def parse_empty_stmt(self):
        return self.match(TokenKind.EOLN, "EOLN")

    def parse_stmt(self):
        kind = classify_statement(self.tokens)
        if kind is None:
            return self.error("start of a statement")

        handler = self.stmt_handlers.get(kind)
        if handler is None:
            return self.internal_error("parse_stmt")
        return handler()

    def parse_stmts(self):
        if not self.parse_stmt():
            return False
        while classify_statement(self.tokens) is not None:
            if not self.parse_stmt():
                return False
        return True

    def parse_program(self):
        if not self.parse_stmts():
            return False
        return self.match(TokenKind.EOS, "$")


def parse(stream, filename=None, reporter=None, config=None) -> Optional[TokenQueue]:
    """Scan and syntax-check a whole program.

    Returns the program's token queue (ending in EOS) on success, or None
    after a single diagnostic has been emitted.
    """
    if stream is None:
        panic("input stream is None (parse)")

    reporter = reporter or get_error_reporter()
    scanner = Scanner(stream, filename=filename, reporter=reporter, config=config)
    scanner.init()

    tokens = TokenQueue()
    for token, text in scanner:
        tokens.enqueue(token, text)

    duplicate = tokens.duplicate()

    parser = Parser(tokens, filename=scanner.filename, reporter=reporter, config=config)
    result = parser.parse_program()

    # Interactive input: drop the rest of the line after '$' so the program
    # being run does not read it.
    if result and scanner.source.interactive:
        scanner.source.drain_line()

    tokens.destroy()

    if result:
        return duplicate

    duplicate.destroy()
    return None
