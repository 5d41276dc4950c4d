# scanner.py
"""
Character-by-character scanner for nuPython.

Each call to ``Scanner.next_token`` consumes just enough input to complete
one lexical unit and returns a ``(Token, text)`` pair. The scanner never
fails on bad input: unknown characters become UNKNOWN tokens and an
unterminated string literal only produces a warning.
"""

import logging
from dataclasses import dataclass

from .config import config as nupy_config
from .error_reporter import get_error_reporter, panic
from .nupy_token import COMPARISON_TOKENS, SINGLE_CHAR_TOKENS, Token, TokenKind
from .source import CharSource

logger = logging.getLogger("nupy.scanner")

_WHITESPACE = {" ", "\t", "\r", "\f", "\v"}
_QUOTES = {"'", '"'}


@dataclass
class Cursor:
    """Line/column of the next character to be consumed; both 1-based."""
    line: int = 1
    col: int = 1

    def advance(self, count=1):
        self.col += count

    def newline(self):
        self.line += 1
        self.col = 1


def scanner_init() -> Cursor:
    return Cursor(1, 1)


def is_letter(ch):
    return 'a' <= ch <= 'z' or 'A' <= ch <= 'Z' or ch == '_'


def is_digit(ch):
    return '0' <= ch <= '9'


class Scanner:
    def __init__(self, stream, filename=None, reporter=None, config=None):
        if stream is None:
            panic("input stream is None (Scanner)")
        self.source = stream if isinstance(stream, CharSource) else CharSource(stream, filename)
        self.filename = self.source.filename
        self.reporter = reporter or get_error_reporter()
        self.config = config or nupy_config
        self.cursor = scanner_init()
        if self.source.text is not None:
            self.reporter.register_source(self.filename, self.source.text)

    def init(self):
        """Reset the cursor to (1,1) before a new pass over the input."""
        self.cursor = scanner_init()

    def __iter__(self):
        """Yield every (token, text) pair up to and including EOS."""
        while True:
            token, text = self.next_token()
            yield token, text
            if token.kind == TokenKind.EOS:
                return

    def next_token(self):
        token, text = self._scan()
        if self.config.should_log("debug"):
            logger.debug("%s %r", token, text)
        return token, text

    def _make(self, kind, text, line, col):
        return Token(kind, line, col), text

    def _scan(self):
        source = self.source
        cursor = self.cursor

        while True:
            ch = source.read()
            line, col = cursor.line, cursor.col

            if ch == "":
                return self._make(TokenKind.EOS, "$", line, col)

            if ch == self.config.terminator:
                cursor.advance()
                return self._make(TokenKind.EOS, ch, line, col)

            if ch == "\n":
                cursor.newline()
                return self._make(TokenKind.EOLN, ch, line, col)

            if ch in _WHITESPACE:
                cursor.advance()
                continue

            if ch == self.config.comment_marker:
                self.skip_comment()
                continue

            if ch in SINGLE_CHAR_TOKENS:
                cursor.advance()
                return self._make(SINGLE_CHAR_TOKENS[ch], ch, line, col)

            if ch == "*":
                cursor.advance()
                nxt = source.read()
                if nxt == "*":
                    cursor.advance()
                    return self._make(TokenKind.POWER, "**", line, col)
                source.unread(nxt)
                return self._make(TokenKind.ASTERISK, ch, line, col)

            if ch in COMPARISON_TOKENS:
                return self.read_comparison(ch, line, col)

            if ch in ("+", "-"):
                nxt = source.read()
                if is_digit(nxt):
                    source.unread(nxt)
                    return self.read_number(ch, line, col)
                source.unread(nxt)
                cursor.advance()
                kind = TokenKind.PLUS if ch == "+" else TokenKind.MINUS
                return self._make(kind, ch, line, col)

            if is_letter(ch):
                return self.read_identifier(ch, line, col)

            if is_digit(ch):
                source.unread(ch)
                return self.read_number("", line, col)

            if ch in _QUOTES:
                return self.read_string(ch, line, col)

            cursor.advance()
            return self._make(TokenKind.UNKNOWN, ch, line, col)

    def skip_comment(self):
        """Skip to the end of the line, leaving the newline unconsumed."""
        if self.config.legacy_comment_line_count:
            self.cursor.line += 1
        self.cursor.advance()
        ch = self.source.read()
        while ch not in ("\n", ""):
            self.cursor.advance()
            ch = self.source.read()
        self.source.unread(ch)

    def read_comparison(self, ch, line, col):
        # '!' must be followed by '='; a lone '!' stays UNKNOWN
        alone, with_equal = COMPARISON_TOKENS[ch]
        self.cursor.advance()
        nxt = self.source.read()
        if nxt == "=":
            self.cursor.advance()
            return self._make(with_equal, ch + nxt, line, col)
        self.source.unread(nxt)
        return self._make(alone, ch, line, col)

    def read_identifier(self, first, line, col):
        chars = [first]
        ch = self.source.read()
        while is_letter(ch) or is_digit(ch):
            chars.append(ch)
            ch = self.source.read()
        self.source.unread(ch)

        text = "".join(chars)
        self.cursor.advance(len(text))
        kind = self.config.keywords.get(text, TokenKind.IDENTIFIER)
        return self._make(kind, text, line, col)

    def read_number(self, sign, line, col):
        chars = [sign] if sign else []
        kind = TokenKind.INT_LITERAL

        ch = self.source.read()
        while is_digit(ch):
            chars.append(ch)
            ch = self.source.read()

        if ch == ".":
            kind = TokenKind.REAL_LITERAL
            chars.append(ch)
            ch = self.source.read()
            while is_digit(ch):
                chars.append(ch)
                ch = self.source.read()
        self.source.unread(ch)

        text = "".join(chars)
        self.cursor.advance(len(text))
        return self._make(kind, text, line, col)

    def read_string(self, quote, line, col):
        self.cursor.advance()  # opening quote
        chars = []
        while True:
            ch = self.source.read()
            if ch == quote:
                self.cursor.advance()
                break
            if ch in _QUOTES or ch in ("\n", ""):
                # the offending character is left for the next call
                self.source.unread(ch)
                self.reporter.report_warning(
                    f"string literal @ ({line},{col}) not terminated properly",
                    line, col, filename=self.filename,
                )
                break
            chars.append(ch)
            self.cursor.advance()
        return self._make(TokenKind.STR_LITERAL, "".join(chars), line, col)


def tokenize(stream, filename=None, reporter=None, config=None):
    """Scan a whole stream, returning the list of (token, text) pairs."""
    return list(Scanner(stream, filename=filename, reporter=reporter, config=config))
