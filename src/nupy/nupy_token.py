# nupy_token.py
"""Token kinds and the immutable token record shared by scanner and parser."""

from dataclasses import dataclass
from enum import IntEnum


class TokenKind(IntEnum):
    # Sentinel returned by lookahead past the end of a queue; never produced
    # by the scanner.
    NO_TOKEN = -1

    EOS = 0
    UNKNOWN = 1

    IDENTIFIER = 2
    INT_LITERAL = 3
    REAL_LITERAL = 4
    STR_LITERAL = 5

    # keywords
    KEYW_AND = 10
    KEYW_BREAK = 11
    KEYW_CONTINUE = 12
    KEYW_DEF = 13
    KEYW_ELIF = 14
    KEYW_ELSE = 15
    KEYW_FALSE = 16
    KEYW_FOR = 17
    KEYW_IF = 18
    KEYW_IN = 19
    KEYW_IS = 20
    KEYW_NONE = 21
    KEYW_NOT = 22
    KEYW_OR = 23
    KEYW_PASS = 24
    KEYW_RETURN = 25
    KEYW_TRUE = 26
    KEYW_WHILE = 27

    # punctuation and operators
    LEFT_PAREN = 40
    RIGHT_PAREN = 41
    LEFT_BRACKET = 42
    RIGHT_BRACKET = 43
    LEFT_BRACE = 44
    RIGHT_BRACE = 45
    COLON = 46
    AMPERSAND = 47
    ASTERISK = 48
    POWER = 49
    PLUS = 50
    MINUS = 51
    DIV = 52
    MOD = 53
    EQUAL = 54
    EQUALEQUAL = 55
    NOTEQUAL = 56
    LT = 57
    LTE = 58
    GT = 59
    GTE = 60
    EOLN = 61


KEYWORDS = {
    "and": TokenKind.KEYW_AND,
    "break": TokenKind.KEYW_BREAK,
    "continue": TokenKind.KEYW_CONTINUE,
    "def": TokenKind.KEYW_DEF,
    "elif": TokenKind.KEYW_ELIF,
    "else": TokenKind.KEYW_ELSE,
    "False": TokenKind.KEYW_FALSE,
    "for": TokenKind.KEYW_FOR,
    "if": TokenKind.KEYW_IF,
    "in": TokenKind.KEYW_IN,
    "is": TokenKind.KEYW_IS,
    "None": TokenKind.KEYW_NONE,
    "not": TokenKind.KEYW_NOT,
    "or": TokenKind.KEYW_OR,
    "pass": TokenKind.KEYW_PASS,
    "return": TokenKind.KEYW_RETURN,
    "True": TokenKind.KEYW_TRUE,
    "while": TokenKind.KEYW_WHILE,
}

# Characters that always form a token on their own.
SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ":": TokenKind.COLON,
    "&": TokenKind.AMPERSAND,
    "/": TokenKind.DIV,
    "%": TokenKind.MOD,
}

# Base character -> (kind alone, kind when followed by '=')
COMPARISON_TOKENS = {
    "=": (TokenKind.EQUAL, TokenKind.EQUALEQUAL),
    "<": (TokenKind.LT, TokenKind.LTE),
    ">": (TokenKind.GT, TokenKind.GTE),
    "!": (TokenKind.UNKNOWN, TokenKind.NOTEQUAL),
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    line: int
    col: int

    def __str__(self):
        return f"{self.kind.name} @ ({self.line},{self.col})"


# Lookahead result for a position past the end of a queue.
NO_TOKEN = Token(TokenKind.NO_TOKEN, 0, 0)


def display_text(kind, text):
    """Render a lexeme for diagnostics; the newline token reads as EOLN."""
    if kind == TokenKind.EOLN:
        return "EOLN"
    return text
