"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers and literals
    IDENT = auto()  # letter+
    INT = auto()  # ascii digit+, signed 64-bit

    # Operators
    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    BANG = auto()  # !
    ASTERISK = auto()  # *
    SLASH = auto()  # /
    EQ = auto()  # ==
    NOT_EQ = auto()  # !=
    GT = auto()  # >
    LT = auto()  # <

    # Delimiters
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Keywords
    FUNCTION = auto()  # fn
    LET = auto()
    RETURN = auto()
    IF = auto()
    ELSE = auto()
    TRUE = auto()
    FALSE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its payload and original source text.

    ``value`` is the identifier text for IDENT, the parsed integer for INT,
    and None for every other type.
    """

    type: TokenType
    value: str | int | None
    raw: str


EOF_TOKEN = Token(TokenType.EOF, None, "")

KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ">": TokenType.GT,
    "<": TokenType.LT,
}

INT64_MAX = 2**63 - 1

# Unicode White_Space property; excludes the \x1c-\x1f separators str.isspace() accepts.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def lookup_ident(text: str) -> TokenType:
    """Return the keyword type for text, or IDENT."""
    return KEYWORDS.get(text, TokenType.IDENT)


def is_letter(ch: str) -> bool:
    """Return True if ch is a Unicode letter or letter number (any script)."""
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nl"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in "0123456789"


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE
