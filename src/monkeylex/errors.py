"""Error types raised while constructing a lexer."""

from __future__ import annotations


class LexerError(Exception):
    """Base class for lexer construction errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.format())

    def format(self, filename: str = "<input>") -> str:
        return f"error: {self.message}\n  --> {filename}"


class InvalidInputError(LexerError):
    """Raised when the source cannot be read to completion or decoded as UTF-8."""


class EmptyInputError(LexerError):
    """Reserved. Empty input lexes to a single EOF token and never raises this."""
