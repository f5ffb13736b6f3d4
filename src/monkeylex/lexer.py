"""monkeylex lexer — converts source text into a lazy token stream."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from monkeylex.errors import InvalidInputError
from monkeylex.tokens import (
    EOF_TOKEN,
    INT64_MAX,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
    is_digit,
    is_letter,
    is_whitespace,
    lookup_ident,
)

logger = logging.getLogger(__name__)


def decode_source(data: bytes) -> str:
    """Decode raw source bytes as UTF-8, raising InvalidInputError on failure."""
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidInputError(f"expected bytes from source, got {type(data).__name__}")
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"source is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc


class Lexer:
    """Pull tokens one at a time from a fully materialized source text.

    The cursor is the pair ``(_pos, _read_pos)`` with ``_read_pos == _pos + 1``;
    ``_ch`` is the character at ``_pos`` or None past the end of input.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._read_pos = 0
        self._ch: str | None = None
        self._read_char()

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> Lexer:
        """Read a binary stream to completion and build a lexer over its text."""
        try:
            data = stream.read()
        except OSError as exc:
            raise InvalidInputError(f"could not read source: {exc}") from exc
        return cls(decode_source(data))

    @classmethod
    def from_path(cls, path: str | Path) -> Lexer:
        """Open, read and close a source file, then build a lexer over its text."""
        try:
            with open(path, "rb") as f:
                return cls.from_stream(f)
        except OSError as exc:
            raise InvalidInputError(f"could not read source: {exc}") from exc

    @property
    def position(self) -> int:
        """Offset of the character under the cursor (len(source) at end of input)."""
        return self._pos

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    def tokenize(self) -> list[Token]:
        """Drain the remaining tokens into a list ending with EOF."""
        return list(self)

    def next_token(self) -> Token:
        """Scan and return the next token. EOF is returned forever once reached."""
        self._skip_whitespace()

        ch = self._ch
        if ch is None:
            return EOF_TOKEN

        if ch == "=":
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(TokenType.EQ, None, "==")
            else:
                tok = Token(TokenType.ASSIGN, None, "=")
        elif ch == "!":
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(TokenType.NOT_EQ, None, "!=")
            else:
                tok = Token(TokenType.BANG, None, "!")
        elif ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[ch], None, ch)
        elif is_letter(ch):
            # Scanners leave the cursor past the run; no trailing advance.
            return self._read_identifier()
        elif is_digit(ch):
            return self._read_number()
        else:
            tok = Token(TokenType.ILLEGAL, None, ch)

        self._read_char()
        return tok

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._read_pos >= len(self._source):
            self._ch = None
        else:
            self._ch = self._source[self._read_pos]
        self._pos = self._read_pos
        self._read_pos += 1

    def _peek_char(self) -> str | None:
        if self._read_pos >= len(self._source):
            return None
        return self._source[self._read_pos]

    def _skip_whitespace(self) -> None:
        while self._ch is not None and is_whitespace(self._ch):
            self._read_char()

    # ------------------------------------------------------------------
    # Maximal-munch scanners
    # ------------------------------------------------------------------

    def _read_identifier(self) -> Token:
        start = self._pos
        while self._ch is not None and is_letter(self._ch):
            self._read_char()
        text = self._source[start : self._pos]
        tt = lookup_ident(text)
        return Token(tt, text if tt == TokenType.IDENT else None, text)

    def _read_number(self) -> Token:
        start = self._pos
        while self._ch is not None and is_digit(self._ch):
            self._read_char()
        text = self._source[start : self._pos]
        value = int(text, 10)
        if value > INT64_MAX:
            logger.debug("integer literal %s at offset %d overflows int64", text, start)
            return Token(TokenType.ILLEGAL, None, text)
        return Token(TokenType.INT, value, text)


def iter_extents(lexer: Lexer) -> Iterator[tuple[int, int, Token]]:
    """Yield (start, end, token) offsets for each token through EOF.

    Extents are recovered from the cursor after each token; the lexer itself
    keeps no per-token location.
    """
    for tok in lexer:
        end = lexer.position
        yield end - len(tok.raw), end, tok


def tokenize(source: str | bytes) -> list[Token]:
    """Convenience function: tokenize source text (or UTF-8 bytes) and return the token list."""
    if isinstance(source, (bytes, bytearray)):
        source = decode_source(source)
    return Lexer(source).tokenize()
