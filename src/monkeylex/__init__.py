"""monkeylex — tokenizer for a small C-like scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeylex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str | bytes) -> list[Token]:
    """Tokenize source text and return the full token list, ending with EOF."""
    from monkeylex.lexer import tokenize as _tokenize

    return _tokenize(source)
