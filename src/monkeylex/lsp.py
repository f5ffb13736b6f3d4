"""Minimal LSP server for monkeylex — illegal-token diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from monkeylex import __version__
from monkeylex.lexer import Lexer, iter_extents
from monkeylex.tokens import TokenType, is_digit

server = LanguageServer(
    "monkeylex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _offset_to_position(source: str, offset: int) -> Position:
    """Convert a 0-based code point offset into a 0-based LSP line/character.

    Characters are counted in UTF-16 code units, the LSP default encoding.
    """
    line = source.count("\n", 0, offset)
    line_start = source.rfind("\n", 0, offset) + 1
    prefix = source[line_start:offset]
    return Position(line=line, character=len(prefix.encode("utf-16-le")) // 2)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish one diagnostic per illegal token."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    for start, end, tok in iter_extents(Lexer(source)):
        if tok.type != TokenType.ILLEGAL:
            continue
        if is_digit(tok.raw[0]):
            message = f"integer literal {tok.raw} does not fit in 64 bits"
        else:
            message = f"illegal character {tok.raw!r}"
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=_offset_to_position(source, start),
                    end=_offset_to_position(source, end),
                ),
                message=message,
                severity=DiagnosticSeverity.Error,
                source="monkeylex",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
