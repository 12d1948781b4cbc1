"""Minimal LSP server for Rud — diagnostics only."""

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

from rud import __version__
from rud.errors import RudError
from rud.parser import parse
from rud.tokens import position_at

server = LanguageServer("rud-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_lsp_position(source: str, offset: int) -> Position:
    pos = position_at(source, offset)
    return Position(line=pos.line - 1, character=pos.column - 1)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Run the Rud front end and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    try:
        parse(source, filename)
    except RudError as exc:
        # Spans are inclusive; LSP ranges are end-exclusive
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=_to_lsp_position(source, exc.span.start),
                    end=_to_lsp_position(source, exc.span.end + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="rud",
                code=exc.kind.name.lower(),
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
