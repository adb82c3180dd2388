"""Minimal LSP server for Monkey: diagnostics only."""

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

from monkeylang import __version__, errors
from monkeylang.parser import parse

server = LanguageServer(
    "monkeylang-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)

_SEVERITY = {
    errors.Severity.ERROR: DiagnosticSeverity.Error,
    errors.Severity.WARNING: DiagnosticSeverity.Warning,
}


def to_lsp_diagnostic(diag: errors.Diagnostic) -> Diagnostic:
    """Convert a parse diagnostic (1-based span) to an LSP one (0-based range)."""
    span = diag.span
    return Diagnostic(
        range=Range(
            start=Position(line=span.start.line - 1, character=span.start.column - 1),
            end=Position(line=span.end.line - 1, character=span.end.column - 1),
        ),
        message=diag.message,
        severity=_SEVERITY[diag.severity],
        source="monkeylang",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Parse the document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    result = parse(doc.source, filename)

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(
            uri=uri,
            diagnostics=[to_lsp_diagnostic(d) for d in result.diagnostics],
        )
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
