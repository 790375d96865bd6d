"""Minimal LSP server for lexscan: diagnostics only."""

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

from lexscan import __version__
from lexscan.errors import InvalidInputError
from lexscan.lexer import Scanner

server = LanguageServer("lexscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    # An empty buffer is a normal editor state, not an error
    if source:
        scanner = Scanner(source, filename)
        try:
            scanner.scan()
        except InvalidInputError as exc:
            line, col = 0, 0
            if exc.position is not None:
                line = exc.position.line - 1
                col = exc.position.column - 1
            diagnostics.append(
                Diagnostic(
                    range=Range(
                        start=Position(line=line, character=col),
                        end=Position(line=line, character=col + 1),
                    ),
                    message=exc.message,
                    severity=DiagnosticSeverity.Error,
                    source="lexscan",
                )
            )
        else:
            for found in scanner.diagnostics:
                start, end = found.span.start, found.span.end
                diagnostics.append(
                    Diagnostic(
                        range=Range(
                            start=Position(line=start.line - 1, character=start.column - 1),
                            end=Position(line=end.line - 1, character=end.column - 1),
                        ),
                        message=found.message,
                        severity=DiagnosticSeverity.Warning,
                        source="lexscan",
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
