from __future__ import annotations

"""
A minimal pygls-based Language Server for Lispette.

Features:
- Text synchronization via the pygls workspace
- Diagnostics: reader errors, unclosed lists, unterminated strings
- Hover: builtin signatures and locally defined symbols
- Completion: locals, builtins
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from lispette_lsp.diagnostics import diagnose
from lispette_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, SymbolDef, build_index

logger = logging.getLogger(__name__)

SYMBOL_KINDS = {
    "function": SymbolKind.Function,
    "macro": SymbolKind.Operator,
    "var": SymbolKind.Variable,
}


class LispetteLanguageServer(LanguageServer):
    CMD_NAME = "lispette-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.indexes: Dict[str, DocumentIndex] = {}

    def refresh(self, uri: str) -> None:
        text = self.workspace.get_text_document(uri).source
        idx = build_index(text)
        self.indexes[uri] = idx
        self.publish_diagnostics(uri, diagnose(text, idx))


ls = LispetteLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(server: LispetteLanguageServer, params: DidOpenTextDocumentParams):
    server.refresh(params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(server: LispetteLanguageServer, params: DidChangeTextDocumentParams):
    server.refresh(params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(server: LispetteLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    server.indexes.pop(uri, None)
    server.publish_diagnostics(uri, [])


# --- Hover ---
def describe(word: str, idx: DocumentIndex) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = idx.symbols.get(word)
    if sdef is not None:
        return f"{word}: {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
    return None


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(server: LispetteLanguageServer, params: HoverParams) -> Optional[Hover]:
    uri = params.text_document.uri
    idx = server.indexes.get(uri)
    if idx is None:
        return None
    text = server.workspace.get_text_document(uri).source
    word = extract_word_at(text, params.position)
    contents = describe(word, idx) if word else None
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(server: LispetteLanguageServer, params: CompletionParams) -> CompletionList:
    idx = server.indexes.get(params.text_document.uri, DocumentIndex())
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    items.extend(
        CompletionItem(label=name, kind=CompletionItemKind.Variable, detail=sdef.kind)
        for name, sdef in idx.symbols.items()
    )
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
def document_symbols(idx: DocumentIndex) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for name, sdef in idx.symbols.items():
        rng = _symbol_range(sdef)
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SYMBOL_KINDS.get(sdef.kind, SymbolKind.Variable),
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(server: LispetteLanguageServer, params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    idx = server.indexes.get(params.text_document.uri)
    return None if idx is None else document_symbols(idx)


# --- Helpers ---
def _symbol_range(sdef: SymbolDef) -> Range:
    return Range(
        start=Position(line=sdef.line, character=sdef.col),
        end=Position(line=sdef.line, character=sdef.col + len(sdef.name)),
    )


def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to word boundaries (anything but whitespace and parens)
    start = pos.character
    while start > 0 and line[start - 1] not in " \t()\n\r":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t()\n\r":
        end += 1
    return line[start:end] or None


if __name__ == "__main__":
    # Run the language server over stdio
    logging.basicConfig(level=logging.INFO)
    ls.start_io()
