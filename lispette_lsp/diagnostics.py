from __future__ import annotations

"""
Reader diagnostics for Lispette buffers.

Runs the real reader over the text (no expansion, no evaluation) and reports
what it rejects, plus the silent truncation it applies to unclosed lists.
"""

from typing import List

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from lispette.errors import LispetteSyntaxError
from lispette.reader.parser import InPort, read_all
from lispette_lsp.indexer import DocumentIndex, build_index

SOURCE = "lispette-ls"


def _mk_range(line: int, col: int, width: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + width))


def _end_of(text: str) -> tuple[int, int]:
    lines = text.split("\n")
    return len(lines) - 1, len(lines[-1])


def diagnose(text: str, idx: DocumentIndex | None = None) -> List[Diagnostic]:
    idx = idx if idx is not None else build_index(text)
    diags: List[Diagnostic] = []

    try:
        for _ in read_all(InPort(text)):
            pass
    except LispetteSyntaxError as e:
        if e.message == "unexpected )" and idx.stray_closes:
            line, col = idx.stray_closes[0]
        elif e.message == "unterminated string" and idx.open_strings:
            line, col = idx.open_strings[0]
        else:
            line, col = _end_of(text)
        diags.append(
            Diagnostic(
                range=_mk_range(line, col),
                message=str(e),
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )

    # The reader closes open lists at end of input without complaint
    for line, col in idx.unclosed:
        diags.append(
            Diagnostic(
                range=_mk_range(line, col),
                message="Unclosed '(': the list is closed at end of input",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    return diags
