"""Lispette Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for the Lispette dialect.
- A lightweight indexer that scans documents for top-level definitions without evaluation.
- Reader-based diagnostics for malformed buffers.
- A simple TCP REPL server that gives each connection its own Interpreter session.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
    "diagnostics",
    "repl_server",
]
