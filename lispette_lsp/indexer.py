from __future__ import annotations

"""
Lightweight indexer for Lispette files without evaluating code.

We scan for definitions and build an index for:
- (define name ...), (define (name args...) ...)   -> var / function
- (define-macro name ...), (define-macro (name ...) ...) -> macro
- paren structure: unclosed '(' and stray ')' positions
- strings left open at the end of a line (strings never span lines)
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import re

# Same token classes as the reader, with positions
TOKEN_REGEX = re.compile(
    r"\s+"
    r"|;.*$"
    r"|,@|[()'`,]"
    r'|"(?:\\.|[^\\"\n])*"'
    r'|(?P<open_string>"[^\n]*)'
    r"""|[^\s()'`,;"]+""",
    re.MULTILINE,
)

DEFINITION_HEADS = {"define": "var", "define-macro": "macro"}


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function" | "macro"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    unclosed: List[Tuple[int, int]] = field(default_factory=list)
    stray_closes: List[Tuple[int, int]] = field(default_factory=list)
    open_strings: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def paren_balance(self) -> int:
        return len(self.unclosed) - len(self.stray_closes)

    @property
    def has_unmatched_quote(self) -> bool:
        return bool(self.open_strings)


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(';'):
            continue
        yield tok, m.start(), m.group("open_string") is not None


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))
    opens: List[int] = []

    for i, (tok, start, is_open_string) in enumerate(tokens):
        if is_open_string:
            idx.open_strings.append(_position_from_offset(text, start))
        elif tok == '(':
            opens.append(start)
            head = tokens[i + 1][0] if i + 1 < len(tokens) else None
            if head in DEFINITION_HEADS:
                _index_definition(text, tokens, i + 2, DEFINITION_HEADS[head], idx)
        elif tok == ')':
            if opens:
                opens.pop()
            else:
                idx.stray_closes.append(_position_from_offset(text, start))

    idx.unclosed = [_position_from_offset(text, off) for off in opens]
    return idx


def _index_definition(text: str, tokens, j: int, kind: str, idx: DocumentIndex) -> None:
    if j >= len(tokens):
        return
    tok, start, _ = tokens[j]
    if tok == '(':
        # (define (f args...) body...) sugar
        if j + 1 >= len(tokens):
            return
        tok, start, _ = tokens[j + 1]
        if kind == 'var':
            kind = 'function'
    if tok in ('(', ')') or tok.startswith('"'):
        return
    line, col = _position_from_offset(text, start)
    idx.symbols[tok] = SymbolDef(name=tok, kind=kind, line=line, col=col)


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ num ...)",
    "-": "(- x num ...)",
    "*": "(* num ...)",
    "/": "(/ x num ...)",
    "=": "(= x y ...)",
    "<": "(< x y ...)",
    "cons": "(cons x xs)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "list": "(list x ...)",
    "append": "(append xs ...)",
    "length": "(length xs)",
    "apply": "(apply f args)",
    "eval": "(eval datum)",
    "call/cc": "(call/cc f)",
    "display": "(display x)",
    "max": "(max num ...)",
    "min": "(min num ...)",
    "let": "(let ((var val) ...) body ...)",
    "lambda": "(lambda (params) body ...)",
    "define": "(define name value) | (define (name params) body ...)",
    "define-macro": "(define-macro name procedure)",
    "if": "(if test then [else])",
    "set!": "(set! var value)",
    "begin": "(begin expr ...)",
    "quote": "(quote datum)",
    "quasiquote": "(quasiquote template)",
}
