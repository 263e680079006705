"""
  Lisp Reader: line-buffered tokenizer and recursive-descent parser

- Emits Python primitives for forms:

    - lists   -> Python list
    - symbols -> Symbol, interned in the session's SymbolTable
    - strings -> str (quotes stripped, no escape processing)
    - numbers -> int, else float
    - #t / #f -> True / False
    - 'x `x ,x ,@x -> [quote x], [quasiquote x], [unquote x], [unquote-splicing x]

  End of input inside an open list closes the list silently; an unmatched ')'
  is a syntax error.
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterator

from lispette import SExpression
from lispette.errors import LispetteSyntaxError
from lispette.types.symbol import EOF_OBJECT, SymbolTable


TOKENIZER = re.compile(
    r"\s*("
    r",@|[('`,)]"  # ,@ and single-character punctuation
    r'|"(?:[\\].|[^\\"])*"'  # double-quoted strings
    r"|;.*"  # line comment
    r"""|[^\s('"`,;)]*"""  # atom: maximal run of non-delimiters
    r")(.*)"
)

INTEGER_RE = re.compile(r"[+\-]?[0-9]+\Z")
FLOAT_RE = re.compile(r"[+\-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+\-]?[0-9]+)?\Z")

QUOTES: dict[str, str] = {
    "'": "quote",
    "`": "quasiquote",
    ",": "unquote",
    ",@": "unquote-splicing",
}


class InPort:
    """An input port: remaining source lines plus the unread rest of the current one."""

    def __init__(self, source: str, symbols: SymbolTable | None = None):
        self.lines: deque[str] = deque(source.split("\n"))
        self.line = ""
        self.symbols = symbols if symbols is not None else SymbolTable()

    def next_token(self):
        """Return the next token, refilling the line buffer as needed."""
        while True:
            if self.line == "":
                if not self.lines:
                    return EOF_OBJECT
                self.line = self.lines.popleft()
                continue
            token, rest = TOKENIZER.match(self.line).groups()
            if token == "" and rest.strip():
                # only an unterminated string leaves text the tokenizer can't consume
                raise LispetteSyntaxError(rest.strip(), "unterminated string")
            self.line = rest
            if token != "" and not token.startswith(";"):
                return token


def read(inport: InPort) -> SExpression:
    """Read one form from `inport`; returns EOF_OBJECT when input is exhausted."""

    def read_ahead(token: str) -> SExpression:
        if token == "(":
            items: list[SExpression] = []
            while True:
                token = inport.next_token()
                if token is EOF_OBJECT or token == ")":
                    return items
                items.append(read_ahead(token))
        if token == ")":
            raise LispetteSyntaxError(")", "unexpected )")
        if token in QUOTES:
            form = read(inport)
            if form is EOF_OBJECT:
                raise LispetteSyntaxError(token, "unexpected end of input after quote")
            return [inport.symbols.intern(QUOTES[token]), form]
        return atom(token, inport.symbols)

    token1 = inport.next_token()
    return EOF_OBJECT if token1 is EOF_OBJECT else read_ahead(token1)


def read_all(inport: InPort) -> Iterator[SExpression]:
    while (form := read(inport)) is not EOF_OBJECT:
        yield form


def atom(token: str, symbols: SymbolTable) -> SExpression:
    """Numbers become numbers; #t and #f are booleans; "..." string; otherwise Symbol."""
    if token == "#t":
        return True
    if token == "#f":
        return False
    if token.startswith('"'):
        return token[1:-1]
    if INTEGER_RE.match(token):
        return int(token)
    if FLOAT_RE.match(token):
        return float(token)
    return symbols.intern(token)
