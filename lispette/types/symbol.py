from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern the text too: fast equality/hash, less memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Names the expander and evaluator emit or dispatch on. Symbols are immutable,
# so every SymbolTable shares these objects rather than minting its own.
QUOTE, IF, SET, DEFINE, LAMBDA, BEGIN, DEFINE_MACRO = (
    Symbol(s) for s in "quote if set! define lambda begin define-macro".split()
)
QUASIQUOTE, UNQUOTE, UNQUOTE_SPLICING = (
    Symbol(s) for s in "quasiquote unquote unquote-splicing".split()
)
APPEND, CONS, LET = (Symbol(s) for s in "append cons let".split())

_CORE_SYMBOLS = (
    QUOTE, IF, SET, DEFINE, LAMBDA, BEGIN, DEFINE_MACRO,
    QUASIQUOTE, UNQUOTE, UNQUOTE_SPLICING, APPEND, CONS, LET,
)


class SymbolTable:
    """Session-scoped interning table: one Symbol object per distinct name.

    Entries are never evicted, so identity comparison (`is`) between symbols
    interned by the same table is equivalent to comparing their text.
    """

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {s.id: s for s in _CORE_SYMBOLS}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = self._symbols[name] = Symbol(name)
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)


# Never entered into a SymbolTable, so no source text can produce it.
EOF_OBJECT = Symbol("#<eof-object>")
