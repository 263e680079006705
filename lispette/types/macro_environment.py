from __future__ import annotations

import logging

from lispette import Datum
from lispette.types.symbol import Symbol

logger = logging.getLogger(__name__)


class MacroEnvironment:
    """
    Macro registry mapping macro names (Symbols) to procedures.

    Consulted only by the expander; the evaluator never sees a macro. A
    transformer is any procedure: a user closure registered by define-macro,
    or a native `(env, args)` callable such as the builtin `let`.
    """

    def __init__(self):
        self.macros: dict[Symbol, Datum] = {}

    def define_macro(self, name: Symbol, transformer: Datum) -> None:
        logger.debug("registering macro %s", name)
        self.macros[name] = transformer

    def is_macro(self, sym: Datum) -> bool:
        return isinstance(sym, Symbol) and sym in self.macros

    def get(self, name: Symbol) -> Datum:
        return self.macros[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.is_macro(name)
