from lispette.types.symbol import Symbol, SymbolTable, EOF_OBJECT
from lispette.types.unspecified import Unspecified
from lispette.types.environment import Environment
from lispette.types.procedure import Procedure, is_procedure
from lispette.types.continuation import Continuation, Escape
from lispette.types.macro_environment import MacroEnvironment

__all__ = [
    "Symbol",
    "SymbolTable",
    "EOF_OBJECT",
    "Unspecified",
    "Environment",
    "Procedure",
    "is_procedure",
    "Continuation",
    "Escape",
    "MacroEnvironment",
]
