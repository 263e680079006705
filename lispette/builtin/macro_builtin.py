"""Builtin macro transformers for Lispette (implemented in Python).
"""

from lispette import SExpression
from lispette.evaluation.expander import require
from lispette.types.environment import Environment
from lispette.types.macro_environment import MacroEnvironment
from lispette.types.symbol import Symbol, LAMBDA, LET


def let_macro(env: Environment, args: list[SExpression]) -> SExpression:
    """
    (let ((var1 val1) (var2 val2) ...) body...)
    => ((lambda (var1 var2 ...) body...) val1 val2 ...)
    """
    x = [LET, *args]
    require(x, len(args) > 1)
    bindings, *body = args
    require(
        x,
        isinstance(bindings, list)
        and all(isinstance(b, list) and len(b) == 2 and isinstance(b[0], Symbol) for b in bindings),
        "illegal binding list",
    )
    vars_ = [b[0] for b in bindings]
    vals_ = [b[1] for b in bindings]
    return [[LAMBDA, vars_, *body], *vals_]


def register(macro_env: MacroEnvironment) -> None:
    """Register builtin macros in the provided MacroEnvironment."""
    macro_env.define_macro(LET, let_macro)
