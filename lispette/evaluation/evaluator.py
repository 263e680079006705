"""Core evaluator and trampoline for the Lispette interpreter.

Evaluates macro-expanded trees. The chosen branch of `if`, the last form of
`begin`, and the body of a closure applied from the loop are continued in
place rather than recursed into, so tail recursion through them runs in
constant host stack. Operand evaluation recurses normally.

An Escape returned by any sub-evaluation is handed straight back to the
caller; only the call/cc that owns it turns it into a value.
"""

from __future__ import annotations

from lispette import SExpression, Datum
from lispette.errors import LispetteTypeError
from lispette.evaluation.apply import apply_procedure
from lispette.evaluation.special_forms import SPECIAL_FORMS
from lispette.types.continuation import Escape
from lispette.types.environment import Environment
from lispette.types.procedure import Procedure
from lispette.types.symbol import Symbol
from lispette.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> Datum | Escape:
    """Evaluate an expanded expression in an environment."""
    while True:
        match expr:
            case Symbol():
                return env.lookup(expr)

            case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
                result = SPECIAL_FORMS[head](tail, env, evaluate)
                if isinstance(result, TailCall):
                    expr, env = result.expr, result.env
                    continue
                return result

            case [_, *_]:
                values: list[Datum] = []
                for sub in expr:
                    value = evaluate(sub, env)
                    if isinstance(value, Escape):
                        return value
                    values.append(value)
                proc, *args = values
                if isinstance(proc, Procedure):
                    expr, env = proc.body, proc.bind(args)
                    continue
                return apply_procedure(proc, args, env, evaluate)

            case []:
                raise LispetteTypeError("cannot evaluate the empty list ()")

            case _:
                return expr
