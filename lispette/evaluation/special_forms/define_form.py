from lispette import EvaluatorFn, SExpression, Datum
from lispette.types.continuation import Escape
from lispette.types.environment import Environment


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> Datum:
    """
    (define name value)
    Binds into the innermost frame, shadowing any outer binding, and
    returns the bound value.
    """
    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    if isinstance(value, Escape):
        return value
    env.define(name, value)
    return value
