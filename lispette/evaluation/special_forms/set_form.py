from lispette import EvaluatorFn, SExpression, Datum
from lispette.types.continuation import Escape
from lispette.types.environment import Environment
from lispette.types.unspecified import Unspecified


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> Datum:
    var_sym, val_expr = tail
    value = evaluate_fn(val_expr, env)
    if isinstance(value, Escape):
        return value
    env.set(var_sym, value)
    return Unspecified
