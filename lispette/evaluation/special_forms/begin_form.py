from lispette import EvaluatorFn, SExpression, Datum
from lispette.types.continuation import Escape
from lispette.types.environment import Environment
from lispette.types.tail_call import TailCall
from lispette.types.unspecified import Unspecified


def begin_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> Datum | TailCall:
    if not tail:
        return Unspecified
    for e in tail[:-1]:
        result = evaluate_fn(e, env)
        if isinstance(result, Escape):
            return result
    return TailCall(tail[-1], env)
