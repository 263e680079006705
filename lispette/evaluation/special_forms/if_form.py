from lispette import EvaluatorFn, SExpression
from lispette.types.continuation import Escape
from lispette.types.environment import Environment
from lispette.types.tail_call import TailCall
from lispette.types.unspecified import Unspecified


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> TailCall | Escape:
    test = evaluate_fn(tail[0], env)
    if isinstance(test, Escape):
        return test
    # only #f is false: 0, "", () and Unspecified all select the consequent
    if test is not False:
        return TailCall(tail[1], env)
    return TailCall(tail[2] if len(tail) > 2 else Unspecified, env)
