from lispette import EvaluatorFn, SExpression
from lispette.types.environment import Environment
from lispette.types.procedure import Procedure
from lispette.types.symbol import BEGIN


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> Procedure:
    params, *body = tail
    # expanded trees carry exactly one body form; be lenient with raw ones
    return Procedure(params, body[0] if len(body) == 1 else [BEGIN, *body], env)
