from lispette import EvaluatorFn, SExpression, Datum
from lispette.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> Datum:
    return tail[0]
