"""Application engine for Lispette.

Centralizes how a procedure value is invoked once its arguments are evaluated:
- user closures run their body in a fresh frame bound by the closure,
- escape continuations produce an Escape result,
- native callables are called as fn(env, args).

The evaluator inlines the closure case so that closure calls it reaches in
tail position reuse its trampoline; every other caller (call/cc, apply,
macro invocation) comes through here.
"""

from lispette import Datum, EvaluatorFn
from lispette.errors import LispetteTypeError
from lispette.printer import to_string
from lispette.types.continuation import Continuation, Escape
from lispette.types.environment import Environment
from lispette.types.procedure import Procedure


def apply_procedure(
    proc: Datum,
    args: list[Datum],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Datum | Escape:
    """Apply `proc` to already-evaluated `args`.

    Raises LispetteTypeError when `proc` is not a procedure.
    """
    if isinstance(proc, Procedure):
        return evaluate_fn(proc.body, proc.bind(args))
    if isinstance(proc, Continuation):
        return proc.escape(args)
    if callable(proc):
        return proc(env, args)
    raise LispetteTypeError(f"cannot apply non-procedure {to_string(proc)}")
