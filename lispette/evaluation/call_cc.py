"""Builtin: call/cc (call-with-current-continuation), escape-only.

Usage examples:
  (call/cc (lambda (k) (k 42) 99))      ; => 42
  (+ 1 (call/cc (lambda (k) (k 10))))  ; => 11

Notes:
- `k` is a Continuation. Applying it yields an Escape tagged with `k`, which
  the evaluator passes back up unchanged until it reaches this frame.
- `k` is single-shot and upward-only: once this call/cc has returned,
  normally or by escape, invoking `k` is a LispetteContinuationError.
- Escapes tagged with any other continuation pass through untouched, so
  nested call/cc forms resolve by scope.
"""

from __future__ import annotations

from lispette import Datum
from lispette.errors import LispetteArityError
from lispette.evaluation.apply import apply_procedure
from lispette.evaluation.evaluator import evaluate
from lispette.types.continuation import Continuation, Escape
from lispette.types.environment import Environment


def call_cc(env: Environment, args: list[Datum]) -> Datum | Escape:
    """(call/cc f): apply f to a fresh escape continuation."""
    if len(args) != 1:
        raise LispetteArityError(1, len(args), "call/cc")

    k = Continuation()
    try:
        result = apply_procedure(args[0], [k], env, evaluate)
    finally:
        k.active = False
    if isinstance(result, Escape) and result.continuation is k:
        return result.value
    return result
