"""Static macro expansion: rewrite a read form into a core form.

The expander walks the tree once before evaluation, error-checking special
forms and replacing every application of a registered macro with its
expansion. The input tree is never mutated. Only `define-macro` has an
effect, registering a procedure in the session's MacroEnvironment; the
resulting core tree contains no macro applications and no define-macro forms.

Core forms produced:
    (quote x)  (if t c a)  (set! v e)  (define v e)  (lambda params e)
    (begin e...)  and ordinary applications (f e...)
"""

from __future__ import annotations

from lispette import SExpression
from lispette.errors import LispetteSyntaxError
from lispette.evaluation.apply import apply_procedure
from lispette.evaluation.evaluator import evaluate
from lispette.printer import to_string
from lispette.types.environment import Environment
from lispette.types.macro_environment import MacroEnvironment
from lispette.types.procedure import is_procedure
from lispette.types.symbol import (
    Symbol,
    QUOTE, IF, SET, DEFINE, LAMBDA, BEGIN, DEFINE_MACRO,
    QUASIQUOTE, UNQUOTE, UNQUOTE_SPLICING, APPEND, CONS,
)
from lispette.types.unspecified import Unspecified


def require(x: SExpression, predicate: bool, msg: str = "wrong length") -> None:
    """Signal a syntax error about form `x` if predicate is false."""
    if not predicate:
        raise LispetteSyntaxError(to_string(x), msg)


def is_pair(x: SExpression) -> bool:
    return isinstance(x, list) and len(x) > 0


def _is_param(x: SExpression) -> bool:
    # there are no dotted pairs, so "." is never a parameter name
    return isinstance(x, Symbol) and x.id != "."


def expand(
    x: SExpression,
    env: Environment,
    macros: MacroEnvironment,
    toplevel: bool = False,
) -> SExpression:
    """Walk tree of x, expanding macros and signaling LispetteSyntaxError.

    `env` is the frame define-macro bodies are evaluated in (the session
    root); `toplevel` is true only for forms read directly from source or
    nested in top-level `begin`s.
    """
    if not isinstance(x, list):  # constant or symbol => unchanged
        return x
    require(x, x != [])  # () => Error

    head = x[0]

    if head == QUOTE:  # (quote exp)
        require(x, len(x) == 2)
        return x

    if head == IF:  # (if t c) => (if t c #<unspecified>)
        if len(x) == 3:
            x = x + [Unspecified]
        require(x, len(x) == 4)
        return [expand(e, env, macros) for e in x]

    if head == SET:
        require(x, len(x) == 3)
        var = x[1]  # (set! non-var exp) => Error
        require(x, isinstance(var, Symbol), "can set! only a symbol")
        return [SET, var, expand(x[2], env, macros)]

    if head == DEFINE or head == DEFINE_MACRO:
        require(x, len(x) >= 3)
        definer, target, *body = x
        if isinstance(target, list):  # (define (f args) body...)
            require(x, target != [], "illegal definition target")
            name, *params = target  # => (define f (lambda (args) body...))
            return expand([definer, name, [LAMBDA, params, *body]], env, macros, toplevel)
        require(x, len(x) == 3)  # (define non-var/list exp) => Error
        require(x, isinstance(target, Symbol), "can define only a symbol")
        exp = expand(x[2], env, macros)
        if definer == DEFINE_MACRO:
            require(x, toplevel, "define-macro only allowed at top level")
            proc = evaluate(exp, env)
            require(x, is_procedure(proc), "macro must be a procedure")
            macros.define_macro(target, proc)
            return Unspecified  # pure expansion-time effect
        return [DEFINE, target, exp]

    if head == BEGIN:
        if len(x) == 1:  # (begin) => #<unspecified>
            return Unspecified
        return [expand(e, env, macros, toplevel) for e in x]

    if head == LAMBDA:  # (lambda (x) e1 e2) => (lambda (x) (begin e1 e2))
        require(x, len(x) >= 3)
        params, *body = x[1:]
        require(
            x,
            _is_param(params)
            or (isinstance(params, list) and all(_is_param(p) for p in params)),
            "illegal lambda argument list",
        )
        exp = body[0] if len(body) == 1 else [BEGIN, *body]
        return [LAMBDA, params, expand(exp, env, macros)]

    if head == QUASIQUOTE:  # `x => expand_quasiquote(x)
        require(x, len(x) == 2)
        # unquoted parts may themselves use macros
        return expand(expand_quasiquote(x[1]), env, macros)

    if macros.is_macro(head):  # (m arg...) => expansion of m, re-expanded
        expansion = apply_procedure(macros.get(head), x[1:], env, evaluate)
        return expand(expansion, env, macros)

    return [expand(e, env, macros) for e in x]  # (f arg...) => expand each


def expand_quasiquote(x: SExpression) -> SExpression:
    """Expand `x => 'x; `,x => x; `(,@x y) => (append x y); `(x y) => (cons x y)"""
    if not is_pair(x):
        return [QUOTE, x]
    require(x, x[0] != UNQUOTE_SPLICING, "can't splice here")
    if x[0] == UNQUOTE:
        require(x, len(x) == 2)
        return x[1]
    if is_pair(x[0]) and x[0][0] == UNQUOTE_SPLICING:
        require(x[0], len(x[0]) == 2)
        return [APPEND, x[0][1], expand_quasiquote(x[1:])]
    return [CONS, expand_quasiquote(x[0]), expand_quasiquote(x[1:])]
