"""Built-in procedures for the Lispette root environment.

This is the swappable procedure table: arithmetic, comparison, list
processing, predicates, math functions, and the few procedures that reach
back into the interpreter (apply, eval, call/cc, display). Every entry follows
the native calling convention fn(env, args).
"""
from __future__ import annotations

import math
import operator
import random
from typing import Callable

from lispette import Datum, NativeFn
from lispette.errors import LispetteArityError, LispetteTypeError
from lispette.evaluation.apply import apply_procedure
from lispette.evaluation.call_cc import call_cc
from lispette.evaluation.evaluator import evaluate
from lispette.evaluation.expander import expand
from lispette.printer import to_string
from lispette.types.environment import Environment
from lispette.types.macro_environment import MacroEnvironment
from lispette.types.procedure import is_procedure
from lispette.types.symbol import Symbol
from lispette.types.unspecified import Unspecified


def _arity(name: str, args: list[Datum], n: int) -> None:
    if len(args) != n:
        raise LispetteArityError(n, len(args), name)


def _is_number(x: Datum) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[Datum]) -> list[Datum]:
    for a in args:
        if not _is_number(a):
            raise LispetteTypeError(f"All arguments to {name} must be numbers, got {to_string(a)}")
    return args


def _list_arg(name: str, x: Datum) -> list[Datum]:
    if not isinstance(x, list):
        raise LispetteTypeError(f"{name} expects a list, got {to_string(x)}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Datum]) -> Datum:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args))


def sub(env: Environment, args: list[Datum]) -> Datum:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise LispetteArityError(1, 0, "-")
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(env: Environment, args: list[Datum]) -> Datum:
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[Datum]) -> Datum:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise LispetteArityError(1, 0, "/")
    first, *rest = _numbers("/", args)
    try:
        if not rest:
            return 1 / first
        for x in rest:
            first /= x
        return first
    except ZeroDivisionError:
        raise LispetteTypeError("Division by zero")


def _chain(name: str, op: Callable[[Datum, Datum], bool]) -> NativeFn:
    def compare(env: Environment, args: list[Datum]) -> bool:
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))

    compare.__name__ = compare.__qualname__ = f"compare_{op.__name__}"
    return compare


# -------------------------------
# Equality
# -------------------------------
def is_eq(a: Datum, b: Datum) -> bool:
    """Identity for lists and procedures, value equality for atoms of one type."""
    if isinstance(a, list) and isinstance(b, list):
        return a is b or (a == [] and b == [])
    return a is b or (type(a) is type(b) and not isinstance(a, list) and a == b)


def is_equal(a: Datum, b: Datum) -> bool:
    """Deep equality for Lisp values, element-wise for lists."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return is_eq(a, b)


def eq_p(env: Environment, args: list[Datum]) -> bool:
    _arity("eq?", args, 2)
    return is_eq(*args)


def equal_p(env: Environment, args: list[Datum]) -> bool:
    _arity("equal?", args, 2)
    return is_equal(*args)


def logical_not(env: Environment, args: list[Datum]) -> bool:
    """Logical NOT: only #f is false."""
    _arity("not", args, 1)
    return args[0] is False


# -------------------------------
# Lists
# -------------------------------
def cons(env: Environment, args: list[Datum]) -> list[Datum]:
    """Prepend head to a list, non-destructively."""
    _arity("cons", args, 2)
    head, tail = args
    return [head] + _list_arg("cons", tail)


def car(env: Environment, args: list[Datum]) -> Datum:
    _arity("car", args, 1)
    xs = _list_arg("car", args[0])
    if not xs:
        raise LispetteTypeError("car of empty list")
    return xs[0]


def cdr(env: Environment, args: list[Datum]) -> list[Datum]:
    _arity("cdr", args, 1)
    xs = _list_arg("cdr", args[0])
    if not xs:
        raise LispetteTypeError("cdr of empty list")
    return xs[1:]


def append(env: Environment, args: list[Datum]) -> list[Datum]:
    """Concatenate any number of lists into a new list."""
    result: list[Datum] = []
    for item in args:
        result.extend(_list_arg("append", item))
    return result


def list_builtin(env: Environment, args: list[Datum]) -> list[Datum]:
    return list(args)


def length(env: Environment, args: list[Datum]) -> int:
    _arity("length", args, 1)
    x = args[0]
    if not isinstance(x, (list, str)):
        raise LispetteTypeError(f"length expects a list or string, got {to_string(x)}")
    return len(x)


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[Datum], bool]) -> NativeFn:
    def predicate(env: Environment, args: list[Datum]) -> bool:
        _arity(name, args, 1)
        return test(args[0])

    predicate.__name__ = predicate.__qualname__ = name
    return predicate


PREDICATES = {
    "list?": lambda x: isinstance(x, list),
    "pair?": lambda x: isinstance(x, list) and len(x) > 0,
    "null?": lambda x: isinstance(x, list) and len(x) == 0,
    "symbol?": lambda x: isinstance(x, Symbol),
    "boolean?": lambda x: isinstance(x, bool),
    "number?": _is_number,
    "string?": lambda x: isinstance(x, str),
    "procedure?": is_procedure,
}


# -------------------------------
# Control
# -------------------------------
def apply_builtin(env: Environment, args: list[Datum]) -> Datum:
    """(apply f args): call f with the elements of the list args."""
    _arity("apply", args, 2)
    proc, proc_args = args
    return apply_procedure(proc, list(_list_arg("apply", proc_args)), env, evaluate)


# -------------------------------
# Math
# -------------------------------
def _js_round(x: float) -> int:
    # halves round up: (round -2.5) => -2
    return math.floor(x + 0.5)


def _sign(x: float) -> Datum:
    if x == 0 or math.isnan(x):
        return x
    return 1 if x > 0 else -1


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


UNARY_MATH: dict[str, Callable[[Datum], Datum]] = {
    "abs": abs,
    "acos": math.acos,
    "acosh": math.acosh,
    "asin": math.asin,
    "asinh": math.asinh,
    "atan": math.atan,
    "atanh": math.atanh,
    "cbrt": _cbrt,
    "ceil": math.ceil,
    "cos": math.cos,
    "cosh": math.cosh,
    "exp": math.exp,
    "expm1": math.expm1,
    "floor": math.floor,
    "log": math.log,
    "log1p": math.log1p,
    "log10": math.log10,
    "log2": math.log2,
    "round": _js_round,
    "sign": _sign,
    "sin": math.sin,
    "sinh": math.sinh,
    "sqrt": math.sqrt,
    "tan": math.tan,
    "tanh": math.tanh,
    "trunc": math.trunc,
}


def _unary_math(name: str, fn: Callable[[Datum], Datum]) -> NativeFn:
    def unary(env: Environment, args: list[Datum]) -> Datum:
        _arity(name, args, 1)
        try:
            return fn(*_numbers(name, args))
        except (ValueError, OverflowError) as e:
            raise LispetteTypeError(f"{name}: {e}")

    unary.__name__ = unary.__qualname__ = name
    return unary


def atan2(env: Environment, args: list[Datum]) -> float:
    _arity("atan2", args, 2)
    return math.atan2(*_numbers("atan2", args))


def pow_builtin(env: Environment, args: list[Datum]) -> Datum:
    _arity("pow", args, 2)
    x, y = _numbers("pow", args)
    try:
        result = x ** y
    except ZeroDivisionError:
        raise LispetteTypeError("pow: zero to a negative power")
    except OverflowError as e:
        raise LispetteTypeError(f"pow: {e}")
    # negative base with a fractional exponent
    if isinstance(result, complex):
        raise LispetteTypeError("pow: result is not a real number")
    return result


def hypot(env: Environment, args: list[Datum]) -> float:
    return math.hypot(*_numbers("hypot", args))


def max_builtin(env: Environment, args: list[Datum]) -> Datum:
    if not args:
        raise LispetteArityError(1, 0, "max")
    return max(_numbers("max", args))


def min_builtin(env: Environment, args: list[Datum]) -> Datum:
    if not args:
        raise LispetteArityError(1, 0, "min")
    return min(_numbers("min", args))


def random_builtin(env: Environment, args: list[Datum]) -> float:
    _arity("random", args, 0)
    return random.random()


def register(
    env: Environment,
    macros: MacroEnvironment,
    output: Callable[[str], None] = print,
) -> None:
    """Register all builtin procedures into the given (root) environment.

    `macros` and `output` belong to the owning session: `eval` expands with
    its macro registry and `display` writes lines to its output sink.
    """

    def eval_builtin(_: Environment, args: list[Datum]) -> Datum:
        """(eval x): expand then evaluate the datum x in the session's root frame."""
        _arity("eval", args, 1)
        return evaluate(expand(args[0], env, macros), env)

    def display(_: Environment, args: list[Datum]) -> Datum:
        """(display x): strings are written raw, other values printed."""
        _arity("display", args, 1)
        x = args[0]
        output(x if isinstance(x, str) else to_string(x))
        return Unspecified

    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("="): _chain("=", operator.eq),
            Symbol("<"): _chain("<", operator.lt),
            Symbol(">"): _chain(">", operator.gt),
            Symbol("<="): _chain("<=", operator.le),
            Symbol(">="): _chain(">=", operator.ge),
            Symbol("not"): logical_not,
            Symbol("eq?"): eq_p,
            Symbol("equal?"): equal_p,
            Symbol("length"): length,
            Symbol("cons"): cons,
            Symbol("car"): car,
            Symbol("cdr"): cdr,
            Symbol("append"): append,
            Symbol("list"): list_builtin,
            Symbol("apply"): apply_builtin,
            Symbol("eval"): eval_builtin,
            Symbol("call/cc"): call_cc,
            Symbol("call-with-current-continuation"): call_cc,
            Symbol("display"): display,
            Symbol("atan2"): atan2,
            Symbol("pow"): pow_builtin,
            Symbol("hypot"): hypot,
            Symbol("max"): max_builtin,
            Symbol("min"): min_builtin,
            Symbol("random"): random_builtin,
        }
    )
    env.update({Symbol(name): _predicate(name, test) for name, test in PREDICATES.items()})
    env.update({Symbol(name): _unary_math(name, fn) for name, fn in UNARY_MATH.items()})
