# Core type aliases for Lispette's data model.
# Runtime values are plain Python types (int, float, str, bool, list) plus the
# Symbol, Procedure, Continuation and Unspecified types from lispette.types.
# The closed set of shapes a value may take is:
#
#   Symbol | int | float | str | bool | list | Procedure | Continuation
#   | native callable (env, args) -> Datum | Unspecified
#
# Naming guidance:
# - SExpression: reader/expander code, denoting syntactic forms (code-as-data).
# - Datum:       evaluator/runtime code, denoting evaluated values.

import logging
from typing import Any, Callable

Datum = Any
SExpression = Datum

# Native procedure calling convention: (calling environment, evaluated args)
NativeFn = Callable[[Any, list], Datum]

# Evaluator function type: (expr, env) -> value, Escape or TailCall
EvaluatorFn = Callable[..., Datum]

logging.getLogger(__name__).addHandler(logging.NullHandler())
