"""User closures and the procedure predicate."""

from __future__ import annotations

from lispette import Datum, SExpression
from lispette.types.environment import Environment
from lispette.types.symbol import Symbol


class Procedure:
    """A first-class closure: parameter list, expanded body, defining frame.

    `params` is either a list of Symbols (fixed arity) or a single Symbol that
    receives every argument as one list. The defining frame is captured by
    reference, so later definitions in it are visible to the body.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol] | Symbol, body: SExpression, env: Environment):
        self.params = params
        self.body = body
        self.env = env

    def bind(self, args: list[Datum]) -> Environment:
        """Return the frame in which one invocation of the body runs."""
        return Environment(self.params, args, self.env)

    def __str__(self) -> str:
        from lispette.printer import to_string

        return f"#<procedure (lambda {to_string(self.params)} {to_string(self.body)})>"

    def __repr__(self) -> str:
        return str(self)


def is_procedure(value: Datum) -> bool:
    """True for closures, escape continuations and native callables."""
    from lispette.types.continuation import Continuation

    return isinstance(value, (Procedure, Continuation)) or callable(value)
