from lispette import SExpression
from lispette.types.environment import Environment


class TailCall:
    """Tells the trampoline to continue with `expr` in `env` instead of recursing."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
