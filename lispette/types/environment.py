"""Runtime environment for Lispette.

An Environment is one frame: it owns a mapping of Symbols to values and holds
a non-owning link to the lexically enclosing frame (`outer`). Only the root
frame of a session has no outer.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, Sequence

from lispette import Datum
from lispette.errors import LispetteArityError, LispetteUnboundSymbol, LispetteTypeError
from lispette.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        params: Sequence[Symbol] | Symbol = (),
        args: Sequence[Datum] = (),
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[Symbol, Datum] = {}
        self.outer: Environment | None = outer
        if isinstance(params, Symbol):
            # (lambda args ...) collects every argument into one list
            self.vars[params] = list(args)
        else:
            if len(args) != len(params):
                raise LispetteArityError(
                    len(params),
                    len(args),
                    f"({' '.join(str(p) for p in params)})",
                )
            self.vars.update(zip(params, args))

    def define(self, name: Symbol, value: Datum) -> None:
        """Bind `name` to `value` in this frame."""
        if not isinstance(name, Symbol):
            raise LispetteTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, Datum]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, symbol: Symbol) -> Environment:
        """Find the nearest environment in the chain that contains `symbol`.

        Raises LispetteUnboundSymbol when the chain is exhausted.
        """
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        raise LispetteUnboundSymbol(f"unbound variable {symbol}")

    def lookup(self, name: Symbol) -> Datum:
        return self.find(name).vars[name]

    def set(self, name: Symbol, value: Datum) -> None:
        """Update an existing binding for `name` in the frame that owns it."""
        self.find(name).vars[name] = value

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                # the root frame carries every builtin; keep it short
                if env.outer is None and len(env.vars) > 8:
                    buffer.write(f"<root: {len(env.vars)} bindings>")
                else:
                    env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
