"""Escape continuations as explicit results.

Invoking a continuation does not unwind the host stack with an exception.
It produces an `Escape` value which every evaluator return path hands back
to its caller untouched, until the `call/cc` that created the continuation
recognises its own tag and turns the escape back into an ordinary value.
"""

from __future__ import annotations

from dataclasses import dataclass

from lispette import Datum
from lispette.errors import LispetteArityError, LispetteContinuationError
from lispette.types.unspecified import Unspecified


class Continuation:
    """One-shot, upward-only escape procedure handed to call/cc's argument."""

    __slots__ = ("active",)

    def __init__(self):
        self.active = True

    def escape(self, args: list[Datum]) -> Escape:
        if not self.active:
            raise LispetteContinuationError(
                "continuation invoked after its call/cc returned"
            )
        if len(args) > 1:
            raise LispetteArityError(1, len(args), "continuation")
        return Escape(self, args[0] if args else Unspecified)

    def __repr__(self) -> str:
        state = "live" if self.active else "spent"
        return f"#<continuation {state}>"


@dataclass(frozen=True)
class Escape:
    """Control-flow result: return `value` from the call/cc owning `continuation`."""

    continuation: Continuation
    value: Datum
