"""Render runtime values back to source-like text."""

from __future__ import annotations

import math

from lispette import Datum
from lispette.types.symbol import Symbol


def to_string(x: Datum) -> str:
    """Convert a Python object back into a Lisp-readable string."""
    match x:
        case True:
            return "#t"
        case False:
            return "#f"
        case float() if math.isinf(x):
            # overflows to infinity when read back
            return "1e999" if x > 0 else "-1e999"
        case Symbol():
            return x.id
        case str():
            return f'"{x}"'
        case list():
            return "(" + " ".join(to_string(e) for e in x) + ")"
        case _:
            return str(x)
