import pytest

from lispette.printer import to_string
from lispette.types.continuation import Continuation
from lispette.types.procedure import Procedure
from lispette.types.symbol import Symbol
from lispette.types.unspecified import Unspecified


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "#t"),
        (False, "#f"),
        (0, "0"),
        (1, "1"),
        (-7, "-7"),
        (2.5, "2.5"),
        ("text", '"text"'),
        (Symbol("abc"), "abc"),
        ([], "()"),
        ([1, [2, [3]], "s"], '(1 (2 (3)) "s")'),
        ([Symbol("quote"), Symbol("x")], "(quote x)"),
        ([True, False], "(#t #f)"),
        (Unspecified, "#<unspecified>"),
        (float("inf"), "1e999"),
        (float("-inf"), "-1e999"),
        ([1.5, float("inf")], "(1.5 1e999)"),
    ],
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_procedure_text():
    proc = Procedure([Symbol("x")], [Symbol("+"), Symbol("x"), 1], None)
    assert to_string(proc) == "#<procedure (lambda (x) (+ x 1))>"


def test_continuation_text():
    assert to_string(Continuation()) == "#<continuation live>"


@pytest.mark.parametrize("source", ["1e400", "(- 0 1e400)", "(list 1e400)"])
def test_infinities_read_back_as_numbers(bare, source):
    printed = bare.load(source)
    assert bare.eval(f"'{printed}") == bare.eval(source)
