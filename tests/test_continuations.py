import pytest

from lispette.config import FAILURE
from lispette.errors import LispetteArityError, LispetteContinuationError, LispetteTypeError
from lispette.types.continuation import Continuation, Escape
from lispette.types.unspecified import Unspecified


def test_escape_discards_pending_work(bare):
    assert bare.eval("(+ 1 (call/cc (lambda (k) (+ 2 (k 3)))))") == 4


def test_normal_return_without_invoking_k(bare):
    assert bare.eval("(call/cc (lambda (k) 42))") == 42


def test_long_name_is_an_alias(bare):
    assert bare.eval("(call-with-current-continuation (lambda (k) (k 7) 8))") == 7


def test_escape_skips_the_rest_of_a_body(bare, output):
    result = bare.eval('(call/cc (lambda (k) (display "before") (k 1) (display "after")))')
    assert result == 1
    assert output == ["before"]


def test_escape_from_nested_procedure_calls(bare):
    bare.eval(
        """
        (define (find-first pred xs)
          (call/cc
            (lambda (return)
              (define (walk xs)
                (if (null? xs) #f
                    (begin (if (pred (car xs)) (return (car xs)) #f)
                           (walk (cdr xs)))))
              (walk xs))))
        """
    )
    assert bare.eval("(find-first (lambda (x) (> x 2)) '(1 2 3 4))") == 3
    assert bare.eval("(find-first (lambda (x) (> x 9)) '(1 2 3 4))") is False


def test_outer_escape_passes_through_inner_call_cc(bare):
    source = "(call/cc (lambda (outer) (+ 1 (call/cc (lambda (inner) (outer 10))))))"
    assert bare.eval(source) == 10


def test_inner_escape_resolves_at_inner_call_cc(bare):
    source = "(call/cc (lambda (outer) (+ 1 (call/cc (lambda (inner) (inner 10))))))"
    assert bare.eval(source) == 11


def test_escape_through_define_and_set(bare):
    assert bare.eval("(define x (call/cc (lambda (k) (k 5))))") == 5
    bare.eval("(set! x (call/cc (lambda (k) (k 6))))")
    assert bare.eval("x") == 6


def test_escape_from_if_test(bare):
    assert bare.eval("(call/cc (lambda (k) (if (k 'out) 1 2)))") == bare.symbols.intern("out")


def test_k_without_argument_yields_unspecified(bare):
    assert bare.eval("(call/cc (lambda (k) (k)))") is Unspecified


def test_dead_continuation_is_an_error(bare):
    bare.eval("(define saved #f)")
    assert bare.eval("(+ 1 (call/cc (lambda (k) (set! saved k) 1)))") == 2
    with pytest.raises(LispetteContinuationError):
        bare.eval("(saved 5)")


def test_dead_continuation_reported_by_load(bare, output):
    bare.eval("(define saved (call/cc (lambda (k) k)))")
    assert bare.load("(saved 1)") == FAILURE
    assert output[-1].startswith("LispetteContinuationError")
    assert bare.load("(+ 1 1)") == "2"


def test_call_cc_arity(bare):
    with pytest.raises(LispetteArityError):
        bare.eval("(call/cc)")


def test_call_cc_requires_a_procedure(bare):
    with pytest.raises(LispetteTypeError):
        bare.eval("(call/cc 5)")


def test_continuation_is_a_procedure(bare):
    assert bare.eval("(call/cc (lambda (k) (procedure? k)))") is True


def test_continuation_object():
    k = Continuation()
    assert k.escape([1]) == Escape(k, 1)
    with pytest.raises(LispetteArityError):
        k.escape([1, 2])
    k.active = False
    assert repr(k) == "#<continuation spent>"
    with pytest.raises(LispetteContinuationError):
        k.escape([1])
