import pytest

from lispette.errors import LispetteArityError, LispetteTypeError, LispetteUnboundSymbol
from lispette.types.environment import Environment
from lispette.types.symbol import Symbol

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


def test_bind_params_to_args():
    env = Environment([a, b], [1, 2])
    assert env.lookup(a) == 1
    assert env.lookup(b) == 2


@pytest.mark.parametrize("args", [[1], [1, 2, 3]])
def test_arity_mismatch_names_both_counts(args):
    with pytest.raises(LispetteArityError) as exc:
        Environment([a, b], args)
    assert exc.value.expected == 2
    assert exc.value.given == len(args)
    assert "expected 2" in str(exc.value)
    assert f"got {len(args)}" in str(exc.value)


def test_single_symbol_params_collects_all_args():
    env = Environment(a, [1, 2, 3])
    assert env.lookup(a) == [1, 2, 3]
    assert Environment(a, []).lookup(a) == []


def test_find_walks_outward():
    root = Environment([a], [1])
    inner = Environment([b], [2], root)
    assert inner.find(a) is root
    assert inner.find(b) is inner


def test_find_exhausted_raises_unbound():
    with pytest.raises(LispetteUnboundSymbol, match="c"):
        Environment([a], [1]).find(c)


def test_define_shadows_outer_binding():
    root = Environment([a], [1])
    inner = Environment(outer=root)
    inner.define(a, 99)
    assert inner.lookup(a) == 99
    assert root.lookup(a) == 1


def test_set_updates_the_owning_frame():
    root = Environment([a], [1])
    inner = Environment([b], [2], root)
    inner.set(a, 10)
    assert root.lookup(a) == 10
    assert a not in inner.vars


def test_set_unbound_raises():
    with pytest.raises(LispetteUnboundSymbol):
        Environment().set(a, 1)


def test_define_requires_a_symbol():
    with pytest.raises(LispetteTypeError):
        Environment().define("a", 1)


def test_update_last_wins():
    env = Environment()
    env.update({a: 1})
    env.update({a: 2, b: 3})
    assert env.lookup(a) == 2
    assert env.lookup(b) == 3


def test_repr_summarises_the_chain():
    root = Environment()
    root.update({Symbol(f"v{i}"): i for i in range(20)})
    inner = Environment([a], [1], root)
    text = repr(inner)
    assert text.startswith("<Environment chain:")
    assert "<root: 20 bindings>" in text
    assert "-> ..." in str(inner)
