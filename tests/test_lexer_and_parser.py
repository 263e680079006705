import pytest
from hypothesis import given, strategies as st

from lispette.errors import LispetteSyntaxError
from lispette.printer import to_string
from lispette.reader.parser import InPort, atom, read, read_all
from lispette.types.symbol import EOF_OBJECT, Symbol, SymbolTable


def tokens_of(source):
    port = InPort(source)
    result = []
    while (tok := port.next_token()) is not EOF_OBJECT:
        result.append(tok)
    return result


def read_one(source):
    return read(InPort(source))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ["a"]),
        ("'a", ["'", "a"]),
        ("(a b c)", ["(", "a", "b", "c", ")"]),
        ('"hello world"', ['"hello world"']),
        ('"a\\"b" c', ['"a\\"b"', "c"]),
        (" ; comment\n a b", ["a", "b"]),
        ("a ; trailing comment", ["a"]),
        ("`y", ["`", "y"]),
        (",z", [",", "z"]),
        (",@w", [",@", "w"]),
        ("(f\n  x\n\n  y)", ["(", "f", "x", "y", ")"]),
        ("(a)(b)", ["(", "a", ")", "(", "b", ")"]),
        ("", []),
        ("   \n\n  ", []),
    ],
)
def test_next_token(source, expected):
    assert tokens_of(source) == expected


def test_next_token_returns_eof_repeatedly():
    port = InPort("x")
    assert port.next_token() == "x"
    assert port.next_token() is EOF_OBJECT
    assert port.next_token() is EOF_OBJECT


def test_unterminated_string_is_a_syntax_error():
    with pytest.raises(LispetteSyntaxError):
        tokens_of('(display "abc')


@pytest.mark.parametrize(
    "source,expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("3.14", 3.14),
        ("-.5", -0.5),
        ("1e3", 1000.0),
        ("#t", True),
        ("#f", False),
        ('"hello"', "hello"),
        ('""', ""),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("`(a ,b ,@c)", [Symbol("quasiquote"), [Symbol("a"), [Symbol("unquote"), Symbol("b")], [Symbol("unquote-splicing"), Symbol("c")]]]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        ("()", []),
    ],
)
def test_read(source, expected):
    assert read_one(source) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("...", Symbol("...")),
        ("nan", Symbol("nan")),
        ("inf", Symbol("inf")),
        ("1+", Symbol("1+")),
        ("set!", Symbol("set!")),
        ("call/cc", Symbol("call/cc")),
    ],
)
def test_atom_falls_back_to_symbol(token, expected):
    result = atom(token, SymbolTable())
    assert isinstance(result, Symbol)
    assert result == expected


def test_atom_integer_versus_float():
    table = SymbolTable()
    assert type(atom("10", table)) is int
    assert type(atom("10.0", table)) is float


def test_string_has_no_escape_processing():
    assert read_one('"a\\nb"') == "a\\nb"


def test_unmatched_close_paren():
    with pytest.raises(LispetteSyntaxError, match="unexpected \\)"):
        read_one(")")


def test_eof_inside_list_truncates_silently():
    assert read_one("(a (b c") == [Symbol("a"), [Symbol("b"), Symbol("c")]]


def test_quote_at_end_of_input_is_an_error():
    with pytest.raises(LispetteSyntaxError):
        read_one("'")


def test_read_on_empty_input_is_eof():
    assert read_one("  ; nothing here") is EOF_OBJECT


def test_read_all_yields_each_top_level_form():
    forms = list(read_all(InPort("(define x 1)\n(+ x 1) 'y")))
    assert len(forms) == 3
    assert forms[2] == [Symbol("quote"), Symbol("y")]


def test_quote_consumes_exactly_one_form():
    port = InPort("'a b")
    assert read(port) == [Symbol("quote"), Symbol("a")]
    assert read(port) == Symbol("b")


# -------------------------------
# Print/read round trip
# -------------------------------
symbol_strat = st.from_regex(
    r"[a-zA-Z!$%&*/:<=>?^_~][a-zA-Z0-9!$%&*/:<=>?^_~+\-.]{0,10}", fullmatch=True
).map(Symbol)

string_strat = st.text(
    st.characters(min_codepoint=32, max_codepoint=126, blacklist_characters='"\\'),
    max_size=20,
)

number_strat = st.one_of(
    st.integers(min_value=-10**12, max_value=10**12),
    st.floats(allow_infinity=False, allow_nan=False),
)

atom_strat = st.one_of(symbol_strat, string_strat, number_strat, st.booleans())

datum_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=4), max_leaves=20)


@given(datum_strat)
def test_print_then_read_round_trips(x):
    assert read_one(to_string(x)) == x


@given(datum_strat)
def test_printed_text_reads_as_a_single_form(x):
    port = InPort(to_string(x))
    read(port)
    assert read(port) is EOF_OBJECT
