import datetime as dt

import pytest
from hypothesis import given, strategies as st

from risp.reader.parser import lex, parse, parse_tree, TokenStream
from risp.types.errors import ParseError
from risp.types.val import Date, DateTime, Float, List, Num, Risp, Sym, Time


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("rparen", ")")]),
        ("(+ 1 -2.5)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "-2.5"), ("rparen", ")")]),
        ("07:30:00", [("atom", "07:30:00")]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("a;trailing\nb", [("atom", "a"), ("atom", "b")]),
        ("", []),
        ("   \n\t ", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = [(t.kind, t.text) for t in lex(source)]
    assert tokens == expected


def test_lexer_positions():
    tokens = list(lex("  (ab  12)"))
    assert [t.pos for t in tokens] == [2, 3, 7, 9]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1", Num(1)),
        ("-45", Num(-45)),
        ("3.14", Float(3.14)),
        ("-0.5", Float(-0.5)),
        ("3.0", Float(3.0)),
        ("9223372036854775807", Num(2 ** 63 - 1)),
        ("-9223372036854775808", Num(-(2 ** 63))),
        ("9223372036854775808", Float(9223372036854775808.0)),
        ("00000000000000000000042", Num(42)),
        ("a", Sym("a")),
        ("undefined_name", Sym("undefined_name")),
        ("x2", Sym("x2")),
        ("<=", Sym("<=")),
        ("!=", Sym("!=")),
        ("-", Sym("-")),
        ("07:30:00", Time(dt.time(7, 30, 0))),
        ("2024-05-01", Date(dt.date(2024, 5, 1))),
        ("2024-05-01T18:00:05", DateTime(dt.datetime(2024, 5, 1, 18, 0, 5))),
        ("(a b c)", List.of(Sym("a"), Sym("b"), Sym("c"))),
        ("()", List()),
    ]
)
def test_parser(source, expected):
    result = parse(source)
    assert isinstance(result, Risp)
    assert result.forms == (expected,)  # one top-level form


def test_parse_list_of_numbers():
    assert parse("1 2 3") == Risp.of(Num(1), Num(2), Num(3))


def test_parse_empty_program():
    assert parse("") == Risp()
    assert parse("  ; only a comment") == Risp()


def test_nested_lists():
    source = "((a b) (c (d)))"
    expected = List.of(
        List.of(Sym("a"), Sym("b")),
        List.of(Sym("c"), List.of(Sym("d"))),
    )
    assert parse(source).forms == (expected,)


def test_parse_rule_file_with_comments():
    source = """
    ; heater rule
    (if (< tank_temp 78)   ; too cold
        true
        false)
    """
    (form,) = parse(source).forms
    assert form == List.of(
        Sym("if"),
        List.of(Sym("<"), Sym("tank_temp"), Num(78)),
        Sym("true"),
        Sym("false"),
    )


def test_parse_tree_keeps_brackets():
    tree = parse_tree("(+ 1 2)")
    assert tree.rule == "risp"
    (lst, eoi) = tree.children
    assert eoi.rule == "EOI"
    assert [c.rule for c in lst.children] == ["lparen", "symbol", "number", "number", "rparen"]
    assert lst.text == "(+ 1 2)"


@pytest.mark.parametrize(
    "source",
    [
        "/|garbage|/",
        "1a",
        "(1a)",
        "-1a",
        "(a b",
        "a b)",
        ")",
        "((a)",
        "1.",
        ".5",
        "a-b",
        "25:00:00",
        "07:61:00",
        "2024-13-01",
        "2024-02-30T10:00:00",
        "7:30:00",
        "#t",
    ]
)
def test_malformed_input_is_a_parse_error(source):
    with pytest.raises(ParseError):
        parse(source)


def test_parse_error_renders_position():
    with pytest.raises(ParseError) as info:
        parse("(+ 1\n   2b)")
    message = info.value.message
    assert message.startswith("2:4:")
    assert "   2b)" in message
    assert "cannot start with a digit" in message


def test_unclosed_paren_points_at_open_bracket():
    with pytest.raises(ParseError) as info:
        parse("(a (b c)")
    assert info.value.message.startswith("1:1: unclosed '('")


def test_nesting_limit():
    deep = "(" * 10 + "1" + ")" * 10
    assert TokenStream(deep, max_depth=10).parse_program().children
    with pytest.raises(ParseError, match="nesting deeper than 9"):
        TokenStream(deep, max_depth=9).parse_program()


def test_nesting_limit_from_environment(monkeypatch):
    monkeypatch.setenv("RISP_MAX_DEPTH", "3")
    assert parse("(((1)))")
    with pytest.raises(ParseError):
        parse("((((1))))")


@given(st.lists(st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1), max_size=8))
def test_parse_integer_sequences(xs):
    source = " ".join(str(x) for x in xs)
    assert parse(source) == Risp(tuple(Num(x) for x in xs))
