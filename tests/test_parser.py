"""Parser tests."""

import pytest

from minitac.errors import (
    ParseError,
    ParseExpectedAssignOp,
    ParseExpectedIdentifier,
    ParseExpectedOperand,
    ParseUnexpectedEndOfInput,
)
from minitac.lexer import tokenize
from minitac.mini import Assignment, BinaryOp, Identifier, Literal
from minitac.parser import Parser, parse_assignment


def parse(source: str) -> Assignment:
    return parse_assignment(tokenize(source))


def test_left_fold():
    assert parse("y = x * 2 + 5;") == Assignment(
        "y",
        BinaryOp("+", BinaryOp("*", Identifier("x"), Literal("2")), Literal("5")),
    )


def test_no_precedence():
    # (x + 2) * 5, not x + (2 * 5)
    assert parse("y = x + 2 * 5;") == Assignment(
        "y",
        BinaryOp("*", BinaryOp("+", Identifier("x"), Literal("2")), Literal("5")),
    )


def test_semicolon_is_optional():
    assert parse("y = x * 2 + 5") == parse("y = x * 2 + 5;")


def test_single_operand():
    assert parse("a = 1;") == Assignment("a", Literal("1"))
    assert parse("a = b") == Assignment("a", Identifier("b"))


def test_every_operator_folds_left():
    ast = parse("r = a == b && c = d")
    assert ast == Assignment(
        "r",
        BinaryOp(
            "=",
            BinaryOp("&&", BinaryOp("==", Identifier("a"), Identifier("b")), Identifier("c")),
            Identifier("d"),
        ),
    )


def test_trailing_tokens_are_left_unconsumed():
    p = Parser(tokenize("a = 1; b = 2;"))
    assert p.parse_assignment() == Assignment("a", Literal("1"))
    assert [t.lexeme for t in p.remaining()] == ["b", "=", "2", ";"]


def test_expression_stops_at_non_operator():
    p = Parser(tokenize("a = 1 2"))
    assert p.parse_assignment() == Assignment("a", Literal("1"))
    assert [t.lexeme for t in p.remaining()] == ["2"]


def test_empty_input():
    with pytest.raises(ParseExpectedIdentifier) as excinfo:
        parse_assignment([])
    assert excinfo.value.token is None
    assert excinfo.value.line is None
    assert "at end of input" in str(excinfo.value)


@pytest.mark.parametrize("source", ["1 = 2", "if = 2", "= x", "; y = 1"])
def test_expected_identifier(source):
    with pytest.raises(ParseExpectedIdentifier) as excinfo:
        parse(source)
    assert (excinfo.value.line, excinfo.value.column) == (1, 1)


def test_expected_assign_op():
    with pytest.raises(ParseExpectedAssignOp) as excinfo:
        parse("y == 2")
    assert excinfo.value.token.lexeme == "=="
    assert (excinfo.value.line, excinfo.value.column) == (1, 3)


def test_expected_assign_op_at_end_of_input():
    with pytest.raises(ParseExpectedAssignOp) as excinfo:
        parse("y")
    assert excinfo.value.token is None


def test_expected_assign_op_wrong_kind():
    # a string literal which happens to read '=' is not the assign operator
    with pytest.raises(ParseExpectedAssignOp):
        parse('y "=" 2')


@pytest.mark.parametrize("source,column", [
    ("y = ;", 5),
    ("y = x + ;", 9),
    ("y = 'c'", 5),
    ('y = "s"', 5),
    ("y = x + while", 9),
    ("y = (x)", 5),
    ("y = x * * 2", 9),
])
def test_expected_operand(source, column):
    with pytest.raises(ParseExpectedOperand) as excinfo:
        parse(source)
    assert (excinfo.value.line, excinfo.value.column) == (1, column)


@pytest.mark.parametrize("source", ["y =", "y = x +", "y = 1 * 2 -"])
def test_unexpected_end_of_input(source):
    with pytest.raises(ParseUnexpectedEndOfInput) as excinfo:
        parse(source)
    assert excinfo.value.token is None
    assert str(excinfo.value) == "Expected literal or identifier at end of input"


def test_parse_errors_share_a_base_class():
    for source in ["", "1", "y", "y = ;", "y ="]:
        with pytest.raises(ParseError):
            parse(source)


def test_parsers_do_not_share_state():
    tokens = tokenize("a = b + c")
    first = Parser(tokens).parse_assignment()
    second = Parser(tokens).parse_assignment()
    assert first == second
