import pytest

from core import (
    ShuntingYardConverter, infix_to_rpn, tokenize, Token, TokenType,
    StackUnderflow, UnbalancedParentheses, MalformedExpression, UnexpectedCharacter
)


def test_infix_to_postfix():
    assert infix_to_rpn("1 + 2 * 3 - 4") == "1 2 3 * + 4 -"


@pytest.mark.parametrize("expr,expected", [
    ("3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3", "3 4 2 * 1 5 - 2 3 ^ ^ / +"),
    ("2 ^ 3 ^ 2", "2 3 2 ^ ^"),       # 右结合
    ("1 - 2 - 3", "1 2 - 3 -"),       # 左结合
    ("10 / 5 * 2", "10 5 / 2 *"),
    ("(1 + 2) * 3", "1 2 + 3 *"),
    ("(2 ^ 3) ^ 2", "2 3 ^ 2 ^"),
    ("12+34", "12 34 +"),
    ("(((7)))", "7"),
    ("2 * 3 + 4", "2 3 * 4 +"),
])
def test_to_rpn_various(expr, expected):
    assert infix_to_rpn(expr) == expected


def test_convert_returns_tokens():
    tokens = ShuntingYardConverter().convert("1 + 2")
    assert tokens == [Token.number(1), Token.number(2), Token(TokenType.PLUS)]


def test_convert_accepts_token_sequence():
    assert ShuntingYardConverter().convert(tokenize("4 * (5)")) == tokenize("4 5 *")


def test_custom_separator():
    assert ShuntingYardConverter().to_rpn("1 + 2", separator=",") == "1,2,+"


@pytest.mark.parametrize("expr", ["(1 + 2", "((1)", "("])
def test_unmatched_left_paren(expr):
    with pytest.raises(UnbalancedParentheses):
        infix_to_rpn(expr)


@pytest.mark.parametrize("expr", ["1 + 2)", ")", "(1)) + (2"])
def test_unmatched_right_paren(expr):
    with pytest.raises(StackUnderflow):
        infix_to_rpn(expr)


@pytest.mark.parametrize("expr", ["", "   "])
def test_empty_expression(expr):
    with pytest.raises(MalformedExpression):
        infix_to_rpn(expr)


def test_bad_character():
    with pytest.raises(UnexpectedCharacter):
        infix_to_rpn("1 + a")
