import string

import pytest

from core import (
    Token, TokenType, Tokenizer, tokenize, format_tokens,
    UnexpectedCharacter, NumericOverflow, ExpressionError, evaluate_rpn
)


def test_tokenize_mixed_expression():
    """数字与操作符按顺序输出，空格被跳过"""
    tokens = tokenize("1 + 2 * 3 - 4")
    assert tokens == [
        Token.number(1), Token(TokenType.PLUS), Token.number(2),
        Token(TokenType.ASTERISK), Token.number(3), Token(TokenType.MINUS),
        Token.number(4),
    ]
    assert repr(tokens) == "[Number(1), Plus, Number(2), Asterisk, Number(3), Minus, Number(4)]"


def test_digit_runs_are_greedy():
    assert tokenize("(12)^345") == [
        Token(TokenType.PAREN_LEFT), Token.number(12), Token(TokenType.PAREN_RIGHT),
        Token(TokenType.CARET), Token.number(345),
    ]


def test_all_single_character_tokens():
    types = [t.type for t in tokenize("+-*/^()")]
    assert types == [
        TokenType.PLUS, TokenType.MINUS, TokenType.ASTERISK, TokenType.SLASH,
        TokenType.CARET, TokenType.PAREN_LEFT, TokenType.PAREN_RIGHT,
    ]


def test_leading_zeros_are_parsed():
    assert tokenize("007") == [Token.number(7)]


@pytest.mark.parametrize("expr", ["", "   "])
def test_blank_input_has_no_tokens(expr):
    assert tokenize(expr) == []


def test_unexpected_character_reports_position():
    with pytest.raises(UnexpectedCharacter) as excinfo:
        tokenize("1 + x")
    assert excinfo.value.char == 'x'
    assert excinfo.value.position == 4


@pytest.mark.parametrize("expr", ["1\t+ 2", "1.5", "a + 1", "\u00b2"])
def test_characters_outside_alphabet_fail(expr):
    with pytest.raises(UnexpectedCharacter):
        tokenize(expr)


def test_only_plain_space_is_skipped_by_default():
    with pytest.raises(UnexpectedCharacter):
        tokenize("1 +\n2")
    assert tokenize("1\t+\n2", skip_chars=string.whitespace) == [
        Token.number(1), Token(TokenType.PLUS), Token.number(2),
    ]


def test_number_at_upper_limit():
    assert tokenize("4294967295") == [Token.number(4294967295)]


def test_number_overflow():
    with pytest.raises(NumericOverflow):
        tokenize("1 + 4294967296")


def test_very_long_digit_run_overflows():
    with pytest.raises(NumericOverflow):
        tokenize("1" * 5000)
    with pytest.raises(ExpressionError):
        evaluate_rpn("1" * 5000 + " 1 +")


def test_leading_zeros_do_not_count_towards_length():
    assert tokenize("0" * 5000 + "42") == [Token.number(42)]


def test_tokenizer_is_lazy():
    tokens = iter(Tokenizer("1 + ?"))
    assert next(tokens) == Token.number(1)
    assert next(tokens) == Token(TokenType.PLUS)
    with pytest.raises(UnexpectedCharacter):
        next(tokens)


def test_tokens_are_immutable():
    token = Token.number(3)
    with pytest.raises(AttributeError):
        token.value = 4


def test_format_tokens():
    assert format_tokens(tokenize("12 3 +")) == "12 3 +"
    assert format_tokens(tokenize("12 3 +"), separator=",") == "12,3,+"
    assert format_tokens([]) == ""
