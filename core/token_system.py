"""core/token_system.py"""
import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from config.config import TOKENIZER_CONFIG, RPN_CONFIG, operand_limits
from core.errors import UnexpectedCharacter, NumericOverflow

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)  # 只接受 ASCII 数字


class TokenType(Enum):
    NUMBER = "number"  # 操作数
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    CARET = "^"
    PAREN_LEFT = "("
    PAREN_RIGHT = ")"


OPERATOR_TYPES = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.ASTERISK,
    TokenType.SLASH, TokenType.CARET,
})


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[int] = None  # 仅 NUMBER 有值

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, int(value))

    @property
    def is_number(self):
        return self.type is TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type in OPERATOR_TYPES

    @property
    def symbol(self):
        """Token 的文本形式"""
        if self.type is TokenType.NUMBER:
            return str(self.value)
        return self.type.value

    def __str__(self):
        return self.symbol

    def __repr__(self):
        if self.type is TokenType.NUMBER:
            return f"Number({self.value})"
        return self.type.name.title().replace('_', '')


# 单字符 Token 定义
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.PLUS),
    '-': Token(TokenType.MINUS),
    '*': Token(TokenType.ASTERISK),
    '/': Token(TokenType.SLASH),
    '^': Token(TokenType.CARET),
    '(': Token(TokenType.PAREN_LEFT),
    ')': Token(TokenType.PAREN_RIGHT),
}


class Tokenizer:
    """
    单遍扫描的词法分析器，只向前看一个字符来结束数字串，不回溯。

    Args:
        expression: 原始表达式字符串
        skip_chars: 需要跳过的字符，默认只有空格（见 TOKENIZER_CONFIG）
    """

    def __init__(self, expression, skip_chars=None):
        self.expression = expression
        self.skip_chars = TOKENIZER_CONFIG["skip_chars"] if skip_chars is None else skip_chars
        self.min_value, self.max_value = operand_limits()

    def __iter__(self) -> Iterator[Token]:
        text = self.expression
        length = len(text)
        i = 0
        while i < length:
            ch = text[i]

            if ch in DIGITS:
                start = i
                while i < length and text[i] in DIGITS:
                    i += 1
                yield self._make_number(text[start:i])
                continue

            if ch in TOKEN_DEFINITIONS:
                yield TOKEN_DEFINITIONS[ch]
            elif ch not in self.skip_chars:
                raise UnexpectedCharacter(ch, i)
            i += 1

    def _make_number(self, digits):
        # 先按长度拒绝，避免对超长数字串做 int 转换
        significant = digits.lstrip('0') or '0'
        if len(significant) > len(str(self.max_value)):
            raise NumericOverflow(digits[:20] + "...", (self.min_value, self.max_value))
        value = int(significant)
        if value > self.max_value:
            raise NumericOverflow(digits, (self.min_value, self.max_value))
        return Token.number(value)


def tokenize(expression, skip_chars=None) -> List[Token]:
    """把表达式字符串切分为 Token 列表"""
    tokens = list(Tokenizer(expression, skip_chars))
    logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
    return tokens


def format_tokens(tokens, separator=None) -> str:
    """把 Token 序列拼成以空格分隔的字符串（末尾无空格）"""
    if separator is None:
        separator = RPN_CONFIG["output_separator"]
    return separator.join(token.symbol for token in tokens)
