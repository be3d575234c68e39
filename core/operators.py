"""core/operators.py"""
import operator
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

from config.config import operand_limits
from core.errors import UnsupportedOperator, NumericOverflow, DivisionByZero, UnsupportedCaretMode


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


OperatorInfo = namedtuple('OperatorInfo', 'precedence associativity')

# 进程级只读常量，不会被修改
OPERATOR_TABLE = MappingProxyType({
    '+': OperatorInfo(precedence=2, associativity=Associativity.LEFT),
    '-': OperatorInfo(precedence=2, associativity=Associativity.LEFT),
    '*': OperatorInfo(precedence=3, associativity=Associativity.LEFT),
    '/': OperatorInfo(precedence=3, associativity=Associativity.LEFT),
    '^': OperatorInfo(precedence=4, associativity=Associativity.RIGHT),
})

CARET_MODES = ('xor', 'pow')


class Operators:
    """所有操作符的静态方法集合：优先级、结合性与带范围检查的整数运算"""

    @staticmethod
    def _symbol(op):
        """接受单个字符或 Token"""
        return getattr(op, 'symbol', op)

    @staticmethod
    def _info(op):
        symbol = Operators._symbol(op)
        try:
            return OPERATOR_TABLE[symbol]
        except (KeyError, TypeError):
            raise UnsupportedOperator(symbol) from None

    @staticmethod
    def is_valid(op):
        symbol = Operators._symbol(op)
        return isinstance(symbol, str) and symbol in OPERATOR_TABLE

    @staticmethod
    def precedence(op):
        """获取操作符优先级"""
        return Operators._info(op).precedence

    @staticmethod
    def associativity(op):
        """获取左/右结合性"""
        return Operators._info(op).associativity

    @staticmethod
    def check_caret(caret):
        """校验 '^' 的含义"""
        if caret not in CARET_MODES:
            raise UnsupportedCaretMode(caret, CARET_MODES)
        return caret

    @staticmethod
    def is_left_associative(op):
        return Operators.associativity(op) is Associativity.LEFT

    # 二元运算========================================

    @staticmethod
    def _checked(value, limits):
        """结果必须落在操作数范围内，否则视为溢出/下溢"""
        low, high = limits
        if value < low or value > high:
            raise NumericOverflow(value, limits)
        return value

    @staticmethod
    def power(base, exponent, limits=None):
        """整数乘方；先判断是否必然溢出，避免构造巨大的整数"""
        limits = limits or operand_limits()
        if exponent == 0:
            return 1
        if base in (0, 1):
            return base
        # base >= 2 时 base**exponent >= 2**exponent
        if exponent >= limits[1].bit_length():
            raise NumericOverflow(f"{base} ^ {exponent}", limits)
        return Operators._checked(base ** exponent, limits)

    @staticmethod
    def divide(left, right):
        """无符号截断除法"""
        if right == 0:
            raise DivisionByZero(left)
        return left // right

    @staticmethod
    def apply(op, left, right, caret='xor', limits=None):
        """
        计算 left <op> right

        Args:
            op: 操作符字符或 Token
            left: 第二个出栈的值
            right: 第一个出栈的值
            caret: '^' 的含义，'xor' 为按位异或，'pow' 为乘方
            limits: 操作数范围，默认取自 NUMERIC_CONFIG
        """
        symbol = Operators._symbol(op)
        if not Operators.is_valid(symbol):
            raise UnsupportedOperator(symbol)
        limits = limits or operand_limits()

        if symbol == '+':
            result = operator.add(left, right)
        elif symbol == '-':
            result = operator.sub(left, right)
        elif symbol == '*':
            result = operator.mul(left, right)
        elif symbol == '/':
            result = Operators.divide(left, right)
        elif caret == 'xor':
            result = operator.xor(left, right)
        elif caret == 'pow':
            return Operators.power(left, right, limits)
        else:
            raise UnsupportedCaretMode(caret, CARET_MODES)

        return Operators._checked(result, limits)
