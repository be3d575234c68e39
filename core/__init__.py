"""核心模块 - Token系统、操作符表、Shunting-Yard 转换与两种求值器"""
from .errors import (
    ExpressionError, StackUnderflow, UnsupportedOperator, UnexpectedCharacter,
    UnbalancedParentheses, NumericOverflow, DivisionByZero, MalformedExpression,
    UnsupportedCaretMode
)
from .stack import Stack
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, Tokenizer, tokenize, format_tokens
)
from .operators import Operators, Associativity, OPERATOR_TABLE
from .rpn_evaluator import RPNEvaluator, RPNValidator, evaluate_rpn
from .shunting_yard import ShuntingYardConverter, infix_to_rpn
from .fused_evaluator import FusedEvaluator, evaluate_infix_fused

__all__ = [
    'ExpressionError', 'StackUnderflow', 'UnsupportedOperator', 'UnexpectedCharacter',
    'UnbalancedParentheses', 'NumericOverflow', 'DivisionByZero', 'MalformedExpression',
    'UnsupportedCaretMode', 'Stack', 'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'Tokenizer', 'tokenize',
    'format_tokens', 'Operators', 'Associativity', 'OPERATOR_TABLE',
    'RPNEvaluator', 'RPNValidator', 'evaluate_rpn',
    'ShuntingYardConverter', 'infix_to_rpn',
    'FusedEvaluator', 'evaluate_infix_fused'
]
