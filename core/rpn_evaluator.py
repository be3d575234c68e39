"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import RPN_CONFIG, operand_limits
from core.errors import MalformedExpression
from core.operators import Operators
from core.stack import Stack
from core.token_system import Tokenizer

logger = logging.getLogger(__name__)


def _as_tokens(expression):
    """字符串交给 Tokenizer，Token 序列原样返回"""
    if isinstance(expression, str):
        return Tokenizer(expression)
    return expression


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(expression, caret=None):
        """
        评估RPN表达式

        Args:
            expression: RPN 字符串或 Token 序列
            caret: '^' 的含义，默认 RPN_CONFIG['rpn_caret']（按位异或）
        Returns:
            无符号整数结果
        Raises:
            StackUnderflow: 操作符前可用的操作数不足两个
            MalformedExpression: 结束时栈中不是恰好一个值，或出现括号
        """
        caret = Operators.check_caret(caret or RPN_CONFIG["rpn_caret"])
        limits = operand_limits()
        stack = Stack()

        for token in _as_tokens(expression):
            if token.is_number:
                stack.push(token.value)
            elif token.is_operator:
                # 先出栈的是右操作数
                right = stack.pop()
                left = stack.pop()
                stack.push(Operators.apply(token, left, right, caret=caret, limits=limits))
            else:
                raise MalformedExpression(f"Parenthesis {token.symbol!r} is not allowed in RPN input")

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.error(f"Stack content: {list(stack)}")
            raise MalformedExpression(f"RPN expression left {len(stack)} values on the stack, expected 1")

        result = stack.pop()
        logger.debug(f"RPN result: {result}")
        return result


class RPNValidator:
    """只模拟栈深度，不计算数值"""

    @staticmethod
    def calculate_stack_size(tokens):
        """计算处理完全部 Token 后栈中的元素数量；中途下溢或遇到括号时返回 None"""
        stack_size = 0
        for token in _as_tokens(tokens):
            if token.is_number:
                stack_size += 1
            elif token.is_operator:
                if stack_size < 2:
                    return None
                stack_size -= 1
            else:
                return None
        return stack_size

    @staticmethod
    def is_valid(expression):
        """所有操作符都有两个操作数，且最后恰好剩一个值"""
        return RPNValidator.calculate_stack_size(expression) == 1


def evaluate_rpn(expression) -> int:
    """求值 RPN 字符串，'^' 为按位异或"""
    return RPNEvaluator.evaluate(expression)
