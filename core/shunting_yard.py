"""core/shunting_yard.py - 中缀表达式转 RPN（Shunting-Yard 算法）

Reference: https://en.wikipedia.org/wiki/Shunting_yard_algorithm
"""
import logging
from typing import List

from core.errors import UnbalancedParentheses, MalformedExpression
from core.operators import Operators
from core.stack import Stack
from core.token_system import Token, TokenType, Tokenizer, format_tokens

logger = logging.getLogger(__name__)


class ShuntingYard:
    """
    Shunting-Yard 控制流。子类只决定输出里放什么：
    转换器输出 Token，融合求值器输出数值并在操作符出栈时立即计算。
    """

    def _new_output(self):
        raise NotImplementedError

    def _emit_number(self, output, token):
        raise NotImplementedError

    def _emit_operator(self, output, token):
        raise NotImplementedError

    def _finish(self, output):
        raise NotImplementedError

    def run(self, expression):
        """
        Args:
            expression: 中缀表达式字符串或 Token 序列
        Raises:
            StackUnderflow: ')' 找不到匹配的 '('
            UnbalancedParentheses: 结束时栈中还有 '('
            MalformedExpression: 空表达式
        """
        tokens = Tokenizer(expression) if isinstance(expression, str) else expression
        operators: Stack[Token] = Stack()
        output = self._new_output()
        seen_token = False

        for token in tokens:
            seen_token = True

            if token.is_number:
                self._emit_number(output, token)

            elif token.type is TokenType.PAREN_LEFT:
                operators.push(token)

            elif token.type is TokenType.PAREN_RIGHT:
                # 栈空时 pop 抛出 StackUnderflow
                while not self._is_left_paren(operators.peek()):
                    self._emit_operator(output, operators.pop())
                operators.pop()  # 丢弃匹配的 '('

            elif token.is_operator:
                self._pop_higher_precedence(operators, output, token)
                operators.push(token)

        if not seen_token:
            raise MalformedExpression("Empty expression")

        while operators:
            top = operators.pop()
            if top.type is TokenType.PAREN_LEFT:
                raise UnbalancedParentheses()
            self._emit_operator(output, top)

        return self._finish(output)

    @staticmethod
    def _is_left_paren(token):
        return token is not None and token.type is TokenType.PAREN_LEFT

    def _pop_higher_precedence(self, operators, output, o1):
        o1_prec = Operators.precedence(o1)
        o1_left = Operators.is_left_associative(o1)
        while True:
            o2 = operators.peek()
            if o2 is None or not o2.is_operator:
                break
            o2_prec = Operators.precedence(o2)
            # 优先级相同时只有左结合的 o1 才弹出，'^' 因此从右向左结合
            if o2_prec > o1_prec or (o2_prec == o1_prec and o1_left):
                self._emit_operator(output, operators.pop())
            else:
                break


class ShuntingYardConverter(ShuntingYard):
    """中缀 -> RPN Token 序列"""

    def _new_output(self):
        return []

    def _emit_number(self, output, token):
        output.append(token)

    def _emit_operator(self, output, token):
        output.append(token)

    def _finish(self, output):
        return output

    def convert(self, expression) -> List[Token]:
        return self.run(expression)

    def to_rpn(self, expression, separator=None) -> str:
        rpn = format_tokens(self.convert(expression), separator)
        logger.debug(f"Converted {expression!r} -> {rpn!r}")
        return rpn


def infix_to_rpn(expression) -> str:
    """中缀表达式转为以空格分隔的 RPN 字符串（末尾无空格）"""
    return ShuntingYardConverter().to_rpn(expression)
