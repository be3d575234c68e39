"""core/errors.py - 表达式处理的错误类型"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""


class StackUnderflow(ExpressionError):
    """对空栈执行 pop：操作符过多或括号不匹配"""

    def __init__(self, message="Stack is empty. Nothing to pop!"):
        super().__init__(message)


class UnsupportedOperator(ExpressionError):
    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"Unsupported operator: {operator}")


class UnexpectedCharacter(ExpressionError):
    def __init__(self, char, position=None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unexpected character {char!r}{where}")


class UnbalancedParentheses(ExpressionError):
    def __init__(self, message="Unbalanced parentheses: unmatched '('"):
        super().__init__(message)


class NumericOverflow(ExpressionError):
    """数字或中间结果超出操作数范围（包括减法下溢）"""

    def __init__(self, value, limits=None):
        self.value = value
        self.limits = limits
        bounds = f" (allowed range {limits[0]}..{limits[1]})" if limits else ""
        super().__init__(f"Value out of range: {value}{bounds}")


class DivisionByZero(ExpressionError):
    def __init__(self, left):
        self.left = left
        super().__init__(f"Division by zero: {left} / 0")


class MalformedExpression(ExpressionError):
    """结构错误：最终栈中不是恰好一个值、空表达式等"""


class UnsupportedCaretMode(ExpressionError):
    def __init__(self, caret, modes):
        self.caret = caret
        super().__init__(f"Unknown caret mode: {caret!r}, expected one of {modes}")
