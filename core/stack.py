"""core/stack.py - 通用后进先出栈"""
from typing import Generic, Iterator, List, Optional, TypeVar

from core.errors import StackUnderflow

T = TypeVar('T')


class Stack(Generic[T]):
    """
    后进先出栈，用于三种场景：
    - RPN 求值的操作数栈
    - Shunting-Yard 的操作符栈
    - 融合求值器的输出值栈
    """

    def __init__(self, items=None):
        self._elements: List[T] = list(items) if items is not None else []

    def __len__(self):
        return len(self._elements)

    def __bool__(self):
        return bool(self._elements)

    def __iter__(self) -> Iterator[T]:
        """从栈底到栈顶遍历"""
        return iter(self._elements)

    def __repr__(self):
        return f"Stack({self._elements!r})"

    def is_empty(self):
        return not self._elements

    def push(self, element: T) -> None:
        self._elements.append(element)

    def pop(self) -> T:
        """弹出栈顶元素；栈为空时抛出 StackUnderflow，不返回默认值"""
        if not self._elements:
            raise StackUnderflow()
        return self._elements.pop()

    def peek(self) -> Optional[T]:
        """查看栈顶元素，栈为空时返回 None"""
        return self._elements[-1] if self._elements else None
