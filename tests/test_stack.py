import pytest

from core import Stack, StackUnderflow


def test_push_pop_is_lifo():
    st = Stack()
    for value in (1, 2, 3):
        st.push(value)
    assert len(st) == 3
    assert [st.pop(), st.pop(), st.pop()] == [3, 2, 1]
    assert st.is_empty()


def test_peek_does_not_consume():
    st = Stack(['(', '+'])
    assert st.peek() == '+'
    assert len(st) == 2


def test_peek_on_empty_returns_none():
    assert Stack().peek() is None


def test_pop_on_empty_raises():
    st = Stack()
    st.push(7)
    st.pop()
    with pytest.raises(StackUnderflow):
        st.pop()


def test_iterates_bottom_to_top():
    st = Stack()
    st.push('a')
    st.push('b')
    assert list(st) == ['a', 'b']
    assert bool(st)
    assert not Stack()
