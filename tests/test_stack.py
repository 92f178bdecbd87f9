import pytest

from dsaprimer.stack import ArrayStack, LinkedStack, StackEmptyError, StackFullError


def test_pop_returns_last_pushed():
    for stack in (ArrayStack(), LinkedStack()):
        for value in (10, 20, 30):
            stack.push(value)
        assert stack.pop() == 30
        assert len(stack) == 2


def test_lifo_order():
    values = [1, 2, 3, 4]
    for stack in (ArrayStack(), LinkedStack()):
        for value in values:
            stack.push(value)
        popped = [stack.pop() for _ in values]
        assert popped == values[::-1]
        assert len(stack) == 0


def test_peek_does_not_remove():
    for stack in (ArrayStack(), LinkedStack()):
        stack.push(5)
        stack.push(6)
        assert stack.peek() == 6
        assert len(stack) == 2
        assert stack.pop() == 6


def test_pop_empty_raises():
    with pytest.raises(StackEmptyError):
        ArrayStack().pop()
    with pytest.raises(StackEmptyError):
        LinkedStack().pop()


def test_peek_empty_raises():
    with pytest.raises(StackEmptyError):
        ArrayStack().peek()
    with pytest.raises(StackEmptyError):
        LinkedStack().peek()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        ArrayStack().pop()
    with pytest.raises(IndexError):
        LinkedStack().pop()


def test_array_stack_default_capacity():
    stack = ArrayStack()
    for value in range(20):
        stack.push(value)
    with pytest.raises(StackFullError):
        stack.push(20)
    assert len(stack) == 20
    assert stack.peek() == 19


def test_array_stack_custom_capacity():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackFullError):
        stack.push(3)
    assert stack.pop() == 2
    stack.push(3)
    assert stack.peek() == 3


def test_array_stack_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_linked_stack_unbounded():
    stack = LinkedStack()
    count = 100
    for value in range(count):
        stack.push(value)
    assert len(stack) == count
    assert stack.peek() == count - 1