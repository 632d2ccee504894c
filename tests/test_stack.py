import pytest

from algokit.stack import LinkedStack, QueueStack, StackEmptyError


def test_linked_stack_source_example():
    stack = LinkedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.pop() == 30
    assert stack.peek() == 20


def test_linked_stack_lifo_order():
    stack = LinkedStack()
    values = [3, 1, 4, 1, 5]
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty() is True


def test_linked_stack_empty_errors():
    stack = LinkedStack()
    assert stack.is_empty() is True
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_peek_does_not_remove():
    stack = LinkedStack()
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1


def test_queue_stack_source_sequence():
    stack = QueueStack()
    for value in range(1, 11):
        stack.push(value)
    assert len(stack) == 10
    assert stack.top() == 10
    assert stack.pop() == 10
    assert stack.top() == 9
    stack.pop()
    assert len(stack) == 8


def test_queue_stack_lifo_order():
    stack = QueueStack()
    values = [2, 7, 1, 8]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_queue_stack_top_keeps_order():
    stack = QueueStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.top() == 3
    stack.push(4)
    assert [stack.pop() for _ in range(4)] == [4, 3, 2, 1]


def test_queue_stack_empty_errors():
    stack = QueueStack()
    with pytest.raises(StackEmptyError):
        stack.top()
    with pytest.raises(IndexError):
        stack.pop()