import pytest

from algokit.stack import EmptyStackError, Stack


def make_stack(count):
    stack = Stack()
    for i in range(count):
        stack.push(i)
    return stack


def test_new_stack_is_empty():
    stack = Stack()
    assert len(stack) == 0
    assert str(stack) == "[]"


def test_push_order():
    stack = make_stack(10)
    assert list(stack) == [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]


@pytest.mark.parametrize("count", [0, 10])
def test_size(count):
    assert len(make_stack(count)) == count


def test_is_empty_true():
    assert make_stack(0).is_empty() is True


def test_is_empty_false():
    assert make_stack(10).is_empty() is False


def test_pop_sequence_then_empty():
    stack = make_stack(10)
    for i in range(10):
        assert stack.pop() == 9 - i
        assert list(stack) == list(range(8 - i, -1, -1))
    with pytest.raises(EmptyStackError) as excinfo:
        stack.pop()
    assert str(excinfo.value) == "stack - empty stack"


def test_peek_non_empty():
    stack = make_stack(10)
    assert stack.peek() == 9
    assert len(stack) == 10


def test_peek_empty():
    with pytest.raises(EmptyStackError) as excinfo:
        make_stack(0).peek()
    assert str(excinfo.value) == "stack - empty stack"


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        Stack().pop()


def test_str_empty():
    assert str(make_stack(0)) == "[]"


def test_str_non_empty():
    assert str(make_stack(10)) == "[9, 8, 7, 6, 5, 4, 3, 2, 1, 0]"