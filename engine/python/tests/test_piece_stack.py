"""Tests for the reserve stack."""

import pytest
from tetris_stack.errors import EmptyContainerError
from tetris_stack.piece import Piece
from tetris_stack.piece_stack import PieceStack


def test_stack_starts_empty():
    stack = PieceStack()
    assert stack.is_empty()
    assert stack.top == -1
    assert len(stack) == 0
    assert stack.capacity == 3


def test_push_until_full():
    """Test top index tracks pushes."""
    stack = PieceStack()
    for i, kind in enumerate("IOT"):
        assert stack.push(Piece(kind, i))
        assert stack.top == i

    assert stack.is_full()
    assert [p.label for p in stack.to_list()] == ["T2", "O1", "I0"]


def test_push_when_full_is_ignored():
    stack = PieceStack()
    for i in range(3):
        stack.push(Piece("L", i))

    assert not stack.push(Piece("J", 9))
    assert stack.top == 2
    assert stack.peek_at(0).id == 2


def test_pop_lifo_order():
    stack = PieceStack()
    for i in range(3):
        stack.push(Piece("S", i))

    assert [stack.pop().id for _ in range(3)] == [2, 1, 0]
    assert stack.is_empty()


def test_pop_empty_raises():
    with pytest.raises(EmptyContainerError):
        PieceStack().pop()


def test_peek_and_swap_at_depth():
    """Test positional access relative to the top."""
    stack = PieceStack()
    for i in range(3):
        stack.push(Piece("Z", i))

    assert stack.peek_at(0).id == 2
    assert stack.peek_at(2).id == 0

    old = stack.swap_at(1, Piece("J", 10))

    assert old.id == 1
    assert [p.id for p in stack.to_list()] == [2, 10, 0]


def test_depth_out_of_range():
    stack = PieceStack()
    stack.push(Piece("I", 0))
    with pytest.raises(IndexError):
        stack.peek_at(1)
    with pytest.raises(IndexError):
        PieceStack().peek_at(0)
