"""Tests for piece values."""

import dataclasses

import pytest
from tetris_stack.piece import Piece, PIECE_KINDS


def test_piece_creation():
    """Test creating a piece."""
    piece = Piece("T", 3)
    assert piece.kind == "T"
    assert piece.id == 3
    assert piece.label == "T3"
    assert str(piece) == "[T3]"


def test_piece_is_immutable():
    """Test pieces cannot be modified in place."""
    piece = Piece("I", 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        piece.id = 5


def test_piece_equality_by_value():
    """Test pieces compare by kind and id."""
    assert Piece("O", 1) == Piece("O", 1)
    assert Piece("O", 1) != Piece("O", 2)


def test_invalid_piece_kind():
    """Test unknown kinds are rejected."""
    with pytest.raises(ValueError):
        Piece("X", 0)


def test_invalid_piece_id():
    """Test negative ids are rejected."""
    with pytest.raises(ValueError):
        Piece("I", -1)


def test_all_piece_kinds_defined():
    """Test the 7-symbol alphabet."""
    assert sorted(PIECE_KINDS) == ["I", "J", "L", "O", "S", "T", "Z"]


def test_piece_to_dict():
    assert Piece("Z", 7).to_dict() == {"kind": "Z", "id": 7}
