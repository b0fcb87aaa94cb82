"""Tests for the piece generator."""

import pytest
from tetris_stack.piece import PIECE_KINDS
from tetris_stack.rng import PieceGenerator


def test_generator_deterministic():
    """Test that same seed produces same sequence."""
    gen1 = PieceGenerator(12345)
    gen2 = PieceGenerator(12345)

    sequence1 = [gen1.next() for _ in range(21)]
    sequence2 = [gen2.next() for _ in range(21)]

    assert sequence1 == sequence2, "Same seed should produce identical sequences"


def test_ids_start_at_zero_and_increase():
    """Test ids are consecutive from 0."""
    gen = PieceGenerator(42)

    ids = [gen.next().id for _ in range(50)]

    assert ids == list(range(50))
    assert gen.next_id == 50


def test_kinds_from_alphabet():
    """Test random kinds stay within the alphabet."""
    gen = PieceGenerator(7)

    kinds = {gen.next().kind for _ in range(200)}

    assert kinds <= set(PIECE_KINDS)
    assert len(kinds) == 7, "200 draws should hit every kind"


def test_fixed_kind_sequence():
    """Test the fixed kind seam cycles through the given kinds."""
    gen = PieceGenerator(0, kinds="ITO")

    pieces = [gen.next() for _ in range(5)]

    assert [p.kind for p in pieces] == ["I", "T", "O", "I", "T"]
    assert [p.id for p in pieces] == [0, 1, 2, 3, 4]


def test_fixed_kind_sequence_rejects_unknown_kind():
    with pytest.raises(ValueError):
        PieceGenerator(0, kinds=["I", "Q"])


def test_fixed_kind_sequence_rejects_empty():
    with pytest.raises(ValueError):
        PieceGenerator(0, kinds=[])


def test_wall_clock_seed_when_none():
    """Test a seed is chosen when none is given."""
    gen = PieceGenerator()
    assert isinstance(gen.seed, int)


def test_generator_is_iterator():
    """Test the generator works as a lazy infinite iterator."""
    gen = PieceGenerator(99)

    first = [piece for _, piece in zip(range(4), gen)]

    assert [p.id for p in first] == [0, 1, 2, 3]
    assert next(gen).id == 4
