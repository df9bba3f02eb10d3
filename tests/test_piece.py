import pytest

from webtris_piece import PIECE_NAMES, SHAPES, Piece, shape_for
from webtris_rng import PieceRandomizer


def test_catalog_has_seven_single_tag_shapes():
    assert sorted(PIECE_NAMES) == sorted(SHAPES) == sorted("IOTSZJL")
    tags = set()
    for name in PIECE_NAMES:
        shape = shape_for(name)
        assert len(shape) in (2, 3, 4)
        values = {v for row in shape for v in row if v}
        assert len(values) == 1
        tags |= values
    assert tags == set(range(1, 8))


def test_shape_for_returns_independent_copies():
    a = shape_for("T")
    b = shape_for("T")
    a[0][0] = 9
    assert b[0][0] == 0
    assert SHAPES["T"][0][0] == 0


def test_unknown_piece():
    with pytest.raises(KeyError):
        shape_for("X")


def test_spawn_centers_on_top_row():
    piece = Piece.spawn("I", 15)
    assert piece.offset == (0, 5)
    assert Piece.spawn("O", 15).x == 6
    assert Piece.spawn("T", 15).x == 6


def test_copy_is_deep():
    piece = Piece.spawn("S", 15)
    other = piece.copy()
    other.shape[0][1] = 0
    other.x += 1
    assert piece.shape[0][1] == 6
    assert piece.x != other.x


def test_randomizer_is_reproducible_and_in_catalog():
    a = PieceRandomizer(seed=7)
    b = PieceRandomizer(seed=7)
    seq = [a.next_piece() for _ in range(50)]
    assert seq == [b.next_piece() for _ in range(50)]
    assert set(seq) <= set(PIECE_NAMES)
