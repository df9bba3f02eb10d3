import pytest

from webtris_board import COLS, create_grid
from webtris_piece import PIECE_NAMES, Piece, shape_for
from webtris_rotate import CCW, CW, rotate, rotate_with_kicks


@pytest.mark.parametrize("name", list(PIECE_NAMES))
@pytest.mark.parametrize("direction", [CW, CCW])
def test_four_turns_is_identity(name, direction):
    shape = shape_for(name)
    for _ in range(4):
        rotate(shape, direction)
    assert shape == shape_for(name)


def test_rotate_directions():
    shape = [[1, 2], [3, 4]]
    rotate(shape, CW)
    assert shape == [[3, 1], [4, 2]]
    rotate(shape, CCW)
    assert shape == [[1, 2], [3, 4]]


def test_rotate_mutates_same_list_and_swaps_dims():
    shape = [[1, 1, 1], [0, 1, 0]]
    rows = shape
    rotate(shape, CW)
    assert shape is rows
    assert shape == [[0, 1], [1, 1], [0, 1]]


def test_rotate_in_open_space_keeps_column():
    grid = create_grid()
    piece = Piece("T", shape_for("T"), 6, 10)
    assert rotate_with_kicks(grid, piece, CW)
    assert piece.x == 6
    assert piece.shape == [[0, 1, 0], [1, 1, 0], [0, 1, 0]]


def test_i_hugging_right_wall_cannot_rotate():
    grid = create_grid()
    # vertical I in the last column: x+1, x-1, x+2 all stick out, x-2 is never tried
    piece = Piece("I", shape_for("I"), COLS - 2, 5)
    before = piece.copy()
    assert not rotate_with_kicks(grid, piece, CW)
    assert piece == before


def test_i_next_to_right_wall_kicks_left():
    grid = create_grid()
    piece = Piece("I", shape_for("I"), COLS - 3, 5)
    assert rotate_with_kicks(grid, piece, CW)
    assert piece.x == COLS - 4
    assert piece.shape[1] == [5, 5, 5, 5]


def test_kick_reaches_two_right():
    grid = create_grid()
    # rotated T puts a cell in row 10 at column x+1; block x, x+1 and x-1
    grid[10][6] = grid[10][7] = grid[10][8] = 1
    piece = Piece("T", shape_for("T"), 6, 10)
    assert rotate_with_kicks(grid, piece, CW)
    assert piece.x == 8
    assert piece.shape == [[0, 1, 0], [1, 1, 0], [0, 1, 0]]


def test_kick_off_left_wall():
    grid = create_grid()
    piece = Piece("L", shape_for("L"), -1, 5)
    assert rotate_with_kicks(grid, piece, CW)
    assert piece.x == 0


def test_failed_kick_leaves_piece_unchanged():
    grid = create_grid()
    piece = Piece("I", shape_for("I"), COLS - 2, 5)
    grid[6] = [1] * COLS
    grid[6][COLS - 1] = 0
    before = piece.copy()
    assert not rotate_with_kicks(grid, piece, CW)
    assert piece.shape == before.shape
    assert piece.x == before.x
    assert piece.y == before.y
