"""Matrix rotation and horizontal kick search"""
from typing import List

from webtris_board import Grid, collide
from webtris_piece import Piece

CW, CCW = 1, -1


def rotate(shape: List[List[int]], direction: int = CW) -> None:
    """Rotate the matrix 90 degrees in place: transpose, then flip.

    Clockwise reverses each row, counter-clockwise reverses the row order.
    Non-square matrices swap their dimensions.
    """
    shape[:] = [list(col) for col in zip(*shape)]
    if direction > 0:
        for row in shape:
            row.reverse()
    else:
        shape.reverse()


def rotate_with_kicks(grid: Grid, piece: Piece, direction: int = CW) -> bool:
    """Rotate the piece, shifting it sideways until it fits.

    Shifts alternate right/left with growing steps (+1, -2, +3, ...), so the
    columns tried are x+1, x-1, x+2, ... As soon as the next rightward step
    is wider than the rotated shape the rotation is undone and the piece is
    left exactly as it was; the position just shifted to is not tried.
    Returns True if the rotation stuck.
    """
    x0 = piece.x
    step = 1
    rotate(piece.shape, direction)
    while collide(grid, piece):
        piece.x += step
        step = -(step + (1 if step > 0 else -1))
        if step > piece.width:
            rotate(piece.shape, -direction)
            piece.x = x0
            return False
    return True
