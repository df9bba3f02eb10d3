"""Grid helpers: create, clear, collide, merge, sweep"""
import logging
from typing import List, Tuple

from webtris_piece import Piece

COLS, ROWS = 15, 30
ROW_POINTS = 10

Grid = List[List[int]]

log = logging.getLogger(__name__)


def create_grid(width: int = COLS, height: int = ROWS) -> Grid:
    return [[0] * width for _ in range(height)]


def clear_grid(grid: Grid) -> None:
    for row in grid:
        row[:] = [0] * len(row)


def grid_size(grid: Grid) -> Tuple[int, int]:
    """Return (width, height)."""
    return (len(grid[0]) if grid else 0), len(grid)


def cell_at(grid: Grid, row: int, col: int) -> int:
    w, h = grid_size(grid)
    if not (0 <= row < h and 0 <= col < w):
        raise IndexError(f"cell ({row}, {col}) outside {w}x{h} grid")
    return grid[row][col]


def collide(grid: Grid, piece: Piece) -> bool:
    """Return True if any filled cell of the piece is off the grid or on a filled cell."""
    w, h = grid_size(grid)
    for y, row in enumerate(piece.shape):
        for x, v in enumerate(row):
            if not v:
                continue
            gx, gy = piece.x + x, piece.y + y
            if gx < 0 or gx >= w or gy < 0 or gy >= h:
                return True
            if grid[gy][gx]:
                return True
    return False


def merge(grid: Grid, piece: Piece) -> None:
    """Write the piece into the grid (no collision check)."""
    for y, row in enumerate(piece.shape):
        for x, v in enumerate(row):
            if v:
                grid[piece.y + y][piece.x + x] = v


def sweep(grid: Grid) -> Tuple[int, int]:
    """Clear full rows bottom-up and return (rows cleared, points awarded).

    Each row cleared in the same call is worth twice the previous one, so k
    rows award 10 * (2**k - 1).
    """
    w, _ = grid_size(grid)
    cleared = points = 0
    mult = 1
    y = len(grid) - 1
    while y >= 0:
        if all(grid[y]):
            del grid[y]
            grid.insert(0, [0] * w)
            cleared += 1
            points += mult * ROW_POINTS
            mult *= 2
        else:
            y -= 1
    if cleared:
        log.debug("swept %d row(s) for %d points", cleared, points)
    return cleared, points
