"""Piece catalog and piece state"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

PIECE_NAMES = "ILJOTSZ"

# Each shape carries its own colour tag (1..7); 0 is empty.
SHAPES: Dict[str, List[List[int]]] = {
    "T": [[0,0,0],
          [1,1,1],
          [0,1,0]],
    "O": [[2,2],
          [2,2]],
    "L": [[0,3,0],
          [0,3,0],
          [0,3,3]],
    "J": [[0,4,0],
          [0,4,0],
          [4,4,0]],
    "I": [[0,5,0,0],
          [0,5,0,0],
          [0,5,0,0],
          [0,5,0,0]],
    "S": [[0,6,6],
          [6,6,0],
          [0,0,0]],
    "Z": [[7,7,0],
          [0,7,7],
          [0,0,0]],
}


def shape_for(name: str) -> List[List[int]]:
    """Return an independent copy of the named shape."""
    if name not in SHAPES:
        raise KeyError(f"unknown piece {name!r}")
    return [row[:] for row in SHAPES[name]]


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    x: int
    y: int

    @property
    def offset(self) -> Tuple[int, int]:
        return self.y, self.x

    @property
    def width(self) -> int:
        return len(self.shape[0]) if self.shape else 0

    def copy(self) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.x, self.y)

    @staticmethod
    def spawn(t: str, cols: int) -> "Piece":
        shape = shape_for(t)
        return Piece(t, shape, cols // 2 - len(shape[0]) // 2, 0)
