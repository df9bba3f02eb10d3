"""Spawn randomizer"""
import random
from typing import Optional

from webtris_piece import PIECE_NAMES


class PieceRandomizer:
    """
    Picks the next piece uniformly from the catalog.

    Every roll is independent: there is no bag and no repeat rejection, so the
    same piece can come up any number of times in a row. Pass a seed to get a
    reproducible sequence.
    """

    PIECES = PIECE_NAMES

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
