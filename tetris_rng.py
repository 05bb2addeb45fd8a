"""Uniform piece randomizer module"""
import random
from typing import Optional

from tetris_piece import KINDS

class PieceRandom:
    """Plain uniform choice over the seven kinds; repeats are allowed."""
    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_kind(self) -> str:
        return self._rng.choice(self.PIECES)

_default = PieceRandom()

def random_kind(rng: Optional[PieceRandom] = None) -> str:
    return (rng or _default).next_kind()
