"""Piece catalog: the seven tetrominoes, their colors, clockwise rotation"""
from dataclasses import dataclass
from typing import List, Tuple

from tetris_config import COLS

Shape = List[List[int]]

KINDS = ("I", "J", "L", "O", "S", "T", "Z")

SHAPES = {
    "I": ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)),
    "J": ((1,0,0),(1,1,1),(0,0,0)),
    "L": ((0,0,1),(1,1,1),(0,0,0)),
    "O": ((1,1),(1,1)),
    "S": ((0,1,1),(1,1,0),(0,0,0)),
    "T": ((0,1,0),(1,1,1),(0,0,0)),
    "Z": ((1,1,0),(0,1,1),(0,0,0)),
}

COLORS = {
    "I": "#00FFFF",
    "J": "#0000FF",
    "L": "#FFA500",
    "O": "#FFFF00",
    "S": "#00FF00",
    "T": "#800080",
    "Z": "#FF0000",
}

def template_for(kind: str) -> Shape:
    return [list(r) for r in SHAPES[kind]]

def rotate_cw(m: Shape) -> Shape:
    return [list(r) for r in zip(*m[::-1])]

def spawn_position(shape: Shape) -> Tuple[int, int]:
    """Horizontally centered, fully above the visible board."""
    return COLS//2 - len(shape[0])//2, -len(shape)

@dataclass
class Piece:
    kind: str
    shape: Shape
    color: str
    x: int = 0
    y: int = 0

    @staticmethod
    def new(kind: str) -> "Piece":
        return Piece(kind, template_for(kind), COLORS[kind])

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> List[Tuple[int, int]]:
        """Board coordinates (x, y) of every occupied cell."""
        return [(self.x+c, self.y+r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

    def copy(self) -> "Piece":
        return Piece(self.kind, [r[:] for r in self.shape], self.color, self.x, self.y)
