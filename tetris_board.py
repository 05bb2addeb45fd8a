"""Board helpers: collide, merge, clear_full_lines"""
from typing import Optional, List
from tetris_piece import Piece, Shape
from tetris_config import COLS, ROWS

Cell = Optional[str]
Board = List[List[Cell]]

def new_board() -> Board:
    return [[None]*COLS for _ in range(ROWS)]

def collide(board: Board, shape: Shape, x: int, y: int) -> bool:
    # rows above the board are only bounded on x
    for r,row in enumerate(shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = x+c, y+r
            if bx<0 or bx>=COLS or by>=ROWS: return True
            if by>=0 and board[by][bx] is not None: return True
    return False

def merge(board: Board, piece: Piece):
    for bx,by in piece.cells():
        if by>=0: board[by][bx]=piece.color

def clear_full_lines(board: Board) -> int:
    c=0; y=ROWS-1
    while y>=0:
        if all(cell is not None for cell in board[y]):
            del board[y]; board.insert(0,[None]*COLS); c+=1
        else: y-=1
    return c

def filled_cells(board: Board) -> int:
    return sum(cell is not None for row in board for cell in row)
