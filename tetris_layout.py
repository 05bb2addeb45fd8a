from dataclasses import dataclass
from tetris_config import CONFIG, COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["BLOCK_SIZE"])
    margin = 16
    panel_w = 200

    # canvas is exactly COLS x ROWS blocks
    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin, panel_y=margin,
    )
