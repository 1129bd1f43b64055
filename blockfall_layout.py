# blockfall_layout.py
from dataclasses import dataclass
from blockfall_config import CONFIG
from blockfall_shapes import COLS, ROWS

GAP = 1
HEADER_H = 110
BUTTON_W, BUTTON_H = 44, 32

@dataclass
class Dims:
    cell: int
    margin: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    buttons_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    if cell <= 0:
        raise ValueError(f"CELL_SIZE must be positive, got {cell}")
    margin = 20

    board_w = COLS * (cell + GAP) - GAP
    board_h = ROWS * (cell + GAP) - GAP

    total_w = max(board_w, 4 * BUTTON_W + 3 * 8) + 2 * margin + 120
    total_h = HEADER_H + board_h + margin + BUTTON_H + margin

    board_x = (total_w - board_w) // 2
    board_y = HEADER_H
    buttons_y = board_y + board_h + margin

    return Dims(
        cell=cell, margin=margin,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        buttons_y=buttons_y
    )
