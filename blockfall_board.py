"""Board helpers: collide, place, clear"""
from typing import List, Tuple, Union
from blockfall_shapes import COLS, ROWS, Shape

Cell = Union[int, str]
Grid = List[List[Cell]]

LINE_POINTS = 100

class PlacementError(IndexError):
    """A filled cell was written outside the grid."""

def empty_grid() -> Grid:
    return [[0] * COLS for _ in range(ROWS)]

def check_collision(grid: Grid, x: int, y: int, shape: Shape) -> bool:
    for r,row in enumerate(shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = x+c, y+r
            if by>=ROWS or bx<0 or bx>=COLS: return True
            # cells above the top edge are allowed
            if by>=0 and grid[by][bx]: return True
    return False

def place_shape(piece, grid: Grid) -> Grid:
    new = [row[:] for row in grid]
    for r,row in enumerate(piece.shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = piece.x+c, piece.y+r
            if not (0<=by<ROWS and 0<=bx<COLS):
                raise PlacementError(f"cell ({bx}, {by}) of {piece.name} is outside the grid")
            new[by][bx] = piece.color
    return new

def clear_lines(grid: Grid) -> Tuple[Grid, int]:
    kept = [row[:] for row in grid if any(cell == 0 for cell in row)]
    cleared = ROWS - len(kept)
    return [[0] * COLS for _ in range(cleared)] + kept, cleared

def line_score(cleared: int) -> int:
    return cleared * LINE_POINTS
