"""Active piece model and movement"""
from dataclasses import dataclass, replace
from typing import Optional

from blockfall_shapes import COLS, Shape, ShapeDef, rotate_shape
from blockfall_board import Grid, check_collision

SPAWN_X, SPAWN_Y = 3, 0

@dataclass(frozen=True)
class ActivePiece:
    name: str
    shape: Shape
    color: str
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @staticmethod
    def spawn(d: ShapeDef) -> "ActivePiece":
        return ActivePiece(d.name, [r[:] for r in d.shape], d.color, SPAWN_X, SPAWN_Y)

    def cells(self):
        return [(self.x+c, self.y+r) for r,row in enumerate(self.shape) for c,v in enumerate(row) if v]

def move_left(grid: Grid, piece: ActivePiece) -> ActivePiece:
    if check_collision(grid, piece.x-1, piece.y, piece.shape): return piece
    return replace(piece, x=max(piece.x-1, 0))

def move_right(grid: Grid, piece: ActivePiece) -> ActivePiece:
    if check_collision(grid, piece.x+1, piece.y, piece.shape): return piece
    return replace(piece, x=min(piece.x+1, COLS-piece.width))

def move_down(grid: Grid, piece: ActivePiece) -> Optional[ActivePiece]:
    """Returns the piece one row lower, or None when it has landed."""
    if check_collision(grid, piece.x, piece.y+1, piece.shape): return None
    return replace(piece, y=piece.y+1)

def rotate(grid: Grid, piece: ActivePiece) -> ActivePiece:
    ns = rotate_shape(piece.shape)
    if check_collision(grid, piece.x, piece.y, ns): return piece
    return replace(piece, shape=ns)
