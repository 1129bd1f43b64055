"""Shape catalog: the seven pieces, their colors, random pick, rotation"""
import random
from dataclasses import dataclass
from typing import List

COLS, ROWS = 10, 20

Shape = List[List[int]]

@dataclass(frozen=True)
class ShapeDef:
    name: str
    shape: Shape
    color: str

SHAPES = [
    ShapeDef("I", [[1,1,1,1]], "cyan"),
    ShapeDef("O", [[1,1],[1,1]], "yellow"),
    ShapeDef("T", [[0,1,0],[1,1,1]], "purple"),
    ShapeDef("Z", [[1,1,0],[0,1,1]], "red"),
    ShapeDef("S", [[0,1,1],[1,1,0]], "green"),
    ShapeDef("L", [[1,0,0],[1,1,1]], "orange"),
    ShapeDef("J", [[0,0,1],[1,1,1]], "blue"),
]

COLORS = {s.name: s.color for s in SHAPES}

def random_shape(rng=None) -> ShapeDef:
    d = (rng or random).choice(SHAPES)
    return ShapeDef(d.name, [r[:] for r in d.shape], d.color)

# transpose, then reverse the row order; turns about the top-left corner
def rotate_shape(m: Shape) -> Shape: return [list(c) for c in zip(*m)][::-1]
