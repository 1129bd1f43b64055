"""Key bindings and on-screen buttons"""
from typing import List, Optional, Tuple
import pygame
from blockfall_layout import Dims, BUTTON_W, BUTTON_H

ACTIONS = ("move_left", "rotate", "move_right", "move_down")

KEYMAP = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "move_down",
    pygame.K_UP: "rotate",
}

LABELS = {"move_left": "<", "rotate": "R", "move_right": ">", "move_down": "v"}

def button_rects(dims: Dims) -> List[Tuple[str, pygame.Rect]]:
    spacing = 8
    row_w = len(ACTIONS)*BUTTON_W + (len(ACTIONS)-1)*spacing
    x = (dims.total_w - row_w)//2
    out = []
    for a in ACTIONS:
        out.append((a, pygame.Rect(x, dims.buttons_y, BUTTON_W, BUTTON_H)))
        x += BUTTON_W + spacing
    return out

def action_for_event(e, dims: Dims) -> Optional[str]:
    if e.type == pygame.KEYDOWN:
        return KEYMAP.get(e.key)
    if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
        for a, rect in button_rects(dims):
            if rect.collidepoint(e.pos): return a
    return None

def dispatch(game, e, dims: Dims) -> bool:
    """Runs the Game method bound to the event; False when nothing matched."""
    a = action_for_event(e, dims)
    if a is None: return False
    getattr(game, a)()
    return True
