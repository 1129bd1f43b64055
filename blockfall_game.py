"""
Game state, lifecycle transitions and the owning Game object.

The transition functions are pure: each takes a GameState and returns a new
one. Game holds the authoritative state, drives the gravity timer and tells
its listeners about every change so the view never has to poll.
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from blockfall_shapes import random_shape
from blockfall_board import Grid, check_collision, clear_lines, empty_grid, line_score, place_shape
from blockfall_piece import ActivePiece, move_down, move_left, move_right, rotate
from blockfall_timer import GravityTimer

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    grid: Grid
    piece: ActivePiece
    score: int = 0
    status: Status = Status.RUNNING
    lines: int = 0

    @property
    def game_over(self) -> bool:
        return self.status is Status.GAME_OVER


def new_game(rng=None) -> GameState:
    return GameState(empty_grid(), ActivePiece.spawn(random_shape(rng)))


def lock_piece(state: GameState, rng=None) -> GameState:
    """Merge the piece into the grid, clear full rows and spawn the next piece."""
    grid, cleared = clear_lines(place_shape(state.piece, state.grid))
    logger.debug("locked %s at (%d, %d), cleared %d", state.piece.name, state.piece.x, state.piece.y, cleared)
    nxt = ActivePiece.spawn(random_shape(rng))
    status = Status.RUNNING
    if check_collision(grid, nxt.x, nxt.y, nxt.shape):
        status = Status.GAME_OVER
    return GameState(grid, nxt, state.score + line_score(cleared), status, state.lines + cleared)


def step_down(state: GameState, rng=None) -> GameState:
    if state.game_over: return state
    moved = move_down(state.grid, state.piece)
    if moved is None:
        return lock_piece(state, rng)
    return replace(state, piece=moved)


def _step(move):
    def step(state: GameState) -> GameState:
        if state.game_over: return state
        return replace(state, piece=move(state.grid, state.piece))
    step.__name__ = "step_" + move.__name__
    return step

step_left = _step(move_left)
step_right = _step(move_right)
step_rotate = _step(rotate)


Listener = Callable[[GameState], None]


class Game:
    def __init__(self, timer: Optional[GravityTimer] = None, rng=None):
        self.timer = timer if timer is not None else GravityTimer()
        self.rng = rng
        self.state = new_game(rng)
        self.listeners: List[Listener] = []
        self.game_over_listeners: List[Callable[[int], None]] = []

    def subscribe(self, callback: Listener):
        self.listeners.append(callback)

    def on_game_over(self, callback: Callable[[int], None]):
        self.game_over_listeners.append(callback)

    def _commit(self, state: GameState):
        ended = state.game_over and not self.state.game_over
        self.state = state
        if ended:
            self.timer.stop()
            logger.info("game over, final score %d after %d lines", state.score, state.lines)
        for cb in list(self.listeners):
            cb(state)
        if ended:
            for cb in list(self.game_over_listeners):
                cb(state.score)

    def start(self):
        logger.info("game started")
        self.timer.start()

    def stop(self):
        self.timer.stop()

    def restart_timer(self):
        if not self.state.game_over:
            self.timer.stop()
            self.timer.start()

    def reset(self):
        self.timer.stop()
        self._commit(new_game(self.rng))
        logger.info("game reset")
        self.timer.start()

    def tick(self):
        self._commit(step_down(self.state, self.rng))

    def move_down(self): self.tick()
    def move_left(self): self._commit(step_left(self.state))
    def move_right(self): self._commit(step_right(self.state))
    def rotate(self): self._commit(step_rotate(self.state))
