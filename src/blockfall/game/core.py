from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional

import numpy as np

from .collision import is_valid_move
from .grid import GameGrid
from .pieces import Piece, PieceFactory, rotate
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    PAUSE = 5


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class DropResult(Enum):
    FALLING = "falling"
    LOCKED = "locked"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 2:
            raise ValueError(f"grid too small for tetrominoes: {self.width}x{self.height}")


@dataclass(frozen=True)
class SessionSnapshot:
    score: int
    level: int
    lines: int
    drop_interval: int
    state: GameState

    @property
    def running(self) -> bool:
        return self.state in (GameState.RUNNING, GameState.PAUSED)

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER


class FallingBlockGame:
    """Falling-block session: spawn, fall, lock, clear, score.

    All session state lives on the instance. Player actions and `tick` are
    expected to be called from a single thread, one at a time; every
    operation is a silent no-op when it does not apply to the current state.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[Any] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.grid = GameGrid(self.config.width, self.config.height)
        self.factory = PieceFactory(self.config.width, rng=rng, seed=self.config.random_seed)
        self.state = GameState.IDLE
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.score = 0
        self.level = 1
        self.lines = 0
        self.drop_interval = self.rules.drop_interval_for_level(1)
        self.last_drop_time = 0

    # Session lifecycle

    def start_game(self, now_ms: int = 0) -> None:
        self.grid.reset()
        self.score = 0
        self.level = 1
        self.lines = 0
        self.drop_interval = self.rules.drop_interval_for_level(1)
        self.current_piece = None
        self.state = GameState.RUNNING
        self.next_piece = self.factory.create()
        self.spawn_piece()
        self.last_drop_time = now_ms
        logger.debug("session started at %d ms", now_ms)

    def toggle_pause(self) -> GameState:
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.RUNNING
        return self.state

    def tick(self, now_ms: int) -> bool:
        if self.state is not GameState.RUNNING:
            return False
        if now_ms - self.last_drop_time > self.drop_interval:
            self.move_down()
            self.last_drop_time = now_ms
            return True
        return False

    # Player actions

    def _can_act(self) -> bool:
        return self.state is GameState.RUNNING and self.current_piece is not None

    def _shift(self, dx: int) -> bool:
        if not self._can_act():
            return False
        piece = self.current_piece
        if is_valid_move(self.grid, piece.x + dx, piece.y, piece.shape):
            piece.x += dx
            return True
        return False

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def move_down(self) -> Optional[DropResult]:
        if not self._can_act():
            return None
        piece = self.current_piece
        if is_valid_move(self.grid, piece.x, piece.y + 1, piece.shape):
            piece.y += 1
            return DropResult.FALLING
        self.lock_piece()
        return DropResult.LOCKED

    def rotate_piece(self) -> bool:
        if not self._can_act():
            return False
        piece = self.current_piece
        rotated = rotate(piece.shape)
        if is_valid_move(self.grid, piece.x, piece.y, rotated):
            piece.shape = rotated
            return True
        return False

    def step(self, action: Action) -> SessionSnapshot:
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE:
            self.rotate_piece()
        elif action == Action.SOFT_DROP:
            self.move_down()
        elif action == Action.PAUSE:
            self.toggle_pause()
        return self.snapshot()

    # Lock / spawn

    def lock_piece(self) -> int:
        if self.current_piece is None:
            return 0
        piece = self.current_piece
        for x, y in piece.cells():
            self.grid.set(x, y, piece.color)
        cleared = self.grid.clear_completed_rows()
        if cleared:
            self._apply_line_clear(cleared)
        self.spawn_piece()
        return cleared

    def spawn_piece(self) -> None:
        if self.next_piece is None:
            self.next_piece = self.factory.create()
        self.current_piece = self.next_piece
        self.next_piece = self.factory.create()
        piece = self.current_piece
        if not is_valid_move(self.grid, piece.x, piece.y, piece.shape):
            self.state = GameState.GAME_OVER
            logger.debug("game over: no room for %s, final score %d", piece.kind.name, self.score)

    def _apply_line_clear(self, cleared: int) -> None:
        self.lines += cleared
        self.score += self.rules.score_for_lines(cleared, self.level)
        new_level = self.rules.level_for_lines(self.lines)
        if new_level > self.level:
            self.level = new_level
            self.drop_interval = self.rules.drop_interval_for_level(self.level)
            logger.debug("level %d, drop interval %d ms", self.level, self.drop_interval)

    # Read-only views

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            score=self.score,
            level=self.level,
            lines=self.lines,
            drop_interval=self.drop_interval,
            state=self.state,
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if self.current_piece is not None and self.state is not GameState.IDLE:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -self.current_piece.color
        return state
