"""Game module for blockfall.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation and line clearing
- Piece, PieceFactory, rotate: Tetromino pieces and clockwise rotation
- is_valid_move: Collision check against grid bounds and occupancy
- ScoringRules: Score, level and drop-interval curve
- FallingBlockGame: Session state machine and gravity tick
"""

from .grid import GameGrid
from .pieces import BASE_SHAPES, Piece, PieceFactory, TetrominoType, rotate
from .collision import is_valid_move
from .rules import ScoringRules
from .core import (
    Action,
    DropResult,
    FallingBlockGame,
    GameConfig,
    GameState,
    SessionSnapshot,
)

__all__ = [
    "GameGrid",
    "BASE_SHAPES",
    "Piece",
    "PieceFactory",
    "TetrominoType",
    "rotate",
    "is_valid_move",
    "ScoringRules",
    "Action",
    "DropResult",
    "FallingBlockGame",
    "GameConfig",
    "GameState",
    "SessionSnapshot",
]
