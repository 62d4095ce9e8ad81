"""Falling-block puzzle engine with a pygame front-end and a Gymnasium environment."""

from .game import (
    Action,
    DropResult,
    FallingBlockGame,
    GameConfig,
    GameState,
    ScoringRules,
)

__all__ = [
    "Action",
    "DropResult",
    "FallingBlockGame",
    "GameConfig",
    "GameState",
    "ScoringRules",
]
