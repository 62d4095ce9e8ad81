import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from blockfall.game import FallingBlockGame, GameConfig, TetrominoType


class ScriptedRng:
    """Stand-in for random.Random that hands out a fixed piece order, cycling."""

    def __init__(self, kinds):
        self.kinds = list(kinds)
        self.calls = 0

    def choice(self, seq):
        kind = self.kinds[self.calls % len(self.kinds)]
        self.calls += 1
        return kind


@pytest.fixture
def scripted_game():
    def _make(*kinds, width=10, height=20):
        return FallingBlockGame(GameConfig(width=width, height=height), rng=ScriptedRng(kinds))
    return _make


@pytest.fixture
def o_game(scripted_game):
    game = scripted_game(TetrominoType.O)
    game.start_game(0)
    return game
