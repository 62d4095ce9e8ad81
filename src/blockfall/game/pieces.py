from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def _template(rows: Sequence[Sequence[int]]) -> Shape:
    shape = np.array(rows, dtype=np.int8)
    shape.flags.writeable = False
    return shape


BASE_SHAPES = {
    TetrominoType.I: _template([[1, 1, 1, 1]]),
    TetrominoType.O: _template([[2, 2], [2, 2]]),
    TetrominoType.T: _template([[0, 3, 0], [3, 3, 3]]),
    TetrominoType.S: _template([[0, 4, 4], [4, 4, 0]]),
    TetrominoType.Z: _template([[5, 5, 0], [0, 5, 5]]),
    TetrominoType.J: _template([[6, 0, 0], [6, 6, 6]]),
    TetrominoType.L: _template([[0, 0, 7], [7, 7, 7]]),
}


def rotate(shape: Shape) -> Shape:
    """Return a new matrix rotated 90 degrees clockwise.

    An R x C input becomes C x R, with out[col][R-1-row] = in[row][col].
    """
    return np.rot90(shape, 1, axes=(1, 0)).copy()


@dataclass
class Piece:
    kind: TetrominoType
    shape: Shape
    x: int = 0
    y: int = 0

    @property
    def color(self) -> int:
        return int(self.kind)

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate(self.shape), self.x, self.y)

    def cells(self) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        for dy in range(self.height):
            for dx in range(self.width):
                if self.shape[dy, dx]:
                    cells.append((self.x + dx, self.y + dy))
        return cells


class PieceFactory:
    """Creates spawn-ready pieces centered at the top of a grid.

    `rng` only needs a `choice(seq)` method, so tests can pass a scripted
    sequence instead of a `random.Random`.
    """

    def __init__(self, width: int, rng: Optional[Any] = None, seed: Optional[int] = None) -> None:
        self.width = int(width)
        self.rng = rng if rng is not None else random.Random(seed)

    def create(self) -> Piece:
        kind = self.rng.choice(list(TetrominoType))
        return self.create_kind(kind)

    def create_kind(self, kind: TetrominoType) -> Piece:
        kind = TetrominoType(kind)
        shape = BASE_SHAPES[kind].copy()
        x = self.width // 2 - shape.shape[1] // 2
        return Piece(kind=kind, shape=shape, x=x, y=0)
