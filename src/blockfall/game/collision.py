from __future__ import annotations

from .grid import GameGrid
from .pieces import Shape


def is_valid_move(grid: GameGrid, x: int, y: int, shape: Shape) -> bool:
    """Check whether `shape` anchored at (x, y) fits on `grid`.

    Cells above the top edge (y < 0) are only checked against the side
    walls; everything else must be inside the board and unoccupied.
    """
    rows, cols = shape.shape
    for row in range(rows):
        for col in range(cols):
            if not shape[row, col]:
                continue
            gx = x + col
            gy = y + row
            if gx < 0 or gx >= grid.width or gy >= grid.height:
                return False
            if gy >= 0 and grid.occupied(gx, gy):
                return False
    return True
