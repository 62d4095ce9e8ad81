from __future__ import annotations

import numpy as np


NUM_COLORS = 7


class GameGrid:
    """Fixed-size occupancy matrix for the falling-block board.

    The grid uses 0 for empty cells and 1..7 for locked cells, where the
    integer is the color id of the tetromino that filled the cell.
    Row 0 is the top of the board.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def occupied(self, x: int, y: int) -> bool:
        return self.grid[y, x] != 0

    def cell(self, x: int, y: int) -> int:
        return int(self.grid[y, x])

    def set(self, x: int, y: int, color: int) -> None:
        """Write `color` into a cell. Rows above the board (y < 0) are skipped."""
        if not 0 <= color <= NUM_COLORS:
            raise ValueError(f"color id out of palette range: {color}")
        if y < 0:
            return
        self.grid[y, x] = color

    def is_row_complete(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != 0))

    def clear_completed_rows(self) -> int:
        cleared = 0
        row = self.height - 1
        while row >= 0:
            if self.is_row_complete(row):
                # Shift everything above down by one; re-examine this row.
                self.grid[1 : row + 1] = self.grid[0:row].copy()
                self.grid[0] = 0
                cleared += 1
            else:
                row -= 1
        return cleared

    def filled_cells(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
