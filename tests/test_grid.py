import pytest

from blockfall.game import GameGrid


def _fill_row(grid, row, color=1, skip=()):
    for x in range(grid.width):
        if x not in skip:
            grid.set(x, row, color)


def test_reset_empties_every_cell():
    grid = GameGrid(10, 20)
    _fill_row(grid, 19)
    grid.set(3, 7, 5)
    grid.reset()
    assert not any(grid.occupied(x, y) for y in range(20) for x in range(10))
    assert grid.filled_cells() == 0


def test_set_above_top_edge_is_skipped():
    grid = GameGrid(10, 20)
    grid.set(4, -1, 2)
    assert grid.filled_cells() == 0


def test_set_rejects_colors_outside_palette():
    grid = GameGrid(10, 20)
    with pytest.raises(ValueError):
        grid.set(0, 0, 8)
    with pytest.raises(ValueError):
        grid.set(0, 0, -1)


def test_row_complete_requires_every_cell():
    grid = GameGrid(10, 20)
    _fill_row(grid, 19, skip={9})
    assert not grid.is_row_complete(19)
    grid.set(9, 19, 7)
    assert grid.is_row_complete(19)


def test_clear_single_row_shifts_rows_above_down():
    grid = GameGrid(10, 20)
    _fill_row(grid, 19)
    grid.set(0, 18, 3)
    grid.set(1, 18, 3)
    grid.set(7, 10, 6)

    assert grid.clear_completed_rows() == 1
    assert grid.cell(0, 19) == 3 and grid.cell(1, 19) == 3
    assert grid.cell(7, 11) == 6
    assert not grid.occupied(7, 10)
    assert grid.filled_cells() == 3
    assert not any(grid.occupied(x, 0) for x in range(10))


def test_clear_adjacent_rows_rechecks_same_index():
    grid = GameGrid(10, 20)
    _fill_row(grid, 18, color=2)
    _fill_row(grid, 19, color=4)
    grid.set(5, 17, 1)

    assert grid.clear_completed_rows() == 2
    assert grid.cell(5, 19) == 1
    assert grid.filled_cells() == 1


def test_clear_separated_rows_keeps_order_of_remaining_rows():
    grid = GameGrid(10, 20)
    _fill_row(grid, 19)
    grid.set(0, 18, 5)
    _fill_row(grid, 17)
    grid.set(9, 16, 6)

    assert grid.clear_completed_rows() == 2
    assert grid.cell(0, 19) == 5
    assert grid.cell(9, 18) == 6
    assert grid.filled_cells() == 2


def test_clear_without_complete_rows_changes_nothing():
    grid = GameGrid(10, 20)
    _fill_row(grid, 19, skip={0})
    before = grid.clone_state()
    assert grid.clear_completed_rows() == 0
    assert (grid.clone_state() == before).all()
