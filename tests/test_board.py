import pytest

from blockfall_board import (PlacementError, check_collision, clear_lines, empty_grid,
                             line_score, place_shape)
from blockfall_piece import ActivePiece
from blockfall_shapes import COLS, ROWS

I = [[1, 1, 1, 1]]
O = [[1, 1], [1, 1]]


def test_empty_grid_dimensions():
    g = empty_grid()
    assert len(g) == ROWS
    assert all(len(row) == COLS and not any(row) for row in g)


@pytest.mark.parametrize("x,y,hit", [
    (0, 0, False),
    (6, 0, False),
    (7, 0, True),
    (-1, 0, True),
    (0, ROWS - 1, False),
    (0, ROWS, True),
    (3, -1, False),
    (3, -5, False),
])
def test_collision_against_bounds(x, y, hit):
    assert check_collision(empty_grid(), x, y, I) is hit


def test_collision_with_occupied_cell():
    g = empty_grid()
    g[5][4] = "red"
    assert check_collision(g, 3, 4, O)
    assert not check_collision(g, 5, 4, O)


def test_empty_flags_never_collide():
    g = empty_grid()
    g[0][3] = "red"
    assert not check_collision(g, 3, 0, [[0, 1, 0], [1, 1, 1]])
    assert not check_collision(empty_grid(), -1, 0, [[0, 1], [0, 1]])


def test_place_shape_returns_new_grid():
    g = empty_grid()
    out = place_shape(ActivePiece("O", O, "yellow", 4, 18), g)
    assert not any(any(row) for row in g)
    assert [out[18][4], out[18][5], out[19][4], out[19][5]] == ["yellow"] * 4
    assert sum(1 for row in out for c in row if c) == 4


@pytest.mark.parametrize("x,y", [(8, 0), (0, ROWS), (0, -1)])
def test_place_shape_outside_grid_raises(x, y):
    with pytest.raises(PlacementError):
        place_shape(ActivePiece("I", I, "cyan", x, y), empty_grid())


def test_clear_lines_without_full_rows():
    g = empty_grid()
    g[19][0] = "red"
    out, cleared = clear_lines(g)
    assert cleared == 0
    assert out == g


@pytest.mark.parametrize("k", [1, 2, 4, ROWS])
def test_clear_lines_removes_full_rows(k):
    g = empty_grid()
    for r in range(ROWS - k, ROWS):
        g[r] = ["blue"] * COLS
    if k < ROWS:
        g[ROWS - k - 1][2] = "green"
    out, cleared = clear_lines(g)
    assert cleared == k
    assert len(out) == ROWS and all(len(row) == COLS for row in out)
    assert all(not any(row) for row in out[:k])
    if k < ROWS:
        assert out[ROWS - 1][2] == "green"
    assert line_score(cleared) == k * 100


def test_clear_lines_keeps_order_of_remaining_rows():
    g = empty_grid()
    g[10][0] = "red"
    g[12] = ["cyan"] * COLS
    g[15][9] = "blue"
    out, cleared = clear_lines(g)
    assert cleared == 1
    assert out[11][0] == "red"
    assert out[15][9] == "blue"


def test_rows_above_grid_do_not_read_bottom_row():
    g = empty_grid()
    g[ROWS - 1] = ["red"] * COLS
    assert not check_collision(g, 3, -1, I)
    assert not check_collision(g, 0, -2, O)
