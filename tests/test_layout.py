import pytest

from blockfall_config import CONFIG
from blockfall_layout import compute_dims


def test_default_dims(monkeypatch):
    monkeypatch.setitem(CONFIG, "CELL_SIZE", 20)
    d = compute_dims()
    assert d.board_w == 10 * 21 - 1
    assert d.board_h == 20 * 21 - 1
    assert d.board_x + d.board_w <= d.total_w
    assert d.buttons_y > d.board_y + d.board_h


def test_bad_cell_size(monkeypatch):
    monkeypatch.setitem(CONFIG, "CELL_SIZE", 0)
    with pytest.raises(ValueError):
        compute_dims()
