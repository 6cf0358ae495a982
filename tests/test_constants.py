import pytest

from mineboard import PRESETS, GameState, InvalidConfiguration, board_params, new_board
from mineboard.constants import DEFAULT_COLUMNS, DEFAULT_MINES, DEFAULT_ROWS


def test_board_params_defaults():
    expected = {"rows": DEFAULT_ROWS, "columns": DEFAULT_COLUMNS, "mine_count": DEFAULT_MINES}
    assert board_params() == expected
    assert board_params({}) == expected
    assert board_params({"row": "abc", "column": "0", "mine": None}) == expected
    assert board_params({"row": "-4", "column": "", "mine": "0"}) == expected


def test_board_params_parses_strings_and_ints():
    assert board_params({"row": "16", "column": " 30 ", "mine": 99}) == {
        "rows": 16, "columns": 30, "mine_count": 99,
    }


def test_oversized_mine_param_is_clamped_by_board():
    board = new_board({"row": "2", "column": "2", "mine": "50"})
    assert board.mine_count == 3


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_build_boards(name):
    board = new_board(preset=name, seed=0)
    p = PRESETS[name]
    assert (board.rows, board.columns, board.mine_count) == (p["rows"], p["columns"], p["mine_count"])
    assert board.state is GameState.NOT_STARTED


def test_unknown_preset():
    with pytest.raises(InvalidConfiguration):
        new_board(preset="Nightmare")
