import numpy as np
import pytest

from mineboard import MinesHidden
from mineboard.encoding import (
    ENC_DETONATED,
    ENC_FLAGGED,
    ENC_MINE_SHOWN,
    ENC_UNREVEALED,
    mine_mask,
    visible_board,
    visible_to_int8,
)


def test_fresh_board_is_all_closed(wall_board):
    grid = visible_to_int8(wall_board)
    assert grid.shape == (3, 5)
    assert grid.dtype == np.int8
    assert (grid == ENC_UNREVEALED).all()


def test_visible_board_after_flood(wall_board):
    wall_board.reveal(0)
    wall_board.toggle_flag(3)
    assert visible_board(wall_board) == [
        ["B", "2", "E", "F", "E"],
        ["B", "3", "E", "E", "E"],
        ["B", "2", "E", "E", "E"],
    ]


def test_loss_shows_detonated_and_other_mines(wall_board):
    wall_board.reveal(0)
    wall_board.toggle_flag(3)
    wall_board.reveal(7)
    grid = visible_to_int8(wall_board)
    assert grid[1, 2] == ENC_DETONATED
    assert grid[0, 2] == ENC_MINE_SHOWN
    assert grid[2, 2] == ENC_MINE_SHOWN
    assert grid[0, 3] == ENC_FLAGGED
    assert visible_board(wall_board)[1][2] == "X"


def test_win_shows_every_cell(wall_board):
    wall_board.reveal(0)
    wall_board.reveal(4)
    assert visible_board(wall_board) == [
        ["B", "2", "M", "2", "B"],
        ["B", "3", "M", "3", "B"],
        ["B", "2", "M", "2", "B"],
    ]


def test_mine_mask_hidden_until_game_ends(wall_board):
    with pytest.raises(MinesHidden):
        mine_mask(wall_board)
    wall_board.reveal(0)
    wall_board.reveal(12)
    mask = mine_mask(wall_board)
    assert mask.dtype == np.uint8
    assert mask.tolist() == [
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
    ]
