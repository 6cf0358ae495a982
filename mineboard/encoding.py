"""
Renderer-facing snapshots of a board.

I expose the player's view in two shapes: a grid of short strings (handy for
terminals and logs) and an int8 numpy grid (handy for diffing and array code).
Mine locations only show up once the game has ended.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .errors import MinesHidden
from .game import Board

# Visible-board encoding (int8):
#  -2: flagged
#  -1: closed
#  0..8: opened, neighbor-mine count
#   9: mine shown (starred after the game ended)
#  10: detonated mine
ENC_FLAGGED: int = -2
ENC_UNREVEALED: int = -1
ENC_BLANK: int = 0
ENC_MINE_SHOWN: int = 9
ENC_DETONATED: int = 10

_SYMBOLS = {ENC_FLAGGED: "F", ENC_UNREVEALED: "E", ENC_BLANK: "B",
            ENC_MINE_SHOWN: "M", ENC_DETONATED: "X"}


def encode_cell(board: Board, index: int) -> int:
    if index == board.detonated:
        return ENC_DETONATED
    if board.is_flagged(index) and not board.is_opened(index):
        return ENC_FLAGGED
    if board.is_starred(index):
        return ENC_MINE_SHOWN
    if board.is_opened(index):
        return board.neighbor_mine_count(index)
    return ENC_UNREVEALED


def visible_to_int8(board: Board) -> np.ndarray:
    """Convert the player's view into an int8 array [rows, columns]."""
    out = np.full(board.cell_count, ENC_UNREVEALED, dtype=np.int8)
    for i in range(board.cell_count):
        out[i] = encode_cell(board, i)
    return out.reshape(board.rows, board.columns)


def visible_board(board: Board) -> List[List[str]]:
    """
    The player's view as strings:
    `E` closed, `F` flagged, `B` blank, `1`-`8` counts, `M` mine, `X` detonated.
    """
    grid = visible_to_int8(board)
    return [[_SYMBOLS.get(int(v), str(int(v))) for v in row] for row in grid]


def mine_mask(board: Board) -> np.ndarray:
    """Return uint8 mask [rows, columns] where 1 marks a mine. Only after the game ended."""
    if not board.state.ended:
        raise MinesHidden("Mine locations are hidden until the game ends")
    return board.mines.to_array().reshape(board.rows, board.columns)
