"""
This is the top-level package for the Minesweeper board engine.

Everything a renderer needs is importable from here: the `Board` itself, its
result records, the bitmap it stores mines in and the error types.
"""

from .bitmap import Bitmap
from .errors import BoardError, IndexOutOfRange, InvalidConfiguration, InvalidSize, MinesHidden
from .game import FLAGS_EXHAUSTED, Board, FlagResult, GameState, RevealResult, neighbors
from .constants import PRESETS, board_params, new_board

__all__ = [
    'Bitmap', 'Board', 'GameState', 'RevealResult', 'FlagResult', 'FLAGS_EXHAUSTED',
    'neighbors', 'PRESETS', 'board_params', 'new_board',
    'BoardError', 'InvalidSize', 'IndexOutOfRange', 'InvalidConfiguration', 'MinesHidden',
]
