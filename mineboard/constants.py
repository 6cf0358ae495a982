"""
These are the board defaults and difficulty presets I share across the package.

Callers usually get dimensions from user input (a settings form, a query string)
so `board_params()` parses loosely and falls back to the defaults rather than
failing.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .errors import InvalidConfiguration
from .game import Board

DEFAULT_ROWS = 9
DEFAULT_COLUMNS = 9
DEFAULT_MINES = 10

# Define shared preset definitions here.
PRESETS = {
    "Beginner": {"rows": 9, "columns": 9, "mine_count": 10},
    "Intermediate": {"rows": 16, "columns": 16, "mine_count": 40},
    "Expert": {"rows": 16, "columns": 30, "mine_count": 100},
    "Huge": {"rows": 25, "columns": 60, "mine_count": 309},
}


def _loose_int(v: Any) -> Optional[int]:
    """Parse an int the way a form field would be read; None if it isn't one."""
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(str(v).strip())
    except ValueError:
        return None


def board_params(params: Optional[Mapping[str, Any]] = None) -> Dict[str, int]:
    """
    Turn `{"row": ..., "column": ..., "mine": ...}` into Board keyword arguments.

    Missing, unparsable or non-positive values fall back to the defaults. An
    oversized mine count is passed through; the Board clamps it.
    """
    params = params or {}
    rows = _loose_int(params.get("row"))
    columns = _loose_int(params.get("column"))
    mines = _loose_int(params.get("mine"))
    return {
        "rows": rows if rows and rows > 0 else DEFAULT_ROWS,
        "columns": columns if columns and columns > 0 else DEFAULT_COLUMNS,
        "mine_count": mines if mines and mines > 0 else DEFAULT_MINES,
    }


def new_board(params: Optional[Mapping[str, Any]] = None, preset: Optional[str] = None,
              seed: Optional[int] = None) -> Board:
    """Build a Board from a preset name, or from loose `row`/`column`/`mine` params."""
    if preset is not None:
        if preset not in PRESETS:
            raise InvalidConfiguration(
                f"Unknown preset {preset!r}; expected one of {', '.join(PRESETS)}")
        return Board(seed=seed, **PRESETS[preset])
    return Board(seed=seed, **board_params(params))
