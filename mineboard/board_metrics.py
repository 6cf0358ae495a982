"""
I keep "board metrics" here so there is one source of truth for:
- how I count progress (safe cells opened)
- what "100% progress" means
- how I map a board to a short status code (NEW/PROG/WON/LOST)
"""

from __future__ import annotations

from typing import Any, Dict

from .game import Board, GameState

_STATUS_CODES = {
    GameState.NOT_STARTED: "NEW",
    GameState.PLAYING: "PROG",
    GameState.WON: "WON",
    GameState.LOST: "LOST",
}


def total_safe_cells(*, rows: int, columns: int, mine_count: int) -> int:
    """Total safe cells on the board (used as the denominator for progress)."""
    return max(1, max(0, rows) * max(0, columns) - max(0, mine_count))


def progress_percent(board: Board) -> int:
    """Compute progress% as opened_count / total_safe."""
    denom = total_safe_cells(rows=board.rows, columns=board.columns, mine_count=board.mine_count)
    pct = int((float(board.opened_count) / float(denom)) * 100.0)
    return max(0, min(100, pct))


def status_code(board: Board) -> str:
    return _STATUS_CODES[board.state]


def board_statistics(board: Board) -> Dict[str, Any]:
    """Get a flat dict of counters for reports and the simulation CLI."""
    return {
        "rows": board.rows,
        "columns": board.columns,
        "mine_count": board.mine_count,
        "status": status_code(board),
        "opened_count": board.opened_count,
        "flagged_count": board.flagged_count,
        "flags_remaining": board.flags_remaining,
        "progress_percent": progress_percent(board),
        "game_won": board.state is GameState.WON,
        "game_lost": board.state is GameState.LOST,
        "elapsed": board.elapsed(),
    }
