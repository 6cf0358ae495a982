"""
I use this script to drive a board headlessly with random clicks.

It's a quick smoke test of the engine on any board size and a rough feel for how
often blind play survives a given density.

Usage:
  mineboard-simulate --preset Expert --games 20 --seed 7
  mineboard-simulate --rows 16 --columns 16 --mines 40 --games 5
"""

from __future__ import annotations

import argparse
import random
from typing import List, Optional

from .board_metrics import board_statistics
from .constants import DEFAULT_COLUMNS, DEFAULT_MINES, DEFAULT_ROWS, PRESETS, new_board
from .errors import InvalidConfiguration
from .game import Board, GameState


def play_random_game(board: Board, rng: random.Random) -> GameState:
    """Reveal random closed, unflagged cells until the game ends."""
    while not board.state.ended:
        closed = [i for i in range(board.cell_count)
                  if not board.is_opened(i) and not board.is_flagged(i)]
        board.reveal(rng.choice(closed))
    return board.state


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Play random games on a Minesweeper board")
    p.add_argument("--rows", type=int, default=DEFAULT_ROWS)
    p.add_argument("--columns", type=int, default=DEFAULT_COLUMNS)
    p.add_argument("--mines", type=int, default=DEFAULT_MINES)
    p.add_argument("--preset", choices=sorted(PRESETS), default=None,
                   help="Use a named preset instead of --rows/--columns/--mines")
    p.add_argument("--games", type=int, default=10)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args(argv)

    if args.games <= 0:
        p.error("--games must be positive")

    try:
        if args.preset is not None:
            board = new_board(preset=args.preset, seed=args.seed)
        else:
            board = Board(args.rows, args.columns, args.mines, seed=args.seed)
    except InvalidConfiguration as e:
        p.error(str(e))
    rng = random.Random(args.seed)

    wins = 0
    for n in range(1, args.games + 1):
        board.reset()
        if play_random_game(board, rng) is GameState.WON:
            wins += 1
        s = board_statistics(board)
        print(f"Game {n}: {s['status']} ({s['opened_count']}/{board.total_safe} safe cells, "
              f"{s['progress_percent']}%)")

    print(f"{board.rows}x{board.columns} with {board.mine_count} mines: "
          f"won {wins}/{args.games} ({100.0 * wins / args.games:.1f}%)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
