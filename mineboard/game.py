"""
This is the core Minesweeper board engine.

Cells are addressed by a single linear index (`row * columns + column`). I keep
mine locations in a packed `Bitmap` and the player-facing state (opened, flagged,
starred) in flat per-cell lists, so nothing here knows how a board is drawn.

Mines are placed on the first reveal, never at construction, which lets me keep
the first click safe. A renderer drives the board with `reveal()` and
`toggle_flag()` and diffs the returned `RevealResult` / `FlagResult`.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from .bitmap import Bitmap
from .errors import IndexOutOfRange, InvalidConfiguration, MinesHidden

logger = logging.getLogger(__name__)

# Returned as FlagResult.warning when the last flag went on a wrong cell, or
# when there is no flag left to place.
FLAGS_EXHAUSTED = "No flags left and not every flag is on a mine"

# Above this share of mines the first click is no longer guaranteed safe.
SAFE_FIRST_CLICK_MAX_DENSITY = 0.5


class GameState(Enum):
    """Lifecycle of one game on a board."""
    NOT_STARTED = "NOT_STARTED"
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"

    @property
    def ended(self) -> bool:
        return self in (GameState.WON, GameState.LOST)


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of one `reveal()` call.

    `opened` maps every cell opened by this call to its neighbor-mine count, in
    the order the cells were opened. `detonated` is the mine that was clicked,
    if any.
    """
    accepted: bool
    state: GameState
    opened: Dict[int, int] = field(default_factory=dict)
    detonated: Optional[int] = None

    @property
    def ignored(self) -> bool:
        return not self.accepted


@dataclass(frozen=True)
class FlagResult:
    """Outcome of one `toggle_flag()` call. `opened` is only filled by a flag that wins."""
    accepted: bool
    state: GameState
    index: Optional[int] = None
    flagged: bool = False
    flags_remaining: int = 0
    warning: Optional[str] = None
    opened: Dict[int, int] = field(default_factory=dict)

    @property
    def ignored(self) -> bool:
        return not self.accepted


def neighbors(index: int, rows: int, columns: int) -> List[int]:
    """
    Get the up-to-8 neighbors (including diagonals) of a cell.

    Args:
        index: Linear index of the cell
        rows: Number of rows on the board
        columns: Number of columns on the board

    Returns:
        Neighbor indices, never `index` itself and never wrapping across a row edge
    """
    if index < 0 or index >= rows * columns:
        return []
    row, col = divmod(index, columns)
    out = []
    for dr in (-1, 0, 1):
        r = row + dr
        if r < 0 or r >= rows:
            continue
        for dc in (-1, 0, 1):
            c = col + dc
            if (dr == 0 and dc == 0) or c < 0 or c >= columns:
                continue
            out.append(r * columns + c)
    return out


def _positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    return value


class Board:
    """
    One Minesweeper board.

    Dimensions and mine count are fixed for the lifetime of the object; use
    `reset()` to play again on the same board and build a new `Board` to change
    difficulty.
    """

    def __init__(self, rows: int, columns: int, mine_count: int,
                 seed: Optional[int] = None, clock: Callable[[], float] = time.time):
        """
        Initialize a new board.

        Args:
            rows: Number of rows (positive)
            columns: Number of columns (positive)
            mine_count: Requested mines; clamped to `rows * columns - 1`
            seed: Seed for this board's own random generator
            clock: Time source for `started_at` / `finished_at` (seconds)
        """
        self._rows = _positive_int(rows, "rows")
        self._columns = _positive_int(columns, "columns")
        if isinstance(mine_count, bool) or not isinstance(mine_count, int) or mine_count < 0:
            raise InvalidConfiguration(f"mine_count must be a non-negative integer, got {mine_count!r}")
        cells = self._rows * self._columns
        if mine_count >= cells:
            logger.debug("Clamping mine_count %d to %d", mine_count, cells - 1)
            mine_count = cells - 1
        self._mine_count = mine_count

        self._rng = random.Random(seed)
        self._clock = clock
        self.mines = Bitmap(cells)

        self._opened = [False] * cells
        self._flagged = [False] * cells
        self._starred = [False] * cells
        self._clear_progress()

    def _clear_progress(self):
        self._state = GameState.NOT_STARTED
        self._layout_loaded = False
        self._detonated: Optional[int] = None
        self._opened_count = 0
        self._flagged_count = 0
        self._correct_flag_count = 0
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None

    # ------------------------------------------------------------------ #
    # Read accessors
    # ------------------------------------------------------------------ #

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def cell_count(self) -> int:
        return self._rows * self._columns

    @property
    def total_safe(self) -> int:
        """Number of non-mine cells; opening all of them wins."""
        return self.cell_count - self._mine_count

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def opened_count(self) -> int:
        return self._opened_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def flags_remaining(self) -> int:
        if self._state is GameState.WON:
            return 0
        return self._mine_count - self._flagged_count

    @property
    def detonated(self) -> Optional[int]:
        return self._detonated

    @property
    def started_at(self) -> Optional[float]:
        """Clock reading at the first reveal of this game, or None before it."""
        return self._started_at

    @property
    def finished_at(self) -> Optional[float]:
        return self._finished_at

    def elapsed(self, now: Optional[float] = None) -> float:
        """Seconds since the first reveal, frozen once the game has ended."""
        if self._started_at is None:
            return 0.0
        if self._finished_at is not None:
            end = self._finished_at
        elif now is not None:
            end = now
        else:
            end = self._clock()
        return max(0.0, end - self._started_at)

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.cell_count

    def is_opened(self, index: int) -> bool:
        return self.in_bounds(index) and self._opened[index]

    def is_flagged(self, index: int) -> bool:
        return self.in_bounds(index) and self._flagged[index]

    def is_starred(self, index: int) -> bool:
        return self.in_bounds(index) and self._starred[index]

    def is_mine(self, index: int) -> bool:
        """Whether `index` holds a mine. Only answered once the game has ended."""
        if not self._state.ended:
            raise MinesHidden("Mine locations are hidden until the game ends")
        return bool(self.mines.get(index))

    def mine_indices(self) -> List[int]:
        if not self._state.ended:
            raise MinesHidden("Mine locations are hidden until the game ends")
        return [i for i in range(self.cell_count) if self.mines.get(i)]

    # ------------------------------------------------------------------ #
    # Geometry
    # ------------------------------------------------------------------ #

    def neighbors(self, index: int) -> List[int]:
        return neighbors(index, self._rows, self._columns)

    def neighbor_mine_count(self, index: int) -> int:
        return sum(self.mines.get(n) for n in self.neighbors(index))

    # ------------------------------------------------------------------ #
    # Mine placement
    # ------------------------------------------------------------------ #

    def place_mines(self, excluded_index: int):
        """
        Randomly place `mine_count` mines, keeping `excluded_index` clear.

        This is plain rejection sampling. On boards denser than 50% the excluded
        cell may still receive a mine.
        """
        cells = self.cell_count
        allow_excluded = self._mine_count > cells * SAFE_FIRST_CLICK_MAX_DENSITY
        self.mines.fill(0)
        placed = 0
        while placed < self._mine_count:
            i = self._rng.randrange(cells)
            if (allow_excluded or i != excluded_index) and self.mines.get(i) == 0:
                self.mines.set(i, 1)
                placed += 1
        logger.debug("Placed %d mines on %dx%d board (excluded %d)",
                     placed, self._rows, self._columns, excluded_index)

    def load_layout(self, mine_indices: Iterable[int]):
        """
        Plant a known mine layout before the first reveal (replays, tests).

        Args:
            mine_indices: Exactly `mine_count` distinct cell indices
        """
        if self._state is not GameState.NOT_STARTED:
            raise InvalidConfiguration("A mine layout can only be loaded before the first reveal")
        indices = list(mine_indices)
        for i in indices:
            if not self.in_bounds(i):
                raise IndexOutOfRange(i, self.cell_count)
        if len(set(indices)) != len(indices) or len(indices) != self._mine_count:
            raise InvalidConfiguration(
                f"Expected {self._mine_count} distinct mine indices, got {len(indices)}")
        self.mines.fill(0)
        for i in indices:
            self.mines.set(i, 1)
        self._layout_loaded = True

    # ------------------------------------------------------------------ #
    # Player actions
    # ------------------------------------------------------------------ #

    def _open(self, index: int, count: int, opened: Dict[int, int]):
        self._opened[index] = True
        self._opened_count += 1
        opened[index] = count

    def reveal(self, index: int) -> RevealResult:
        """
        Open a cell.

        The first reveal of a game places the mines. Zero-count cells flood
        outwards through the zero region and its numbered border.
        """
        if self._state.ended or not self.in_bounds(index):
            logger.debug("Ignoring reveal(%r) in state %s", index, self._state.value)
            return RevealResult(False, self._state)
        if self._flagged[index] or self._opened[index]:
            return RevealResult(False, self._state)

        if self._state is GameState.NOT_STARTED:
            if not self._layout_loaded:
                self.place_mines(index)
            self._state = GameState.PLAYING
            self._started_at = self._clock()

        if self.mines.get(index):
            self._detonated = index
            self._end_game(False, {})
            return RevealResult(True, self._state, {}, detonated=index)

        opened: Dict[int, int] = {}
        count = self.neighbor_mine_count(index)
        self._open(index, count, opened)
        if count == 0:
            self._flood(index, opened)

        if self._opened_count >= self.total_safe:
            self._end_game(True, opened)
        return RevealResult(True, self._state, opened)

    def _flood(self, start: int, opened: Dict[int, int]):
        # Iterative DFS; a cell enters `visited` once, so each is expanded at most once.
        stack = [start]
        visited = {start}
        while stack:
            current = stack.pop()
            for n in self.neighbors(current):
                if n in visited or self._opened[n]:
                    continue
                visited.add(n)
                # Neighbors of a zero cell are never mines, so a flag here was wrong.
                if self._flagged[n]:
                    self._flagged[n] = False
                    self._flagged_count -= 1
                count = self.neighbor_mine_count(n)
                self._open(n, count, opened)
                if count == 0:
                    stack.append(n)

    def toggle_flag(self, index: int) -> FlagResult:
        """
        Place or remove a flag on a closed cell.

        Committing the last flag while every flag sits on a mine wins the game.
        Committing it with a wrong flag somewhere keeps the game going but comes
        back with a `FLAGS_EXHAUSTED` warning.
        """
        if self._state is not GameState.PLAYING or not self.in_bounds(index) or self._opened[index]:
            logger.debug("Ignoring toggle_flag(%r) in state %s", index, self._state.value)
            return FlagResult(False, self._state, index, self.is_flagged(index), self.flags_remaining)

        is_mine = bool(self.mines.get(index))
        if self._flagged[index]:
            self._flagged[index] = False
            self._flagged_count -= 1
            if is_mine:
                self._correct_flag_count -= 1
            return FlagResult(True, self._state, index, False, self.flags_remaining)

        if self.flags_remaining <= 0:
            return FlagResult(False, self._state, index, False, 0, warning=FLAGS_EXHAUSTED)

        self._flagged[index] = True
        self._flagged_count += 1
        if is_mine:
            self._correct_flag_count += 1

        warning = None
        opened: Dict[int, int] = {}
        if self.flags_remaining == 0:
            if self._correct_flag_count == self._mine_count:
                self._end_game(True, opened)
            else:
                warning = FLAGS_EXHAUSTED
        return FlagResult(True, self._state, index, True, self.flags_remaining, warning, opened)

    def game_over(self, win: bool) -> bool:
        """
        End the current game.

        On a win every cell is opened; either way every mine is starred. Returns
        False (and changes nothing) unless a game is in progress.
        """
        if self._state is not GameState.PLAYING:
            return False
        self._end_game(win, {})
        return True

    def _end_game(self, win: bool, opened: Dict[int, int]):
        # Cells opened by a win are added to `opened`; mines don't count towards opened_count.
        self._state = GameState.WON if win else GameState.LOST
        self._finished_at = self._clock()
        for i in range(self.cell_count):
            mine = bool(self.mines.get(i))
            self._starred[i] = mine
            if win and not self._opened[i]:
                self._opened[i] = True
                opened[i] = self.neighbor_mine_count(i)
                if not mine:
                    self._opened_count += 1
        logger.info("Game %s after %.1fs (%d/%d safe cells opened)",
                    self._state.value.lower(), self.elapsed(), self._opened_count, self.total_safe)

    def reset(self):
        """Clear mines, counters and per-cell markers; dimensions are kept."""
        self.mines.fill(0)
        cells = self.cell_count
        self._opened = [False] * cells
        self._flagged = [False] * cells
        self._starred = [False] * cells
        self._clear_progress()

    def __repr__(self) -> str:
        return (f"Board(rows={self._rows}, columns={self._columns}, "
                f"mine_count={self._mine_count}, state={self._state.value})")
