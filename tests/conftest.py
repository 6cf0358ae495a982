"""
Pytest configuration and shared fixtures.
"""
import pytest

from mineboard import Board


class FakeClock:
    """Deterministic time source: returns `now` and can be advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def board_with_layout(rows, columns, mines, **kwargs) -> Board:
    board = Board(rows, columns, len(mines), **kwargs)
    board.load_layout(mines)
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def wall_board(clock) -> Board:
    """
    3x5 board with a vertical wall of mines in the middle column:

        . . * . .
        . . * . .
        . . * . .
    """
    return board_with_layout(3, 5, [2, 7, 12], clock=clock)


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its single mine in the center; every other cell counts 1."""
    return board_with_layout(3, 3, [4])


@pytest.fixture
def strip_board() -> Board:
    """1x5 strip with a single mine at index 2."""
    return board_with_layout(1, 5, [2])
