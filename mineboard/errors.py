"""
These are the exceptions the board engine raises.

All of them are programmer errors (bad sizes, bad dimensions, writes past the end
of a bitmap). Player actions never raise; they come back as ignored results.
"""


class BoardError(Exception):
    """Base class for everything the engine raises."""


class InvalidSize(BoardError, ValueError):
    """A bitmap was constructed with a negative (or non-integer) size."""

    def __init__(self, size):
        super().__init__(f"Bitmap size must be a non-negative integer, got {size!r}")
        self.size = size


class IndexOutOfRange(BoardError, IndexError):
    """A write targeted a bit outside `[0, size)`."""

    def __init__(self, index, size):
        super().__init__(f"Index {index!r} is outside [0, {size})")
        self.index = index
        self.size = size


class InvalidConfiguration(BoardError, ValueError):
    """Board dimensions, mine count, preset or mine layout are not usable."""


class MinesHidden(BoardError, RuntimeError):
    """Mine locations were queried while the game is still running."""
