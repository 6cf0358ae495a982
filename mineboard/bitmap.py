"""
This is the packed bit array I store mine locations in.

One bit per cell, eight cells per byte, so a 25x60 board needs 188 bytes.
Reads are forgiving (anything out of range is 0) while writes are strict.
"""

from __future__ import annotations

import numpy as np

from .errors import IndexOutOfRange, InvalidSize


class Bitmap:
    """Fixed-size array of single-bit flags addressed by linear index."""

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
            raise InvalidSize(size)
        self._size = int(size)
        self._bits = np.zeros((self._size + 7) >> 3, dtype=np.uint8)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def get(self, i: int) -> int:
        """
        Return the bit at `i`.

        Indices outside `[0, size)` read as 0, so neighbor counting near the
        edges never has to bounds-check.
        """
        if i < 0 or i >= self._size:
            return 0
        return (int(self._bits[i >> 3]) >> (i & 7)) & 1

    def set(self, i: int, value) -> None:
        """Set (truthy `value`) or clear the bit at `i`."""
        if i < 0 or i >= self._size:
            raise IndexOutOfRange(i, self._size)
        byte = int(self._bits[i >> 3])
        mask = 1 << (i & 7)
        if value:
            byte |= mask
        else:
            byte &= 0xFF ^ mask
        self._bits[i >> 3] = byte

    def fill(self, value) -> None:
        """Set every bit to `value` in one pass."""
        self._bits.fill(0xFF if value else 0)

    def to_array(self) -> np.ndarray:
        """One uint8 per bit, trailing padding bits dropped."""
        return np.unpackbits(self._bits, count=self._size, bitorder="little")

    def count(self) -> int:
        """Number of set bits within `size`."""
        return int(self.to_array().sum())

    def __repr__(self) -> str:
        return f"Bitmap(size={self._size}, set={self.count()})"
