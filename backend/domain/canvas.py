"""
Canvas entity - a binary pixel buffer with deferred flush.
"""

from typing import Tuple

import numpy as np


class Canvas:
    """
    A rows x columns buffer of on/off pixels.

    set_pixel and clear only touch the buffer. flush() is the single point
    where the buffer is pushed to the display collaborator, which receives
    a copy via its show(buffer) method.

    Coordinates are (x, y) = (column, row) and are expected to be already
    wrapped into range by the caller.
    """

    def __init__(self, rows: int, columns: int, display=None):
        self._rows = rows
        self._columns = columns
        self.display = display
        self.buffer = np.zeros((rows, columns), dtype=bool)
        self.flush_count = 0

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def set_pixel(self, point: Tuple[int, int], on: bool) -> None:
        x, y = point
        self.buffer[y, x] = on

    def get_pixel(self, point: Tuple[int, int]) -> bool:
        x, y = point
        return bool(self.buffer[y, x])

    def fill_row(self, row: int, on: bool) -> None:
        self.buffer[row, :] = on

    def clear(self) -> None:
        self.buffer[:, :] = False

    def flush(self) -> None:
        """Commit the buffered pixels to the display."""
        self.flush_count += 1
        if self.display is not None:
            self.display.show(self.buffer.copy())

    def lit_count(self) -> int:
        return int(self.buffer.sum())

    def __repr__(self):
        return f"<Canvas {self._rows}x{self._columns} lit={self.lit_count()} flushes={self.flush_count}>"
