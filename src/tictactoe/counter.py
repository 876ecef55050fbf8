"""
Per-line mark tallies used for constant-time win detection.
"""

import numpy as np

from .errors import SizeMismatch
from .game import PlayerMark

# Tally row for each mark
_MARK_ROW = {PlayerMark.X: 0, PlayerMark.O: 1}


class LineCounter:
    """
    Counts X and O marks on each of `size` lines (rows, columns or diagonals).

    tally[mark][i] is the number of cells of `mark` currently on line i.
    """

    def __init__(self, size: int):
        self._tally = np.zeros((2, size), dtype=np.int64)

    def __len__(self) -> int:
        return self._tally.shape[1]

    def increment(self, index: int, mark: PlayerMark) -> None:
        self._tally[_MARK_ROW[mark], index] += 1

    def get(self, index: int, mark: PlayerMark) -> int:
        return int(self._tally[_MARK_ROW[mark], index])

    def counts(self, mark: PlayerMark) -> np.ndarray:
        """Copy of all tallies for `mark`, one entry per line."""
        return self._tally[_MARK_ROW[mark]].copy()

    def reset(self) -> None:
        self._tally.fill(0)

    def copy_from(self, other: "LineCounter") -> None:
        """Overwrite this counter's tallies with `other`'s (no shared storage)."""
        if len(self) != len(other):
            raise SizeMismatch(
                f"Cannot copy counter tracking {len(other)} lines into one tracking {len(self)}"
            )
        np.copyto(self._tally, other._tally)
