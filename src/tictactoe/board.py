"""
Mutable board engine with incremental win detection.

The engine keeps a tally of marks on every row, column and both diagonals,
so checking whether a move wins only looks at the lines through that move.
"""

import logging
from typing import List, Optional

from .counter import LineCounter
from .errors import IllegalMove, InvalidState
from .game import EMPTY, BoardState, Cell, Occupied, PlayerMark, Position

logger = logging.getLogger(__name__)

# Diagonal line ids
MAIN_DIAGONAL = 0
ANTI_DIAGONAL = 1


class Board:
    """
    Live N x N grid plus the line tallies derived from it.

    Only `place` mutates the grid. `winner` and `is_over` are updated after
    every placement; `snapshot` exports an independent BoardState.
    """

    def __init__(self, size: int = 3):
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size
        self._grid: List[List[Cell]] = [[EMPTY] * size for _ in range(size)]
        self._rows = LineCounter(size)
        self._columns = LineCounter(size)
        self._diagonals = LineCounter(2)
        self._total = 0
        self._winner: Optional[PlayerMark] = None
        self._is_over = False

    @classmethod
    def restore_from(cls, state: BoardState) -> "Board":
        """
        Rebuild an engine from a snapshot.

        Raises:
            InvalidState: if both marks own a full line
        """
        board = cls(state.size)
        for r, c, cell in state.cells():
            board._grid[r][c] = cell
            if isinstance(cell, Occupied):
                board._update_counts(Position(r, c), cell.mark)

        x_won = board._has_full_line(PlayerMark.X)
        o_won = board._has_full_line(PlayerMark.O)
        if x_won and o_won:
            raise InvalidState("Invalid board state: two winners")
        if x_won:
            board._winner = PlayerMark.X
        elif o_won:
            board._winner = PlayerMark.O
        board._is_over = board._winner is not None or board._total == board.size * board.size
        logger.debug(
            "Restored %dx%d board with %d marks (winner=%s, over=%s)",
            board.size, board.size, board._total, board._winner, board._is_over,
        )
        return board

    @property
    def winner(self) -> Optional[PlayerMark]:
        return self._winner

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def move_count(self) -> int:
        return self._total

    def cell(self, position: Position) -> Cell:
        position.require_valid_for(self.size)
        return self._grid[position.row][position.column]

    def available_positions(self) -> List[Position]:
        """Empty positions in row-major order; none once the game is over."""
        if self._is_over:
            return []
        return [
            Position(r, c)
            for r, row in enumerate(self._grid)
            for c, cell in enumerate(row)
            if cell == EMPTY
        ]

    def place(self, position: Position, mark: PlayerMark) -> None:
        """
        Put `mark` on an empty cell and update winner / game-over status.

        Raises:
            IllegalMove: game already over, position off the board or cell
                already taken
        """
        if self._is_over:
            raise IllegalMove("Illegal move: the game is already over")
        if self.cell(position) != EMPTY:
            raise IllegalMove(f"Illegal move: cell {position} is already taken")

        self._grid[position.row][position.column] = Occupied(mark)
        self._update_counts(position, mark)

        if self._wins_through(position, mark):
            self._winner = mark
            self._is_over = True

        # Full board ends the game; a winner found above is kept
        if self._total == self.size * self.size:
            self._is_over = True

    def snapshot(self) -> BoardState:
        return BoardState(tuple(tuple(row) for row in self._grid))

    def reset(self) -> None:
        for row in self._grid:
            row[:] = [EMPTY] * self.size
        self._rows.reset()
        self._columns.reset()
        self._diagonals.reset()
        self._total = 0
        self._winner = None
        self._is_over = False

    def copy(self) -> "Board":
        """Independent engine with identical observable state."""
        board = Board(self.size)
        board._grid = [row[:] for row in self._grid]
        board._rows.copy_from(self._rows)
        board._columns.copy_from(self._columns)
        board._diagonals.copy_from(self._diagonals)
        board._total = self._total
        board._winner = self._winner
        board._is_over = self._is_over
        return board

    def _on_main_diagonal(self, position: Position) -> bool:
        return position.row == position.column

    def _on_anti_diagonal(self, position: Position) -> bool:
        return position.row + position.column == self.size - 1

    def _update_counts(self, position: Position, mark: PlayerMark) -> None:
        self._total += 1
        self._rows.increment(position.row, mark)
        self._columns.increment(position.column, mark)
        if self._on_main_diagonal(position):
            self._diagonals.increment(MAIN_DIAGONAL, mark)
        if self._on_anti_diagonal(position):
            self._diagonals.increment(ANTI_DIAGONAL, mark)

    def _wins_through(self, position: Position, mark: PlayerMark) -> bool:
        """Check only the lines passing through `position`."""
        n = self.size
        return (
            self._rows.get(position.row, mark) == n
            or self._columns.get(position.column, mark) == n
            or (self._on_main_diagonal(position) and self._diagonals.get(MAIN_DIAGONAL, mark) == n)
            or (self._on_anti_diagonal(position) and self._diagonals.get(ANTI_DIAGONAL, mark) == n)
        )

    def _has_full_line(self, mark: PlayerMark) -> bool:
        n = self.size
        return bool(
            (self._rows.counts(mark) == n).any()
            or (self._columns.counts(mark) == n).any()
            or (self._diagonals.counts(mark) == n).any()
        )
