"""
TicTacToe data model: marks, positions, cells and immutable snapshots.

Board representation: tuple of rows, each a tuple of cells
  - EMPTY: empty square
  - Occupied(mark): square holding PlayerMark.X or PlayerMark.O

Everything here is a value type. Snapshots never alias the live board of
an engine, so they can be handed to players and listeners freely.
"""

import enum
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

from .errors import IllegalMove, InvalidState


class PlayerMark(enum.Enum):
    """Symbol of one of the two players. X always moves first."""

    X = "X"
    O = "O"

    def opposite(self) -> "PlayerMark":
        return PlayerMark.O if self is PlayerMark.X else PlayerMark.X

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Position:
    """Zero-based (row, column) pair."""
    row: int
    column: int

    def is_valid_for(self, size: int) -> bool:
        return 0 <= self.row < size and 0 <= self.column < size

    def require_valid_for(self, size: int) -> None:
        if not self.is_valid_for(size):
            raise IllegalMove(
                f"Position ({self.row}, {self.column}) is invalid for board size {size}"
            )

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


@dataclass(frozen=True)
class Empty:
    """Cell with no mark."""

    def __str__(self) -> str:
        return " "


@dataclass(frozen=True)
class Occupied:
    """Cell holding a player's mark."""
    mark: PlayerMark

    def __str__(self) -> str:
        return str(self.mark)


Cell = Union[Empty, Occupied]

EMPTY = Empty()


@dataclass(frozen=True)
class BoardState:
    """Immutable N x N grid of cells."""
    rows: Tuple[Tuple[Cell, ...], ...]

    def __post_init__(self):
        rows = tuple(tuple(row) for row in self.rows)
        n = len(rows)
        if n < 1:
            raise ValueError("Board must have at least one row")
        for i, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"Board is not square: row {i} has {len(row)} cells, expected {n}")
            for cell in row:
                if not isinstance(cell, (Empty, Occupied)):
                    raise ValueError(f"Not a board cell: {cell!r}")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(cls, size: int = 3) -> "BoardState":
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        return cls(tuple((EMPTY,) * size for _ in range(size)))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "BoardState":
        """
        Build a board from text rows such as ["XO ", " X ", "  O"].

        'X' and 'O' are marks; any other character is an empty cell.
        """
        def parse(ch: str) -> Cell:
            if ch in ("X", "O"):
                return Occupied(PlayerMark(ch))
            return EMPTY

        return cls(tuple(tuple(parse(ch) for ch in row) for row in rows))

    @property
    def size(self) -> int:
        return len(self.rows)

    def __getitem__(self, position: Position) -> Cell:
        position.require_valid_for(self.size)
        return self.rows[position.row][position.column]

    def cell(self, row: int, column: int) -> Cell:
        return self[Position(row, column)]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, column, cell) in row-major order."""
        for r, row in enumerate(self.rows):
            for c, cell in enumerate(row):
                yield r, c, cell

    def count(self, mark: Optional[PlayerMark] = None) -> int:
        """Number of cells holding `mark`, or all occupied cells if None."""
        return sum(
            1 for _, _, cell in self.cells()
            if isinstance(cell, Occupied) and (mark is None or cell.mark is mark)
        )

    def is_full(self) -> bool:
        return self.count() == self.size * self.size

    def render(self) -> str:
        """Plain text grid, rows separated by rule lines."""
        rule = "\n" + "+".join("-" * self.size) + "\n"
        return rule.join("|".join(str(cell) for cell in row) for row in self.rows)


def iter_lines(size: int) -> Iterator[List[Position]]:
    """Every winning line of an N x N board: rows, columns, both diagonals."""
    for i in range(size):
        yield [Position(i, c) for c in range(size)]
    for i in range(size):
        yield [Position(r, i) for r in range(size)]
    yield [Position(i, i) for i in range(size)]
    yield [Position(i, size - 1 - i) for i in range(size)]


def winners_set(board: BoardState) -> Set[PlayerMark]:
    """Return set of marks owning a full line (both marks if illegal)."""
    wins = set()
    for line in iter_lines(board.size):
        cells = {board[p] for p in line}
        if len(cells) == 1:
            cell = next(iter(cells))
            if isinstance(cell, Occupied):
                wins.add(cell.mark)
    return wins


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a game handed to players and listeners.

    Invariants:
        winner is the single mark owning a full line on board, if any
        is_over == (winner is not None) or board is full
        is_draw == is_over and winner is None
        next_to_play is None  <=>  is_over
    """
    board: BoardState
    next_to_play: Optional[PlayerMark]
    is_over: bool
    is_draw: bool
    winner: Optional[PlayerMark]

    def __post_init__(self):
        wins = winners_set(self.board)
        if len(wins) > 1:
            raise InvalidState("Invalid board state: two winners")
        if self.winner != next(iter(wins), None):
            raise ValueError(f"winner {self.winner} does not match the board's full line owner")
        if self.is_over != (self.winner is not None or self.board.is_full()):
            raise ValueError("is_over must hold exactly when there is a winner or the board is full")
        if self.is_draw != (self.is_over and self.winner is None):
            raise ValueError("is_draw must hold exactly when the game is over without a winner")
        if (self.next_to_play is None) != self.is_over:
            raise ValueError("next_to_play must be absent exactly when the game is over")

    @classmethod
    def initial(cls, size: int = 3) -> "GameState":
        return cls(BoardState.empty(size), PlayerMark.X, False, False, None)

    def is_valid_move(self, position: Position) -> bool:
        if self.is_over:
            return False
        if not position.is_valid_for(self.board.size):
            return False
        return self.board[position] == EMPTY

    def available_moves(self) -> List[Position]:
        """Return list of empty positions in row-major order."""
        if self.is_over:
            return []
        return [Position(r, c) for r, c, cell in self.board.cells() if cell == EMPTY]
