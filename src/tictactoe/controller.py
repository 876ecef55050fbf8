"""
Turn-taking controller around a board engine.
"""

import logging
from typing import List, Optional

from .board import Board
from .game import GameState, PlayerMark, Position

logger = logging.getLogger(__name__)


class GameController:
    """
    Owns one board engine and the mark whose turn it is.

    Example:
        game = GameController(size=3)
        game.play_move(Position(0, 0))   # X plays
        game.play_move(Position(1, 1))   # O plays
        state = game.get_state()
    """

    def __init__(self, size: int = 3):
        self._board = Board(size)
        self.turn = PlayerMark.X

    @classmethod
    def from_state(cls, state: GameState) -> "GameController":
        """
        Resume from a snapshot. A finished game (no next_to_play) restarts
        turn order with X.
        """
        return cls._wrap(Board.restore_from(state.board), state.next_to_play or PlayerMark.X)

    @classmethod
    def _wrap(cls, board: Board, turn: PlayerMark) -> "GameController":
        game = cls.__new__(cls)
        game._board = board
        game.turn = turn
        return game

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def is_over(self) -> bool:
        return self._board.is_over

    @property
    def winner(self) -> Optional[PlayerMark]:
        return self._board.winner

    @property
    def is_draw(self) -> bool:
        return self._board.is_over and self._board.winner is None

    def available_moves(self) -> List[Position]:
        return self._board.available_positions()

    def play_move(self, position: Position) -> None:
        """
        Place the current player's mark and pass the turn.

        Raises:
            IllegalMove: the turn does not change and the board is untouched
        """
        self._board.place(position, self.turn)
        self.turn = self.turn.opposite()

    def with_move(self, position: Position) -> "GameController":
        """Return a new controller with `position` played; self is unchanged."""
        board = self._board.copy()
        board.place(position, self.turn)
        return self._wrap(board, self.turn.opposite())

    def reset(self) -> None:
        self._board.reset()
        self.turn = PlayerMark.X
        logger.debug("Game reset on %dx%d board", self.size, self.size)

    def get_state(self) -> GameState:
        is_over = self.is_over
        return GameState(
            board=self._board.snapshot(),
            next_to_play=None if is_over else self.turn,
            is_over=is_over,
            is_draw=self.is_draw,
            winner=self.winner,
        )
