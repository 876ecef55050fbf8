"""
Player capability and the built-in players.

A player is asked for a move once per turn and may suspend while choosing
(waiting on a human, a network peer, ...).
"""

import logging
from typing import Iterable, Optional, Protocol, runtime_checkable

import numpy as np

from .errors import NoLegalMove
from .game import GameState, Position
from .minimax import search

logger = logging.getLogger(__name__)


@runtime_checkable
class Player(Protocol):
    name: str

    async def select_move(self, state: GameState) -> Position:
        ...


class MinimaxPlayer:
    """Optimal player backed by alpha-beta search. Never loses."""

    def __init__(self, name: str = "Minimax", pruning: bool = True):
        self.name = name
        self.pruning = pruning

    async def select_move(self, state: GameState) -> Position:
        result = search(state, pruning=self.pruning)
        logger.debug("%s plays %s (score %d, %d nodes)", self.name, result.move, result.score, result.nodes)
        return result.move


class RandomPlayer:
    """Uniformly random legal moves from a seeded numpy generator."""

    def __init__(self, name: str = "Random", seed: Optional[int] = None):
        self.name = name
        self.rng = np.random.default_rng(seed)

    async def select_move(self, state: GameState) -> Position:
        return self.choose(state)

    def choose(self, state: GameState) -> Position:
        moves = state.available_moves()
        if not moves:
            raise NoLegalMove("No legal moves: the game is already over")
        return moves[int(self.rng.integers(0, len(moves)))]


class ScriptedPlayer:
    """
    Replay a fixed list of moves, then fall back to the first available one.

    Scripted moves are returned as-is, even if illegal, so tests can drive
    the runner's invalid-move handling.
    """

    def __init__(self, name: str, moves: Iterable[Position]):
        self.name = name
        self.moves = list(moves)
        self._next = 0

    async def select_move(self, state: GameState) -> Position:
        if self._next < len(self.moves):
            move = self.moves[self._next]
            self._next += 1
            return move
        moves = state.available_moves()
        if not moves:
            raise NoLegalMove("No legal moves: the game is already over")
        return moves[0]
