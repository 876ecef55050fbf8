"""
TicTacToe engine - N x N board with constant-time win detection and an
optimal alpha-beta minimax opponent.

The core is synchronous; the runner drives players and listeners through
an asyncio turn loop.
"""

from .errors import TicTacToeError, IllegalMove, InvalidState, SizeMismatch, NoLegalMove
from .game import (
    PlayerMark,
    Position,
    Empty,
    Occupied,
    Cell,
    EMPTY,
    BoardState,
    GameState,
    iter_lines,
    winners_set,
)
from .counter import LineCounter
from .board import Board
from .controller import GameController
from .minimax import SearchResult, search, minimax_move, iter_reachable_states
from .events import BoardUpdated, InvalidMove, GameOver, GameEvent, GameEventListener, CallbackListener
from .players import Player, MinimaxPlayer, RandomPlayer, ScriptedPlayer
from .runner import GameConfig, GameRunner
from .eval import eval_vs_random, eval_never_loses, eval_pruning_agreement_all_states

__version__ = "0.1.0"
__all__ = [
    "TicTacToeError",
    "IllegalMove",
    "InvalidState",
    "SizeMismatch",
    "NoLegalMove",
    "PlayerMark",
    "Position",
    "Empty",
    "Occupied",
    "Cell",
    "EMPTY",
    "BoardState",
    "GameState",
    "iter_lines",
    "winners_set",
    "LineCounter",
    "Board",
    "GameController",
    "SearchResult",
    "search",
    "minimax_move",
    "iter_reachable_states",
    "BoardUpdated",
    "InvalidMove",
    "GameOver",
    "GameEvent",
    "GameEventListener",
    "CallbackListener",
    "Player",
    "MinimaxPlayer",
    "RandomPlayer",
    "ScriptedPlayer",
    "GameConfig",
    "GameRunner",
    "eval_vs_random",
    "eval_never_loses",
    "eval_pruning_agreement_all_states",
]
